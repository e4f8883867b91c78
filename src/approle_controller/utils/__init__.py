# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Controller Utilities.

Exports:
    encode_role_path: Build ``auth/<mount>/role/<role_name>``
    decode_role_path: Split a role path into (mount, role_name)
    role_id_path: RoleID sub-path of a role path
    is_not_found: Classify a Vault error as a 404
"""

from approle_controller.utils.util_role_path import (
    ROLE_ID_SUFFIX,
    ROLE_PATH_PREFIX,
    ROLE_PATH_SEPARATOR,
    decode_role_path,
    encode_role_path,
    role_id_path,
)
from approle_controller.utils.util_vault_errors import is_not_found

__all__: list[str] = [
    "ROLE_ID_SUFFIX",
    "ROLE_PATH_PREFIX",
    "ROLE_PATH_SEPARATOR",
    "decode_role_path",
    "encode_role_path",
    "is_not_found",
    "role_id_path",
]
