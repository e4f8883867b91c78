# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Controller Enumerations Module.

Exports:
    EnumRoleFieldKind: Wire shape of a role field (BOOL, INT, STRING, STRING_SET)
    EnumRoleSyncState: Controller lifecycle state (UNMANAGED, SYNCED)
"""

from approle_controller.enums.enum_role_field_kind import EnumRoleFieldKind
from approle_controller.enums.enum_role_sync_state import EnumRoleSyncState

__all__: list[str] = [
    "EnumRoleFieldKind",
    "EnumRoleSyncState",
]
