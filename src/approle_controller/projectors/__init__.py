# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Controller Projectors.

Exports:
    ProjectorRoleFields: Role field write projection and read resolution
    ROLE_FIELD_SPECS: Role fields written by create/update
    ROLE_FIELD_MIGRATIONS: Deprecated/current field pairs
"""

from approle_controller.projectors.projector_role_fields import (
    IDENTITY_FIELDS,
    REFRESHED_FIELD_SPECS,
    ROLE_FIELD_MIGRATIONS,
    ROLE_FIELD_SPECS,
    ProjectorRoleFields,
)

__all__: list[str] = [
    "IDENTITY_FIELDS",
    "REFRESHED_FIELD_SPECS",
    "ROLE_FIELD_MIGRATIONS",
    "ROLE_FIELD_SPECS",
    "ProjectorRoleFields",
]
