# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Controller Models.

Exports:
    ModelRoleIdentity: (mount, role_name) identity of a role
    ModelRoleConfig: Declared role configuration with set-vs-absent tracking
    ModelRoleFieldSpec: Name and wire shape of a role field
    ModelFieldMigration: Deprecated/current field pair with read resolution
    ModelVaultClientConfig: Vault connection settings
"""

from approle_controller.models.model_field_migration import ModelFieldMigration
from approle_controller.models.model_role_config import (
    CONFLICTING_FIELDS,
    ModelRoleConfig,
)
from approle_controller.models.model_role_field_spec import (
    ModelRoleFieldSpec,
    RoleFieldValue,
)
from approle_controller.models.model_role_identity import ModelRoleIdentity
from approle_controller.models.model_vault_client_config import (
    ModelVaultClientConfig,
)

__all__: list[str] = [
    "CONFLICTING_FIELDS",
    "ModelFieldMigration",
    "ModelRoleConfig",
    "ModelRoleFieldSpec",
    "ModelRoleIdentity",
    "ModelVaultClientConfig",
    "RoleFieldValue",
]
