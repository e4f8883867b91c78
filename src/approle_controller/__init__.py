# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Controller - declarative reconciliation of Vault AppRole roles.

This package reconciles locally declared AppRole roles against HashiCorp
Vault's logical API:

- Deterministic role path encoding (``auth/<mount>/role/<role_name>``)
- Create/update payload projection that never resets unmanaged fields
- Read-time resolution between deprecated and current field names
- Create, read, update, delete, exists and import lifecycle

Key Components:
    - ControllerAppRoleRole: lifecycle controller for one role
    - ProjectorRoleFields: write projection and read resolution
    - HandlerVaultLogical: hvac-backed Vault client
"""

__all__: list[str] = []
