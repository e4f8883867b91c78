# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Controller Errors Module.

Exports:
    ModelRoleErrorContext: Structured context bundled into every error
    RoleControllerError: Base error class
    ProtocolConfigurationError: Invalid role declaration or client configuration
    PathFormatError: Path does not match the mount/role template
    RoleNotFoundError: Import target has no role behind it
    RemoteOperationError: Base class for wrapped Vault failures
    RemoteWriteError: Vault write failed
    RemoteReadError: Vault read failed
    RemoteDeleteError: Vault delete failed (other than not-found)

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Vault tokens, SecretIDs or wrapped responses

    SAFE to include:
        - Vault paths (e.g., "auth/approle/role/web")
        - Operation names (e.g., "create", "read")
        - Correlation IDs
        - Exception type names of the underlying transport failure
"""

from approle_controller.errors.error_role_controller import (
    PathFormatError,
    ProtocolConfigurationError,
    RemoteDeleteError,
    RemoteOperationError,
    RemoteReadError,
    RemoteWriteError,
    RoleControllerError,
    RoleNotFoundError,
)
from approle_controller.errors.model_role_error_context import ModelRoleErrorContext

__all__: list[str] = [
    "ModelRoleErrorContext",
    "PathFormatError",
    "ProtocolConfigurationError",
    "RemoteDeleteError",
    "RemoteOperationError",
    "RemoteReadError",
    "RemoteWriteError",
    "RoleControllerError",
    "RoleNotFoundError",
]
