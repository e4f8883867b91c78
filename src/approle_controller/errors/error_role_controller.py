# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Role Controller Error Classes.

Error Hierarchy:
    RoleControllerError (base error)
    ├── ProtocolConfigurationError
    ├── PathFormatError
    ├── RoleNotFoundError
    └── RemoteOperationError
        ├── RemoteWriteError
        ├── RemoteReadError
        └── RemoteDeleteError

All errors:
    - Support proper error chaining with `raise ... from e`
    - Carry a ModelRoleErrorContext naming the operation and path
    - Never include Vault tokens in messages or context

A missing role is not an error: a read that finds nothing and a delete that
finds nothing are reported through return values, not exceptions.
"""

from __future__ import annotations

from uuid import UUID

from approle_controller.errors.model_role_error_context import ModelRoleErrorContext


class RoleControllerError(Exception):
    """Base error class for role controller failures.

    Structured Fields (via ModelRoleErrorContext):
        operation: Operation being performed
        path: Vault path the operation targeted
        correlation_id: Correlation ID for tracing

    Example:
        >>> context = ModelRoleErrorContext(operation="create", path=path)
        >>> raise RoleControllerError("Operation failed", context=context)

        # Or with extra context:
        >>> raise RoleControllerError(
        ...     "Operation failed",
        ...     context=context,
        ...     field="secret_id_ttl",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelRoleErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize RoleControllerError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled context (operation, path, correlation_id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
        self.extra_context: dict[str, object] = dict(extra_context)

    @property
    def operation(self) -> str | None:
        """Return the operation from the error context, if any."""
        return self.context.operation if self.context is not None else None

    @property
    def path(self) -> str | None:
        """Return the Vault path from the error context, if any."""
        return self.context.path if self.context is not None else None

    @property
    def correlation_id(self) -> UUID | None:
        """Return the correlation ID from the error context, if any."""
        return self.context.correlation_id if self.context is not None else None


class ProtocolConfigurationError(RoleControllerError):
    """Raised when a role declaration or client configuration is invalid.

    Used for YAML parsing errors, pydantic validation failures, conflicting
    legacy/modern fields and attempts to change an immutable identity field.
    """


class PathFormatError(RoleControllerError):
    """Raised when a path does not match ``auth/<mount>/role/<role_name>``.

    The offending path is always available as ``error.path``, even when no
    context was supplied.

    Example:
        >>> raise PathFormatError("no role found", path="auth/role/bar")
    """

    def __init__(
        self,
        message: str,
        path: str,
        context: ModelRoleErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize PathFormatError.

        Args:
            message: Human-readable error message
            path: The path that failed to decode
            context: Bundled context
            **extra_context: Additional context information
        """
        if context is None:
            context = ModelRoleErrorContext(operation="decode", path=path)
        elif context.path is None:
            context = context.model_copy(update={"path": path})
        super().__init__(message, context=context, **extra_context)


class RoleNotFoundError(RoleControllerError):
    """Raised when an import targets a path with no role behind it."""


class RemoteOperationError(RoleControllerError):
    """Base class for wrapped Vault transport and API failures."""


class RemoteWriteError(RemoteOperationError):
    """Raised when writing a role or its RoleID to Vault fails."""


class RemoteReadError(RemoteOperationError):
    """Raised when reading a role or its RoleID from Vault fails."""


class RemoteDeleteError(RemoteOperationError):
    """Raised when deleting a role fails for a reason other than not-found."""


__all__: list[str] = [
    "PathFormatError",
    "ProtocolConfigurationError",
    "RemoteDeleteError",
    "RemoteOperationError",
    "RemoteReadError",
    "RemoteWriteError",
    "RoleControllerError",
    "RoleNotFoundError",
]
