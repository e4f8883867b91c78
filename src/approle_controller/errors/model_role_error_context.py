# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Role Controller Error Context Model.

Bundles the structured fields every role controller error carries so that a
failure can be diagnosed without re-deriving the role identity.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ModelRoleErrorContext(BaseModel):
    """Structured context attached to role controller errors.

    Attributes:
        operation: Operation being performed (create, read, update, delete, ...)
        path: Vault path the operation targeted
        correlation_id: Correlation ID for tracing one controller operation

    Example:
        >>> context = ModelRoleErrorContext(
        ...     operation="read",
        ...     path="auth/approle/role/web",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise RemoteReadError("Failed to read role", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (create, read, update, delete, ...)",
    )
    path: str | None = Field(
        default=None,
        description="Vault path the operation targeted",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing one controller operation",
    )


__all__ = ["ModelRoleErrorContext"]
