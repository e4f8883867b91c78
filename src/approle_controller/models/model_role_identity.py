# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole role identity model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from approle_controller.utils.util_role_path import decode_role_path, encode_role_path


class ModelRoleIdentity(BaseModel):
    """The (mount, role_name) pair that addresses one AppRole role.

    Identity and canonical path form a bijection under slash trimming:
    ``ModelRoleIdentity.from_path(identity.path).path == identity.path``.

    Attributes:
        mount: Auth mount the AppRole backend is enabled at
        role_name: Name of the role

    Example:
        >>> identity = ModelRoleIdentity(mount="approle", role_name="web")
        >>> identity.path
        'auth/approle/role/web'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    mount: str = Field(description="Auth mount the AppRole backend is enabled at")
    role_name: str = Field(description="Name of the role")

    @property
    def path(self) -> str:
        """Return the canonical role path for this identity."""
        return encode_role_path(self.mount, self.role_name)

    @classmethod
    def from_path(cls, path: str) -> ModelRoleIdentity:
        """Parse an identity from a role path.

        Raises:
            PathFormatError: If the path does not match the role template.
        """
        mount, role_name = decode_role_path(path)
        return cls(mount=mount, role_name=role_name)


__all__ = ["ModelRoleIdentity"]
