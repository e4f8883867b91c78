# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Role Configuration Model.

ModelRoleConfig is the locally declared role that the controller reconciles
against Vault. Whether a field was explicitly declared is tracked with
pydantic's ``model_fields_set``: a field counts as set when the caller passed
it to the constructor or assigned it, including explicit ``False``, ``0`` and
empty sets. Projection relies on that distinction, so ``bind_secret_id=False``
and ``secret_id_num_uses=0`` are never confused with "not declared".

Assignments are validated like constructor arguments: bounds, slash trimming
and the conflict check all apply to ``set_field`` and plain attribute writes.

Deprecated Fields:
    ``bound_cidr_list``, ``policies`` and ``period`` predate Vault 1.2 and are
    superseded by ``secret_id_bound_cidrs``, ``token_policies`` and
    ``token_period``. Each pair is mutually exclusive in a declaration.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from approle_controller.models.model_role_identity import ModelRoleIdentity

# Legacy/modern field pairs that may not both be declared.
CONFLICTING_FIELDS: tuple[tuple[str, str], ...] = (
    ("bound_cidr_list", "secret_id_bound_cidrs"),
    ("policies", "token_policies"),
    ("period", "token_period"),
)


class ModelRoleConfig(BaseModel):
    """Declared configuration of one AppRole role.

    Attributes:
        mount: Auth mount of the AppRole backend (slashes trimmed, default "approle")
        role_name: Name of the role (slashes trimmed)
        role_id: RoleID of the role; generated by Vault when not declared
        bind_secret_id: Require a SecretID at login (Vault default True)
        bound_cidr_list: Deprecated, use secret_id_bound_cidrs
        secret_id_bound_cidrs: CIDR blocks allowed to log in with a SecretID
        secret_id_num_uses: Uses per SecretID; 0 means unlimited
        secret_id_ttl: Seconds a SecretID remains valid
        policies: Deprecated, use token_policies
        period: Deprecated, use token_period
        token_*: Shared token settings owned by AdapterTokenFields

    Example:
        >>> config = ModelRoleConfig(role_name="web", bind_secret_id=False)
        >>> config.is_set("bind_secret_id")
        True
        >>> config.is_set("secret_id_num_uses")
        False
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    mount: str = Field(
        default="approle",
        description="Auth mount of the AppRole backend",
    )
    role_name: str = Field(
        description="Name of the role",
    )
    role_id: str | None = Field(
        default=None,
        description="RoleID of the role. Autogenerated if not set.",
    )
    bind_secret_id: bool = Field(
        default=True,
        description="Whether or not to require secret_id to be present when logging in",
    )
    bound_cidr_list: set[str] | None = Field(
        default=None,
        description="Deprecated: use secret_id_bound_cidrs",
    )
    secret_id_bound_cidrs: set[str] | None = Field(
        default=None,
        description="CIDR blocks that can log in using the AppRole",
    )
    secret_id_num_uses: int = Field(
        default=0,
        ge=0,
        description="Number of uses per SecretID. 0 allows unlimited uses.",
    )
    secret_id_ttl: int = Field(
        default=0,
        ge=0,
        description="Number of seconds a SecretID remains valid for",
    )
    policies: set[str] | None = Field(
        default=None,
        description="Deprecated: use token_policies",
    )
    period: int | None = Field(
        default=None,
        ge=0,
        description="Deprecated: use token_period",
    )

    token_bound_cidrs: set[str] | None = Field(
        default=None,
        description="CIDR blocks that tokens issued by this role may be used from",
    )
    token_explicit_max_ttl: int = Field(
        default=0,
        ge=0,
        description="Hard cap on token lifetime in seconds, ignoring renewals",
    )
    token_max_ttl: int = Field(
        default=0,
        ge=0,
        description="Maximum token lifetime in seconds",
    )
    token_no_default_policy: bool = Field(
        default=False,
        description="Do not attach the default policy to issued tokens",
    )
    token_num_uses: int = Field(
        default=0,
        ge=0,
        description="Number of times an issued token may be used",
    )
    token_period: int | None = Field(
        default=None,
        ge=0,
        description="Renewal period in seconds for periodic tokens",
    )
    token_policies: set[str] | None = Field(
        default=None,
        description="Policies attached to issued tokens",
    )
    token_ttl: int = Field(
        default=0,
        ge=0,
        description="Initial TTL of issued tokens in seconds",
    )
    token_type: str = Field(
        default="default",
        description="Type of token to issue (service, batch or default)",
    )

    @field_validator("mount", "role_name")
    @classmethod
    def _trim_slashes(cls, value: str) -> str:
        trimmed = value.strip("/")
        if not trimmed:
            raise ValueError("must contain at least one character besides '/'")
        return trimmed

    @model_validator(mode="after")
    def _check_conflicts(self) -> ModelRoleConfig:
        conflicts = self.conflicting_fields()
        if conflicts:
            pairs = ", ".join(f"{legacy!r} and {modern!r}" for legacy, modern in conflicts)
            raise ValueError(f"conflicting fields declared together: {pairs}")
        return self

    @property
    def identity(self) -> ModelRoleIdentity:
        """Return the (mount, role_name) identity of this role."""
        return ModelRoleIdentity(mount=self.mount, role_name=self.role_name)

    def conflicting_fields(self) -> list[tuple[str, str]]:
        """Return legacy/modern pairs that both hold a declared value."""
        return [
            (legacy, modern)
            for legacy, modern in CONFLICTING_FIELDS
            if self.is_set(legacy)
            and self.is_set(modern)
            and getattr(self, legacy) is not None
            and getattr(self, modern) is not None
        ]

    def is_set(self, name: str) -> bool:
        """Return True if the field was explicitly declared or assigned."""
        return name in self.model_fields_set

    def set_field(self, name: str, value: object) -> None:
        """Assign a field and mark it as explicitly set."""
        setattr(self, name, value)
        self.model_fields_set.add(name)

    def unset_field(self, name: str) -> None:
        """Reset a field to its default and mark it as not set."""
        default = type(self).model_fields[name].get_default(call_default_factory=True)
        setattr(self, name, default)
        self.model_fields_set.discard(name)

    def apply_updates(self, updates: Mapping[str, object]) -> None:
        """Apply a field update map.

        A value of None unsets the field (restoring its default); any other
        value is assigned and marks the field as set. Fields are cleared
        before any are assigned, so handing a value from a deprecated field
        to its replacement never trips the conflict check midway.
        """
        for name, value in updates.items():
            if value is None:
                self.unset_field(name)
        for name, value in updates.items():
            if value is not None:
                self.set_field(name, value)


__all__ = ["CONFLICTING_FIELDS", "ModelRoleConfig"]
