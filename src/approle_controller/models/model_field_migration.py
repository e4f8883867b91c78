# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Field Migration Model.

A field migration pairs a deprecated role field with the field that replaced
it and decides, on every read, which of the two receives the value Vault
returned. Whichever name the caller declared last stays authoritative, so a
configuration written against the deprecated name keeps reading back under
that name, and switching between the two is visible after the next read.

Resolution Rules:
    1. Legacy authoritative: the snapshot has a value in the legacy field
       (an empty value counts, None does not). The legacy field is refreshed
       from the response key of the same name; when that key is missing and
       ``fallback_response_key`` is configured, that key is read instead.
       The modern field is cleared.
    2. Modern authoritative: otherwise. The modern field is refreshed from its
       response key when present; the legacy field is left untouched.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from approle_controller.models.model_role_config import ModelRoleConfig
from approle_controller.models.model_role_field_spec import (
    ModelRoleFieldSpec,
    RoleFieldValue,
)


class ModelFieldMigration(BaseModel):
    """Deprecated/current field pair with its read resolution policy.

    Attributes:
        legacy_field: The deprecated field
        modern_field: The field that supersedes it
        fallback_response_key: Response key read for the legacy field when
            Vault no longer returns the legacy key

    Example:
        >>> migration = ModelFieldMigration(
        ...     legacy_field=ModelRoleFieldSpec(
        ...         name="bound_cidr_list", kind=EnumRoleFieldKind.STRING_SET
        ...     ),
        ...     modern_field=ModelRoleFieldSpec(
        ...         name="secret_id_bound_cidrs", kind=EnumRoleFieldKind.STRING_SET
        ...     ),
        ...     fallback_response_key="secret_id_bound_cidrs",
        ... )
        >>> migration.resolve(snapshot, {"secret_id_bound_cidrs": ["10.0.0.0/8"]})
        {'bound_cidr_list': {'10.0.0.0/8'}, 'secret_id_bound_cidrs': None}
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    legacy_field: ModelRoleFieldSpec = Field(description="The deprecated field")
    modern_field: ModelRoleFieldSpec = Field(description="The superseding field")
    fallback_response_key: str | None = Field(
        default=None,
        description="Response key read for the legacy field when its own key is absent",
    )

    def legacy_is_authoritative(self, snapshot: ModelRoleConfig) -> bool:
        """Return True if the caller declared the legacy field with a value.

        An empty value counts; a legacy field cleared to None does not.
        """
        name = self.legacy_field.name
        return snapshot.is_set(name) and getattr(snapshot, name) is not None

    def resolve(
        self,
        snapshot: ModelRoleConfig,
        response_data: Mapping[str, object],
    ) -> dict[str, RoleFieldValue]:
        """Compute field updates for this pair from a Vault response.

        Args:
            snapshot: Local configuration before the read
            response_data: The ``data`` mapping of the Vault read response

        Returns:
            Update map; a None value clears the named field.
        """
        legacy = self.legacy_field
        modern = self.modern_field
        updates: dict[str, RoleFieldValue] = {}

        if self.legacy_is_authoritative(snapshot):
            if legacy.name in response_data:
                updates[legacy.name] = legacy.from_response(response_data[legacy.name])
            elif (
                self.fallback_response_key is not None
                and self.fallback_response_key in response_data
            ):
                updates[legacy.name] = legacy.from_response(
                    response_data[self.fallback_response_key]
                )
            updates[modern.name] = None
            return updates

        if modern.name in response_data:
            updates[modern.name] = modern.from_response(response_data[modern.name])
        return updates


__all__ = ["ModelFieldMigration"]
