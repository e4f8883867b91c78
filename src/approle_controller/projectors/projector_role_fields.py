# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Role Field Projector.

Translates a declared role into Vault write payloads and folds Vault read
responses back into the local role.

Write Projection:
    - project_for_create writes only the fields the caller declared, so
      Vault's defaults apply to everything else
    - project_for_update writes only the fields that changed since the last
      sync, so remote fields the caller is not managing are never reset

Read Resolution:
    - bind_secret_id, secret_id_num_uses and secret_id_ttl are refreshed
      directly from the response
    - each deprecated/current pair is resolved through its ModelFieldMigration;
      see ``approle_controller.models.model_field_migration``

Token fields are handled by AdapterTokenFields; this projector only covers
the AppRole-specific fields and the deprecated fields that shadow token
fields.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping

from approle_controller.enums import EnumRoleFieldKind
from approle_controller.models import (
    ModelFieldMigration,
    ModelRoleConfig,
    ModelRoleFieldSpec,
    RoleFieldValue,
)
from approle_controller.projectors.projection_role_field_values import (
    project_changed_fields,
    project_declared_fields,
    read_response_fields,
)

BIND_SECRET_ID = ModelRoleFieldSpec(name="bind_secret_id", kind=EnumRoleFieldKind.BOOL)
SECRET_ID_NUM_USES = ModelRoleFieldSpec(
    name="secret_id_num_uses", kind=EnumRoleFieldKind.INT
)
SECRET_ID_TTL = ModelRoleFieldSpec(name="secret_id_ttl", kind=EnumRoleFieldKind.INT)
SECRET_ID_BOUND_CIDRS = ModelRoleFieldSpec(
    name="secret_id_bound_cidrs", kind=EnumRoleFieldKind.STRING_SET
)
BOUND_CIDR_LIST = ModelRoleFieldSpec(
    name="bound_cidr_list", kind=EnumRoleFieldKind.STRING_SET
)
POLICIES = ModelRoleFieldSpec(name="policies", kind=EnumRoleFieldKind.STRING_SET)
PERIOD = ModelRoleFieldSpec(name="period", kind=EnumRoleFieldKind.INT)

# Fields written by create/update, deprecated fields last.
ROLE_FIELD_SPECS: tuple[ModelRoleFieldSpec, ...] = (
    BIND_SECRET_ID,
    SECRET_ID_NUM_USES,
    SECRET_ID_TTL,
    SECRET_ID_BOUND_CIDRS,
    PERIOD,
    POLICIES,
    BOUND_CIDR_LIST,
)

# Fields refreshed unconditionally on read.
REFRESHED_FIELD_SPECS: tuple[ModelRoleFieldSpec, ...] = (
    BIND_SECRET_ID,
    SECRET_ID_NUM_USES,
    SECRET_ID_TTL,
)

# Only the CIDR pair falls back to the current response key.
ROLE_FIELD_MIGRATIONS: tuple[ModelFieldMigration, ...] = (
    ModelFieldMigration(
        legacy_field=BOUND_CIDR_LIST,
        modern_field=SECRET_ID_BOUND_CIDRS,
        fallback_response_key=SECRET_ID_BOUND_CIDRS.name,
    ),
    ModelFieldMigration(
        legacy_field=POLICIES,
        modern_field=ModelRoleFieldSpec(
            name="token_policies", kind=EnumRoleFieldKind.STRING_SET
        ),
    ),
    ModelFieldMigration(
        legacy_field=PERIOD,
        modern_field=ModelRoleFieldSpec(name="token_period", kind=EnumRoleFieldKind.INT),
    ),
)

# Fields that address the role rather than configure it.
IDENTITY_FIELDS: frozenset[str] = frozenset({"mount", "role_name"})


class ProjectorRoleFields:
    """Projects AppRole role fields to and from Vault.

    Example:
        >>> projector = ProjectorRoleFields()
        >>> config = ModelRoleConfig(role_name="web", bind_secret_id=False)
        >>> projector.project_for_create(config)
        {'bind_secret_id': False}
    """

    def __init__(
        self,
        specs: tuple[ModelRoleFieldSpec, ...] = ROLE_FIELD_SPECS,
        migrations: tuple[ModelFieldMigration, ...] = ROLE_FIELD_MIGRATIONS,
    ) -> None:
        self._specs = specs
        self._migrations = migrations

    @property
    def migrations(self) -> tuple[ModelFieldMigration, ...]:
        """Return the deprecated/current field pairs resolved on read."""
        return self._migrations

    def project_for_create(self, config: ModelRoleConfig) -> dict[str, object]:
        """Build the payload for the initial write of a role.

        Args:
            config: Declared role configuration

        Returns:
            Payload holding every declared role field, including explicit
            ``False`` and ``0`` values.
        """
        return project_declared_fields(config, self._specs)

    def project_for_update(
        self,
        config: ModelRoleConfig,
        changed_fields: Collection[str],
    ) -> dict[str, object]:
        """Build the payload for a partial update of a role.

        Args:
            config: Desired role configuration
            changed_fields: Names of fields changed since the last sync

        Returns:
            Payload holding only the changed role fields.
        """
        return project_changed_fields(config, self._specs, changed_fields)

    def resolve_on_read(
        self,
        snapshot: ModelRoleConfig,
        response_data: Mapping[str, object],
    ) -> dict[str, RoleFieldValue]:
        """Compute local field updates from a Vault read response.

        Args:
            snapshot: Local configuration before the read; decides which
                field of each deprecated/current pair is authoritative
            response_data: The ``data`` mapping of the Vault read response

        Returns:
            Update map for ModelRoleConfig.apply_updates; a None value clears
            the named field.
        """
        updates = read_response_fields(response_data, REFRESHED_FIELD_SPECS)
        for migration in self._migrations:
            updates.update(migration.resolve(snapshot, response_data))
        return updates

    @staticmethod
    def changed_fields(
        previous: ModelRoleConfig | None,
        current: ModelRoleConfig,
    ) -> set[str]:
        """Return the configuration fields whose value differs.

        Args:
            previous: Last synced configuration, or None if never synced
            current: Desired configuration

        Returns:
            Names of non-identity fields to send in an update. With no
            previous configuration every declared field counts as changed.
        """
        if previous is None:
            return set(current.model_fields_set) - IDENTITY_FIELDS
        return {
            name
            for name in type(current).model_fields
            if name not in IDENTITY_FIELDS
            and getattr(previous, name) != getattr(current, name)
        }


__all__: list[str] = [
    "IDENTITY_FIELDS",
    "REFRESHED_FIELD_SPECS",
    "ROLE_FIELD_MIGRATIONS",
    "ROLE_FIELD_SPECS",
    "ProjectorRoleFields",
]
