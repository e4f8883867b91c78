# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Token Field Adapter.

Vault auth backends share a common block of token settings (``token_ttl``,
``token_policies``, ...). AdapterTokenFields owns that block: it projects the
token fields of a role into write payloads and refreshes them from read
responses. The role controller calls it alongside the role field projector;
the deprecated ``policies``/``period`` fields that shadow ``token_policies``
and ``token_period`` are resolved by the projector afterwards.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping

from approle_controller.enums import EnumRoleFieldKind
from approle_controller.models import (
    ModelRoleConfig,
    ModelRoleFieldSpec,
    RoleFieldValue,
)
from approle_controller.projectors.projection_role_field_values import (
    project_changed_fields,
    project_declared_fields,
    read_response_fields,
)

TOKEN_FIELD_SPECS: tuple[ModelRoleFieldSpec, ...] = (
    ModelRoleFieldSpec(name="token_bound_cidrs", kind=EnumRoleFieldKind.STRING_SET),
    ModelRoleFieldSpec(name="token_explicit_max_ttl", kind=EnumRoleFieldKind.INT),
    ModelRoleFieldSpec(name="token_max_ttl", kind=EnumRoleFieldKind.INT),
    ModelRoleFieldSpec(name="token_no_default_policy", kind=EnumRoleFieldKind.BOOL),
    ModelRoleFieldSpec(name="token_period", kind=EnumRoleFieldKind.INT),
    ModelRoleFieldSpec(name="token_policies", kind=EnumRoleFieldKind.STRING_SET),
    ModelRoleFieldSpec(name="token_type", kind=EnumRoleFieldKind.STRING),
    ModelRoleFieldSpec(name="token_ttl", kind=EnumRoleFieldKind.INT),
    ModelRoleFieldSpec(name="token_num_uses", kind=EnumRoleFieldKind.INT),
)


class AdapterTokenFields:
    """Read and write hooks for the shared token field block.

    Example:
        >>> adapter = AdapterTokenFields()
        >>> config = ModelRoleConfig(role_name="web", token_ttl=600)
        >>> adapter.project_fields(config, create=True)
        {'token_ttl': 600}
    """

    def __init__(
        self, specs: tuple[ModelRoleFieldSpec, ...] = TOKEN_FIELD_SPECS
    ) -> None:
        self._specs = specs

    @property
    def field_names(self) -> frozenset[str]:
        """Return the names of the token fields this adapter owns."""
        return frozenset(spec.name for spec in self._specs)

    def project_fields(
        self,
        config: ModelRoleConfig,
        create: bool,
        changed_fields: Collection[str] = (),
    ) -> dict[str, object]:
        """Project token fields into a write payload.

        Args:
            config: Role configuration to project
            create: True for the initial write, False for an update
            changed_fields: Fields changed since the last sync (update only)

        Returns:
            Payload fragment holding the token fields to write.
        """
        if create:
            return project_declared_fields(config, self._specs)
        return project_changed_fields(config, self._specs, changed_fields)

    def read_fields(self, response_data: Mapping[str, object]) -> dict[str, RoleFieldValue]:
        """Refresh every token field from a Vault read response."""
        return read_response_fields(response_data, self._specs)


__all__: list[str] = ["TOKEN_FIELD_SPECS", "AdapterTokenFields"]
