# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared field projection routines.

These functions turn a ModelRoleConfig into Vault request payloads and Vault
response data into field updates for any table of ModelRoleFieldSpec entries.
Both the role field projector and the token field adapter are built on them.

Projection Rules:
    create: a field is written only if the caller explicitly set it. Explicit
        ``False``, ``0`` and empty sets are written; undeclared fields are
        omitted so Vault's own defaults apply.
    update: a field is written only if it is in the changed set, whatever its
        value. A changed field with no local value is written as the zero
        value of its kind.
    read: every field in the table is refreshed from the response; a missing
        key produces None, which resets the field to its default.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping

from approle_controller.models import (
    ModelRoleConfig,
    ModelRoleFieldSpec,
    RoleFieldValue,
)


def project_declared_fields(
    config: ModelRoleConfig,
    specs: Iterable[ModelRoleFieldSpec],
) -> dict[str, object]:
    """Build a create payload from the fields the caller declared."""
    payload: dict[str, object] = {}
    for spec in specs:
        if not config.is_set(spec.name):
            continue
        value = getattr(config, spec.name)
        if value is None:
            continue
        payload[spec.name] = spec.to_payload(value)
    return payload


def project_changed_fields(
    config: ModelRoleConfig,
    specs: Iterable[ModelRoleFieldSpec],
    changed_fields: Collection[str],
) -> dict[str, object]:
    """Build an update payload from the fields marked changed."""
    return {
        spec.name: spec.to_payload(getattr(config, spec.name))
        for spec in specs
        if spec.name in changed_fields
    }


def read_response_fields(
    response_data: Mapping[str, object],
    specs: Iterable[ModelRoleFieldSpec],
) -> dict[str, RoleFieldValue]:
    """Build a field update map from a Vault response."""
    return {spec.name: spec.from_response(response_data.get(spec.name)) for spec in specs}


__all__: list[str] = [
    "project_changed_fields",
    "project_declared_fields",
    "read_response_fields",
]
