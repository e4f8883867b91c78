# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ProjectorRoleFields."""

from __future__ import annotations

import pytest

from approle_controller.models import ModelRoleConfig
from approle_controller.projectors import ProjectorRoleFields


@pytest.fixture
def projector() -> ProjectorRoleFields:
    """Provide a projector with the default AppRole field table."""
    return ProjectorRoleFields()


class TestProjectForCreate:
    """Test initial write payloads."""

    def test_undeclared_fields_omitted(self, projector: ProjectorRoleFields) -> None:
        """Test a bare declaration produces an empty payload."""
        assert projector.project_for_create(ModelRoleConfig(role_name="web")) == {}

    def test_num_uses_unset_omitted(self, projector: ProjectorRoleFields) -> None:
        """Test secret_id_num_uses is omitted when not declared."""
        payload = projector.project_for_create(
            ModelRoleConfig(role_name="web", secret_id_ttl=60)
        )

        assert "secret_id_num_uses" not in payload

    def test_num_uses_zero_included(self, projector: ProjectorRoleFields) -> None:
        """Test an explicit 0 (unlimited) is written verbatim."""
        payload = projector.project_for_create(
            ModelRoleConfig(role_name="web", secret_id_num_uses=0)
        )

        assert payload == {"secret_id_num_uses": 0}

    def test_bind_secret_id_false_included(self, projector: ProjectorRoleFields) -> None:
        """Test an explicit False is written even though the default is True."""
        payload = projector.project_for_create(
            ModelRoleConfig(role_name="web", bind_secret_id=False)
        )

        assert payload == {"bind_secret_id": False}

    def test_bind_secret_id_unset_omitted(self, projector: ProjectorRoleFields) -> None:
        """Test bind_secret_id is omitted when not declared."""
        payload = projector.project_for_create(
            ModelRoleConfig(role_name="web", secret_id_num_uses=3)
        )

        assert "bind_secret_id" not in payload

    def test_sets_written_as_sorted_lists(self, projector: ProjectorRoleFields) -> None:
        """Test set fields are written as sorted lists."""
        payload = projector.project_for_create(
            ModelRoleConfig(
                role_name="web",
                secret_id_bound_cidrs={"192.168.0.0/16", "10.0.0.0/8"},
            )
        )

        assert payload == {"secret_id_bound_cidrs": ["10.0.0.0/8", "192.168.0.0/16"]}

    def test_deprecated_fields_included(self, projector: ProjectorRoleFields) -> None:
        """Test declared deprecated fields are written under their own names."""
        payload = projector.project_for_create(
            ModelRoleConfig(
                role_name="web",
                policies={"read"},
                period=300,
                bound_cidr_list={"10.0.0.0/8"},
            )
        )

        assert payload == {
            "policies": ["read"],
            "period": 300,
            "bound_cidr_list": ["10.0.0.0/8"],
        }

    def test_identity_and_token_fields_excluded(
        self, projector: ProjectorRoleFields
    ) -> None:
        """Test identity, role_id and token fields are not role payload fields."""
        payload = projector.project_for_create(
            ModelRoleConfig(
                mount="approle", role_name="web", role_id="abc", token_ttl=60
            )
        )

        assert payload == {}


class TestProjectForUpdate:
    """Test partial update payloads."""

    def test_only_changed_fields_written(self, projector: ProjectorRoleFields) -> None:
        """Test unchanged fields are never written, whatever their value."""
        config = ModelRoleConfig(
            role_name="web", secret_id_num_uses=5, secret_id_ttl=3600
        )

        payload = projector.project_for_update(config, {"secret_id_ttl"})

        assert payload == {"secret_id_ttl": 3600}

    def test_changed_default_value_written(self, projector: ProjectorRoleFields) -> None:
        """Test a changed field is written even when it holds its default."""
        config = ModelRoleConfig(role_name="web")

        payload = projector.project_for_update(config, {"bind_secret_id"})

        assert payload == {"bind_secret_id": True}

    def test_cleared_field_written_as_zero_value(
        self, projector: ProjectorRoleFields
    ) -> None:
        """Test a changed field with no value is written as its zero value."""
        config = ModelRoleConfig(role_name="web")

        payload = projector.project_for_update(config, {"policies", "period"})

        assert payload == {"period": 0, "policies": []}

    def test_no_changes_empty_payload(self, projector: ProjectorRoleFields) -> None:
        """Test an empty change set produces an empty payload."""
        config = ModelRoleConfig(role_name="web", secret_id_ttl=5)

        assert projector.project_for_update(config, set()) == {}


class TestResolveOnRead:
    """Test folding a read response into local state."""

    def test_legacy_cidr_populated_from_modern_key(
        self, projector: ProjectorRoleFields
    ) -> None:
        """Test bound_cidr_list is refreshed from secret_id_bound_cidrs."""
        snapshot = ModelRoleConfig(role_name="web", bound_cidr_list={"10.0.0.0/8"})

        updates = projector.resolve_on_read(
            snapshot, {"secret_id_bound_cidrs": ["10.0.0.0/8", "172.16.0.0/12"]}
        )

        assert updates["bound_cidr_list"] == {"10.0.0.0/8", "172.16.0.0/12"}
        assert updates["secret_id_bound_cidrs"] is None

        config = snapshot.model_copy(deep=True)
        config.apply_updates(updates)
        assert config.bound_cidr_list == {"10.0.0.0/8", "172.16.0.0/12"}
        assert config.secret_id_bound_cidrs is None
        assert not config.is_set("secret_id_bound_cidrs")

    def test_refreshed_fields(self, projector: ProjectorRoleFields) -> None:
        """Test the AppRole scalars are always refreshed."""
        updates = projector.resolve_on_read(
            ModelRoleConfig(role_name="web"),
            {"bind_secret_id": False, "secret_id_num_uses": 5, "secret_id_ttl": 60},
        )

        assert updates["bind_secret_id"] is False
        assert updates["secret_id_num_uses"] == 5
        assert updates["secret_id_ttl"] == 60

    def test_missing_scalars_reset(self, projector: ProjectorRoleFields) -> None:
        """Test scalars missing from the response reset to their defaults."""
        updates = projector.resolve_on_read(ModelRoleConfig(role_name="web"), {})

        assert updates["bind_secret_id"] is None
        assert updates["secret_id_num_uses"] is None

    def test_each_pair_resolved_independently(
        self, projector: ProjectorRoleFields
    ) -> None:
        """Test declaring one deprecated field does not affect other pairs."""
        snapshot = ModelRoleConfig(role_name="web", period=60)
        response = {
            "period": 60,
            "token_period": 60,
            "policies": ["a"],
            "token_policies": ["a"],
            "secret_id_bound_cidrs": ["10.0.0.0/8"],
        }

        updates = projector.resolve_on_read(snapshot, response)

        assert updates["period"] == 60
        assert updates["token_period"] is None
        assert updates["token_policies"] == {"a"}
        assert "policies" not in updates
        assert updates["secret_id_bound_cidrs"] == {"10.0.0.0/8"}
        assert "bound_cidr_list" not in updates


class TestChangedFields:
    """Test change detection between synced and desired configuration."""

    def test_detects_value_changes(self) -> None:
        """Test only fields with differing values are reported."""
        previous = ModelRoleConfig(role_name="web", secret_id_ttl=60, secret_id_num_uses=5)
        current = previous.model_copy(update={"secret_id_ttl": 120})

        assert ProjectorRoleFields.changed_fields(previous, current) == {"secret_id_ttl"}

    def test_without_previous_uses_declared_fields(self) -> None:
        """Test every declared non-identity field counts without a previous sync."""
        current = ModelRoleConfig(mount="approle", role_name="web", secret_id_ttl=60)

        assert ProjectorRoleFields.changed_fields(None, current) == {"secret_id_ttl"}

    def test_identity_fields_never_reported(self) -> None:
        """Test mount and role name are never part of the change set."""
        previous = ModelRoleConfig(role_name="web")
        current = ModelRoleConfig(mount="other", role_name="api")

        assert ProjectorRoleFields.changed_fields(previous, current) == set()
