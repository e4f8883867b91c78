# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ModelRoleConfig and ModelRoleIdentity."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from approle_controller.errors import PathFormatError
from approle_controller.models import ModelRoleConfig, ModelRoleIdentity


class TestModelRoleConfigSetTracking:
    """Test the set-vs-absent distinction."""

    def test_defaults_are_not_set(self) -> None:
        """Test fields left at their default are not reported as set."""
        config = ModelRoleConfig(role_name="web")

        assert config.bind_secret_id is True
        assert config.secret_id_num_uses == 0
        assert not config.is_set("bind_secret_id")
        assert not config.is_set("secret_id_num_uses")

    def test_explicit_false_and_zero_are_set(self) -> None:
        """Test explicit False and 0 count as declared."""
        config = ModelRoleConfig(
            role_name="web", bind_secret_id=False, secret_id_num_uses=0
        )

        assert config.is_set("bind_secret_id")
        assert config.is_set("secret_id_num_uses")

    def test_explicit_empty_set_is_set(self) -> None:
        """Test an explicit empty set counts as declared."""
        config = ModelRoleConfig(role_name="web", bound_cidr_list=set())

        assert config.is_set("bound_cidr_list")
        assert config.bound_cidr_list == set()

    def test_set_field_marks_field(self) -> None:
        """Test set_field assigns the value and marks it set."""
        config = ModelRoleConfig(role_name="web")

        config.set_field("secret_id_ttl", 600)

        assert config.secret_id_ttl == 600
        assert config.is_set("secret_id_ttl")

    def test_unset_field_restores_default(self) -> None:
        """Test unset_field restores the default and clears the mark."""
        config = ModelRoleConfig(role_name="web", token_policies={"read"})

        config.unset_field("token_policies")

        assert config.token_policies is None
        assert not config.is_set("token_policies")

    def test_apply_updates_sets_and_clears(self) -> None:
        """Test None values clear fields and other values set them."""
        config = ModelRoleConfig(role_name="web", token_period=60)

        config.apply_updates({"token_period": None, "secret_id_ttl": 30})

        assert not config.is_set("token_period")
        assert config.token_period is None
        assert config.is_set("secret_id_ttl")
        assert config.secret_id_ttl == 30

    def test_copy_preserves_set_tracking(self) -> None:
        """Test deep copies keep the fields-set marks independent."""
        config = ModelRoleConfig(role_name="web", bind_secret_id=False)

        copied = config.model_copy(deep=True)
        copied.set_field("secret_id_ttl", 5)

        assert copied.is_set("bind_secret_id")
        assert not config.is_set("secret_id_ttl")


class TestModelRoleConfigValidation:
    """Test declaration validation."""

    def test_identity_fields_are_trimmed(self) -> None:
        """Test slashes are trimmed from mount and role name."""
        config = ModelRoleConfig(mount="/approle/", role_name="web/")

        assert config.mount == "approle"
        assert config.role_name == "web"
        assert config.identity.path == "auth/approle/role/web"

    def test_default_mount(self) -> None:
        """Test the mount defaults to approle."""
        assert ModelRoleConfig(role_name="web").mount == "approle"

    def test_slash_only_role_name_rejected(self) -> None:
        """Test a role name made only of slashes is rejected."""
        with pytest.raises(ValidationError):
            ModelRoleConfig(role_name="//")

    @pytest.mark.parametrize(
        ("legacy", "modern", "value"),
        [
            ("bound_cidr_list", "secret_id_bound_cidrs", {"10.0.0.0/8"}),
            ("policies", "token_policies", {"default"}),
            ("period", "token_period", 60),
        ],
    )
    def test_conflicting_fields_rejected(
        self, legacy: str, modern: str, value: object
    ) -> None:
        """Test a deprecated field and its replacement cannot both be declared."""
        with pytest.raises(ValidationError, match="conflicting fields"):
            ModelRoleConfig.model_validate(
                {"role_name": "web", legacy: value, modern: value}
            )

    def test_negative_counts_rejected(self) -> None:
        """Test negative counts and durations are rejected."""
        with pytest.raises(ValidationError):
            ModelRoleConfig(role_name="web", secret_id_num_uses=-1)

    def test_assignment_validated(self) -> None:
        """Test assignments are checked against the field bounds."""
        config = ModelRoleConfig(role_name="web")

        with pytest.raises(ValidationError):
            config.secret_id_num_uses = -5
        with pytest.raises(ValidationError):
            config.set_field("token_ttl", -1)

    def test_assignment_trims_identity_fields(self) -> None:
        """Test assigned mount and role names are trimmed like declared ones."""
        config = ModelRoleConfig(role_name="web")

        config.role_name = "/api/"

        assert config.role_name == "api"
        with pytest.raises(ValidationError):
            config.mount = "//"

    def test_conflicting_assignment_rejected(self) -> None:
        """Test assigning a replacement next to its deprecated field is rejected."""
        config = ModelRoleConfig(role_name="web", bound_cidr_list={"10.0.0.0/8"})

        with pytest.raises(ValidationError, match="conflicting fields"):
            config.secret_id_bound_cidrs = {"172.16.0.0/12"}

    def test_apply_updates_hands_over_between_names(self) -> None:
        """Test a deprecated field can be replaced in a single update map."""
        config = ModelRoleConfig(role_name="web", policies={"read"})

        config.apply_updates({"token_policies": {"write"}, "policies": None})

        assert config.token_policies == {"write"}
        assert config.policies is None
        assert not config.is_set("policies")

    def test_unknown_field_rejected(self) -> None:
        """Test undeclared keys are rejected."""
        with pytest.raises(ValidationError):
            ModelRoleConfig.model_validate({"role_name": "web", "secret_id": "x"})

    def test_list_input_becomes_set(self) -> None:
        """Test YAML-style lists are accepted for set fields."""
        config = ModelRoleConfig.model_validate(
            {"role_name": "web", "token_policies": ["a", "b", "a"]}
        )

        assert config.token_policies == {"a", "b"}


class TestModelRoleIdentity:
    """Test role identity parsing and path derivation."""

    def test_from_path_round_trip(self) -> None:
        """Test re-deriving the path from a parsed identity is lossless."""
        identity = ModelRoleIdentity.from_path("auth/team/approle/role/web")

        assert identity.mount == "team/approle"
        assert identity.role_name == "web"
        assert identity.path == "auth/team/approle/role/web"

    def test_from_path_rejects_missing_mount(self) -> None:
        """Test a path without a mount segment is rejected."""
        with pytest.raises(PathFormatError):
            ModelRoleIdentity.from_path("auth/role/bar")

    def test_identity_is_frozen(self) -> None:
        """Test identities are immutable."""
        identity = ModelRoleIdentity(mount="approle", role_name="web")

        with pytest.raises(ValidationError):
            identity.mount = "other"  # type: ignore[misc]
