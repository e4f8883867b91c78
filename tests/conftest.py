"""Pytest configuration and shared fixtures for approle_controller tests."""

from __future__ import annotations

import pytest

from approle_controller.controllers import ControllerAppRoleRole
from approle_controller.models import ModelRoleConfig
from tests.helpers import InMemoryVaultLogical

ROLE_PATH = "auth/approle/role/web"


@pytest.fixture
def fake_vault() -> InMemoryVaultLogical:
    """Provide an empty in-memory Vault logical API."""
    return InMemoryVaultLogical()


@pytest.fixture
def controller(fake_vault: InMemoryVaultLogical) -> ControllerAppRoleRole:
    """Provide an unmanaged controller bound to the in-memory Vault."""
    return ControllerAppRoleRole(fake_vault)


@pytest.fixture
def existing_role(fake_vault: InMemoryVaultLogical) -> str:
    """Store a role directly in the in-memory Vault and return its path.

    The setup write is removed from the call log so tests only see the
    calls made by the code under test.
    """
    fake_vault.write(ROLE_PATH, {"secret_id_num_uses": 5, "token_ttl": 600})
    fake_vault.calls.clear()
    return ROLE_PATH


@pytest.fixture
def web_role() -> ModelRoleConfig:
    """Provide a minimal declared role."""
    return ModelRoleConfig(role_name="web")
