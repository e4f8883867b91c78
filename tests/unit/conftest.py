# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for all unit tests.

Every test under tests/unit/ is marked ``unit`` at collection time, so unit
tests can be selected without each module setting pytestmark:

    pytest -m unit
    pytest -m "not unit"

Related:
    - pyproject.toml: Marker definitions
    - tests/conftest.py: Global test fixtures
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the unit marker to every test collected from tests/unit.

    Args:
        config: Pytest configuration object.
        items: List of collected test items.
    """
    unit_marker = pytest.mark.unit
    for item in items:
        if "tests/unit" not in item.path.as_posix():
            continue
        if item.get_closest_marker("unit") is None:
            item.add_marker(unit_marker)
