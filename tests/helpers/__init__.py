# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for approle_controller unit tests.

Available Utilities:
    Fake Vault:
        - InMemoryVaultLogical: In-memory Vault logical API with AppRole
          upsert, default and legacy-key behaviour
"""

from tests.helpers.fake_vault import InMemoryVaultLogical

__all__: list[str] = ["InMemoryVaultLogical"]
