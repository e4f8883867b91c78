# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Controller Handlers.

Exports:
    HandlerVaultLogical: hvac-backed Vault logical API client
"""

from approle_controller.handlers.handler_vault_logical import HandlerVaultLogical

__all__: list[str] = ["HandlerVaultLogical"]
