# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Controller Protocols.

Exports:
    ProtocolVaultLogicalClient: read/write/delete contract for Vault
"""

from approle_controller.protocols.protocol_vault_logical_client import (
    ProtocolVaultLogicalClient,
)

__all__: list[str] = ["ProtocolVaultLogicalClient"]
