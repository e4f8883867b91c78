# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for the Vault logical API client.

The role controller only needs three calls against Vault's key-addressed
logical API. HandlerVaultLogical implements them with hvac; tests use an
in-memory implementation.

Contract:
    write(path, data): Upsert. Creating and overwriting are indistinguishable.
    read(path): Returns the ``data`` mapping of the response, or None when
        there is no resource at the path. None is not an error.
    delete(path): Removes the resource. When there is nothing to delete the
        call raises ``hvac.exceptions.InvalidPath`` so that callers can tell
        not-found apart from other failures.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolVaultLogicalClient(Protocol):
    """Key-addressed read/write/delete access to Vault."""

    def read(self, path: str) -> dict[str, object] | None:
        """Read the data stored at a path, or None if nothing is there."""
        ...

    def write(self, path: str, data: Mapping[str, object]) -> None:
        """Create or overwrite the resource at a path."""
        ...

    def delete(self, path: str) -> None:
        """Delete the resource at a path."""
        ...


__all__: list[str] = ["ProtocolVaultLogicalClient"]
