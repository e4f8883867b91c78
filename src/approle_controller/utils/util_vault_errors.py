# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault error classification helpers."""

from __future__ import annotations

import hvac.exceptions


def is_not_found(error: BaseException) -> bool:
    """Return True when a Vault error means "no resource at this path".

    hvac maps HTTP 404 responses to InvalidPath.
    """
    return isinstance(error, hvac.exceptions.InvalidPath)


__all__: list[str] = ["is_not_found"]
