# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Role synchronization state enumeration for the role controller lifecycle."""

from enum import Enum


class EnumRoleSyncState(str, Enum):
    """Lifecycle state of the role owned by a controller.

    Transitions:
        UNMANAGED -> SYNCED: create or import succeeded
        SYNCED -> SYNCED: update or read succeeded
        SYNCED -> UNMANAGED: delete succeeded, or read found the role missing
    """

    UNMANAGED = "UNMANAGED"
    SYNCED = "SYNCED"


__all__ = ["EnumRoleSyncState"]
