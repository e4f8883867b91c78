# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Controller Controllers.

Exports:
    ControllerAppRoleRole: Lifecycle controller for one AppRole role
"""

from approle_controller.controllers.controller_approle_role import (
    ControllerAppRoleRole,
)

__all__: list[str] = ["ControllerAppRoleRole"]
