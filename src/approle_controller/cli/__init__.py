# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Controller CLI."""
