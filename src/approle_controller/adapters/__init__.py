# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Controller Adapters.

Exports:
    AdapterTokenFields: Read/write hooks for the shared token field block
    TOKEN_FIELD_SPECS: Field specs of the token block
"""

from approle_controller.adapters.adapter_token_fields import (
    TOKEN_FIELD_SPECS,
    AdapterTokenFields,
)

__all__: list[str] = ["TOKEN_FIELD_SPECS", "AdapterTokenFields"]
