# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Role Field Kind Enumeration.

Classifies AppRole role fields by the shape of their value on the wire so a
single projection routine can write and read every field uniformly.
"""

from enum import Enum


class EnumRoleFieldKind(str, Enum):
    """Wire shape of an AppRole role field.

    Attributes:
        BOOL: Boolean flag (e.g., bind_secret_id)
        INT: Integer count or duration in seconds (e.g., secret_id_ttl)
        STRING: Plain string (e.g., token_type)
        STRING_SET: Unordered set of strings, written as a sorted list
    """

    BOOL = "bool"
    INT = "int"
    STRING = "string"
    STRING_SET = "string_set"


__all__ = ["EnumRoleFieldKind"]
