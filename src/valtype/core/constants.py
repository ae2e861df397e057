"""
Wire-level constants for simple value specifications.

Defines the short keys used by the structured spec form and the naming
prefixes used by type descriptors. This module is zero-IO.

Notes:
    - The structured form emits keys in the order TYPE_KEY, VALUE_KEY, FORMATTED_KEY;
      consumers may rely on the type reference coming first.
    - Changing these constants changes the persisted format.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "TYPE_KEY",
    "VALUE_KEY",
    "FORMATTED_KEY",
    "TYPE_ID_PREFIX",
    "STYLE_CLASS_PREFIX",
    "TEMP_ID_PREFIX",
]

# Type reference key; present only when full type identity is required.
TYPE_KEY: Final[str] = "_"

# Underlying value key.
VALUE_KEY: Final[str] = "v"

# Formatted text key; present only when formatted is set and not omitted.
FORMATTED_KEY: Final[str] = "f"

# Module-like identifier prefix for built-in type descriptors.
TYPE_ID_PREFIX: Final[str] = "valtype/core/"

# CSS-ish classification tag prefix for display layers.
STYLE_CLASS_PREFIX: Final[str] = "valtype-type-"

# Prefix for temporary ids handed out to anonymous types within a SpecScope.
TEMP_ID_PREFIX: Final[str] = "_"
