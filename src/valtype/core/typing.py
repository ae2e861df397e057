"""
Lightweight typing aliases used across the simple value modules.

This module contains no runtime logic and is zero-IO.

Examples:
    >>> from valtype.core.typing import SpecObject, TypeRef
    >>> def wrap(ref: TypeRef, v: int) -> SpecObject:
    ...     return {"_": ref, "v": v}
    >>> wrap(TypeRef("valtype/core/number"), 5)
    {'_': 'valtype/core/number', 'v': 5}
"""

from __future__ import annotations

from typing import Any, NewType

__all__ = [
    "TypeRef",
    "SpecObject",
    "SpecLiteral",
]

# Reference to a type descriptor inside a spec (its id or a scope-local temporary id).
TypeRef = NewType("TypeRef", str)

# Structured spec form: {"_"?: TypeRef, "v": Any, "f"?: str}.
SpecObject = dict[str, Any]

# Either the bare underlying value or the structured form.
SpecLiteral = Any
