"""
JSON serialization/deserialization for simple value specs.

Specs are either a bare scalar or the structured form {"_"?, "v", "f"?}. JSON
output preserves key order, because consumers expect the type reference first.
Dates are written as ISO 8601 strings. Zero-IO.

Examples:
    >>> from valtype.core.kinds import Number
    >>> from valtype.core.serde import json_dumps_spec, spec_from_json
    >>> json_dumps_spec(Number(5).to_spec(require_type=True))
    '{"_":"valtype/core/number","v":5}'
    >>> spec_from_json(Number, '{"v":5,"f":"five"}')
    Number(5, formatted='five')
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .simple import Simple
from .typing import SpecLiteral, TypeRef

__all__ = [
    "SimpleSpecObject",
    "json_dumps_spec",
    "json_loads",
    "spec_from_json",
]


class SimpleSpecObject(BaseModel):
    """
    Structured spec form of a simple value.

    Attributes:
        type_ref (TypeRef | None): Type reference, serialized under ``_``.
        v (Any): Underlying value.
        f (str | None): Formatted text.

    Raises:
        pydantic.ValidationError: If ``v`` is missing or extra keys are present.
    """

    model_config = ConfigDict(extra="forbid")

    type_ref: TypeRef | None = Field(default=None, alias="_")
    v: Any
    f: str | None = None


def _default(obj: Any) -> Any:
    if isinstance(obj, date):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def json_dumps_spec(spec: SpecLiteral) -> str:
    """
    Serialize a spec to a compact JSON string, keeping key order.

    Args:
        spec (SpecLiteral): Output of ``Simple.to_spec``.

    Returns:
        str: Compact JSON.
    """
    if isinstance(spec, dict):
        spec = SimpleSpecObject.model_validate(spec).model_dump(
            by_alias=True, exclude_none=True
        )
    return json.dumps(spec, separators=(",", ":"), ensure_ascii=False, default=_default)


def json_loads(s: str) -> Any:
    """Deserialize a JSON string using the stdlib json module."""
    return json.loads(s)


def spec_from_json(kind: type[Simple], s: str) -> Simple:
    """
    Decode a JSON spec and construct a value of the given kind.

    Args:
        kind (type[Simple]): Concrete kind to construct.
        s (str): JSON produced by ``json_dumps_spec`` (or compatible).

    Returns:
        Simple: A new instance of ``kind``.
    """
    return kind(json_loads(s))
