"""
Concrete simple value kinds: String, Number, Boolean, and Date.

Each kind pairs a Simple subclass with a SimpleType subclass that overrides only
``cast``. Kinds whose ``str()`` of the value would break key/equality coherence
also override ``key``.

Examples:
    >>> from valtype.core.kinds import Boolean, Number
    >>> Number("42").value
    42
    >>> Boolean("TRUE").key
    'true'
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, ClassVar

from .constants import STYLE_CLASS_PREFIX, TYPE_ID_PREFIX
from .errors import UserError
from .simple import Simple, SimpleType

__all__ = [
    "DateParseError",
    "StringType",
    "String",
    "NumberType",
    "Number",
    "BooleanType",
    "Boolean",
    "DateType",
    "Date",
]


class DateParseError(UserError):
    """A string could not be parsed as an ISO date or datetime."""


class StringType(SimpleType):
    id = TYPE_ID_PREFIX + "string"
    label = "String"
    is_abstract = False
    style_class = STYLE_CLASS_PREFIX + "string"

    def cast(self, value: Any) -> str:
        return str(value)


class String(Simple):
    """Textual simple value."""

    type: ClassVar[StringType] = StringType()


class NumberType(SimpleType):
    id = TYPE_ID_PREFIX + "number"
    label = "Number"
    is_abstract = False
    style_class = STYLE_CLASS_PREFIX + "number"

    def cast(self, value: Any) -> int | float | None:
        """
        Accept ints and finite-or-infinite floats; parse numeric strings.

        Booleans and NaN are rejected (None). Integral floats (including -0.0)
        become ints, so each number has exactly one key.
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            text = value.strip()
            try:
                value = int(text)
            except ValueError:
                try:
                    value = float(text)
                except ValueError:
                    return None
        if isinstance(value, float):
            if math.isnan(value):
                return None
            return int(value) if value.is_integer() else value
        if isinstance(value, int):
            return value
        return None


class Number(Simple):
    """Numeric simple value."""

    type: ClassVar[NumberType] = NumberType()


_TRUE_STRINGS = {"true", "1"}
_FALSE_STRINGS = {"false", "0"}


class BooleanType(SimpleType):
    id = TYPE_ID_PREFIX + "boolean"
    label = "Boolean"
    is_abstract = False
    style_class = STYLE_CLASS_PREFIX + "boolean"

    def cast(self, value: Any) -> bool | None:
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return {0: False, 1: True}.get(value)
        if isinstance(value, str):
            text = value.strip().lower()
            if text in _TRUE_STRINGS:
                return True
            if text in _FALSE_STRINGS:
                return False
        return None


class Boolean(Simple):
    """Boolean simple value."""

    type: ClassVar[BooleanType] = BooleanType()

    @property
    def key(self) -> str:
        return "true" if self._value else "false"


class DateType(SimpleType):
    id = TYPE_ID_PREFIX + "date"
    label = "Date"
    is_abstract = False
    style_class = STYLE_CLASS_PREFIX + "date"

    def cast(self, value: Any) -> date | None:
        """
        Accept date/datetime objects and ISO 8601 strings.

        Raises:
            DateParseError: If a string is not a valid ISO date or datetime.
        """
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                if "T" in text or " " in text:
                    return datetime.fromisoformat(text)
                return date.fromisoformat(text)
            except ValueError as exc:
                raise DateParseError(f"Not an ISO 8601 date: {value!r}") from exc
        return None


class Date(Simple):
    """Date (or date and time) simple value."""

    type: ClassVar[DateType] = DateType()

    @property
    def key(self) -> str:
        return self._value.isoformat()
