"""
Simple values: immutable, indivisible values wrapped with type metadata.

A Simple holds an underlying datum (``value``), an optional human-readable
``formatted`` string, and a derived ``key``. Per-kind behavior lives on the
shared SimpleType descriptor; concrete kinds override only ``SimpleType.cast``.

Responsibilities
- Route every value assignment through ``SimpleType.to_value`` (presence check,
  cast, not-convertible escalation).
- Enforce set-once semantics on ``value``: the first assignment wins, identical
  re-assertions are no-ops, differing ones raise ValueImmutableError.
- Absorb configuration given as a plain dict or as another Simple.
- Render specs: the bare value when possible, else {"_"?, "v", "f"?} in that order.

Examples
--------
>>> from valtype.core.kinds import Number
>>> n = Number(5)
>>> n.value, n.formatted, n.key
(5, None, '5')
>>> n.to_spec()
5
>>> n.formatted = "five"
>>> n.to_spec()
{'v': 5, 'f': 'five'}
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar

from .config import SpecOptions, SpecSettings
from .constants import FORMATTED_KEY, STYLE_CLASS_PREFIX, TYPE_ID_PREFIX, TYPE_KEY, VALUE_KEY
from .element import Element, ElementType
from .errors import (
    ArgumentInvalidTypeError,
    ArgumentRequiredError,
    ValueImmutableError,
    ValueNotConvertibleError,
)
from .scope import SpecScope
from .typing import SpecLiteral, SpecObject

__all__ = [
    "SpecShape",
    "spec_shape",
    "SimpleType",
    "Simple",
]


class SpecShape(Enum):
    """Shape of a construction or configuration argument."""

    RAW = "raw"
    CONFIG = "config"
    SIBLING = "sibling"


def spec_shape(spec: Any) -> SpecShape:
    """
    Classify a construction/configuration argument.

    Returns:
        SpecShape: CONFIG for a plain dict, SIBLING for another Simple, RAW otherwise.
    """
    if isinstance(spec, dict):
        return SpecShape.CONFIG
    if isinstance(spec, Simple):
        return SpecShape.SIBLING
    return SpecShape.RAW


class SimpleType(ElementType):
    """
    Type descriptor of simple values.

    Concrete kinds subclass this and override ``cast`` only; ``to_value`` owns all
    presence/absence error semantics.
    """

    id = TYPE_ID_PREFIX + "simple"
    label = "Simple"
    is_abstract = True
    style_class = STYLE_CLASS_PREFIX + "simple"

    def cast(self, value: Any) -> Any | None:
        """
        Convert a non-None external value to the internal value of this kind.

        The default implementation is the identity function.

        Args:
            value (Any): The value to convert; never None.

        Returns:
            Any | None: The converted value, or None when conversion is not possible.

        Raises:
            valtype.core.errors.UserError: When the value cannot be converted and a more
                specific explanation is available.
        """
        return value

    def to_value(self, value: Any) -> Any:
        """
        Validate and convert an external value to the internal value of this kind.

        Not meant to be overridden; customize ``cast`` instead.

        Args:
            value (Any): The value to convert.

        Returns:
            Any: The converted, non-None value.

        Raises:
            ArgumentRequiredError: If value is None.
            ValueNotConvertibleError: If ``cast`` returns None.
            valtype.core.errors.UserError: Propagated unchanged from ``cast``.
        """
        if value is None:
            raise ArgumentRequiredError(
                "value", self.bundle.format("argument_required", argument="value")
            )

        result = self.cast(value)
        if result is None:
            raise ValueNotConvertibleError(
                "value", self.bundle.format("cannot_convert_to_type", label=self.label)
            )
        return result


def _non_empty_string(value: Any) -> str | None:
    return None if value is None else (str(value) or None)


def _same_value(a: Any, b: Any) -> bool:
    # 1 == True and 1 == 1.0 in Python; identity requires the same type too.
    return type(a) is type(b) and a == b


class Simple(Element):
    """
    Base class of unstructured, indivisible values.

    Args:
        spec (Any): A raw value, a plain dict configuration ({"v": ..., "f": ...}),
            or another Simple to clone or downcast.

    Raises:
        TypeError: If the kind is abstract.
        ArgumentRequiredError: If no value is supplied.
        ValueNotConvertibleError: If the value cannot be cast to the kind.
    """

    type: ClassVar[SimpleType] = SimpleType()

    _config_aliases = MappingProxyType(
        {
            "v": "value",
            "value": "value",
            "f": "formatted",
            "formatted": "formatted",
        }
    )

    def __init__(self, spec: Any = None) -> None:
        super().__init__()
        self._value: Any = None
        self._has_value = False
        self._formatted: str | None = None

        shape = spec_shape(spec)
        if shape is SpecShape.CONFIG:
            self._configure_from_object(spec)
            if not self._has_value:
                self.ensure_value(None)
        elif shape is SpecShape.SIBLING:
            self._configure_from_simple(spec)
        else:
            self.ensure_value(spec)

    def clone(self) -> Simple:
        """Independent copy with equal value and formatted."""
        return type(self)(self)

    # region value

    @property
    def value(self) -> Any:
        """Underlying value. Assignment is guarded by ``ensure_value``."""
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self.ensure_value(value)

    def ensure_value(self, value: Any) -> Any:
        """
        Initialize the value, or assert that it equals the established one.

        Args:
            value (Any): Candidate external value; cast through ``type.to_value``.

        Returns:
            Any: The (possibly just established) underlying value.

        Raises:
            ArgumentRequiredError: If value is None.
            ValueNotConvertibleError: If value cannot be cast.
            ValueImmutableError: If a different value was already established.
        """
        value = self.type.to_value(value)

        if not self._has_value:
            self._value = value
            self._has_value = True
        elif not _same_value(self._value, value):
            raise ValueImmutableError("value", self.type.bundle.format("cannot_change_value"))
        return self._value

    # endregion

    @property
    def formatted(self) -> str | None:
        """Formatted text, or None. Empty strings are stored as None."""
        return self._formatted

    @formatted.setter
    def formatted(self, value: Any) -> None:
        self._formatted = _non_empty_string(value)

    @property
    def key(self) -> str:
        """
        Key identifying this value among values of the same concrete kind.

        Two values of the same kind have equal keys if and only if they are equal.
        """
        return str(self._value)

    def __str__(self) -> str:
        f = self._formatted
        return f if f is not None else str(self._value)

    def __repr__(self) -> str:
        if self._formatted is None:
            return f"{type(self).__name__}({self._value!r})"
        return f"{type(self).__name__}({self._value!r}, formatted={self._formatted!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Simple):
            return NotImplemented
        return type(self) is type(other) and self.key == other.key

    def __hash__(self) -> int:
        return hash((type(self), self.key))

    # region configuration

    def configure(self, config: Any) -> Simple:
        """
        Configure this value.

        Args:
            config (Any): None (no-op), a plain dict, or another Simple.

        Returns:
            Simple: This instance.

        Raises:
            ArgumentInvalidTypeError: If config is neither a dict nor a Simple.
            ValueImmutableError: If config carries a value different from the established one.
        """
        if config is not None:
            self._configure(config)
        return self

    def _configure(self, config: Any) -> None:
        shape = spec_shape(config)
        if shape is SpecShape.CONFIG:
            self._configure_from_object(config)
        elif shape is SpecShape.SIBLING:
            self._configure_from_simple(config)
        else:
            expected = ("dict", "Simple")
            actual = type(config).__name__
            raise ArgumentInvalidTypeError(
                "config",
                expected,
                actual,
                self.type.bundle.format(
                    "argument_invalid_type",
                    argument="config",
                    expected=", ".join(expected),
                    actual=actual,
                ),
            )

    def _configure_from_simple(self, other: Simple) -> None:
        if other is not self:
            # Implicit downcast: the value is re-cast by this kind.
            self.value = other.value
            self.formatted = other.formatted

    def _configure_from_object(self, config: dict[str, Any]) -> None:
        # Every recognized key applies in dict order, so "v" and "value" both hit the guard.
        # Unknown keys, including the type reference key, are ignored.
        self.extend(config)

    # endregion

    # region spec

    def to_spec(
        self,
        *,
        require_type: bool | None = None,
        omit_formatted: bool | None = None,
        settings: SpecSettings | None = None,
    ) -> SpecLiteral:
        """
        Render this value as a spec in a fresh serialization scope.

        Args:
            require_type (bool | None): Embed the type reference; defaults to
                ``settings.require_type``.
            omit_formatted (bool | None): Suppress the formatted text; defaults to
                ``settings.omit_formatted``.
            settings (SpecSettings | None): Defaults source; ``SpecSettings()`` if None.

        Returns:
            SpecLiteral: The bare value, or a {"_"?, "v", "f"?} dict.
        """
        settings = settings or SpecSettings()
        options = settings.spec_options().merge(omit_formatted=omit_formatted)
        if require_type is None:
            require_type = settings.require_type

        with SpecScope() as scope:
            return self.to_spec_in_scope(scope, require_type, options)

    def to_spec_in_scope(
        self, scope: SpecScope, require_type: bool, options: SpecOptions
    ) -> SpecLiteral:
        """
        Render this value as a spec within an existing scope.

        Args:
            scope (SpecScope): Scope resolving type references.
            require_type (bool): Embed the type reference as the first key.
            options (SpecOptions): Serialization options.

        Returns:
            SpecLiteral: The bare value when neither formatted text nor a type
            reference must be emitted; otherwise the structured form.
        """
        add_formatted = not options.omit_formatted and bool(self._formatted)

        if not (add_formatted or require_type):
            return self._value

        spec: SpecObject = {}
        if require_type:
            spec[TYPE_KEY] = self.type.to_reference(scope)
        spec[VALUE_KEY] = self._value
        if add_formatted:
            spec[FORMATTED_KEY] = self._formatted
        return spec

    # endregion
