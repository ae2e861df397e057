"""
Core exception types raised by value construction, casting, and configuration.

Provides typed exceptions for simple-value failures:
- ArgumentRequiredError when a required argument (usually ``value``) is None.
- ArgumentInvalidError when an argument is present but unacceptable.
- ArgumentInvalidTypeError when an argument has an unsupported type/shape.
- ValueImmutableError when an established value is reassigned to a different one.
- ValueNotConvertibleError when a kind's cast cannot represent an input.
- UserError as the base for domain-specific cast failures raised by concrete kinds.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - The core never logs, wraps, or retries these errors; they surface to the caller.
    - A UserError raised inside ``SimpleType.cast`` reaches the caller as the same object.

Examples:
    Catch a reassignment conflict.

    >>> from valtype.core.errors import ValueImmutableError
    >>> try:
    ...     raise ValueImmutableError("value", "Cannot change value.")
    ... except ValueError as e:
    ...     e.argument
    'value'
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "ValueTypeError",
    "ArgumentRequiredError",
    "ArgumentInvalidError",
    "ArgumentInvalidTypeError",
    "ValueImmutableError",
    "ValueNotConvertibleError",
    "UserError",
]


class ValueTypeError(Exception):
    """Base class for all errors raised by valtype.core."""


class ArgumentRequiredError(ValueTypeError, ValueError):
    """
    A required argument was None.

    Attributes:
        argument (str): Name of the missing argument.
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' is required.")


class ArgumentInvalidError(ValueTypeError, ValueError):
    """
    An argument was present but invalid.

    Attributes:
        argument (str): Name of the offending argument.
        reason (str): Human-readable explanation.
    """

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Argument '{argument}' is invalid. {reason}")


class ArgumentInvalidTypeError(ValueTypeError, TypeError):
    """
    An argument had an unsupported type.

    Attributes:
        argument (str): Name of the offending argument.
        expected_types (tuple[str, ...]): Accepted type names.
        actual_type (str): Name of the type actually received.
    """

    def __init__(
        self,
        argument: str,
        expected_types: Iterable[str],
        actual_type: str,
        message: str | None = None,
    ) -> None:
        self.argument = argument
        self.expected_types = tuple(expected_types)
        self.actual_type = actual_type
        super().__init__(
            message
            or (
                f"Argument '{argument}' has invalid type '{actual_type}'. "
                f"Expected one of: {', '.join(self.expected_types)}."
            )
        )


class ValueImmutableError(ArgumentInvalidError):
    """An established simple value was reassigned to a different value."""


class ValueNotConvertibleError(ArgumentInvalidError):
    """A present external value cannot be converted to the kind's internal value."""


class UserError(ValueTypeError, ValueError):
    """
    Domain-specific failure raised by a concrete kind's ``cast``.

    Subclass this when a more precise diagnostic than "cannot convert" is available.
    """
