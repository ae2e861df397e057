"""
Message templates used when raising core errors.

A MessageBundle is handed to each type descriptor at construction time instead of
being looked up from a module-level singleton, so callers can swap wording (or a
translation) per descriptor or per settings object.

Notes:
    - Templates use ``str.format`` placeholders with keyword arguments only.
    - Unknown message ids raise KeyError; a typo must not silently yield empty text.
    - Zero-IO; stdlib only.

Examples:
    >>> from valtype.core.messages import default_bundle
    >>> default_bundle().format("cannot_convert_to_type", label="Number")
    'Cannot convert value to type Number.'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Final

__all__ = [
    "DEFAULT_MESSAGES",
    "MessageBundle",
    "default_bundle",
]

DEFAULT_MESSAGES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "argument_required": "Argument '{argument}' is required.",
        "argument_invalid_type": (
            "Argument '{argument}' has invalid type '{actual}'. Expected one of: {expected}."
        ),
        "cannot_change_value": "Cannot change the value of a simple value once it is set.",
        "cannot_convert_to_type": "Cannot convert value to type {label}.",
    }
)


@dataclass(frozen=True)
class MessageBundle:
    """
    Immutable set of message templates keyed by message id.

    Attributes:
        templates (Mapping[str, str]): Message id to ``str.format`` template.
    """

    templates: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_MESSAGES))

    def format(self, message_id: str, **kwargs: Any) -> str:
        """
        Render a message.

        Args:
            message_id (str): Template id, e.g. "cannot_change_value".
            **kwargs: Placeholder values.

        Returns:
            str: The formatted message.

        Raises:
            KeyError: If the bundle has no template for message_id.
        """
        try:
            template = self.templates[message_id]
        except KeyError as exc:
            raise KeyError(f"Unknown message id: {message_id}") from exc
        return template.format(**kwargs)

    def with_overrides(self, overrides: Mapping[str, str] | None) -> MessageBundle:
        """Return a new bundle with the given templates replacing existing ones."""
        if not overrides:
            return self
        merged = dict(self.templates)
        merged.update(overrides)
        return MessageBundle(templates=merged)


def default_bundle() -> MessageBundle:
    """Build a bundle holding the default English templates."""
    return MessageBundle()
