"""
Base element and element type descriptor.

Elements are values whose per-kind metadata lives on a shared descriptor object
(``cls.type``) rather than on each instance. The descriptor carries identity
(``id``), a display ``label``, the ``is_abstract`` flag, and a ``style_class``
classification tag. Element provides ``extend``, the generic "apply a
configuration mapping onto self" primitive that subclasses build their
plain-object configuration on.

Notes:
    - Descriptors are read-only policy objects shared by every instance of a kind.
    - ``extend`` assigns through normal attribute assignment so property setters
      (and their validation) run for every recognized key.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from .messages import MessageBundle, default_bundle
from .scope import SpecScope
from .typing import TypeRef

__all__ = [
    "ElementType",
    "Element",
]

logger = logging.getLogger(__name__)


class ElementType:
    """
    Per-kind descriptor shared by all instances of an Element subclass.

    Attributes:
        id (str | None): Module-like identifier; None for anonymous types.
        label (str): Human-readable name used in messages.
        is_abstract (bool): Whether instances of the kind may be constructed.
        style_class (str | None): Display classification tag.
        bundle (MessageBundle): Message templates used for errors raised on behalf of the kind.
    """

    id: str | None = None
    label: str = "Element"
    is_abstract: bool = True
    style_class: str | None = None

    def __init__(
        self,
        *,
        id: str | None = None,
        label: str | None = None,
        is_abstract: bool | None = None,
        style_class: str | None = None,
        bundle: MessageBundle | None = None,
    ) -> None:
        if id is not None:
            self.id = id
        if label is not None:
            self.label = label
        if is_abstract is not None:
            self.is_abstract = is_abstract
        if style_class is not None:
            self.style_class = style_class
        self.bundle = bundle or default_bundle()
        logger.debug("Created type descriptor %s (%s)", self.id or "<anonymous>", self.label)

    def to_reference(self, scope: SpecScope) -> TypeRef:
        """Reference to this descriptor within a serialization scope."""
        return scope.reference(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, label={self.label!r})"


class Element:
    """Base class of typed values. Subclasses bind a descriptor to ``type``."""

    type: ClassVar[ElementType] = ElementType()

    # Configuration key -> attribute name applied by ``extend``.
    _config_aliases: ClassVar[Mapping[str, str]] = {}

    def __init__(self) -> None:
        if type(self).type.is_abstract:
            raise TypeError(f"Cannot instantiate abstract type {type(self).type.label}.")

    def extend(self, config: Mapping[str, Any]) -> Element:
        """
        Apply a configuration mapping onto this element.

        Args:
            config (Mapping[str, Any]): Keys naming configurable attributes; unknown keys
                are ignored.

        Returns:
            Element: This instance.
        """
        for key, value in config.items():
            attr = self._config_aliases.get(key)
            if attr is not None:
                setattr(self, attr, value)
        return self
