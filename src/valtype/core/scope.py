"""
Serialization scope for spec rendering.

A SpecScope lives for one serialization pass. It resolves type descriptors to the
references embedded under the type key: identified types use their id, anonymous
types receive a temporary id that stays stable for the lifetime of the scope.

Examples:
    >>> from valtype.core.scope import SpecScope
    >>> from valtype.core.kinds import Number
    >>> with SpecScope() as scope:
    ...     scope.reference(Number.type)
    'valtype/core/number'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import TEMP_ID_PREFIX
from .typing import TypeRef

if TYPE_CHECKING:
    from .element import ElementType

__all__ = ["SpecScope"]


class SpecScope:
    """Reference resolver for a single serialization pass."""

    def __init__(self) -> None:
        self._temp_ids: dict[int, TypeRef] = {}
        self._disposed = False

    def __enter__(self) -> SpecScope:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        self._temp_ids.clear()
        self._disposed = True

    def reference(self, type_: ElementType) -> TypeRef:
        """
        Resolve the reference for a type descriptor.

        Args:
            type_ (ElementType): Descriptor to reference.

        Returns:
            TypeRef: The descriptor id, or a scope-local temporary id ("_1", "_2", ...)
            when the descriptor is anonymous.

        Raises:
            RuntimeError: If the scope was already disposed.
        """
        if self._disposed:
            raise RuntimeError("SpecScope is disposed.")
        if type_.id:
            return TypeRef(type_.id)
        ref = self._temp_ids.get(id(type_))
        if ref is None:
            ref = TypeRef(f"{TEMP_ID_PREFIX}{len(self._temp_ids) + 1}")
            self._temp_ids[id(type_)] = ref
        return ref
