"""Array sequences

Leaf producers over fixed lists and over arbitrary Python iterables."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from .._errors import Exhausted
from ..base import Sequence

_MISSING: typing.Final = object()


class ArraySequence[T](Sequence[T]):
    """
    Sequence over a fixed list of elements.

    items may be None, which yields an empty sequence.
    """

    __slots__ = ("_items", "_index")

    def __init__(self, items: Iterable[T] | None = None, /) -> None:
        super().__init__()
        self._items: tuple[T, ...] | None = None if items is None else tuple(items)
        self._index = 0

    @staticmethod
    def of[V](*items: V) -> ArraySequence[V]:
        """Create sequence over the given items."""
        return ArraySequence(items)

    @property
    def remaining(self) -> int:
        """Number of elements not yet returned."""
        if self._items is None:
            return 0
        return len(self._items) - self._index

    def has_next(self) -> bool:
        return self._items is not None and self._index < len(self._items)

    def next(self) -> T:
        if self._items is None or self._index >= len(self._items):
            raise Exhausted(self)
        item = self._items[self._index]
        self._index += 1
        return item

    def __repr__(self) -> str:
        return f"ArraySequence({self._items!r}, index={self._index})"


class IteratorSequence[T](Sequence[T]):
    """
    Live sequence over any Python iterable.

    Holds one element of lookahead so has_next() can be asked repeatedly
    without losing elements.
    """

    __slots__ = ("_iterator", "_lookahead", "_done")

    def __init__(self, iterable: Iterable[T], /) -> None:
        super().__init__()
        self._iterator = iter(iterable)
        self._lookahead: T | object = _MISSING
        self._done = False

    def has_next(self) -> bool:
        if self._lookahead is not _MISSING:
            return True
        if self._done:
            return False
        try:
            self._lookahead = next(self._iterator)
        except StopIteration:
            self._done = True
            return False
        return True

    def next(self) -> T:
        if not self.has_next():
            raise Exhausted(self)
        item = typing.cast(T, self._lookahead)
        self._lookahead = _MISSING
        return item

    def __repr__(self) -> str:
        return f"IteratorSequence({self._iterator!r}, done={self._done})"


__all__ = ("ArraySequence", "IteratorSequence")
