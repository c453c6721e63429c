"""Concat combinator

Chains child sequences, exhausting each in order."""

from __future__ import annotations

from collections.abc import Iterable

from .._errors import Exhausted
from ..base import Sequence


class ConcatSequence[T](Sequence[T]):
    """
    One logical sequence over several children.

    Probing only moves past children that report no next element, so
    repeated has_next() calls never skip anything.
    """

    __slots__ = ("_children", "_current")

    def __init__(self, children: Iterable[Sequence[T]], /) -> None:
        super().__init__()
        self._children: tuple[Sequence[T], ...] = tuple(child.claim(self) for child in children)
        self._current = 0

    @staticmethod
    def of[V](*children: Sequence[V]) -> ConcatSequence[V]:
        """Concatenate the given sequences."""
        return ConcatSequence(children)

    def _probe(self) -> Sequence[T] | None:
        while self._current < len(self._children):
            child = self._children[self._current]
            if child.has_next():
                return child
            self._current += 1
        return None

    def has_next(self) -> bool:
        return self._probe() is not None

    def next(self) -> T:
        child = self._probe()
        if child is None:
            raise Exhausted(self)
        return child.next()


__all__ = ("ConcatSequence",)
