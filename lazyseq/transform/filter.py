"""
Filter combinators
==================

One input element, zero or more output elements. The transform pushes its
outputs through emit; the combinator buffers them and hands them out one
next() at a time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .._errors import Exhausted
from .._helpers import emit_all
from .._types import Emit, Predicate, Transform
from ..base import Sequence
from .buffer import OutputBuffer


class FilterSequence[T, R](Sequence[R]):
    """
    Transforms the elements of a source sequence.

    transform(item, emit) runs once per source element and may call emit
    any number of times. A call that emits nothing is not exhaustion:
    the source keeps being pulled until something is emitted or the
    source runs dry.
    """

    __slots__ = ("_source", "_transform", "_pending")

    def __init__(self, source: Sequence[T], transform: Transform[T, R], /) -> None:
        super().__init__()
        self._source = source.claim(self)
        self._transform = transform
        self._pending: OutputBuffer[R] = OutputBuffer()

    def _advance(self) -> bool:
        while not self._pending and self._source.has_next():
            self._transform(self._source.next(), self._pending.emit)
        return bool(self._pending)

    def has_next(self) -> bool:
        return self._advance()

    def next(self) -> R:
        if not self._advance():
            raise Exhausted(self)
        return self._pending.pop()


# ============================================================================
# Sugar
# ============================================================================


def mapped[T, R](source: Sequence[T], f: Callable[[T], R], /) -> FilterSequence[T, R]:
    """One output per element: f(element)."""

    def transform(item: T, emit: Emit[R]) -> None:
        emit(f(item))

    return FilterSequence(source, transform)


def filtered[T](source: Sequence[T], predicate: Predicate[T], /) -> FilterSequence[T, T]:
    """Keep elements satisfying predicate."""

    def transform(item: T, emit: Emit[T]) -> None:
        if predicate(item):
            emit(item)

    return FilterSequence(source, transform)


def flat_mapped[T, R](source: Sequence[T], f: Callable[[T], Iterable[R]], /) -> FilterSequence[T, R]:
    """Every item of f(element), in order, for each element."""

    def transform(item: T, emit: Emit[R]) -> None:
        emit_all(f(item), emit)

    return FilterSequence(source, transform)


__all__ = ("FilterSequence", "mapped", "filtered", "flat_mapped")
