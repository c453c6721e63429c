"""Tracing

Records what a sequence hands out, for debugging combinator graphs."""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._errors import Exhausted
from ..base import Sequence
from .log import Log


@dataclass(frozen=True, slots=True)
class TraceEntry[T]:
    """One element observed leaving a traced sequence."""

    label: str
    index: int
    value: T


class TracedSequence[T](Sequence[T]):
    """
    Pass-through sequence that logs every element it yields.

    Elements are logged when consumed, not when peeked with has_next().
    With limit set only the first limit elements are kept; index still
    counts every element yielded.
    """

    __slots__ = ("_source", "_label", "_yielded", "_log")

    def __init__(self, source: Sequence[T], /, *, label: str, limit: int | None = None) -> None:
        super().__init__()
        self._source = source.claim(self)
        self._label = label
        self._yielded = 0
        self._log: Log[TraceEntry[T]] = Log(limit=limit)

    @property
    def label(self) -> str:
        return self._label

    @property
    def log(self) -> Log[TraceEntry[T]]:
        """Copy of the entries recorded so far."""
        return self._log.snapshot()

    def has_next(self) -> bool:
        return self._source.has_next()

    def next(self) -> T:
        if not self._source.has_next():
            raise Exhausted(self)
        item = self._source.next()
        self._log.tell(TraceEntry(self._label, self._yielded, item))
        self._yielded += 1
        return item


def traced[T](source: Sequence[T], /, *, label: str = "trace", limit: int | None = None) -> TracedSequence[T]:
    """Wrap source so each yielded element is recorded under label."""
    return TracedSequence(source, label=label, limit=limit)


@typing.runtime_checkable
class HasLog[W](typing.Protocol):
    """Anything exposing an accumulated Log."""

    @property
    def log(self) -> Log[W]: ...


__all__ = ("HasLog", "TraceEntry", "TracedSequence", "traced")
