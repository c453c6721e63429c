"""
MemoizingSequence
=================

Records every element it yields so the sequence can be restarted. After a
restart the recorded history replays first; only then is the live source
pulled again, and every live element is pulled exactly once.
"""

from __future__ import annotations

from collections.abc import Iterable

from ._errors import Exhausted
from .base import Sequence


class MemoizingSequence[T](Sequence[T]):
    """
    Restartable sequence over a live source or a recorded list.

    - MemoizingSequence(source): history starts empty, grows as elements
      are pulled from source
    - MemoizingSequence.from_history(items): history is a copy of items,
      immediately replayable, no live source
    """

    __slots__ = ("_history", "_replay", "_source")

    def __init__(self, source: Sequence[T] | None = None, /) -> None:
        super().__init__()
        self._history: list[T] = []
        # Index of the next history element to yield; equals len(history)
        # whenever the sequence is reading the live source.
        self._replay = 0
        self._source = source.claim(self) if source is not None else None

    @staticmethod
    def from_history[V](items: Iterable[V], /) -> MemoizingSequence[V]:
        """Replayable sequence over an already complete list."""
        memo: MemoizingSequence[V] = MemoizingSequence()
        memo._history = list(items)
        return memo

    @property
    def history(self) -> tuple[T, ...]:
        """Snapshot of every element recorded so far, oldest first."""
        return tuple(self._history)

    @property
    def live(self) -> bool:
        """True while the live source may still produce elements."""
        return self._source is not None

    def restart(self) -> None:
        """Rewind to the first recorded element. The live source is untouched."""
        self._replay = 0

    def has_next(self) -> bool:
        if self._replay < len(self._history):
            return True
        if self._source is not None:
            if self._source.has_next():
                return True
            self._source = None
        return False

    def next(self) -> T:
        if self._replay < len(self._history):
            item = self._history[self._replay]
            self._replay += 1
            return item
        if self._source is not None and self._source.has_next():
            item = self._source.next()
            self._history.append(item)
            self._replay += 1
            return item
        self._source = None
        raise Exhausted(self)

    def __repr__(self) -> str:
        return f"MemoizingSequence(recorded={len(self._history)}, replay={self._replay}, live={self.live})"


__all__ = ("MemoizingSequence",)
