"""
OutputBuffer - pending outputs of a push-style transform
========================================================
"""

from __future__ import annotations

from collections import deque


class OutputBuffer[T]:
    """
    FIFO of values a transform emitted but nobody has pulled yet.

    Transforms push through emit() while a combinator advances; next()
    drains with pop(). Any value, None included, is a valid output.
    """

    __slots__ = ("_queue",)

    def __init__(self) -> None:
        self._queue: deque[T] = deque()

    def emit(self, item: T, /) -> None:
        """Queue one output."""
        self._queue.append(item)

    def pop(self) -> T:
        """Remove and return the oldest output."""
        return self._queue.popleft()

    def __bool__(self) -> bool:
        return bool(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"OutputBuffer({list(self._queue)!r})"


__all__ = ("OutputBuffer",)
