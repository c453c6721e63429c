"""Collect combinators

Drain sequences into Python values, reporting shortfalls as Result."""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from .._errors import Exhausted
from ..base import Sequence
from ..writer import HasLog, Log, WriterResult


def collect[T](seq: Sequence[T], /, *, limit: int | None = None) -> list[T]:
    """
    Pull every element (or at most limit elements) into a list.

    Never raises Exhausted: stops when the sequence runs dry.
    """
    if limit is not None and limit < 0:
        raise ValueError("collect limit must be >= 0")
    items: list[T] = []
    while (limit is None or len(items) < limit) and seq.has_next():
        items.append(seq.next())
    return items


def take[T](seq: Sequence[T], n: int, /) -> Result[list[T], Exhausted]:
    """
    Exactly n elements, or Error(Exhausted) if fewer remain.

    On error the elements that were available have still been consumed.
    """
    if n < 0:
        raise ValueError("take n must be >= 0")
    items = collect(seq, limit=n)
    if len(items) < n:
        return Error(Exhausted(seq))
    return Ok(items)


def first[T](seq: Sequence[T], /) -> Result[T, Exhausted]:
    """The next element as a value. Alias for seq.try_next()."""
    return seq.try_next()


def collect_writer[T, W](seq: Sequence[T], /) -> WriterResult[list[T], typing.Never, Log[W]]:
    """
    Drain seq and return its values together with the log it wrote.

    seq must record a log (PairSequence, TracedSequence).
    """
    if not isinstance(seq, HasLog):
        raise TypeError(f"{type(seq).__name__} does not record a log")
    items = collect(seq)
    return WriterResult(Ok(items), seq.log)


__all__ = ("collect", "collect_writer", "first", "take")
