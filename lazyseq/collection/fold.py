"""
Fold combinators
================

Reduce a sequence to a single value, plain or through Result-returning steps.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from ..base import Sequence


def fold[A, T](
    seq: Sequence[A],
    handler: Callable[[T, A], T],
    /,
    *,
    initial: T,
) -> T:
    """Left fold over every remaining element."""
    acc = initial
    while seq.has_next():
        acc = handler(acc, seq.next())
    return acc


def try_fold[A, T, E](
    seq: Sequence[A],
    handler: Callable[[T, A], Result[T, E]],
    /,
    *,
    initial: T,
) -> Result[T, E]:
    """
    Fold with a fallible step.

    Stops pulling at the first Error; elements after it stay unconsumed.
    """
    acc = initial
    while seq.has_next():
        r = handler(acc, seq.next())
        match r:
            case Ok(new_acc):
                acc = new_acc
            case Error(e):
                return Error(e)
    return Ok(acc)


__all__ = ("fold", "try_fold")
