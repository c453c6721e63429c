"""Internal helpers for lazyseq.

Small transforms reused by sugar functions and the Flow builder."""

from __future__ import annotations

from collections.abc import Iterable

from ._types import Emit


def emit_pair[A, B](a: A, b: B, emit: Emit[tuple[A, B]], /) -> None:
    """Pair transform that emits the pair itself as a tuple."""
    emit((a, b))


def emit_all[R](items: Iterable[R], emit: Emit[R], /) -> None:
    """
    Push every item into emit, in order.

    Usage:
        FilterSequence(words, lambda w, emit: emit_all(w.split("-"), emit))
    """
    for item in items:
        emit(item)


__all__ = (
    "emit_pair",
    "emit_all",
)
