"""
WriterResult - drained values with the log written alongside
============================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Result

from .log import Log


@dataclass(frozen=True, slots=True)
class WriterResult[T, E, W]:
    """
    Outcome of draining a traced sequence.

    result is what the drain produced, log is the trace the sequence
    wrote while producing it. Matches positionally:

        match collect_writer(seq):
            case WriterResult(Ok(items), log): ...
    """

    result: Result[T, E]
    log: Log[W]

    def unwrap(self) -> T:
        return self.result.unwrap()

    @property
    def truncated(self) -> bool:
        """True if the log dropped entries because it hit its limit."""
        return self.log.dropped > 0


__all__ = ("WriterResult",)
