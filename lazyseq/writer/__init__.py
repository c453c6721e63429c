"""
Writer
======

Observability for sequence graphs, built on the Writer pattern:
- Log[A]: monoid accumulator of trace entries
- WriterResult[T, E, W]: kungfu Result plus the log written alongside it
- TracedSequence: records every element a sequence yields
"""

from .log import Log
from .result import WriterResult
from .trace import HasLog, TraceEntry, TracedSequence, traced

__all__ = (
    "Log",
    "WriterResult",
    "HasLog",
    "TraceEntry",
    "TracedSequence",
    "traced",
)
