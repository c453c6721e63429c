"""
Lazy sequence combinators.

Single-pass, pull-based cursors that can be wrapped, transformed,
concatenated, memoized and restarted, and paired into complete cross
products without materialising either side.

Architecture:
- Sequence contract (has_next / next) shared by every combinator
- Leaf sources (ArraySequence, IteratorSequence) and ConcatSequence
- Push-inside-pull transforms (FilterSequence, PairSequence) buffer what
  their callbacks emit
- MemoizingSequence records history so several consumers can replay it
"""

# Core types
from ._types import Emit, PairTransform, Predicate, Transform
from .base import Restartable, Sequence

# Internal helpers
from . import _helpers
from ._helpers import emit_all, emit_pair

# Sources
from .source import ArraySequence, ConcatSequence, IteratorSequence

# Transform
from .transform import FilterSequence, OutputBuffer, filtered, flat_mapped, mapped

# Memoization
from .memo import MemoizingSequence

# Cross product
from .pair import PairEvent, PairPolicy, PairSequence, PairState, pairs

# Collection operations
from .collection import collect, collect_writer, first, fold, take, try_fold

# Writer (tracing)
from . import writer
from .writer import Log, TraceEntry, TracedSequence, WriterResult, traced

# AST builder (Flow API)
from .flow import Expr, Flow, flow, flow_iter, flow_of

# Errors
from ._errors import Exhausted, SequenceOwnershipError

__all__ = (
    # Types
    "Emit",
    "PairTransform",
    "Predicate",
    "Transform",
    "Restartable",
    "Sequence",
    # Internal helpers
    "_helpers",
    "emit_all",
    "emit_pair",
    # Sources
    "ArraySequence",
    "ConcatSequence",
    "IteratorSequence",
    # Transform
    "FilterSequence",
    "OutputBuffer",
    "filtered",
    "flat_mapped",
    "mapped",
    # Memoization
    "MemoizingSequence",
    # Cross product
    "PairEvent",
    "PairPolicy",
    "PairSequence",
    "PairState",
    "pairs",
    # Collection
    "collect",
    "collect_writer",
    "first",
    "fold",
    "take",
    "try_fold",
    # Writer
    "writer",
    "Log",
    "TraceEntry",
    "TracedSequence",
    "WriterResult",
    "traced",
    # AST
    "Expr",
    "Flow",
    "flow",
    "flow_iter",
    "flow_of",
    # Errors
    "Exhausted",
    "SequenceOwnershipError",
)
