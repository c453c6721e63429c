from .array import ArraySequence, IteratorSequence
from .concat import ConcatSequence

__all__ = (
    "ArraySequence",
    "IteratorSequence",
    "ConcatSequence",
)
