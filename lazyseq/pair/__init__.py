from .pair import PairEvent, PairPolicy, PairSequence, PairState, pairs

__all__ = (
    "PairEvent",
    "PairPolicy",
    "PairSequence",
    "PairState",
    "pairs",
)
