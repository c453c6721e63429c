from .buffer import OutputBuffer
from .filter import FilterSequence, filtered, flat_mapped, mapped

__all__ = (
    "OutputBuffer",
    "FilterSequence",
    "filtered",
    "flat_mapped",
    "mapped",
)
