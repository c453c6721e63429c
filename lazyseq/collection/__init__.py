from .collect import collect, collect_writer, first, take
from .fold import fold, try_fold

__all__ = (
    "collect",
    "collect_writer",
    "first",
    "take",
    "fold",
    "try_fold",
)
