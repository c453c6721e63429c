from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

import pytest

from lazyseq import IteratorSequence


class CountingSource:
    """Iterable that records how many elements were pulled out of it."""

    def __init__(self, items: Iterable[object]) -> None:
        self.items = list(items)
        self.pulled = 0

    def __iter__(self) -> Iterator[object]:
        for item in self.items:
            self.pulled += 1
            yield item


@pytest.fixture
def counting() -> Callable[[Iterable[object]], tuple[CountingSource, IteratorSequence[object]]]:
    """Factory returning (counter, live sequence over the counter)."""

    def make(items: Iterable[object]) -> tuple[CountingSource, IteratorSequence[object]]:
        source = CountingSource(items)
        return source, IteratorSequence(source)

    return make
