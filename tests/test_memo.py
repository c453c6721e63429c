from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from lazyseq import ArraySequence, Exhausted, IteratorSequence, MemoizingSequence, Restartable


@given(st.lists(st.integers()))
def test_restart_replays_exactly_what_was_drained(items: list[int]) -> None:
    pulled = []

    def live():
        for item in items:
            pulled.append(item)
            yield item

    memo = MemoizingSequence(IteratorSequence(live()))
    first_pass = list(memo)
    memo.restart()
    second_pass = list(memo)

    assert first_pass == items
    assert second_pass == items
    assert pulled == items


def test_restart_midway_replays_history_then_continues_live(counting) -> None:
    live, source = counting([1, 2, 3, 4])
    memo = MemoizingSequence(source)

    assert [memo.next(), memo.next()] == [1, 2]
    memo.restart()

    assert list(memo) == [1, 2, 3, 4]
    assert live.pulled == 4
    assert memo.history == (1, 2, 3, 4)


def test_restart_never_rewinds_the_live_source(counting) -> None:
    live, source = counting(["a", "b"])
    memo = MemoizingSequence(source)

    memo.next()
    memo.restart()
    memo.restart()

    assert memo.next() == "a"
    assert memo.next() == "b"
    assert live.pulled == 2


def test_from_history_is_replayable_without_live_source() -> None:
    recorded = ["x", "y"]
    memo = MemoizingSequence.from_history(recorded)
    recorded.append("z")

    assert not memo.live
    assert list(memo) == ["x", "y"]
    memo.restart()
    assert list(memo) == ["x", "y"]
    with pytest.raises(Exhausted):
        memo.next()


def test_exhausted_live_source_is_released() -> None:
    memo = MemoizingSequence(ArraySequence.of(1))

    assert memo.live
    assert list(memo) == [1]
    assert not memo.has_next()
    assert not memo.live


def test_history_snapshot_is_immutable() -> None:
    memo = MemoizingSequence(ArraySequence.of(1, 2))
    memo.next()
    snapshot = memo.history
    memo.next()

    assert snapshot == (1,)
    assert memo.history == (1, 2)


def test_memoizing_sequence_is_restartable() -> None:
    assert isinstance(MemoizingSequence(), Restartable)
    assert not isinstance(ArraySequence(), Restartable)
