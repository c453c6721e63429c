from __future__ import annotations

import pytest
from kungfu import Error, Ok

from lazyseq import (
    ArraySequence,
    Exhausted,
    PairEvent,
    PairPolicy,
    collect,
    collect_writer,
    first,
    fold,
    pairs,
    take,
    traced,
    try_fold,
)


def test_collect_with_and_without_limit() -> None:
    seq = ArraySequence.of(1, 2, 3, 4)

    assert collect(seq, limit=2) == [1, 2]
    assert collect(seq) == [3, 4]
    assert collect(seq) == []


def test_collect_rejects_negative_limit() -> None:
    with pytest.raises(ValueError):
        collect(ArraySequence.of(1), limit=-1)


def test_take_exact_count() -> None:
    seq = ArraySequence.of("a", "b", "c")

    assert take(seq, 2) == Ok(["a", "b"])
    assert take(seq, 0) == Ok([])


def test_take_reports_shortfall_after_consuming() -> None:
    seq = ArraySequence.of("a")

    r = take(seq, 2)

    match r:
        case Ok(_):
            pytest.fail("expected shortfall")
        case Error(err):
            assert isinstance(err, Exhausted)
            assert err.sequence is seq
    assert not seq.has_next()


def test_first() -> None:
    seq = ArraySequence.of(7)

    assert first(seq) == Ok(7)
    assert isinstance(first(seq).unwrap_err(), Exhausted)


def test_fold() -> None:
    assert fold(ArraySequence.of(1, 2, 3), lambda acc, x: acc + x, initial=10) == 16


def test_try_fold_stops_at_first_error() -> None:
    seq = ArraySequence.of(1, 2, -1, 4)

    def add_positive(acc: int, x: int):
        return Ok(acc + x) if x > 0 else Error(f"negative: {x}")

    assert try_fold(seq, add_positive, initial=0) == Error("negative: -1")
    assert seq.next() == 4


def test_try_fold_success() -> None:
    assert try_fold(ArraySequence.of(1, 2), lambda acc, x: Ok(acc * x), initial=3) == Ok(6)


def test_collect_writer_pairs_values_with_log() -> None:
    seq = pairs(ArraySequence.of(1), ArraySequence.of(2), policy=PairPolicy(trace=True, trace_limit=2))

    wr = collect_writer(seq)

    assert wr.result == Ok([(1, 2)])
    assert list(wr.log) == [PairEvent("start"), PairEvent("draw", "first", 1)]


def test_collect_writer_with_traced_sequence() -> None:
    wr = collect_writer(traced(ArraySequence.of("x", "y"), label="letters"))

    assert wr.result.unwrap() == ["x", "y"]
    assert [(e.label, e.index, e.value) for e in wr.log] == [("letters", 0, "x"), ("letters", 1, "y")]


def test_collect_writer_requires_a_log() -> None:
    with pytest.raises(TypeError):
        collect_writer(ArraySequence.of(1))
