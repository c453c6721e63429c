from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from lazyseq import (
    ArraySequence,
    Exhausted,
    FilterSequence,
    SequenceOwnershipError,
    emit_all,
    filtered,
    flat_mapped,
    mapped,
)


def _repeat(item, emit):
    # emits item `item` times
    for _ in range(item):
        emit(item)


@given(
    st.lists(st.integers(min_value=0, max_value=3)),
    st.lists(st.integers(min_value=0, max_value=4)),
)
def test_has_next_is_idempotent(items: list[int], peeks: list[int]) -> None:
    expected = [x for x in items for _ in range(x)]
    seq = FilterSequence(ArraySequence(items), _repeat)

    out = []
    for i in range(len(expected)):
        for _ in range(peeks[i % len(peeks)] if peeks else 0):
            assert seq.has_next()
        out.append(seq.next())

    assert out == expected
    assert not seq.has_next()


def test_fan_out_is_drained_before_next_source_element(counting) -> None:
    live, source = counting(["ab", "cde"])
    seq = FilterSequence(source, lambda word, emit: emit_all(word, emit))

    assert seq.next() == "a"
    assert live.pulled == 1
    assert seq.next() == "b"
    assert live.pulled == 1
    assert seq.next() == "c"
    assert [seq.next(), seq.next()] == ["d", "e"]
    assert not seq.has_next()


def test_silent_elements_are_not_exhaustion() -> None:
    seq = filtered(ArraySequence(range(20)), lambda x: x in (7, 19))

    assert seq.has_next()
    assert seq.next() == 7
    assert seq.next() == 19
    assert not seq.has_next()
    with pytest.raises(Exhausted):
        seq.next()


def test_source_that_never_emits_is_empty() -> None:
    calls = []
    seq = FilterSequence(ArraySequence.of(1, 2, 3), lambda item, emit: calls.append(item))

    assert not seq.has_next()
    assert calls == [1, 2, 3]
    assert not seq.has_next()
    assert calls == [1, 2, 3]


def test_none_is_a_valid_output() -> None:
    seq = mapped(ArraySequence.of(1, 2), lambda _: None)

    assert list(seq) == [None, None]


def test_flat_mapped() -> None:
    seq = flat_mapped(ArraySequence.of(1, 0, 3), range)

    assert list(seq) == [0, 0, 1, 2]


def test_transform_errors_propagate() -> None:
    def boom(item, emit):
        raise RuntimeError(f"bad {item}")

    seq = FilterSequence(ArraySequence.of(1), boom)

    with pytest.raises(RuntimeError, match="bad 1"):
        seq.has_next()


def test_source_is_owned_by_filter() -> None:
    source = ArraySequence.of(1)
    mapped(source, str)

    with pytest.raises(SequenceOwnershipError):
        mapped(source, repr)
