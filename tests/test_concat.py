from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from lazyseq import ArraySequence, ConcatSequence, Exhausted, SequenceOwnershipError


@given(st.lists(st.lists(st.integers(), max_size=5), max_size=6))
def test_concat_output_is_concatenation_of_children(parts: list[list[int]]) -> None:
    seq = ConcatSequence(ArraySequence(part) for part in parts)

    assert list(seq) == [x for part in parts for x in part]
    assert not seq.has_next()


def test_repeated_probing_never_skips_children() -> None:
    seq = ConcatSequence.of(ArraySequence(), ArraySequence.of(1), ArraySequence(), ArraySequence.of(2))

    for _ in range(5):
        assert seq.has_next()
    assert seq.next() == 1
    for _ in range(5):
        assert seq.has_next()
    assert seq.next() == 2
    assert not seq.has_next()


def test_next_on_exhausted_concat_raises() -> None:
    seq: ConcatSequence[int] = ConcatSequence.of(ArraySequence(), ArraySequence(None))

    with pytest.raises(Exhausted):
        seq.next()


def test_no_children() -> None:
    seq: ConcatSequence[int] = ConcatSequence(())

    assert not seq.has_next()


def test_child_cannot_be_wrapped_twice() -> None:
    child = ArraySequence.of(1)

    with pytest.raises(SequenceOwnershipError):
        ConcatSequence.of(child, child)


def test_wrapped_child_is_owned_by_concat() -> None:
    child = ArraySequence.of(1)
    seq = ConcatSequence.of(child)

    assert child.owner is seq
    with pytest.raises(SequenceOwnershipError) as info:
        ConcatSequence.of(child)
    assert info.value.owner is seq
