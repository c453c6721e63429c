from __future__ import annotations

import typing


class Exhausted(Exception):
    """next() called on a sequence with no remaining elements."""

    sequence: typing.Any

    def __init__(self, sequence: typing.Any) -> None:
        self.sequence = sequence
        super().__init__(f"{type(sequence).__name__} has no more elements")


class SequenceOwnershipError(Exception):
    """A sequence was handed to a second combinator while still owned by the first."""

    sequence: typing.Any
    owner: typing.Any

    def __init__(self, sequence: typing.Any, owner: typing.Any) -> None:
        self.sequence = sequence
        self.owner = owner
        super().__init__(
            f"{type(sequence).__name__} is already wrapped by {type(owner).__name__}"
        )


__all__ = ("Exhausted", "SequenceOwnershipError")
