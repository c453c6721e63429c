"""
Sequence contract
=================

Single-pass, pull-based cursor shared by every combinator:
- has_next(): non-consuming, repeatable
- next(): consuming, raises Exhausted when has_next() would be False

Once has_next() returns False it keeps returning False.
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Iterator

from kungfu import Error, Ok, Result

from ._errors import Exhausted, SequenceOwnershipError


class Sequence[T](abc.ABC):
    """
    Abstract single-pass cursor.

    Every Sequence is also a Python iterator, so plain `for` loops and
    `list(seq)` work. Iterating consumes the sequence like next() does.

    A sequence handed to a combinator is owned by it (see claim()); wrapping
    the same sequence twice would let two consumers pull one cursor.
    """

    __slots__ = ("_owner",)

    def __init__(self) -> None:
        self._owner: object | None = None

    @abc.abstractmethod
    def has_next(self) -> bool:
        """True if next() would succeed. Never consumes."""

    @abc.abstractmethod
    def next(self) -> T:
        """Return the next element, advancing the cursor."""

    def try_next(self) -> Result[T, Exhausted]:
        """next() as a value: Ok(element) or Error(Exhausted)."""
        if not self.has_next():
            return Error(Exhausted(self))
        return Ok(self.next())

    # Ownership

    @property
    def owner(self) -> object | None:
        """Combinator currently pulling from this sequence, if any."""
        return self._owner

    def claim(self, owner: object, /, *, transfer_from: object | None = None) -> typing.Self:
        """
        Mark this sequence as consumed by owner.

        Raises SequenceOwnershipError if another combinator already owns it,
        unless that combinator is transfer_from (ownership hand-over).
        """
        if self._owner is not None and self._owner is not transfer_from:
            raise SequenceOwnershipError(self, self._owner)
        self._owner = owner
        return self

    # Protocol methods

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()


@typing.runtime_checkable
class Restartable(typing.Protocol):
    """Sequence that can rewind to its first element."""

    def restart(self) -> None: ...


__all__ = ("Sequence", "Restartable")
