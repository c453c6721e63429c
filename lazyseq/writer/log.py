"""
Log - bounded trace accumulator
===============================
"""

from __future__ import annotations

from collections.abc import Iterator


class Log[A]:
    """
    Append-only record written by traced sequences.

    tell() writes in place; once limit entries are held further entries
    are counted in dropped instead of stored. combine() builds a new log
    and is the monoid operation (Log() is the identity), used to stitch a
    branch's trace after its parent's.
    """

    __slots__ = ("_entries", "_limit", "_dropped")

    def __init__(self, *, limit: int | None = None) -> None:
        if limit is not None and limit < 1:
            raise ValueError("Log limit must be >= 1")
        self._entries: list[A] = []
        self._limit = limit
        self._dropped = 0

    @staticmethod
    def of[T](*items: T, limit: int | None = None) -> Log[T]:
        log: Log[T] = Log(limit=limit)
        for item in items:
            log.tell(item)
        return log

    @property
    def limit(self) -> int | None:
        return self._limit

    @property
    def dropped(self) -> int:
        """Entries refused because the log was full."""
        return self._dropped

    @property
    def full(self) -> bool:
        return self._limit is not None and len(self._entries) >= self._limit

    def tell(self, entry: A, /) -> bool:
        """Record entry; False if the log is full and it was dropped."""
        if self.full:
            self._dropped += 1
            return False
        self._entries.append(entry)
        return True

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        New log holding self's entries followed by other's.

        The result keeps self's limit; entries past it count as dropped.
        """
        result: Log[A] = Log(limit=self._limit)
        for entry in (*self._entries, *other._entries):
            result.tell(entry)
        result._dropped += self._dropped + other._dropped
        return result

    def snapshot(self) -> Log[A]:
        """Copy that later tell() calls on self do not touch."""
        empty: Log[A] = Log(limit=self._limit)
        return empty.combine(self)

    def __iter__(self) -> Iterator[A]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> A:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Log):
            return NotImplemented
        return self._entries == other._entries and self._dropped == other._dropped

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        dropped = f", dropped={self._dropped}" if self._dropped else ""
        return f"Log({self._entries!r}{dropped})"


__all__ = ("Log",)
