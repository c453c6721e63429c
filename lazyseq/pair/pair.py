"""
Pair combinator
===============

Exhaustive cross product of two sequences, produced incrementally.

Each element freshly drawn from one side is paired with everything already
drawn from the other side. Whenever the other side still has elements the
roles swap, so both sides keep feeding the product and neither has to be
exhausted (or materialised) before pairs come out:

    first  = a0 a1          second = b0 b1

    draw a0   pairs with []           -> nothing
    draw b0   pairs with [a0]         -> (a0, b0)
    draw a1   pairs with [b0]         -> (a1, b0)
    draw b1   pairs with [a0, a1]     -> (a0, b1) (a1, b1)

A PairSequence can branch off another one (parent=): the branch starts from
a copy of the parent's histories instead of re-pulling those elements, and
if the parent stopped part way through pairing an element, the branch
finishes that row before drawing anything new.
"""

from __future__ import annotations

import enum
import typing
from dataclasses import dataclass
from typing import Literal

from .._errors import Exhausted
from .._helpers import emit_pair
from .._types import PairTransform
from ..base import Sequence
from ..source.array import ArraySequence
from ..source.concat import ConcatSequence
from ..transform.buffer import OutputBuffer
from ..transform.filter import FilterSequence
from ..writer.log import Log

type Side = Literal["first", "second"]
type PairEventKind = Literal["start", "draw", "swap", "commit", "done"]


class PairState(enum.Enum):
    INIT = "init"
    RUNNING = "running"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class PairPolicy:
    """Configuration for PairSequence."""

    replay_parent: bool = False
    trace: bool = False
    trace_limit: int | None = None

    def __post_init__(self) -> None:
        if self.trace_limit is not None and self.trace_limit < 1:
            raise ValueError("PairPolicy.trace_limit must be >= 1")


@dataclass(frozen=True, slots=True)
class PairEvent:
    """
    One step of the cross-product schedule.

    side names the driving side (for swap: the side that drives afterwards).
    """

    kind: PairEventKind
    side: Side | None = None
    value: typing.Any = None


@dataclass(frozen=True, slots=True)
class _BranchPoint:
    """
    Where a branch picks up: committed histories in (first, second) order,
    plus the element still being paired when in_flight is set.
    """

    first: list[typing.Any]
    second: list[typing.Any]
    in_flight: bool = False
    swapped: bool = False
    current: typing.Any = None
    scan: int = 0


class _Side:
    """A source plus everything already drawn from it."""

    __slots__ = ("source", "history")

    def __init__(self, source: Sequence[typing.Any]) -> None:
        self.source = source
        self.history: list[typing.Any] = []


class PairSequence[A, B, R](Sequence[R]):
    """
    Cross product of first and second, mapped through transform.

    transform(a, b, emit) is called once per pair, with a from first and b
    from second whichever side is driving, and may emit any number of
    results.

    The product is complete: every (a, b) is passed to transform exactly
    once. The sequence ends only when both sides are exhausted.

    A pair counts as visited before transform runs, so if transform
    raises, that pair is not retried by the next has_next()/next().

    Branches form a chain: a branch takes over its parent's sources, so a
    parent can hand them to one branch only.
    """

    __slots__ = (
        "_driver",
        "_other",
        "_swapped",
        "_parent",
        "_transform",
        "_policy",
        "_state",
        "_current",
        "_scan",
        "_pending",
        "_replay",
        "_log",
    )

    def __init__(
        self,
        first: Sequence[A],
        second: Sequence[B],
        transform: PairTransform[A, B, R],
        /,
        *,
        parent: PairSequence[A, B, typing.Any] | None = None,
        policy: PairPolicy = PairPolicy(),
    ) -> None:
        super().__init__()
        self._driver = _Side(first.claim(self, transfer_from=parent))
        self._other = _Side(second.claim(self, transfer_from=parent))
        self._swapped = False
        self._parent = parent
        self._transform = transform
        self._policy = policy
        self._state = PairState.INIT
        self._current: typing.Any = None  # drawn from driver, not yet committed
        self._scan = 0  # next index into other.history to pair with _current
        self._pending: OutputBuffer[R] = OutputBuffer()
        self._replay: Sequence[R] | None = None
        self._log: Log[PairEvent] = Log(limit=policy.trace_limit)

    # Introspection

    @property
    def state(self) -> PairState:
        return self._state

    @property
    def swapped(self) -> bool:
        """True while second is the driving side."""
        return self._swapped

    @property
    def histories(self) -> tuple[tuple[A, ...], tuple[B, ...]]:
        """Committed histories of (first, second)."""
        first, second = self._ordered(self._driver.history, self._other.history)
        return tuple(first), tuple(second)

    @property
    def log(self) -> Log[PairEvent]:
        """
        Events recorded so far (empty unless policy.trace).

        A traced branch's log starts with its parent's events.
        """
        return self._log.snapshot()

    # Sequence contract

    def has_next(self) -> bool:
        return self._advance()

    def next(self) -> R:
        if not self._advance():
            raise Exhausted(self)
        return self._pending.pop()

    # State machine

    def _advance(self) -> bool:
        if self._state is PairState.INIT:
            self._start()
        while not self._pending:
            if self._replay is not None:
                if self._replay.has_next():
                    self._pending.emit(self._replay.next())
                    continue
                self._replay = None
            if self._state is not PairState.RUNNING:
                break
            self._step()
        return bool(self._pending)

    def _start(self) -> None:
        point = None
        if self._parent is not None:
            point = self._parent._branch_point()
            if self._policy.replay_parent:
                self._replay = self._replayed(point)
            # Not swapped yet: driver is first, other is second.
            self._driver.history = point.first
            self._other.history = point.second
            if self._policy.trace:
                self._log = self._log.combine(self._parent._log)
        self._record("start")

        if point is not None and point.in_flight:
            # Finish the parent's row before drawing anything new.
            if point.swapped:
                self._swap()
            self._current = point.current
            self._scan = point.scan
            self._state = PairState.RUNNING
            return

        if not self._driver.source.has_next():
            self._swap()
        if self._driver.source.has_next():
            self._draw()
            self._state = PairState.RUNNING
        else:
            self._finish()

    def _step(self) -> None:
        partners = self._other.history
        emit = self._pending.emit
        while not self._pending and self._scan < len(partners):
            partner = partners[self._scan]
            self._scan += 1
            if self._swapped:
                self._transform(partner, self._current, emit)
            else:
                self._transform(self._current, partner, emit)
        if self._pending:
            return

        # _current has met every partner drawn so far
        self._commit()
        if self._other.source.has_next():
            self._swap()
        if self._driver.source.has_next():
            self._draw()
        else:
            self._finish()

    def _draw(self) -> None:
        self._current = self._driver.source.next()
        self._scan = 0
        self._record("draw", self._driver_side(), self._current)

    def _commit(self) -> None:
        self._driver.history.append(self._current)
        self._record("commit", self._driver_side(), self._current)

    def _swap(self) -> None:
        self._driver, self._other = self._other, self._driver
        self._swapped = not self._swapped
        self._record("swap", self._driver_side())

    def _finish(self) -> None:
        self._current = None
        self._state = PairState.DONE
        self._record("done")

    # Branching

    def _branch_point(self) -> _BranchPoint:
        """
        Copies of the committed histories, plus the in-flight element and how
        far it got through its row if this instance is running. An instance
        that has not started yet defers to its own parent.
        """
        if self._state is PairState.INIT:
            if self._parent is None:
                return _BranchPoint([], [])
            return self._parent._branch_point()
        first, second = self._ordered(list(self._driver.history), list(self._other.history))
        if self._state is PairState.DONE:
            return _BranchPoint(first, second)
        return _BranchPoint(
            first,
            second,
            in_flight=True,
            swapped=self._swapped,
            current=self._current,
            scan=self._scan,
        )

    def _replayed(self, point: _BranchPoint) -> Sequence[R]:
        """Everything the parent produced up to point, without touching sources."""
        transform = self._transform
        committed = PairSequence(ArraySequence(point.first), ArraySequence(point.second), transform)
        if not point.in_flight:
            return committed

        current, swapped = point.current, point.swapped
        met = (point.first if swapped else point.second)[: point.scan]

        def row(partner: typing.Any, emit: typing.Any) -> None:
            if swapped:
                transform(partner, current, emit)
            else:
                transform(current, partner, emit)

        return ConcatSequence.of(committed, FilterSequence(ArraySequence(met), row))

    def _ordered[V](self, driver: V, other: V) -> tuple[V, V]:
        return (other, driver) if self._swapped else (driver, other)

    def _driver_side(self) -> Side:
        return "second" if self._swapped else "first"

    def _record(self, kind: PairEventKind, side: Side | None = None, value: typing.Any = None) -> None:
        if self._policy.trace:
            self._log.tell(PairEvent(kind, side, value))

    def __repr__(self) -> str:
        return f"PairSequence(state={self._state.name}, swapped={self._swapped})"


# ============================================================================
# Sugar
# ============================================================================


def pairs[A, B](
    first: Sequence[A],
    second: Sequence[B],
    /,
    *,
    parent: PairSequence[A, B, typing.Any] | None = None,
    policy: PairPolicy = PairPolicy(),
) -> PairSequence[A, B, tuple[A, B]]:
    """Cross product as (a, b) tuples."""
    return PairSequence(first, second, emit_pair, parent=parent, policy=policy)


__all__ = ("PairEvent", "PairPolicy", "PairSequence", "PairState", "pairs")
