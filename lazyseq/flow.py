"""
AST for fluent sequence chaining.

Architecture:
- Expr[T] - node that lowers into a Sequence[T]
- Flow[T] - fluent builder wrapping an Expr
- flow / flow_of / flow_iter - constructor functions

Nothing is pulled while a Flow is being built. compile() lowers the tree
into combinators, which take ownership of the sequences the flow was built
from; compiling the same flow twice therefore raises SequenceOwnershipError.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ._types import PairTransform, Predicate, Transform
from .base import Sequence
from .pair.pair import PairPolicy


# ============================================================================
# AST nodes
# ============================================================================


class Expr[T]:
    """
    AST node that can be lowered into a Sequence.
    """

    def lower(self) -> Sequence[T]:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Base[T](Expr[T]):
    value: Sequence[T]

    def lower(self) -> Sequence[T]:
        return self.value


@dataclass(frozen=True, slots=True)
class Map[T, R](Expr[R]):
    inner: Expr[T]
    f: Callable[[T], R]

    def lower(self) -> Sequence[R]:
        from .transform.filter import mapped
        return mapped(self.inner.lower(), self.f)


@dataclass(frozen=True, slots=True)
class Filter[T](Expr[T]):
    inner: Expr[T]
    predicate: Predicate[T]

    def lower(self) -> Sequence[T]:
        from .transform.filter import filtered
        return filtered(self.inner.lower(), self.predicate)


@dataclass(frozen=True, slots=True)
class FlatMap[T, R](Expr[R]):
    inner: Expr[T]
    f: Callable[[T], Iterable[R]]

    def lower(self) -> Sequence[R]:
        from .transform.filter import flat_mapped
        return flat_mapped(self.inner.lower(), self.f)


@dataclass(frozen=True, slots=True)
class Apply[T, R](Expr[R]):
    inner: Expr[T]
    transform: Transform[T, R]

    def lower(self) -> Sequence[R]:
        from .transform.filter import FilterSequence
        return FilterSequence(self.inner.lower(), self.transform)


@dataclass(frozen=True, slots=True)
class Concat[T](Expr[T]):
    parts: tuple[Expr[T], ...]

    def lower(self) -> Sequence[T]:
        from .source.concat import ConcatSequence
        return ConcatSequence(part.lower() for part in self.parts)


@dataclass(frozen=True, slots=True)
class Memoize[T](Expr[T]):
    inner: Expr[T]

    def lower(self) -> Sequence[T]:
        from .memo import MemoizingSequence
        return MemoizingSequence(self.inner.lower())


@dataclass(frozen=True, slots=True)
class Pairs[A, B, R](Expr[R]):
    left: Expr[A]
    right: Expr[B]
    transform: PairTransform[A, B, R]
    policy: PairPolicy

    def lower(self) -> Sequence[R]:
        from .pair.pair import PairSequence
        return PairSequence(self.left.lower(), self.right.lower(), self.transform, policy=self.policy)


@dataclass(frozen=True, slots=True)
class Trace[T](Expr[T]):
    inner: Expr[T]
    label: str

    def lower(self) -> Sequence[T]:
        from .writer.trace import TracedSequence
        return TracedSequence(self.inner.lower(), label=self.label)


# ============================================================================
# Fluent builder
# ============================================================================


def _as_expr[T](source: Flow[T] | Sequence[T]) -> Expr[T]:
    if isinstance(source, Flow):
        return source.expr
    return Base(source)


@dataclass(frozen=True, slots=True)
class Flow[T]:
    """
    Fluent builder for chaining sequence combinators.
    """

    expr: Expr[T]

    def map[R](self, f: Callable[[T], R]) -> Flow[R]:
        return Flow(Map(self.expr, f=f))

    def filter(self, predicate: Predicate[T]) -> Flow[T]:
        return Flow(Filter(self.expr, predicate=predicate))

    def flat_map[R](self, f: Callable[[T], Iterable[R]]) -> Flow[R]:
        return Flow(FlatMap(self.expr, f=f))

    def transform[R](self, transform: Transform[T, R]) -> Flow[R]:
        """Arbitrary emit-style transform (see FilterSequence)."""
        return Flow(Apply(self.expr, transform=transform))

    def concat(self, *others: Flow[T] | Sequence[T]) -> Flow[T]:
        return Flow(Concat((self.expr, *(_as_expr(other) for other in others))))

    def memoize(self) -> Flow[T]:
        return Flow(Memoize(self.expr))

    def pairs[B, R](
        self,
        other: Flow[B] | Sequence[B],
        transform: PairTransform[T, B, R] | None = None,
        *,
        policy: PairPolicy | None = None,
    ) -> Flow[typing.Any]:
        """Cross product with other; (a, b) tuples unless transform is given."""
        if transform is None:
            from ._helpers import emit_pair
            transform = typing.cast(typing.Any, emit_pair)
        return Flow(Pairs(self.expr, _as_expr(other), transform=transform, policy=policy or PairPolicy()))

    def traced(self, label: str = "trace") -> Flow[T]:
        return Flow(Trace(self.expr, label=label))

    def compile(self) -> Sequence[T]:
        return self.expr.lower()

    def collect(self, *, limit: int | None = None) -> list[T]:
        from .collection.collect import collect
        return collect(self.compile(), limit=limit)


# ============================================================================
# Constructor functions
# ============================================================================


def flow[T](seq: Sequence[T]) -> Flow[T]:
    """Build a Flow from an existing sequence."""
    return Flow(Base(seq))


def flow_of[T](*items: T) -> Flow[T]:
    """Build a Flow over the given items."""
    from .source.array import ArraySequence
    return Flow(Base(ArraySequence(items)))


def flow_iter[T](iterable: Iterable[T]) -> Flow[T]:
    """Build a Flow over a Python iterable, pulled lazily."""
    from .source.array import IteratorSequence
    return Flow(Base(IteratorSequence(iterable)))


__all__ = (
    "Expr",
    "Flow",
    "flow",
    "flow_of",
    "flow_iter",
)
