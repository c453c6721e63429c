"""
Core type definitions for lazyseq.

Aliases for the callbacks that combinators accept.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Emit = sink a transform pushes its outputs into
type Emit[R] = Callable[[R], None]

# Transform = one input, zero or more outputs pushed through emit
type Transform[T, R] = Callable[[T, Emit[R]], None]

# PairTransform = one pair of inputs, zero or more outputs pushed through emit
# NOTE: Arguments always arrive in the caller's order (first, second),
#       regardless of which side is currently driving the cross product.
type PairTransform[A, B, R] = Callable[[A, B, Emit[R]], None]

__all__ = (
    "Predicate",
    "Emit",
    "Transform",
    "PairTransform",
)
