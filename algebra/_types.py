"""
Core type definitions for algebra.

Aliases shared by the monoid and result modules.
"""

from __future__ import annotations

from collections.abc import Callable

from returns.result import Result

# ============================================================================
# Type aliases
# ============================================================================

# BinaryOp = closed binary operation on a single type (a magma's combine)
type BinaryOp[T] = Callable[[T, T], T]

# Step = fallible operation consuming the previous unwrapped value
type Step[T, U, E] = Callable[[T], Result[U, E]]

# Producer = zero-argument fallible operation that starts a chain
type Producer[T, E] = Callable[[], Result[T, E]]

# Parser = fallible conversion from raw input to a value
type Parser[S, T, E] = Callable[[S], Result[T, E]]

__all__ = (
    "BinaryOp",
    "Parser",
    "Producer",
    "Step",
)
