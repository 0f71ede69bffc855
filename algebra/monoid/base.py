"""
Magma -> Semigroup -> Monoid
============================

Capability objects for combining values of a single type.

- Magma:     closed binary operation, combine(a, b) is another T
- Semigroup: ... the operation is associative
- Monoid:    ... with an identity element I, combine(I, a) == combine(a, I) == a

Instances are passed explicitly as arguments (or looked up in a MonoidRegistry).
They hold no mutable state and can be shared freely.
"""

from __future__ import annotations

import abc
from collections.abc import Iterable

from .._types import BinaryOp


class Magma[T](abc.ABC):
    """A type with a closed binary operation."""

    __slots__ = ()

    @abc.abstractmethod
    def combine(self, a: T, b: T, /) -> T:
        """Combine two values into a third of the same type."""


class Semigroup[T](Magma[T]):
    """Magma whose combine is associative: (a . b) . c == a . (b . c)."""

    __slots__ = ()

    def combine_n(self, a: T, n: int, /) -> T:
        """
        Combine `a` with itself `n` times.

        Example:
            STRING_CONCAT.combine_n("ab", 3)  # "ababab"
        """
        if n < 1:
            raise ValueError(f"combine_n requires n >= 1 for a semigroup, got {n}")
        acc = a
        for _ in range(n - 1):
            acc = self.combine(acc, a)
        return acc

    def combine_all_option(self, items: Iterable[T], /) -> T | None:
        """
        Left fold over a non-empty sequence.

        Returns None for an empty one: without an identity element
        there is nothing sensible to return.
        """
        it = iter(items)
        try:
            acc = next(it)
        except StopIteration:
            return None
        for item in it:
            acc = self.combine(acc, item)
        return acc


class Monoid[T](Semigroup[T]):
    """
    Semigroup with an identity element.

    Monoid laws (checked in algebra.monoid.laws):
    - Left identity:  combine(identity(), a) == a
    - Right identity: combine(a, identity()) == a
    - Associativity:  combine(combine(a, b), c) == combine(a, combine(b, c))
    """

    __slots__ = ()

    @abc.abstractmethod
    def identity(self) -> T:
        """The neutral ("empty") element."""

    @staticmethod
    def of[A](identity: A, combine: BinaryOp[A]) -> Monoid[A]:
        """
        Build an instance from an identity value and a binary function.

        Example:
            MAX_LEN = Monoid.of("", lambda a, b: a if len(a) >= len(b) else b)
        """
        return _FunctionMonoid(identity, combine)

    def combine_all(self, items: Iterable[T], /) -> T:
        """
        Left fold of combine over items, seeded with identity().

        An empty sequence yields identity() itself; this is why a monoid,
        unlike a semigroup, can reduce anything.
        """
        acc = self.identity()
        for item in items:
            acc = self.combine(acc, item)
        return acc

    def combine_n(self, a: T, n: int, /) -> T:
        """Combine `a` with itself `n` times; n == 0 gives identity()."""
        if n < 0:
            raise ValueError(f"combine_n requires n >= 0, got {n}")
        if n == 0:
            return self.identity()
        return super().combine_n(a, n)

    def is_identity(self, a: T, /) -> bool:
        """True when `a` equals identity()."""
        return a == self.identity()

    def reverse(self) -> Monoid[T]:
        """Dual monoid: same identity, arguments of combine swapped."""
        return _ReversedMonoid(self)


class _FunctionMonoid[T](Monoid[T]):
    __slots__ = ("_identity", "_combine")

    def __init__(self, identity: T, combine: BinaryOp[T]) -> None:
        self._identity = identity
        self._combine = combine

    def identity(self) -> T:
        return self._identity

    def combine(self, a: T, b: T, /) -> T:
        return self._combine(a, b)

    def __repr__(self) -> str:
        return f"Monoid.of({self._identity!r}, {self._combine!r})"


class _ReversedMonoid[T](Monoid[T]):
    __slots__ = ("_inner",)

    def __init__(self, inner: Monoid[T]) -> None:
        self._inner = inner

    def identity(self) -> T:
        return self._inner.identity()

    def combine(self, a: T, b: T, /) -> T:
        return self._inner.combine(b, a)

    def reverse(self) -> Monoid[T]:
        return self._inner

    def __repr__(self) -> str:
        return f"{self._inner!r}.reverse()"


__all__ = ("Magma", "Monoid", "Semigroup")
