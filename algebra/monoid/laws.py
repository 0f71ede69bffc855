"""Monoid laws as predicates.

Laws are not enforced by the type system. Anyone defining a new instance
should check them, typically from a property-based test:

    @given(st.text(), st.text(), st.text())
    def test_assoc(a, b, c):
        assert is_associative(STRING_CONCAT, a, b, c)
"""

from __future__ import annotations

from collections.abc import Sequence

from .base import Monoid, Semigroup


def is_associative[T](m: Semigroup[T], a: T, b: T, c: T) -> bool:
    """(a . b) . c == a . (b . c)"""
    return m.combine(m.combine(a, b), c) == m.combine(a, m.combine(b, c))


def has_left_identity[T](m: Monoid[T], a: T) -> bool:
    """I . a == a"""
    return m.combine(m.identity(), a) == a


def has_right_identity[T](m: Monoid[T], a: T) -> bool:
    """a . I == a"""
    return m.combine(a, m.identity()) == a


def is_commutative[T](m: Semigroup[T], a: T, b: T) -> bool:
    """a . b == b . a (holds only for commutative instances)"""
    return m.combine(a, b) == m.combine(b, a)


def folds_consistently[T](m: Monoid[T], items: Sequence[T]) -> bool:
    """combine_all(items) equals the explicit left fold seeded with identity()."""
    acc = m.identity()
    for item in items:
        acc = m.combine(acc, item)
    return m.combine_all(items) == acc


__all__ = (
    "folds_consistently",
    "has_left_identity",
    "has_right_identity",
    "is_associative",
    "is_commutative",
)
