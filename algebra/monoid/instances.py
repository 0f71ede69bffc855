"""
Reference monoid instances.

- STRING_CONCAT:      ("", a + b)   not commutative: "Hello" + "World" != "World" + "Hello"
- INT_MULTIPLICATION: (1, a * b)    commutative
- INT_ADDITION:       (0, a + b)    commutative; same type as above, different monoid
- list_concat():      ([], a + b)   not commutative
"""

from __future__ import annotations

import typing

from .base import Monoid


class StringConcat(Monoid[str]):
    __slots__ = ()

    def identity(self) -> str:
        return ""

    def combine(self, a: str, b: str, /) -> str:
        return a + b

    def __repr__(self) -> str:
        return "STRING_CONCAT"


class IntMultiplication(Monoid[int]):
    __slots__ = ()

    def identity(self) -> int:
        return 1

    def combine(self, a: int, b: int, /) -> int:
        # Python ints are arbitrary precision, so the operation is total
        return a * b

    def __repr__(self) -> str:
        return "INT_MULTIPLICATION"


class IntAddition(Monoid[int]):
    __slots__ = ()

    def identity(self) -> int:
        return 0

    def combine(self, a: int, b: int, /) -> int:
        return a + b

    def __repr__(self) -> str:
        return "INT_ADDITION"


class ListConcat[A](Monoid[list[A]]):
    """
    Lists under concatenation.

    combine never mutates its arguments; it always returns a new list.
    """

    __slots__ = ()

    def identity(self) -> list[A]:
        return []

    def combine(self, a: list[A], b: list[A], /) -> list[A]:
        result: list[A] = list(a)
        result.extend(b)
        return result

    def __repr__(self) -> str:
        return "list_concat()"


STRING_CONCAT: typing.Final[Monoid[str]] = StringConcat()
INT_MULTIPLICATION: typing.Final[Monoid[int]] = IntMultiplication()
INT_ADDITION: typing.Final[Monoid[int]] = IntAddition()

_LIST_CONCAT: typing.Final[ListConcat[typing.Any]] = ListConcat()


def list_concat[A]() -> Monoid[list[A]]:
    """List concatenation monoid for any element type."""
    return _LIST_CONCAT


__all__ = (
    "INT_ADDITION",
    "INT_MULTIPLICATION",
    "STRING_CONCAT",
    "IntAddition",
    "IntMultiplication",
    "ListConcat",
    "StringConcat",
    "list_concat",
)
