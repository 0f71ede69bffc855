"""
Sample fallible operations.

    parse_int("42")      # Success(42)
    parse_int("foo")     # Failure(ParseError('foo'))
    div_int(10, 2)       # Success(5)
    div_int(4, 0)        # Failure(DivideByZeroError())

div_strings and mul_ints compose them with chain and map_and_aggregate.
"""

from __future__ import annotations

import re

from returns.result import Failure, Result, Success

from ._errors import DivideByZeroError, ParseError
from .lift import catching
from .monoid import INT_MULTIPLICATION
from .result import chain, map_and_aggregate

# Optional sign, ASCII digits only: no whitespace, underscores or other digit scripts
_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


def _to_int(s: str) -> int:
    if _INT_LITERAL.fullmatch(s) is None:
        raise ValueError(f"invalid literal for int(): {s!r}")
    return int(s)


def parse_int(s: str) -> Result[int, ParseError]:
    """Parse a base-10 integer literal."""
    return catching(lambda: _to_int(s), on_error=lambda _: ParseError(s))


def div_int(a: int, b: int) -> Result[int, DivideByZeroError]:
    """Integer division truncating toward zero; fails when b == 0."""
    if b == 0:
        return Failure(DivideByZeroError())
    q = abs(a) // abs(b)
    return Success(q if (a < 0) == (b < 0) else -q)


def div_strings(a: str, b: str) -> Result[int, ParseError | DivideByZeroError]:
    """
    Parse both strings and divide.

    Three things can go wrong, checked in this order:
    `a` is not an integer, `b` is not an integer, `b` is zero.
    """
    return chain(
        lambda: parse_int(a),
        lambda ai: parse_int(b).map(lambda bi: (ai, bi)),
        lambda pair: div_int(*pair),
    )


def mul_ints(strings: list[str]) -> Result[int, ParseError]:
    """Parse every string and multiply; any parse failure fails the whole product."""
    return map_and_aggregate(strings, parse_int, INT_MULTIPLICATION)


__all__ = ("div_int", "div_strings", "mul_ints", "parse_int")
