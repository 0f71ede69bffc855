"""Aggregate combinator

traverse + monoidal reduction of the unwrapped values."""

from __future__ import annotations

from collections.abc import Iterable

from returns.result import Result

from .._types import Parser
from ..monoid import Monoid
from .traverse import traverse_results


def map_and_aggregate[S, T, E](
    items: Iterable[S],
    parse: Parser[S, T, E],
    monoid: Monoid[T],
) -> Result[T, E]:
    """
    Parse every item, then combine the values with `monoid`.

    Example:
        map_and_aggregate(["1", "2", "3"], parse_int, INT_MULTIPLICATION)    # Success(6)
        map_and_aggregate(["1", "foo", "3"], parse_int, INT_MULTIPLICATION)  # Failure(ParseError('foo'))
        map_and_aggregate([], parse_int, INT_MULTIPLICATION)                 # Success(1)
    """
    return traverse_results(items, parse).map(monoid.combine_all)


__all__ = ("map_and_aggregate",)
