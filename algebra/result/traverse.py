"""Traverse combinator

Map a fallible function over a sequence, then flip the structure."""

from __future__ import annotations

from collections.abc import Iterable

from returns.result import Result

from .._helpers import require_callable
from .._types import Parser
from .sequence import sequence_results


def traverse_results[S, T, E](
    items: Iterable[S],
    parse: Parser[S, T, E],
) -> Result[list[T], E]:
    """
    Monadic map: S -> Result[T] over every item, then sequence_results.

    Every item is parsed (no short-circuit while mapping); the first
    failing item in input order decides the Failure.
    """
    require_callable(parse, what="parse")
    return sequence_results([parse(item) for item in items])


__all__ = ("traverse_results",)
