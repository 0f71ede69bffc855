"""Sequence combinator

Structure flipping: [Result[T, E]] -> Result[[T], E]."""

from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

from returns.result import Failure, Result, Success


def sequence_results[T, E](items: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Flip structure: list of Results -> Result of list.

    Success of all values (input order) when every element is Success,
    otherwise the first Failure encountered left to right. Later
    elements are not inspected once a Failure is found.

    Pure data transform: whatever produced `items` has already run.
    """
    values: list[T] = []
    for item in items:
        match item:
            case Success(value):
                values.append(value)
            case Failure(err):
                return Failure(err)
            case _ as unreachable:
                assert_never(unreachable)
    return Success(values)


__all__ = ("sequence_results",)
