"""Internal helpers for algebra.

Small functions shared by the result combinators."""

from __future__ import annotations

import typing

from returns.result import Result

from ._types import Producer


def is_result(value: object) -> bool:
    """True for an already-computed Result (Success or Failure)."""
    return isinstance(value, Result)


def require_callable(fn: object, *, what: str) -> None:
    """Raise TypeError naming `what` when fn is not callable."""
    if not callable(fn):
        raise TypeError(f"{what} must be callable, got {type(fn).__name__}")


def force[T, E](value: Result[T, E] | Producer[T, E]) -> Result[T, E]:
    """Run a producer thunk, or pass an already-computed Result through."""
    if is_result(value):
        return typing.cast("Result[T, E]", value)
    require_callable(value, what="chain start")
    return typing.cast("Producer[T, E]", value)()


__all__ = (
    "force",
    "is_result",
    "require_callable",
)
