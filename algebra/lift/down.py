"""
Lowering a Result back to plain values.
"""

from __future__ import annotations

from typing import assert_never

from returns.result import Failure, Result, Success


def to_optional[T, E](result: Result[T, E]) -> T | None:
    """Value of a Success, or None. The error is discarded."""
    match result:
        case Success(v):
            return v
        case Failure(_):
            return None
        case _ as unreachable:
            assert_never(unreachable)


def error_of[T, E](result: Result[T, E]) -> E | None:
    """Error of a Failure, or None for a Success."""
    match result:
        case Success(_):
            return None
        case Failure(err):
            return err
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "error_of",
    "to_optional",
)
