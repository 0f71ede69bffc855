"""
Chain combinators
=================

Short-circuiting sequential composition of fallible steps.

    chain(parse_int(a), lambda x: ..., lambda y: ...)

reads like a for-comprehension / do-block: each step receives the
unwrapped value of the previous one, and the first Failure stops the chain.
"""

from __future__ import annotations

import typing
from typing import assert_never

from returns.result import Failure, Result, Success

from .._helpers import force, require_callable
from .._types import Producer, Step


def bind[T, U, E](result: Result[T, E], step: Step[T, U, E], /) -> Result[U, E]:
    """
    Monadic bind (>>=) for a single step.

    - On Success: returns step(value)
    - On Failure: short-circuit, step is never called
    """
    match result:
        case Success(value):
            return step(value)
        case Failure(err):
            return Failure(err)
        case _ as unreachable:
            assert_never(unreachable)


def chain[E](
    start: Result[typing.Any, E] | Producer[typing.Any, E],
    /,
    *steps: Step[typing.Any, typing.Any, E],
) -> Result[typing.Any, E]:
    """
    Run fallible steps left to right, threading each success value forward.

    `start` is either an already-computed Result or a zero-argument producer.
    The first Failure aborts: remaining steps are not invoked and that Failure is
    the result of the whole chain. Otherwise the last step's Success is returned.

    Example:
        chain(
            lambda: parse_int("10"),
            lambda a: parse_int("2").map(lambda b: (a, b)),
            lambda ab: div_int(*ab),
        )  # Success(5)
    """
    for i, step in enumerate(steps):
        require_callable(step, what=f"step {i}")

    result = force(start)
    for step in steps:
        match result:
            case Success(value):
                result = step(value)
            case Failure(_):
                return result
            case _ as unreachable:
                assert_never(unreachable)
    match result:
        case Success(_) | Failure(_):
            return result
        case _ as unreachable:
            assert_never(unreachable)


__all__ = ("bind", "chain")
