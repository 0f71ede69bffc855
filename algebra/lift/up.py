"""
Lifting optionals and exception-raising code into Result.
"""

from __future__ import annotations

from collections.abc import Callable

from returns.result import Failure, Result, Success


def from_optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """
    Convert Optional to Result. None becomes Failure(error()).

    NOTE: error is a thunk so the error is only built when needed.
    """
    if value is None:
        return Failure(error())
    return Success(value)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Result[T, E]:
    """
    Execute thunk, convert a raised exception into Failure.

    **When to use:** Bridge between exception-based code (int(), json.loads, ...)
    and Result-based composition.

    Example:
        from algebra import lift as L

        def parse_json(raw: str) -> Result[dict, ParseError]:
            return L.catching(lambda: json.loads(raw), on_error=lambda e: ParseError(raw))

    NOTE: Catches Exception subclasses only. Filter in on_error for specific ones.
    """
    try:
        return Success(thunk())
    except Exception as exc:
        return Failure(on_error(exc))


__all__ = (
    "catching",
    "from_optional",
)
