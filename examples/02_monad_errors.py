from __future__ import annotations

from _infra import banner, show

from algebra import DivideByZeroError, ParseError, div_int, div_strings, mul_ints, parse_int
from returns.result import Failure, Result, Success


def div_strings_imperative(a: str, b: str) -> Result[int, ParseError | DivideByZeroError]:
    # Branching by hand: the meaning drowns in error-handling noise
    ae = parse_int(a)
    match ae:
        case Failure(err):
            return Failure(err)
        case Success(ai):
            be = parse_int(b)
            match be:
                case Failure(err):
                    return Failure(err)
                case Success(bi):
                    return div_int(ai, bi)


def main() -> None:
    banner("02_monad_errors: short-circuiting Result chains")

    show('parse_int("foo")', parse_int("foo"))
    show("div_int(4, 0)", div_int(4, 0))

    print("\n  -- imperative --")
    for a, b in [("10", "2"), ("5", "0"), ("2", "foo")]:
        show(f"div_strings_imperative({a!r}, {b!r})", div_strings_imperative(a, b))

    print("\n  -- chained --")
    for a, b in [("10", "2"), ("5", "0"), ("2", "foo")]:
        show(f"div_strings({a!r}, {b!r})", div_strings(a, b))

    print("\n  -- traverse + monoid --")
    show('mul_ints(["1", "2", "3"])', mul_ints(["1", "2", "3"]))
    show('mul_ints(["1", "foo", "3"])', mul_ints(["1", "foo", "3"]))


if __name__ == "__main__":
    main()
