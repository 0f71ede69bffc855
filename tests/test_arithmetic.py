from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from algebra import DivideByZeroError, ParseError, div_int, div_strings, mul_ints, parse_int

from _support import expect_err, expect_ok


class TestParseInt:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("0", 0), ("42", 42), ("-7", -7), ("+3", 3), ("007", 7)],
    )
    def test_valid(self, raw: str, expected: int) -> None:
        assert expect_ok(parse_int(raw)) == expected

    @pytest.mark.parametrize("raw", ["foo", "", "1.5", " 1", "1 ", "1_000", "-", "0x10"])
    def test_invalid(self, raw: str) -> None:
        err = expect_err(parse_int(raw))
        assert err == ParseError(raw)
        assert err.value == raw
        assert err.message == f'For input string: "{raw}"'

    def test_non_ascii_digits_rejected(self) -> None:
        # ASCII digits only
        assert expect_err(parse_int("١٢")) == ParseError("١٢")

    @given(st.integers())
    def test_round_trips_str(self, value: int) -> None:
        assert expect_ok(parse_int(str(value))) == value


class TestDivInt:
    def test_divides(self) -> None:
        assert expect_ok(div_int(10, 2)) == 5

    def test_divide_by_zero(self) -> None:
        err = expect_err(div_int(4, 0))
        assert err == DivideByZeroError()
        assert err.message == "Divide by zero!"

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (0, 5, 0)],
    )
    def test_truncates_toward_zero(self, a: int, b: int, expected: int) -> None:
        assert expect_ok(div_int(a, b)) == expected

    @given(st.integers(), st.integers().filter(lambda b: b != 0))
    def test_quotient_bound(self, a: int, b: int) -> None:
        q = expect_ok(div_int(a, b))
        assert abs(q * b) <= abs(a)


class TestDivStrings:
    def test_success(self) -> None:
        assert expect_ok(div_strings("10", "2")) == 5

    def test_divide_by_zero(self) -> None:
        assert expect_err(div_strings("5", "0")) == DivideByZeroError()

    def test_bad_denominator(self) -> None:
        assert expect_err(div_strings("2", "foo")) == ParseError("foo")

    def test_numerator_checked_first(self) -> None:
        assert expect_err(div_strings("bar", "foo")) == ParseError("bar")


class TestMulInts:
    def test_product(self) -> None:
        assert expect_ok(mul_ints(["1", "2", "3"])) == 6

    def test_parse_failure(self) -> None:
        assert expect_err(mul_ints(["1", "foo", "3"])) == ParseError("foo")

    def test_empty(self) -> None:
        assert expect_ok(mul_ints([])) == 1


class TestErrors:
    def test_equality_by_value(self) -> None:
        assert ParseError("a") == ParseError("a")
        assert ParseError("a") != ParseError("b")
        assert ParseError("a") != DivideByZeroError()

    def test_hashable(self) -> None:
        assert len({ParseError("a"), ParseError("a"), DivideByZeroError()}) == 2

    def test_repr(self) -> None:
        assert repr(ParseError("foo")) == "ParseError('foo')"
        assert repr(DivideByZeroError()) == "DivideByZeroError()"
