from __future__ import annotations

import json

import pytest
from returns.result import Failure, Success

from algebra import lift as L

from _support import expect_err, expect_ok


class TestUp:
    def test_from_optional_value(self) -> None:
        assert expect_ok(L.from_optional(0, error=lambda: "missing")) == 0

    def test_from_optional_none(self) -> None:
        calls: list[None] = []

        def error() -> str:
            calls.append(None)
            return "missing"

        assert expect_err(L.up.from_optional(None, error=error)) == "missing"
        assert len(calls) == 1

    def test_catching_ok(self) -> None:
        assert expect_ok(L.catching(lambda: json.loads("[1]"), on_error=str)) == [1]

    def test_catching_exception(self) -> None:
        result = L.up.catching(lambda: json.loads("{"), on_error=lambda e: type(e).__name__)
        assert expect_err(result) == "JSONDecodeError"

    def test_catching_lets_base_exceptions_through(self) -> None:
        def interrupt() -> None:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            L.catching(interrupt, on_error=str)


class TestDown:
    def test_to_optional(self) -> None:
        assert L.to_optional(Success(1)) == 1
        assert L.down.to_optional(Failure("x")) is None

    def test_error_of(self) -> None:
        assert L.error_of(Success(1)) is None
        assert L.down.error_of(Failure("x")) == "x"

    def test_non_result_is_rejected(self) -> None:
        with pytest.raises(AssertionError):
            L.error_of(1)  # type: ignore[arg-type]
