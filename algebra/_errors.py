from __future__ import annotations


class AlgebraError(Exception):
    """Base for error values carried inside Failure(...)."""

    message: str

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ParseError(AlgebraError):
    """Input is not a valid integer literal."""

    value: str

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'For input string: "{value}"')

    def __repr__(self) -> str:
        return f"ParseError({self.value!r})"


class DivideByZeroError(AlgebraError):
    """Denominator was zero."""

    def __init__(self) -> None:
        super().__init__("Divide by zero!")

    def __repr__(self) -> str:
        return "DivideByZeroError()"


__all__ = ("AlgebraError", "DivideByZeroError", "ParseError")
