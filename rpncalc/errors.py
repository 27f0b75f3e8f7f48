from typing import Optional


class CalcError(Exception):
    """Base class for rpncalc errors."""

    def __init__(self, message: str, location: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = location


class TokenizeError(CalcError):
    """Raised when an expression can not be split into tokens."""


class BadToken(TokenizeError):
    def __init__(self, char: str, location: Optional[int] = None) -> None:
        super().__init__(f"unexpected character {char!r}", location)
        self.char = char


class MismatchedParens(TokenizeError):
    def __init__(self, location: Optional[int] = None) -> None:
        super().__init__("mismatched parentheses", location)


class EvaluationError(CalcError):
    """Raised when a postfix sequence can not be reduced at all."""


class MalformedPostfix(EvaluationError):
    def __init__(self, operator: str, location: Optional[int] = None) -> None:
        super().__init__(f"not enough operands for {operator!r}", location)
        self.operator = operator


class NumberTooLarge(EvaluationError):
    def __init__(self, value: int, location: Optional[int] = None) -> None:
        super().__init__("number too large", location)
        self.value = value


class ConfigError(Exception):
    """Raised when a configuration file sets an unknown option."""
