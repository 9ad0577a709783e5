"""
Expression error classifications for tokenizing, parsing and evaluation.

These exceptions describe why an expression (or a chained state machine
computation) could not produce a number.
"""

from typing import Optional

from .base import CalculatorError, ErrorKind


class ExpressionError(CalculatorError):
    """Base class for expression evaluation failures."""


class LexError(ExpressionError):
    """Unrecognized character in the expression text."""

    kind = ErrorKind.LEX_ERROR

    def __init__(self, position: int, char: str, **kwargs):
        super().__init__(f"Unexpected character {char!r} at position {position}", **kwargs)
        self.position = position
        self.char = char


class ParseError(ExpressionError):
    """Token sequence does not match the expression grammar."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, position: int, message: str, **kwargs):
        super().__init__(f"{message} at position {position}", **kwargs)
        self.position = position
        self.reason = message


class DomainError(ExpressionError):
    """Argument outside the domain of a function or operator."""

    kind = ErrorKind.DOMAIN_ERROR

    def __init__(self, message: str, function: Optional[str] = None,
                 argument: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.function = function
        self.argument = argument


class DivisionByZeroError(ExpressionError):
    """Division (or reciprocal) with a zero divisor."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "Cannot divide by zero", **kwargs):
        super().__init__(message, **kwargs)


class NumericOverflowError(ExpressionError):
    """Result exceeds the range of a 64-bit float."""

    kind = ErrorKind.OVERFLOW_ERROR
