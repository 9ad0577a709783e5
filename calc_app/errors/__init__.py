"""
Error classification system for the numeric core.

This module provides the structured exception hierarchy for failures
encountered while evaluating expressions, running chained calculations
and converting units.
"""

from .base import (
    CalculatorError,
    ErrorKind,
)
from .expression import (
    ExpressionError,
    LexError,
    ParseError,
    DomainError,
    DivisionByZeroError,
    NumericOverflowError,
)
from .conversion import (
    ConversionError,
    UnknownUnitError,
    UnknownCategoryError,
)

__all__ = [
    # Base
    "CalculatorError",
    "ErrorKind",
    # Expression Errors
    "ExpressionError",
    "LexError",
    "ParseError",
    "DomainError",
    "DivisionByZeroError",
    "NumericOverflowError",
    # Conversion Errors
    "ConversionError",
    "UnknownUnitError",
    "UnknownCategoryError",
]
