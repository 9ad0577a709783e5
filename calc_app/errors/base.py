"""
Base error classification shared by every calculator component.

Each error carries an ErrorKind so the UI collaborator can pick a message
without inspecting exception types.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Classification of errors returned to callers."""
    LEX_ERROR = "lex_error"
    PARSE_ERROR = "parse_error"
    DOMAIN_ERROR = "domain_error"
    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW_ERROR = "overflow_error"
    UNKNOWN_UNIT = "unknown_unit"
    UNKNOWN_CATEGORY = "unknown_category"


class CalculatorError(Exception):
    """Base class for all errors raised by the numeric core."""

    kind: ErrorKind = ErrorKind.DOMAIN_ERROR

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
