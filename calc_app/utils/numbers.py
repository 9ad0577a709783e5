"""
Numeric rounding and display formatting utilities.

This module provides the single place where floats are rounded for display
and turned into operand strings, so every component renders numbers the same
way.
"""

import math
from decimal import Decimal

from ..errors import NumericOverflowError

RESULT_DECIMALS = 8
CONVERSION_DECIMALS = 6


def round_half_up(value: float, decimals: int) -> float:
    """
    Round a float to a fixed number of decimal digits, half-up.

    Args:
        value: Value to round
        decimals: Number of decimal digits to keep

    Returns:
        ``floor(value * 10**decimals + 0.5) / 10**decimals``

    Examples:
        >>> round_half_up(0.1 + 0.2, 8)
        0.3
        >>> round_half_up(2.5, 0)
        3.0
        >>> round_half_up(-2.5, 0)
        -2.0
    """
    factor = 10 ** decimals
    scaled = value * factor
    if not math.isfinite(scaled):
        # Already beyond the precision floats can carry
        return value
    return math.floor(scaled + 0.5) / factor


def format_number(value: float) -> str:
    """
    Format a float as a calculator display string.

    Uses the shortest decimal string that round-trips to the same float,
    rendered positionally (``1e-08`` becomes ``0.00000001``). Integral values
    drop the fractional part and negative zero renders as ``0``.

    Raises:
        NumericOverflowError: If value is infinite or NaN
    """
    if not math.isfinite(value):
        raise NumericOverflowError(
            "Result is not a finite number",
            context={"value": repr(value)}
        )

    if value == 0:
        return "0"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def parse_number(text: str) -> float:
    """Parse an operand display string (a trailing '.' is allowed)."""
    return float(text)


def is_integral(value: float) -> bool:
    """Check whether a finite float holds a whole number."""
    return math.isfinite(value) and value == math.floor(value)
