"""
Arithmetic state machine module.

Tracks the current and previous operand and the pending operator for
chained entry such as ``3 + 4 × 2 =``.
"""

from .models import CalculatorState, DisplayUpdate, Operand, Operator
from .runtime import CalculatorSession

__all__ = [
    "CalculatorSession",
    "CalculatorState",
    "DisplayUpdate",
    "Operand",
    "Operator",
]
