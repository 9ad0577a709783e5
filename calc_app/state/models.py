"""
Calculator state data models.

This module defines immutable data structures for the basic-mode arithmetic
state: operands, the pending operator, and the display snapshot handed back
to the UI collaborator after every action.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..errors import CalculatorError, ErrorKind
from ..utils.numbers import format_number, parse_number

# Optional minus, no leading zeros except "0" / "0.x", at most one point
_OPERAND_PATTERN = re.compile(r"-?(0|[1-9][0-9]*)(\.[0-9]*)?")


class Operator(str, Enum):
    """Binary operators of the basic-mode calculator."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    PERCENT = "percent"

    @property
    def symbol(self) -> str:
        return OPERATOR_SYMBOLS[self]


OPERATOR_SYMBOLS = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
    Operator.PERCENT: "%",
}


@dataclass(frozen=True)
class Operand:
    """An operand as typed or displayed, e.g. ``"12"``, ``"0."``, ``"-3.5"``."""

    text: str = "0"

    def __post_init__(self) -> None:
        if not _OPERAND_PATTERN.fullmatch(self.text):
            raise ValueError(f"Invalid operand text {self.text!r}")

    @classmethod
    def from_value(cls, value: float) -> "Operand":
        """Build an operand from a computed value (raises NumericOverflowError if not finite)."""
        return cls(format_number(value))

    @property
    def value(self) -> float:
        return parse_number(self.text)

    @property
    def has_decimal_point(self) -> bool:
        return "." in self.text


@dataclass(frozen=True)
class CalculatorState:
    """Basic-mode calculator state owned by a single session."""

    current: Operand = field(default_factory=Operand)
    previous: Optional[Operand] = None
    pending_op: Optional[Operator] = None
    reset_on_next_digit: bool = False
    echo: str = ""                                   # "<expr> =" after an expression submission

    @property
    def display(self) -> str:
        return self.current.text

    @property
    def preview_line(self) -> str:
        if self.previous is not None and self.pending_op is not None:
            return f"{self.previous.text} {self.pending_op.symbol}"
        if self.echo:
            return self.echo
        if self.previous is not None:
            return self.previous.text
        return ""


@dataclass(frozen=True)
class DisplayUpdate:
    """What the UI collaborator renders after an action."""
    display: str
    preview_line: str
    error: Optional[CalculatorError] = None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    @classmethod
    def of(cls, state: CalculatorState, error: Optional[CalculatorError] = None) -> "DisplayUpdate":
        return cls(display=state.display, preview_line=state.preview_line, error=error)
