"""
Basic-mode arithmetic state machine.

Every transition is a pure function taking a CalculatorState and returning
the next one. Errors are raised as typed exceptions; the session in
``runtime`` decides whether they reset the state.
"""

from dataclasses import replace

from ..errors import DivisionByZeroError
from ..expression.evaluator import apply_binary, evaluate_expression
from ..expression.tokens import CONSTANTS
from ..utils.numbers import RESULT_DECIMALS, round_half_up
from .models import CalculatorState, Operand, Operator

DIGITS = frozenset("0123456789")

_BINARY_SYMBOLS = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "*",
    Operator.DIVIDE: "/",
}


def _next(state: CalculatorState, **changes) -> CalculatorState:
    changes.setdefault("echo", "")
    return replace(state, **changes)


def initial_state() -> CalculatorState:
    """State at session start: display "0", nothing pending."""
    return CalculatorState()


def apply_operator(op: Operator, previous: float, current: float) -> float:
    """
    Apply a pending operator.

    Percent as a pending operator takes ``current`` percent of ``previous``.

    Raises:
        DivisionByZeroError: When dividing by zero
        NumericOverflowError: When the result is not finite
    """
    if op == Operator.PERCENT:
        return apply_binary("*", previous, current / 100)
    return apply_binary(_BINARY_SYMBOLS[op], previous, current)


def append_digit(state: CalculatorState, digit: str) -> CalculatorState:
    """Type a digit, replacing a lone "0" or a just-computed result."""
    if digit not in DIGITS or len(digit) != 1:
        raise ValueError(f"Not a digit: {digit!r}")

    if state.reset_on_next_digit or state.current.text == "0":
        text = digit
    else:
        text = state.current.text + digit

    return _next(state, current=Operand(text), reset_on_next_digit=False)


def append_decimal_point(state: CalculatorState) -> CalculatorState:
    """Type a decimal point; ignored if the operand already has one."""
    if state.reset_on_next_digit:
        return _next(state, current=Operand("0."), reset_on_next_digit=False)

    if state.current.has_decimal_point:
        return state

    return _next(state, current=Operand(state.current.text + "."))


def evaluate(state: CalculatorState, decimals: int = RESULT_DECIMALS) -> CalculatorState:
    """
    Resolve the pending computation (the "=" key).

    No-op unless both a previous operand and a pending operator exist.
    """
    if state.previous is None or state.pending_op is None:
        return state

    result = apply_operator(state.pending_op, state.previous.value, state.current.value)

    return _next(
        state,
        current=Operand.from_value(round_half_up(result, decimals)),
        previous=None,
        pending_op=None,
        reset_on_next_digit=True,
    )


def choose_operator(
    state: CalculatorState,
    op: Operator,
    decimals: int = RESULT_DECIMALS
) -> CalculatorState:
    """Choose a binary operator, first resolving any pending computation."""
    op = Operator(op)

    if state.previous is not None and state.pending_op is not None:
        state = evaluate(state, decimals)

    return _next(state, previous=state.current, pending_op=op, reset_on_next_digit=True)


def percent_immediate(state: CalculatorState, decimals: int = RESULT_DECIMALS) -> CalculatorState:
    """
    The percent key.

    Without a pending operator the operand is divided by 100. With one, the
    pending computation is resolved instead.
    """
    if state.previous is not None and state.pending_op is not None:
        return evaluate(state, decimals)

    return _next(state, current=Operand.from_value(state.current.value / 100))


def reciprocal(state: CalculatorState) -> CalculatorState:
    """Replace the operand with 1/operand."""
    value = state.current.value
    if value == 0:
        raise DivisionByZeroError(context={"operation": "reciprocal"})

    return _next(state, current=Operand.from_value(1 / value), reset_on_next_digit=True)


def clear(state: CalculatorState) -> CalculatorState:
    """Reset to the initial state."""
    return initial_state()


def backspace(state: CalculatorState) -> CalculatorState:
    """Remove the last typed character; never leaves the display empty."""
    text = state.current.text[:-1]
    if text in ("", "-"):
        text = "0"

    return _next(state, current=Operand(text))


def insert_constant(state: CalculatorState, name: str) -> CalculatorState:
    """Replace the operand with the value of pi or e."""
    if name not in CONSTANTS:
        raise ValueError(f"Unknown constant: {name!r}")

    return _next(state, current=Operand.from_value(CONSTANTS[name]), reset_on_next_digit=True)


def submit_expression(
    state: CalculatorState,
    expr: str,
    decimals: int = RESULT_DECIMALS
) -> CalculatorState:
    """
    Evaluate a typed expression and show its result as the operand.

    A blank expression resolves the pending computation instead.

    Raises:
        ExpressionError: If the expression cannot be evaluated
    """
    expr = expr.strip()
    if not expr:
        return evaluate(state, decimals)

    value = evaluate_expression(expr)

    return _next(
        state,
        current=Operand.from_value(value),
        previous=None,
        pending_op=None,
        reset_on_next_digit=True,
        echo=f"{expr} =",
    )
