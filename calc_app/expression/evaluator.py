"""
Closed-grammar expression evaluator.

Walks the AST produced by the parser and computes a single float. Nothing in
the expression text is ever executed as code; the only operations reachable
are the ones listed in this module.

Trigonometric functions take their argument in degrees.
"""

import math
from dataclasses import dataclass
from typing import Callable, Optional

from ..errors import (
    DivisionByZeroError,
    DomainError,
    ExpressionError,
    NumericOverflowError,
)
from ..logging.config import get_evaluator_logger, log_error_result
from ..utils.numbers import is_integral
from .nodes import BinaryOp, Call, Factorial, Literal, Node, UnaryOp
from .parser import parse

logger = get_evaluator_logger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """Result of evaluating an expression."""
    value: Optional[float] = None
    error: Optional[ExpressionError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: float) -> "EvaluationResult":
        """Create successful result."""
        return cls(value=value)

    @classmethod
    def failed(cls, error: ExpressionError) -> "EvaluationResult":
        """Create error result."""
        return cls(error=error)


def _checked(value: float, operation: str) -> float:
    if not math.isfinite(value):
        raise NumericOverflowError(
            f"Result of {operation} is out of range",
            context={"operation": operation}
        )
    return value


def factorial(value: float) -> float:
    """
    Factorial of a non-negative integer, computed iteratively.

    Raises:
        DomainError: If value is negative or fractional
        NumericOverflowError: If the result exceeds the float range
    """
    if value < 0 or not is_integral(value):
        raise DomainError(
            f"Factorial requires a non-negative integer, got {value}",
            function="!",
            argument=value
        )

    result = 1.0
    for i in range(2, int(value) + 1):
        result *= i
        if math.isinf(result):
            raise NumericOverflowError(
                f"Factorial of {int(value)} is out of range",
                context={"operation": "!", "argument": value}
            )
    return result


def _log10(x: float) -> float:
    if x <= 0:
        raise DomainError(f"log requires a positive argument, got {x}", function="log", argument=x)
    return math.log10(x)


def _ln(x: float) -> float:
    if x <= 0:
        raise DomainError(f"ln requires a positive argument, got {x}", function="ln", argument=x)
    return math.log(x)


def _sqrt(x: float) -> float:
    if x < 0:
        raise DomainError(f"sqrt requires a non-negative argument, got {x}", function="sqrt", argument=x)
    return math.sqrt(x)


def _trig(name: str, func: Callable[[float], float]) -> Callable[[float], float]:
    def apply(degrees: float) -> float:
        try:
            return func(math.radians(degrees))
        except ValueError:
            raise DomainError(
                f"{name} is undefined for {degrees}",
                function=name,
                argument=degrees
            ) from None
    return apply


FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": _trig("sin", math.sin),
    "cos": _trig("cos", math.cos),
    "tan": _trig("tan", math.tan),
    "log": _log10,
    "ln": _ln,
    "sqrt": _sqrt,
}


def _power(base: float, exponent: float) -> float:
    if base == 0 and exponent < 0:
        raise DivisionByZeroError("Zero cannot be raised to a negative power")
    try:
        return math.pow(base, exponent)
    except OverflowError:
        raise NumericOverflowError(
            "Result of ^ is out of range",
            context={"operation": "^", "base": base, "exponent": exponent}
        ) from None
    except ValueError:
        raise DomainError(
            f"{base} cannot be raised to the fractional power {exponent}",
            function="^",
            argument=base
        ) from None


def apply_binary(op: str, left: float, right: float) -> float:
    """Apply a binary operator to two operands."""
    if op == "+":
        result = left + right
    elif op == "-":
        result = left - right
    elif op == "*":
        result = left * right
    elif op == "/":
        if right == 0:
            raise DivisionByZeroError(context={"dividend": left})
        result = left / right
    elif op == "^":
        result = _power(left, right)
    else:
        raise ValueError(f"Unknown binary operator {op!r}")
    return _checked(result, op)


def _children(node: Node) -> tuple:
    if isinstance(node, BinaryOp):
        return node.left, node.right
    if isinstance(node, (UnaryOp, Factorial)):
        return (node.operand,)
    if isinstance(node, Call):
        return (node.argument,)
    return ()


def evaluate_node(root: Node) -> float:
    """
    Evaluate an AST with an explicit stack.

    Children are evaluated before their parent; operands accumulate on a
    value stack, so tree depth never touches the interpreter's call stack.
    """
    values: list[float] = []
    pending: list[tuple[Node, bool]] = [(root, False)]

    while pending:
        node, expanded = pending.pop()

        if isinstance(node, Literal):
            values.append(node.value)
            continue

        if not expanded:
            pending.append((node, True))
            for child in reversed(_children(node)):
                pending.append((child, False))
            continue

        if isinstance(node, BinaryOp):
            right = values.pop()
            left = values.pop()
            values.append(apply_binary(node.op, left, right))
        elif isinstance(node, UnaryOp):
            values.append(-values.pop())
        elif isinstance(node, Call):
            values.append(_checked(FUNCTIONS[node.function](values.pop()), node.function))
        elif isinstance(node, Factorial):
            values.append(factorial(values.pop()))
        else:
            raise TypeError(f"Unknown AST node {node!r}")

    return values.pop()


def evaluate_expression(expr: str) -> float:
    """
    Evaluate an expression string.

    Raises:
        LexError, ParseError, DomainError, DivisionByZeroError, NumericOverflowError
    """
    return evaluate_node(parse(expr))


def evaluate(expr: str) -> EvaluationResult:
    """Evaluate an expression string, returning errors as a typed result."""
    try:
        value = evaluate_expression(expr)
    except ExpressionError as e:
        log_error_result(logger, "evaluate", e, context={"expression": expr})
        return EvaluationResult.failed(e)

    logger.debug("Evaluated expression", expression=expr, result=value)
    return EvaluationResult.ok(value)
