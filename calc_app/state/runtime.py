"""
Runtime session for the basic-mode calculator.

A CalculatorSession owns exactly one CalculatorState and serializes every
action on it. Actions never raise for user errors: they return a
DisplayUpdate carrying the classified error, and the state is left as it was
(except division by zero while resolving a chained computation, which resets
the calculator).
"""

from typing import Callable, Optional, Union

from ..config.defaults import PrecisionParams
from ..errors import CalculatorError, DivisionByZeroError
from ..logging.config import get_state_logger, log_error_result, log_state_transition
from . import machine
from .models import CalculatorState, DisplayUpdate, Operator

state_logger = get_state_logger(__name__)

Transition = Callable[[CalculatorState], CalculatorState]


class CalculatorSession:
    """Owns the calculator state of one UI session."""

    def __init__(self, precision: Optional[PrecisionParams] = None):
        self.logger = state_logger
        self.precision = precision or PrecisionParams()
        self.state = machine.initial_state()

    def snapshot(self) -> DisplayUpdate:
        """Current display without performing an action."""
        return DisplayUpdate.of(self.state)

    def _run(
        self,
        action: str,
        transition: Transition,
        reset_on_division_by_zero: bool = False
    ) -> DisplayUpdate:
        before = self.state

        try:
            after = transition(before)
        except DivisionByZeroError as e:
            if reset_on_division_by_zero:
                self.state = machine.initial_state()
                log_state_transition(
                    self.logger,
                    action=action,
                    from_display=before.display,
                    to_display=self.state.display,
                    context={"reset": True, "reason": e.kind.value}
                )
            log_error_result(self.logger, action, e, context={"display": before.display})
            return DisplayUpdate.of(self.state, e)
        except CalculatorError as e:
            log_error_result(self.logger, action, e, context={"display": before.display})
            return DisplayUpdate.of(self.state, e)

        self.state = after
        log_state_transition(
            self.logger,
            action=action,
            from_display=before.display,
            to_display=after.display,
            context={
                "pending_op": after.pending_op.value if after.pending_op else None,
                "previous": after.previous.text if after.previous else None,
            }
        )
        return DisplayUpdate.of(after)

    def append_digit(self, digit: str) -> DisplayUpdate:
        return self._run("append_digit", lambda s: machine.append_digit(s, digit))

    def append_decimal_point(self) -> DisplayUpdate:
        return self._run("append_decimal_point", machine.append_decimal_point)

    def choose_operator(self, op: Union[Operator, str]) -> DisplayUpdate:
        decimals = self.precision.result_decimals
        return self._run(
            "choose_operator",
            lambda s: machine.choose_operator(s, Operator(op), decimals),
            reset_on_division_by_zero=True
        )

    def evaluate(self) -> DisplayUpdate:
        decimals = self.precision.result_decimals
        return self._run(
            "evaluate",
            lambda s: machine.evaluate(s, decimals),
            reset_on_division_by_zero=True
        )

    def percent_immediate(self) -> DisplayUpdate:
        decimals = self.precision.result_decimals
        return self._run(
            "percent_immediate",
            lambda s: machine.percent_immediate(s, decimals),
            reset_on_division_by_zero=True
        )

    def reciprocal(self) -> DisplayUpdate:
        return self._run("reciprocal", machine.reciprocal)

    def clear(self) -> DisplayUpdate:
        return self._run("clear", machine.clear)

    def backspace(self) -> DisplayUpdate:
        return self._run("backspace", machine.backspace)

    def insert_constant(self, name: str) -> DisplayUpdate:
        return self._run("insert_constant", lambda s: machine.insert_constant(s, name))

    def submit_expression(self, expr: str) -> DisplayUpdate:
        """Evaluate a typed expression; a blank one acts like "="."""
        decimals = self.precision.result_decimals
        return self._run(
            "submit_expression",
            lambda s: machine.submit_expression(s, expr, decimals),
            reset_on_division_by_zero=not expr.strip()
        )
