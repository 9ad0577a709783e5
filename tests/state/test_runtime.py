"""Tests for the calculator session runtime."""

from calc_app.config.defaults import PrecisionParams
from calc_app.errors import ErrorKind
from calc_app.state.machine import initial_state
from calc_app.state.models import Operator
from calc_app.state.runtime import CalculatorSession


class TestCalculatorSession:
    """Test session actions and display updates."""

    def test_initial_snapshot(self, session):
        update = session.snapshot()
        assert update.display == "0"
        assert update.preview_line == ""

    def test_chained_entry(self, session, type_operand):
        type_operand(session, "12")
        update = session.choose_operator(Operator.ADD)
        assert update.preview_line == "12 +"
        type_operand(session, "3")
        update = session.evaluate()
        assert update.display == "15"
        assert update.preview_line == ""
        assert update.error is None

    def test_choose_operator_by_name(self, session, type_operand):
        type_operand(session, "8")
        update = session.choose_operator("divide")
        assert update.preview_line == "8 ÷"

    def test_clear_is_idempotent(self, session, type_operand):
        type_operand(session, "42.5")
        session.choose_operator("multiply")
        assert session.clear().display == "0"
        assert session.clear().display == "0"
        assert session.state == initial_state()

    def test_backspace_and_decimal(self, session, type_operand):
        type_operand(session, "3")
        assert session.append_decimal_point().display == "3."
        assert session.backspace().display == "3"
        assert session.backspace().display == "0"

    def test_insert_constant(self, session):
        assert session.insert_constant("e").display.startswith("2.71828")

    def test_precision_override(self, type_operand):
        session = CalculatorSession(PrecisionParams(result_decimals=2))
        type_operand(session, "1")
        session.choose_operator("divide")
        type_operand(session, "3")
        assert session.evaluate().display == "0.33"


class TestErrorPolicy:
    """Test which errors reset the state and which leave it unchanged."""

    def test_chained_division_by_zero_resets(self, session, type_operand):
        type_operand(session, "5")
        session.choose_operator("divide")
        type_operand(session, "0")
        update = session.evaluate()
        assert update.error_kind == ErrorKind.DIVISION_BY_ZERO
        assert update.display == "0"
        assert update.preview_line == ""
        assert session.state == initial_state()

    def test_division_by_zero_while_chaining_operator_resets(self, session, type_operand):
        type_operand(session, "5")
        session.choose_operator("divide")
        type_operand(session, "0")
        update = session.choose_operator("add")
        assert update.error_kind == ErrorKind.DIVISION_BY_ZERO
        assert session.state == initial_state()

    def test_reciprocal_of_zero_keeps_state(self, session, type_operand):
        type_operand(session, "3")
        session.choose_operator("add")
        type_operand(session, "0")
        before = session.state
        update = session.reciprocal()
        assert update.error_kind == ErrorKind.DIVISION_BY_ZERO
        assert update.display == "0"
        assert update.preview_line == "3 +"
        assert session.state == before

    def test_expression_division_by_zero_keeps_state(self, session, type_operand):
        type_operand(session, "7")
        before = session.state
        update = session.submit_expression("1/0")
        assert update.error_kind == ErrorKind.DIVISION_BY_ZERO
        assert update.display == "7"
        assert session.state == before

    def test_blank_expression_follows_chained_policy(self, session, type_operand):
        type_operand(session, "8")
        session.choose_operator("divide")
        type_operand(session, "0")
        update = session.submit_expression("")
        assert update.error_kind == ErrorKind.DIVISION_BY_ZERO
        assert session.state == initial_state()

    def test_parse_error_keeps_state(self, session, type_operand):
        type_operand(session, "9")
        update = session.submit_expression("(2+3")
        assert update.error_kind == ErrorKind.PARSE_ERROR
        assert update.display == "9"

    def test_overflow_keeps_state(self, session):
        session.submit_expression("10^200")
        session.choose_operator("multiply")
        before = session.state
        update = session.evaluate()
        assert update.error_kind == ErrorKind.OVERFLOW_ERROR
        assert session.state == before
        assert update.preview_line.endswith("×")

    def test_out_of_range_literal_keeps_state(self, session, type_operand):
        type_operand(session, "7")
        update = session.submit_expression("cos(" + "9" * 400 + ")")
        assert update.error_kind == ErrorKind.OVERFLOW_ERROR
        assert update.display == "7"

    def test_successful_expression(self, session):
        update = session.submit_expression("sqrt(16)")
        assert update.display == "4"
        assert update.preview_line == "sqrt(16) ="
        assert update.error is None
