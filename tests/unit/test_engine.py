"""Unit tests for the calculator engine coordinator."""

import pytest

from calc_app.engine import CalculatorEngine
from calc_app.errors import (
    DivisionByZeroError,
    ErrorKind,
    UnknownCategoryError,
    UnknownUnitError,
)
from calc_app.logging.config import get_logger


def _press_all(engine: CalculatorEngine, *actions: str):
    update = None
    for action in actions:
        update = engine.press(action)
    return update


class TestCalculatorButtons:
    """Test button routing."""

    def test_engine_creation(self, engine) -> None:
        """Test that the engine starts from a zero display."""
        assert engine.display.display == "0"
        assert engine.display.preview_line == ""

    def test_chained_sequence(self, engine) -> None:
        """Test a simple chained computation."""
        update = _press_all(engine, "1", "2", "add", "3", "equals")

        assert update.display == "15"
        assert update.error is None

    def test_division_by_zero_resets(self, engine) -> None:
        """Test that dividing by zero reports and resets."""
        update = _press_all(engine, "5", "divide", "0", "equals")

        assert isinstance(update.error, DivisionByZeroError)
        assert update.error_kind == ErrorKind.DIVISION_BY_ZERO
        assert update.display == "0"
        assert engine.session.state.pending_op is None

    def test_decimal_and_backspace(self, engine) -> None:
        """Test decimal point entry and deletion."""
        assert _press_all(engine, "1", "decimal", "5").display == "1.5"
        assert engine.press("backspace").display == "1."

    def test_percent(self, engine) -> None:
        """Test immediate percent."""
        assert _press_all(engine, "5", "0", "percent").display == "0.5"

    def test_inverse(self, engine) -> None:
        """Test reciprocal of the current operand."""
        assert _press_all(engine, "8", "inverse").display == "0.125"

    def test_inverse_of_zero_keeps_state(self, engine) -> None:
        """Test that a failed reciprocal leaves the display."""
        update = engine.press("inverse")

        assert update.error_kind == ErrorKind.DIVISION_BY_ZERO
        assert update.display == "0"

    def test_pi(self, engine) -> None:
        """Test constant insertion."""
        assert engine.press("pi").display.startswith("3.14159265")

    def test_clear(self, engine) -> None:
        """Test that clear restores the initial display."""
        _press_all(engine, "9", "multiply", "9")
        update = engine.press("clear")

        assert update.display == "0"
        assert update.preview_line == ""

    def test_unknown_action(self, engine) -> None:
        """Test rejection of an unknown button."""
        with pytest.raises(ValueError):
            engine.press("sqrt")


class TestExpressions:
    """Test expression submission."""

    def test_submit_expression(self, engine) -> None:
        """Test that an expression result becomes the operand."""
        update = engine.submit_expression("sin(30)+2^3!")

        assert update.display == "64.5"
        assert update.preview_line == "sin(30)+2^3! ="

    def test_submit_invalid_expression(self, engine) -> None:
        """Test that a parse failure keeps the display."""
        engine.press("7")
        update = engine.submit_expression("2+*3")

        assert update.error_kind == ErrorKind.PARSE_ERROR
        assert update.display == "7"

    def test_evaluate_expression_leaves_state(self, engine) -> None:
        """Test standalone evaluation."""
        engine.press("4")
        result = engine.evaluate_expression("sqrt(16)*2")

        assert result.success
        assert result.value == 8
        assert engine.display.display == "4"

    def test_evaluate_expression_error(self, engine) -> None:
        """Test standalone evaluation failure."""
        result = engine.evaluate_expression("1/0")

        assert not result.success
        assert isinstance(result.error, DivisionByZeroError)


class TestConverter:
    """Test converter routing."""

    def test_default_selection(self, engine) -> None:
        """Test the configured default category and units."""
        assert engine.converter.from_unit == "meter"
        assert engine.converter.to_unit == "foot"
        assert engine.converter_result().value == 0

    def test_set_value_and_swap(self, engine) -> None:
        """Test conversion output after value changes and swaps."""
        assert engine.set_converter_value(100).value == 328.08399
        assert engine.swap_units().value == 30.48

    def test_select_category(self, engine) -> None:
        """Test that a category change applies its default units."""
        engine.set_converter_value(100)
        result = engine.select_category("temperature")

        assert result.value == 212
        assert engine.list_units()[0] == ("celsius", "Celsius")

    def test_unknown_unit_keeps_selection(self, engine) -> None:
        """Test that an unknown unit is reported without changing the panel."""
        result = engine.select_units(from_unit="parsec")

        assert isinstance(result.error, UnknownUnitError)
        assert engine.converter.from_unit == "meter"

    def test_unknown_category(self, engine) -> None:
        """Test that an unknown category is reported."""
        result = engine.select_category("time")

        assert isinstance(result.error, UnknownCategoryError)
        assert result.error.kind == ErrorKind.UNKNOWN_CATEGORY

    def test_list_units(self, engine) -> None:
        """Test listing units of another category."""
        assert len(engine.list_units("weight")) == 6


class TestEngineConfiguration:
    """Test configuration handling."""

    def test_invalid_overrides(self, tmp_path) -> None:
        """Test that invalid configuration is rejected."""
        with pytest.raises(ValueError, match="result_decimals"):
            CalculatorEngine(config_dir=tmp_path, overrides={"precision": {"result_decimals": 99}})

    def test_precision_overrides(self, tmp_path) -> None:
        """Test that precision overrides reach both panels."""
        engine = CalculatorEngine(
            config_dir=tmp_path,
            overrides={"precision": {"result_decimals": 2, "conversion_decimals": 2}},
        )

        assert _press_all(engine, "1", "divide", "3", "equals").display == "0.33"
        assert engine.set_converter_value(100).value == 328.08

    def test_default_category_override(self, tmp_path) -> None:
        """Test a configured starting category."""
        engine = CalculatorEngine(
            config_dir=tmp_path,
            overrides={"converter": {"default_category": "weight"}},
        )

        assert engine.converter.from_unit == "kilogram"
        assert engine.converter.to_unit == "pound"

    def test_configure_logging(self, tmp_path) -> None:
        """Test that configured caller info and extra processors reach events."""
        captured = []

        def capture(logger, method_name, event_dict):
            captured.append(dict(event_dict))
            return event_dict

        engine = CalculatorEngine(
            config_dir=tmp_path,
            overrides={"logging": {"level": "DEBUG", "include_caller": True}},
        )
        engine.configure_logging(extra_processors=[capture])
        get_logger("calc_app.engine_test").warning("configured", source="test")

        assert captured[-1]["event"] == "configured"
        assert captured[-1]["source"] == "test"
        assert "filename" in captured[-1]
        assert "lineno" in captured[-1]
