"""
Main calculator engine coordinator.

The single entry point the UI collaborator drives. Routes button actions to
the arithmetic session, expression submissions to the evaluator, and
converter changes to the conversion engine. Holds no arithmetic of its own.
"""

from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.defaults import ConverterParams, LoggingParams, PrecisionParams
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .converter import panel
from .converter.engine import CategoryLike, ConversionResult, list_units
from .errors import ConversionError
from .expression.evaluator import EvaluationResult, evaluate
from .logging.config import configure_logging, log_error_result
from .state.machine import DIGITS
from .state.models import DisplayUpdate, Operator
from .state.runtime import CalculatorSession

logger = structlog.get_logger(__name__)

OPERATOR_ACTIONS = {op.value for op in Operator if op != Operator.PERCENT}
CONSTANT_ACTIONS = {"pi", "π", "e"}


class CalculatorEngine:
    """
    Coordinator for one calculator UI session.

    Flow:
    Button / expression → CalculatorSession → DisplayUpdate
    Converter inputs → ConverterSelection → ConversionResult
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> None:
        """
        Initialize the engine.

        Args:
            config_dir: Directory holding an optional calculator.yaml
            overrides: Session-level overrides merged over file and defaults

        Raises:
            ValueError: If the merged configuration is invalid
        """
        self.logger = logger
        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        config = self.config_loader.merge_config(overrides)

        validation_errors = ConfigValidator.validate_config(config)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error("Configuration validation failed", errors=error_msgs)
            raise ValueError("Invalid configuration: " + "; ".join(error_msgs))

        precision = config["precision"]
        self.precision = PrecisionParams(
            result_decimals=precision["result_decimals"],
            conversion_decimals=precision["conversion_decimals"],
        )
        converter = config["converter"]
        self.converter_params = ConverterParams(
            default_category=converter["default_category"],
            default_units={k: (v[0], v[1]) for k, v in converter["default_units"].items()},
        )
        self.logging_params = LoggingParams(
            level=config["logging"]["level"],
            format_json=config["logging"]["format_json"],
            include_caller=config["logging"]["include_caller"],
        )

        self.session = CalculatorSession(self.precision)
        self.converter = panel.initial_selection(self.converter_params)

        self.logger.info(
            "Calculator engine initialized",
            result_decimals=self.precision.result_decimals,
            conversion_decimals=self.precision.conversion_decimals,
            converter_category=self.converter.category.value
        )

    def configure_logging(self, extra_processors: Optional[list] = None) -> None:
        """
        Apply the configured logging level and format.

        Args:
            extra_processors: structlog processors run before the renderer
        """
        configure_logging(
            level=self.logging_params.level,
            format_json=self.logging_params.format_json,
            include_caller=self.logging_params.include_caller,
            extra_processors=extra_processors,
        )

    # Basic / scientific calculator

    @property
    def display(self) -> DisplayUpdate:
        return self.session.snapshot()

    def press(self, action: str) -> DisplayUpdate:
        """
        Route a calculator button.

        Args:
            action: A digit, an operator name (add, subtract, multiply, divide),
                or one of clear, backspace, equals, decimal, percent, inverse, pi, e

        Raises:
            ValueError: If the action is not a known button
        """
        if action in DIGITS:
            return self.session.append_digit(action)
        if action in OPERATOR_ACTIONS:
            return self.session.choose_operator(action)
        if action in CONSTANT_ACTIONS:
            return self.session.insert_constant(action)

        if action == "clear":
            return self.session.clear()
        if action == "backspace":
            return self.session.backspace()
        if action == "equals":
            return self.session.evaluate()
        if action == "decimal":
            return self.session.append_decimal_point()
        if action == "percent":
            return self.session.percent_immediate()
        if action == "inverse":
            return self.session.reciprocal()

        raise ValueError(f"Unknown calculator action: {action!r}")

    def submit_expression(self, expr: str) -> DisplayUpdate:
        """Evaluate a typed expression into the calculator display."""
        return self.session.submit_expression(expr)

    def evaluate_expression(self, expr: str) -> EvaluationResult:
        """Evaluate an expression without touching the calculator state."""
        return evaluate(expr)

    # Unit converter

    def converter_result(self) -> ConversionResult:
        return self.converter.result(self.precision.conversion_decimals)

    def list_units(self, category: Optional[CategoryLike] = None) -> list[tuple[str, str]]:
        """Units of a category (default: the selected one) as (unit_id, display_name)."""
        return list_units(category if category is not None else self.converter.category)

    def select_category(self, category: CategoryLike) -> ConversionResult:
        return self._update_converter(
            "select_category",
            lambda s: panel.select_category(s, category, self.converter_params)
        )

    def select_units(
        self,
        from_unit: Optional[str] = None,
        to_unit: Optional[str] = None
    ) -> ConversionResult:
        return self._update_converter(
            "select_units",
            lambda s: panel.select_units(s, from_unit, to_unit)
        )

    def swap_units(self) -> ConversionResult:
        return self._update_converter("swap_units", panel.swap_units)

    def set_converter_value(self, value: float) -> ConversionResult:
        return self._update_converter("set_converter_value", lambda s: panel.set_value(s, value))

    def _update_converter(self, operation: str, change) -> ConversionResult:
        try:
            self.converter = change(self.converter)
        except ConversionError as e:
            log_error_result(self.logger, operation, e)
            return ConversionResult.failed(e)
        return self.converter_result()
