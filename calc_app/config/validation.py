"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from ..converter.tables import ConversionCategory, unit_ids

MAX_DECIMALS = 15
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_precision_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rounding precision parameters."""
        errors = []

        for name in ("result_decimals", "conversion_decimals"):
            if name in params:
                value = params[name]
                if (not isinstance(value, int) or isinstance(value, bool)
                        or value < 0 or value > MAX_DECIMALS):
                    errors.append(ValidationError(
                        field=name,
                        message=f"Must be an integer between 0 and {MAX_DECIMALS}",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_converter_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate converter panel parameters."""
        errors = []
        known = {c.value for c in ConversionCategory}

        if "default_category" in params:
            value = params["default_category"]
            if value not in known:
                errors.append(ValidationError(
                    field="default_category",
                    message=f"Must be one of {sorted(known)}",
                    value=value
                ))

        default_units = params.get("default_units", {})
        if not isinstance(default_units, dict):
            errors.append(ValidationError(
                field="default_units",
                message="Must be a mapping of category to [from_unit, to_unit]",
                value=default_units
            ))
            return errors

        for category, pair in default_units.items():
            field_name = f"default_units.{category}"
            if category not in known:
                errors.append(ValidationError(
                    field=field_name,
                    message="Unknown conversion category",
                    value=category
                ))
                continue

            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                errors.append(ValidationError(
                    field=field_name,
                    message="Must be a pair of unit identifiers",
                    value=pair
                ))
                continue

            units = unit_ids(ConversionCategory(category))
            for unit in pair:
                if unit not in units:
                    errors.append(ValidationError(
                        field=field_name,
                        message=f"Unknown unit for {category}",
                        value=unit
                    ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        if "include_caller" in params:
            value = params["include_caller"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="include_caller",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "precision" in config:
            errors.extend(ConfigValidator.validate_precision_params(config["precision"]))

        if "converter" in config:
            errors.extend(ConfigValidator.validate_converter_params(config["converter"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
