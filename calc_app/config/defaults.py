"""Default configuration parameters for the calculator core."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PrecisionParams:
    """Rounding applied to displayed results."""
    result_decimals: int = 8                 # Chained state machine results
    conversion_decimals: int = 6             # Unit conversion output


def _default_units() -> dict[str, tuple[str, str]]:
    return {
        "length": ("meter", "foot"),
        "weight": ("kilogram", "pound"),
        "temperature": ("celsius", "fahrenheit"),
        "area": ("squareMeter", "squareFoot"),
        "volume": ("liter", "gallon"),
    }


@dataclass(frozen=True)
class ConverterParams:
    """Unit converter panel parameters."""
    default_category: str = "length"
    default_units: dict[str, tuple[str, str]] = field(default_factory=_default_units)


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_caller: bool = False             # Add filename and line number


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    precision: PrecisionParams
    converter: ConverterParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        precision=PrecisionParams(),
        converter=ConverterParams(),
        logging=LoggingParams(),
    )
