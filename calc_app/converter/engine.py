"""
Unit conversion engine.

Stateless conversion over the static tables in ``tables``. Scalar categories
convert through their base unit; temperature converts through Celsius.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..config.defaults import ConverterParams
from ..errors import ConversionError
from ..logging.config import get_evaluator_logger, log_error_result
from ..utils.numbers import CONVERSION_DECIMALS, round_half_up
from .tables import UNIT_TABLES, ConversionCategory, coerce_category, get_unit

logger = get_evaluator_logger(__name__)

CategoryLike = Union[ConversionCategory, str]


@dataclass(frozen=True)
class ConversionResult:
    """Result of a unit conversion."""
    value: Optional[float] = None
    error: Optional[ConversionError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: float) -> "ConversionResult":
        """Create successful result."""
        return cls(value=value)

    @classmethod
    def failed(cls, error: ConversionError) -> "ConversionResult":
        """Create error result."""
        return cls(error=error)


def _to_celsius(value: float, unit_id: str) -> float:
    if unit_id == "fahrenheit":
        return (value - 32) * 5 / 9
    if unit_id == "kelvin":
        return value - 273.15
    return value


def _from_celsius(celsius: float, unit_id: str) -> float:
    if unit_id == "fahrenheit":
        return celsius * 9 / 5 + 32
    if unit_id == "kelvin":
        return celsius + 273.15
    return celsius


def convert_value(
    category: CategoryLike,
    value: float,
    from_unit: str,
    to_unit: str,
    decimals: int = CONVERSION_DECIMALS
) -> float:
    """
    Convert a value between two units of the same category.

    Args:
        category: Conversion category (enum or its string value)
        value: Value expressed in from_unit
        from_unit: Source unit identifier
        to_unit: Target unit identifier
        decimals: Decimal digits kept in the result

    Returns:
        Converted value rounded half-up to ``decimals`` digits

    Raises:
        UnknownCategoryError: If the category is not recognized
        UnknownUnitError: If either unit is not part of the category
    """
    category = coerce_category(category)
    source = get_unit(category, from_unit)
    target = get_unit(category, to_unit)

    if source.unit_id == target.unit_id:
        result = value
    elif category == ConversionCategory.TEMPERATURE:
        result = _from_celsius(_to_celsius(value, source.unit_id), target.unit_id)
    else:
        result = value * source.factor / target.factor

    return round_half_up(result, decimals)


def convert(
    category: CategoryLike,
    value: float,
    from_unit: str,
    to_unit: str,
    decimals: int = CONVERSION_DECIMALS
) -> ConversionResult:
    """Convert a value, returning errors as a typed result instead of raising."""
    try:
        result = convert_value(category, value, from_unit, to_unit, decimals)
    except ConversionError as e:
        log_error_result(logger, "convert", e, context={
            "category": str(getattr(category, "value", category)),
            "from_unit": from_unit,
            "to_unit": to_unit,
        })
        return ConversionResult.failed(e)

    logger.debug(
        "Converted value",
        category=coerce_category(category).value,
        value=value,
        from_unit=from_unit,
        to_unit=to_unit,
        result=result
    )
    return ConversionResult.ok(result)


def list_units(category: CategoryLike) -> list[tuple[str, str]]:
    """List (unit_id, display_name) pairs of a category in display order."""
    category = coerce_category(category)
    return [(u.unit_id, u.display_name) for u in UNIT_TABLES[category].values()]


def default_units(
    category: CategoryLike,
    params: Optional[ConverterParams] = None
) -> tuple[str, str]:
    """
    Default (from_unit, to_unit) pair shown when a category is selected.

    Falls back to the first unit of the category for both sides when no
    default is configured.
    """
    category = coerce_category(category)
    params = params or ConverterParams()
    pair = params.default_units.get(category.value)
    if pair:
        return pair[0], pair[1]
    first = next(iter(UNIT_TABLES[category]))
    return first, first
