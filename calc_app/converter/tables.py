"""
Static unit conversion tables.

Each scalar category lists its units in display order with a factor relative
to the category's base unit (factor 1). Temperature has no factors; it is
converted with affine formulas pivoting on Celsius.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from ..errors import UnknownCategoryError, UnknownUnitError


class ConversionCategory(str, Enum):
    """Measurement categories supported by the converter."""
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    AREA = "area"
    VOLUME = "volume"


@dataclass(frozen=True)
class UnitDefinition:
    """A unit within a conversion category."""
    unit_id: str
    display_name: str
    factor: Optional[float] = None           # None for affine (temperature) units


def _table(*units: UnitDefinition) -> Mapping[str, UnitDefinition]:
    return MappingProxyType({u.unit_id: u for u in units})


UNIT_TABLES: Mapping[ConversionCategory, Mapping[str, UnitDefinition]] = MappingProxyType({
    ConversionCategory.LENGTH: _table(
        UnitDefinition("meter", "Meters", 1.0),
        UnitDefinition("kilometer", "Kilometers", 1000.0),
        UnitDefinition("centimeter", "Centimeters", 0.01),
        UnitDefinition("millimeter", "Millimeters", 0.001),
        UnitDefinition("mile", "Miles", 1609.34),
        UnitDefinition("yard", "Yards", 0.9144),
        UnitDefinition("foot", "Feet", 0.3048),
        UnitDefinition("inch", "Inches", 0.0254),
    ),
    ConversionCategory.WEIGHT: _table(
        UnitDefinition("kilogram", "Kilograms", 1.0),
        UnitDefinition("gram", "Grams", 0.001),
        UnitDefinition("milligram", "Milligrams", 1e-6),
        UnitDefinition("pound", "Pounds", 0.453592),
        UnitDefinition("ounce", "Ounces", 0.0283495),
        UnitDefinition("ton", "Tons", 1000.0),
    ),
    ConversionCategory.TEMPERATURE: _table(
        UnitDefinition("celsius", "Celsius"),
        UnitDefinition("fahrenheit", "Fahrenheit"),
        UnitDefinition("kelvin", "Kelvin"),
    ),
    ConversionCategory.AREA: _table(
        UnitDefinition("squareMeter", "Square Meters", 1.0),
        UnitDefinition("squareKilometer", "Square Kilometers", 1e6),
        UnitDefinition("squareMile", "Square Miles", 2589988.11),
        UnitDefinition("squareYard", "Square Yards", 0.836127),
        UnitDefinition("squareFoot", "Square Feet", 0.092903),
        UnitDefinition("acre", "Acres", 4046.86),
        UnitDefinition("hectare", "Hectares", 10000.0),
    ),
    ConversionCategory.VOLUME: _table(
        UnitDefinition("liter", "Liters", 1.0),
        UnitDefinition("milliliter", "Milliliters", 0.001),
        UnitDefinition("gallon", "Gallons", 3.78541),
        UnitDefinition("quart", "Quarts", 0.946353),
        UnitDefinition("pint", "Pints", 0.473176),
        UnitDefinition("cup", "Cups", 0.24),
        UnitDefinition("cubicMeter", "Cubic Meters", 1000.0),
    ),
})


def coerce_category(category: Union[ConversionCategory, str]) -> ConversionCategory:
    """Accept a category enum or its string value."""
    if isinstance(category, ConversionCategory):
        return category
    try:
        return ConversionCategory(category)
    except ValueError:
        raise UnknownCategoryError(category) from None


def unit_ids(category: ConversionCategory) -> tuple[str, ...]:
    """Unit identifiers of a category, in display order."""
    return tuple(UNIT_TABLES[category])


def get_unit(category: ConversionCategory, unit_id: str) -> UnitDefinition:
    """Look up a unit definition, failing with UnknownUnitError."""
    unit = UNIT_TABLES[category].get(unit_id)
    if unit is None:
        raise UnknownUnitError(category.value, unit_id)
    return unit
