"""Unit conversion engine: category tables, conversion and panel selection."""

from .engine import ConversionResult, convert, convert_value, default_units, list_units
from .panel import (
    ConverterSelection,
    initial_selection,
    select_category,
    select_units,
    set_value,
    swap_units,
)
from .tables import UNIT_TABLES, ConversionCategory, UnitDefinition

__all__ = [
    "ConversionCategory",
    "ConversionResult",
    "ConverterSelection",
    "UNIT_TABLES",
    "UnitDefinition",
    "convert",
    "convert_value",
    "default_units",
    "initial_selection",
    "list_units",
    "select_category",
    "select_units",
    "set_value",
    "swap_units",
]
