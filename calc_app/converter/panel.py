"""
Converter panel selection state.

A ConverterSelection records what the converter view currently shows. All
operations return a new selection; swapping units is a pure relabel and the
result is always recomputed through ``convert``.
"""

from dataclasses import dataclass, replace
from typing import Optional

from ..config.defaults import ConverterParams
from ..utils.numbers import CONVERSION_DECIMALS
from .engine import CategoryLike, ConversionResult, convert, default_units
from .tables import ConversionCategory, coerce_category, get_unit


@dataclass(frozen=True)
class ConverterSelection:
    """Category, unit pair and input value of the converter view."""
    category: ConversionCategory
    from_unit: str
    to_unit: str
    value: float = 0.0

    def result(self, decimals: int = CONVERSION_DECIMALS) -> ConversionResult:
        """Convert the current value with the selected units."""
        return convert(self.category, self.value, self.from_unit, self.to_unit, decimals)


def initial_selection(params: Optional[ConverterParams] = None) -> ConverterSelection:
    """Selection shown when the converter is first opened."""
    params = params or ConverterParams()
    category = coerce_category(params.default_category)
    from_unit, to_unit = default_units(category, params)
    return ConverterSelection(category=category, from_unit=from_unit, to_unit=to_unit)


def select_category(
    selection: ConverterSelection,
    category: CategoryLike,
    params: Optional[ConverterParams] = None
) -> ConverterSelection:
    """Switch category, resetting units to that category's defaults."""
    category = coerce_category(category)
    from_unit, to_unit = default_units(category, params)
    return replace(selection, category=category, from_unit=from_unit, to_unit=to_unit)


def select_units(
    selection: ConverterSelection,
    from_unit: Optional[str] = None,
    to_unit: Optional[str] = None
) -> ConverterSelection:
    """
    Change one or both units.

    Raises:
        UnknownUnitError: If a unit is not part of the selected category
    """
    from_unit = from_unit if from_unit is not None else selection.from_unit
    to_unit = to_unit if to_unit is not None else selection.to_unit
    get_unit(selection.category, from_unit)
    get_unit(selection.category, to_unit)
    return replace(selection, from_unit=from_unit, to_unit=to_unit)


def swap_units(selection: ConverterSelection) -> ConverterSelection:
    """Exchange the from and to units."""
    return replace(selection, from_unit=selection.to_unit, to_unit=selection.from_unit)


def set_value(selection: ConverterSelection, value: float) -> ConverterSelection:
    """Replace the input value."""
    return replace(selection, value=float(value))
