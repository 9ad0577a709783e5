"""
Unit conversion error classifications.
"""

from typing import Optional

from .base import CalculatorError, ErrorKind


class ConversionError(CalculatorError):
    """Base class for unit conversion failures."""


class UnknownUnitError(ConversionError):
    """Unit identifier is not part of the requested category."""

    kind = ErrorKind.UNKNOWN_UNIT

    def __init__(self, category: str, unit: Optional[str], **kwargs):
        super().__init__(f"Unknown unit {unit!r} for category {category!r}", **kwargs)
        self.category = category
        self.unit = unit


class UnknownCategoryError(ConversionError):
    """Conversion category is not recognized."""

    kind = ErrorKind.UNKNOWN_CATEGORY

    def __init__(self, category: object, **kwargs):
        super().__init__(f"Unknown conversion category {category!r}", **kwargs)
        self.category = category
