"""Unit enumeration and the Weight value object."""

from .enums import (
    Unit,
    UNIT_NAMES,
    ABBREVIATIONS,
    ABBREVIATION_ALIASES,
    unit_to_abbreviation,
    unit_to_display_name,
    abbreviation_to_unit,
)
from .weight import Weight

__all__ = [
    "Unit",
    "UNIT_NAMES",
    "ABBREVIATIONS",
    "ABBREVIATION_ALIASES",
    "unit_to_abbreviation",
    "unit_to_display_name",
    "abbreviation_to_unit",
    "Weight",
]
