"""Unit enumeration and the name/abbreviation lookup tables."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from ..normalizers import TextNormalizer


class Unit(Enum):
    """Units of mass understood by ``Weight``.

    ``UNIT`` is the dimensionless count ("3 apples").
    """

    UNIT = "unit"
    GRAM = "gram"
    OUNCE = "ounce"
    POUND = "pound"
    MILLIGRAM = "milligram"
    KILOGRAM = "kilogram"

    @classmethod
    def from_text(cls, text: str) -> "Unit | None":
        """Match a unit from an abbreviation or alias, ignoring case."""
        return abbreviation_to_unit(text)

    @property
    def display_name(self) -> str:
        return UNIT_NAMES[self]

    @property
    def abbreviation(self) -> str:
        return ABBREVIATIONS[self]


UNIT_NAMES: Mapping[Unit, str] = MappingProxyType({
    Unit.UNIT: "unit",
    Unit.GRAM: "gram",
    Unit.OUNCE: "ounce",
    Unit.POUND: "pound",
    Unit.MILLIGRAM: "milligram",
    Unit.KILOGRAM: "kilogram",
})

# Canonical abbreviation used when rendering; a count renders bare.
ABBREVIATIONS: Mapping[Unit, str] = MappingProxyType({
    Unit.UNIT: "",
    Unit.GRAM: "g",
    Unit.OUNCE: "oz",
    Unit.POUND: "lb",
    Unit.MILLIGRAM: "mg",
    Unit.KILOGRAM: "kg",
})

# Lowercase alias -> unit. Every canonical abbreviation must appear here.
ABBREVIATION_ALIASES: Mapping[str, Unit] = MappingProxyType({
    "unit": Unit.UNIT,
    "units": Unit.UNIT,
    "u": Unit.UNIT,
    "ea": Unit.UNIT,
    "each": Unit.UNIT,
    "ct": Unit.UNIT,
    "count": Unit.UNIT,
    "g": Unit.GRAM,
    "gram": Unit.GRAM,
    "grams": Unit.GRAM,
    "gramme": Unit.GRAM,
    "grammes": Unit.GRAM,
    "oz": Unit.OUNCE,
    "ozs": Unit.OUNCE,
    "ounce": Unit.OUNCE,
    "ounces": Unit.OUNCE,
    "lb": Unit.POUND,
    "lbs": Unit.POUND,
    "pound": Unit.POUND,
    "pounds": Unit.POUND,
    "#": Unit.POUND,
    "mg": Unit.MILLIGRAM,
    "milligram": Unit.MILLIGRAM,
    "milligrams": Unit.MILLIGRAM,
    "kg": Unit.KILOGRAM,
    "kgs": Unit.KILOGRAM,
    "kilo": Unit.KILOGRAM,
    "kilos": Unit.KILOGRAM,
    "kilogram": Unit.KILOGRAM,
    "kilograms": Unit.KILOGRAM,
})


def unit_to_abbreviation(unit: Unit) -> str:
    """Abbreviation shown after the magnitude (empty for a bare count)."""
    return ABBREVIATIONS[unit]


def unit_to_display_name(unit: Unit) -> str:
    """Human-readable unit name used in error messages.

    Falls back to the raw identifier for values outside the name table so that
    error reporting never fails on an unknown unit.
    """
    if unit in UNIT_NAMES:
        return UNIT_NAMES[unit]
    return str(getattr(unit, "value", unit))


def abbreviation_to_unit(text: str) -> Optional[Unit]:
    """Resolve an abbreviation or alias to a unit, or None if unknown."""
    return ABBREVIATION_ALIASES.get(TextNormalizer.normalize_abbreviation(text))
