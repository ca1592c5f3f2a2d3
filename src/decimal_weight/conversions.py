"""Unit conversion table.

Each entry says how to turn a magnitude in the source unit into the destination
unit: multiply or divide by an exact factor. Direction is fixed per pair rather
than derived at runtime because ``x / 28.34952`` and ``x * (1 / 28.34952)`` are
not the same decimal. Larger units convert to smaller ones by multiplying; the
reverse divides by the same factor.
"""

from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple

from . import arithmetic
from .exceptions import NoConversionError
from .logging import WeightLogger
from .models.enums import Unit

logger = WeightLogger(__name__)


GRAMS_PER_OUNCE = Decimal("28.34952")
GRAMS_PER_POUND = Decimal("453.59237")
OUNCES_PER_POUND = Decimal("16")
MILLIGRAMS_PER_GRAM = Decimal("1000")
KILOGRAMS_PER_GRAM = Decimal("0.001")
IDENTITY = Decimal("1")

MILLIGRAMS_PER_OUNCE = arithmetic.multiply(GRAMS_PER_OUNCE, MILLIGRAMS_PER_GRAM)
KILOGRAMS_PER_OUNCE = arithmetic.multiply(GRAMS_PER_OUNCE, KILOGRAMS_PER_GRAM)
MILLIGRAMS_PER_POUND = arithmetic.multiply(GRAMS_PER_POUND, MILLIGRAMS_PER_GRAM)
KILOGRAMS_PER_POUND = arithmetic.multiply(GRAMS_PER_POUND, KILOGRAMS_PER_GRAM)
# Used as the mg <-> kg factor: 1 kg is 1000 * 1000 mg.
KILOGRAMS_PER_MILLIGRAM = arithmetic.multiply(MILLIGRAMS_PER_GRAM, MILLIGRAMS_PER_GRAM)


class Operator(Enum):
    """How a conversion factor is applied."""

    MULTIPLY = "multiply"
    DIVIDE = "divide"


class Conversion(NamedTuple):
    operator: Operator
    factor: Decimal

    def apply(self, value: Decimal) -> Decimal:
        """Convert ``value`` with this entry's operator and factor."""
        if self.operator is Operator.MULTIPLY:
            return arithmetic.multiply(value, self.factor)
        return arithmetic.divide(value, self.factor)


def _times(factor: Decimal) -> Conversion:
    return Conversion(Operator.MULTIPLY, factor)


def _div(factor: Decimal) -> Conversion:
    return Conversion(Operator.DIVIDE, factor)


_SAME = _times(IDENTITY)

# A bare count relabels as a count of any other unit and back.
CONVERSIONS: Mapping[Unit, Mapping[Unit, Conversion]] = MappingProxyType({
    Unit.UNIT: MappingProxyType({
        Unit.UNIT: _SAME,
        Unit.GRAM: _SAME,
        Unit.OUNCE: _SAME,
        Unit.POUND: _SAME,
        Unit.MILLIGRAM: _SAME,
        Unit.KILOGRAM: _SAME,
    }),
    Unit.GRAM: MappingProxyType({
        Unit.UNIT: _SAME,
        Unit.GRAM: _SAME,
        Unit.OUNCE: _div(GRAMS_PER_OUNCE),
        Unit.POUND: _div(GRAMS_PER_POUND),
        Unit.MILLIGRAM: _times(MILLIGRAMS_PER_GRAM),
        Unit.KILOGRAM: _times(KILOGRAMS_PER_GRAM),
    }),
    Unit.OUNCE: MappingProxyType({
        Unit.UNIT: _SAME,
        Unit.GRAM: _times(GRAMS_PER_OUNCE),
        Unit.OUNCE: _SAME,
        Unit.POUND: _div(OUNCES_PER_POUND),
        Unit.MILLIGRAM: _times(MILLIGRAMS_PER_OUNCE),
        Unit.KILOGRAM: _times(KILOGRAMS_PER_OUNCE),
    }),
    Unit.POUND: MappingProxyType({
        Unit.UNIT: _SAME,
        Unit.GRAM: _times(GRAMS_PER_POUND),
        Unit.OUNCE: _times(OUNCES_PER_POUND),
        Unit.POUND: _SAME,
        Unit.MILLIGRAM: _times(MILLIGRAMS_PER_POUND),
        Unit.KILOGRAM: _times(KILOGRAMS_PER_POUND),
    }),
    Unit.MILLIGRAM: MappingProxyType({
        Unit.UNIT: _SAME,
        Unit.GRAM: _div(MILLIGRAMS_PER_GRAM),
        Unit.OUNCE: _div(MILLIGRAMS_PER_OUNCE),
        Unit.POUND: _div(MILLIGRAMS_PER_POUND),
        Unit.MILLIGRAM: _SAME,
        Unit.KILOGRAM: _div(KILOGRAMS_PER_MILLIGRAM),
    }),
    Unit.KILOGRAM: MappingProxyType({
        Unit.UNIT: _SAME,
        Unit.GRAM: _div(KILOGRAMS_PER_GRAM),
        Unit.OUNCE: _div(KILOGRAMS_PER_OUNCE),
        Unit.POUND: _div(KILOGRAMS_PER_POUND),
        Unit.MILLIGRAM: _times(KILOGRAMS_PER_MILLIGRAM),
        Unit.KILOGRAM: _SAME,
    }),
})


def lookup(source: Unit, dest: Unit) -> Conversion:
    """Return the conversion from ``source`` to ``dest``.

    Raises:
        NoConversionError: If the table has no entry for the pair.
    """
    conversion = CONVERSIONS.get(source, {}).get(dest)
    if conversion is None:
        error = NoConversionError(source, dest)
        logger.conversion_missing(source=error.details["source"], dest=error.details["dest"])
        raise error
    return conversion


def has_conversion(source: Unit, dest: Unit) -> bool:
    return dest in CONVERSIONS.get(source, {})


def convertible_units(source: Unit) -> list[Unit]:
    """Units that ``source`` can be converted to, in table order."""
    return list(CONVERSIONS.get(source, {}))
