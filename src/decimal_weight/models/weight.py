"""Weight Value Object with exact cross-unit arithmetic."""

from decimal import Decimal
from typing import Any, Union, overload

from pydantic import BaseModel, field_serializer, field_validator

from .. import arithmetic
from ..conversions import lookup
from ..exceptions import InvalidArgumentError, InvalidWeightError
from ..logging import WeightLogger
from ..normalizers import NumberNormalizer, TextNormalizer
from .enums import Unit, abbreviation_to_unit, unit_to_abbreviation, unit_to_display_name

Scalar = Union[Decimal, int, float, str]

logger = WeightLogger(__name__)


def _resolve_unit(unit: Any) -> Any:
    """Map an identifier ('pound') or alias ('lb') to a Unit; pass anything else through."""
    if isinstance(unit, Unit) or not isinstance(unit, str):
        return unit
    try:
        return Unit(unit)
    except ValueError:
        return abbreviation_to_unit(unit) or unit


class Weight(BaseModel):
    """
    Immutable Value Object representing a weight measurement.

    A weight is an exact decimal magnitude tagged with a unit. Binary
    operations convert the right-hand operand into the left-hand operand's
    unit and tag the result with the left-hand unit:

        >>> Weight(5, Unit.POUND) + Weight(16, Unit.OUNCE)
        Weight(6 pound)

    All operations return new instances (immutable pattern). Equality crosses
    units, so weights are not hashable.
    """

    value: Decimal
    unit: Unit

    model_config = {"frozen": True}  # Make immutable

    def __init__(self, value: Scalar, unit: Union[Unit, str]):
        super().__init__(value=value, unit=unit)

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: Any) -> Decimal:
        """Build the exact Decimal magnitude; floats go through str()."""
        return arithmetic.to_decimal(v)

    @field_validator("unit", mode="before")
    @classmethod
    def coerce_unit(cls, v: Any) -> Any:
        """Accept unit identifiers and abbreviations as well as Unit members."""
        return _resolve_unit(v)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Weight":
        """
        Parse a weight from text such as '3.5 lb', '12' or '0 KG'.

        The text is trimmed and split on whitespace into a decimal literal and
        an optional unit abbreviation. Without an abbreviation the weight is a
        dimensionless count (``Unit.UNIT``).

        Raises:
            InvalidArgumentError: If ``text`` is not a string.
            InvalidWeightError: If the number is missing or malformed, the
                abbreviation is unknown, or extra tokens follow the unit.
        """
        if not isinstance(text, str):
            raise InvalidArgumentError(text, "string")

        tokens = TextNormalizer.tokenize(text)
        if not tokens:
            raise cls._invalid(text, "missing numeric value")
        if len(tokens) > 2:
            raise cls._invalid(text, "unexpected text after unit")

        magnitude = NumberNormalizer.parse_decimal(tokens[0])
        if magnitude is None:
            raise cls._invalid(text, f"'{tokens[0]}' is not a decimal number")

        if len(tokens) == 1:
            unit = Unit.UNIT
        else:
            unit = abbreviation_to_unit(tokens[1])
            if unit is None:
                raise cls._invalid(text, f"unknown unit '{tokens[1]}'")

        return cls(magnitude, unit)

    @staticmethod
    def _invalid(text: str, reason: str) -> InvalidWeightError:
        logger.parse_failed(text=text, reason=reason)
        return InvalidWeightError(text, reason)

    @classmethod
    def zero(cls, unit: Union[Unit, str] = Unit.UNIT) -> "Weight":
        """Create a zero weight."""
        return cls(Decimal("0"), unit)

    @classmethod
    def from_structured(cls, data: dict[str, Any]) -> "Weight":
        """Rebuild a weight from the output of ``to_structured``."""
        return cls.model_validate(data)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    @property
    def unit_abbreviation(self) -> str:
        return unit_to_abbreviation(self.unit)

    @property
    def unit_name(self) -> str:
        return unit_to_display_name(self.unit)

    def to(self, unit: Union[Unit, str]) -> "Weight":
        """
        Convert to another unit.

        Raises:
            NoConversionError: If the conversion table has no entry for the pair.
        """
        target = _resolve_unit(unit)
        if not isinstance(target, Unit):
            raise InvalidArgumentError(unit, "Unit")
        conversion = lookup(self.unit, target)
        return Weight(conversion.apply(self.value), target)

    convert = to

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    @staticmethod
    def _require_weight(other: Any) -> "Weight":
        if not isinstance(other, Weight):
            raise InvalidArgumentError(other, "Weight")
        return other

    @staticmethod
    def _scalar(other: Any) -> Decimal:
        try:
            return arithmetic.to_decimal(other)
        except ValueError as e:
            raise InvalidArgumentError(other, "decimal scalar or Weight") from e

    def plus(self, other: "Weight") -> "Weight":
        converted = self._require_weight(other).to(self.unit)
        return Weight(arithmetic.add(self.value, converted.value), self.unit)

    def minus(self, other: "Weight") -> "Weight":
        converted = self._require_weight(other).to(self.unit)
        return Weight(arithmetic.subtract(self.value, converted.value), self.unit)

    def times(self, other: Union["Weight", Scalar]) -> "Weight":
        """
        Multiply by a scalar or another weight.

        A dimensionless weight contributes its bare magnitude. Any other weight
        is converted into this weight's unit first and its magnitude is used,
        so ``2 lb * 16 oz`` is ``2 lb`` (the product is not squared-unit aware).
        """
        if isinstance(other, Weight):
            if other.unit is Unit.UNIT:
                factor = other.value
            else:
                factor = other.to(self.unit).value
        else:
            factor = self._scalar(other)
        return Weight(arithmetic.multiply(self.value, factor), self.unit)

    @overload
    def div(self, other: Scalar) -> "Weight": ...

    @overload
    def div(self, other: "Weight") -> Union["Weight", Decimal]: ...

    def div(self, other):
        """
        Divide by a scalar or another weight.

        Returns a Weight in this unit when dividing by a scalar, or by a
        dimensionless weight while this weight is not itself dimensionless.
        Otherwise both sides are weights of the same kind and the result is
        the bare Decimal ratio: ``10 g / 2 g`` is ``Decimal('5')``.

        Raises:
            WeightDivisionByZeroError: If the divisor is zero.
        """
        if not isinstance(other, Weight):
            return Weight(arithmetic.divide(self.value, self._scalar(other)), self.unit)
        if other.unit is Unit.UNIT and other.unit is not self.unit:
            return Weight(arithmetic.divide(self.value, other.value), self.unit)
        converted = other.to(self.unit)
        return arithmetic.divide(self.value, converted.value)

    def round(self, precision: int = 0) -> "Weight":
        """Round to ``precision`` decimal places (configured mode, half-up by default)."""
        return Weight(arithmetic.round_to(self.value, precision), self.unit)

    def __round__(self, ndigits: int = None) -> "Weight":
        return self.round(ndigits or 0)

    def __add__(self, other: "Weight") -> "Weight":
        if not isinstance(other, Weight):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: "Weight") -> "Weight":
        if not isinstance(other, Weight):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: Union["Weight", Decimal, int, float]) -> "Weight":
        if isinstance(other, bool) or not isinstance(other, (Weight, Decimal, int, float)):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, other: Union[Decimal, int, float]) -> "Weight":
        if isinstance(other, bool) or not isinstance(other, (Decimal, int, float)):
            return NotImplemented
        return self.times(other)

    def __truediv__(self, other: Union["Weight", Decimal, int, float]) -> Union["Weight", Decimal]:
        if isinstance(other, bool) or not isinstance(other, (Weight, Decimal, int, float)):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> "Weight":
        """Negate weight."""
        return Weight(-self.value, self.unit)

    def __abs__(self) -> "Weight":
        """Absolute value of weight."""
        return Weight(abs(self.value), self.unit)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def cmp(self, other: "Weight") -> int:
        """Three-way comparison after converting ``other``: -1, 0 or 1."""
        converted = self._require_weight(other).to(self.unit)
        return arithmetic.compare(self.value, converted.value)

    def lt(self, other: "Weight") -> bool:
        return self.cmp(other) < 0

    def lte(self, other: "Weight") -> bool:
        return self.cmp(other) <= 0

    def gt(self, other: "Weight") -> bool:
        return self.cmp(other) > 0

    def gte(self, other: "Weight") -> bool:
        return self.cmp(other) >= 0

    def eq(self, other: "Weight") -> bool:
        return self.cmp(other) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Weight):
            return NotImplemented
        return self.eq(other)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: "Weight") -> bool:
        if not isinstance(other, Weight):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: "Weight") -> bool:
        if not isinstance(other, Weight):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: "Weight") -> bool:
        if not isinstance(other, Weight):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: "Weight") -> bool:
        if not isinstance(other, Weight):
            return NotImplemented
        return self.gte(other)

    def is_zero(self) -> bool:
        """Check if weight is zero."""
        return self.value == arithmetic.ZERO

    def is_positive(self) -> bool:
        return self.value > arithmetic.ZERO

    def is_negative(self) -> bool:
        return self.value < arithmetic.ZERO

    def approximately_equals(
        self, other: "Weight", tolerance: Union["Weight", Scalar] = Decimal("0")
    ) -> bool:
        """
        Check if weights are equal within a tolerance.

        Args:
            other: Weight to compare with.
            tolerance: Maximum allowed difference, either a Weight or a scalar
                in this weight's unit.

        Returns:
            True if the weights differ by no more than ``tolerance``.
        """
        if not isinstance(other, Weight):
            return False
        if isinstance(tolerance, Weight):
            limit = tolerance.to(self.unit).value
        else:
            limit = self._scalar(tolerance)
        return abs(self.minus(other).value) <= limit

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    @field_serializer("value")
    def serialize_decimal(self, value: Decimal) -> str:
        """Serialize Decimal to canonical text to preserve precision."""
        return NumberNormalizer.format_decimal(value)

    def to_structured(self) -> dict[str, str]:
        """Return ``{'value': '<decimal text>', 'unit': '<unit identifier>'}``."""
        return self.model_dump(mode="json")

    def to_string(self) -> str:
        return f"{NumberNormalizer.format_decimal(self.value)} {self.unit_abbreviation}".strip()

    def __repr__(self) -> str:
        return f"Weight({NumberNormalizer.format_decimal(self.value)} {self.unit.value})"

    def __str__(self) -> str:
        return self.to_string()
