"""Unit tests for Weight Value Object."""

import pytest
from decimal import Decimal, ROUND_HALF_UP, localcontext
from pydantic import ValidationError

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from decimal_weight.config import WeightSettings, configure
from decimal_weight.exceptions import (
    InvalidArgumentError,
    WeightDivisionByZeroError,
    WeightException,
)
from decimal_weight.models.enums import Unit
from decimal_weight.models.weight import Weight


class TestConstruction:
    """Tests for building weights."""

    def test_from_string(self):
        w = Weight("3.5", Unit.POUND)
        assert w.value == Decimal("3.5")
        assert w.unit is Unit.POUND

    def test_from_int(self):
        assert Weight(12, Unit.GRAM).value == Decimal("12")

    def test_from_decimal(self):
        assert Weight(Decimal("0.001"), Unit.KILOGRAM).value == Decimal("0.001")

    def test_from_float_uses_shortest_repr(self):
        """0.1 must not become its binary expansion."""
        assert Weight(0.1, Unit.GRAM).value == Decimal("0.1")

    def test_keyword_arguments(self):
        w = Weight(value="2", unit=Unit.OUNCE)
        assert w.value == Decimal("2")
        assert w.unit is Unit.OUNCE

    def test_unit_identifier_string(self):
        assert Weight(3, "gram").unit is Unit.GRAM

    def test_unit_abbreviation_string(self):
        assert Weight(3, "lb").unit is Unit.POUND

    def test_invalid_magnitude(self):
        with pytest.raises(ValidationError):
            Weight("abc", Unit.GRAM)

    @pytest.mark.parametrize("value", ["NaN", "Infinity", float("inf"), True, None])
    def test_non_finite_or_non_numeric_magnitude(self, value):
        with pytest.raises(ValidationError):
            Weight(value, Unit.GRAM)

    def test_unknown_unit(self):
        with pytest.raises(ValidationError):
            Weight(1, "furlong")

    def test_zero(self):
        w = Weight.zero(Unit.KILOGRAM)
        assert w.is_zero()
        assert w.unit is Unit.KILOGRAM

    def test_zero_default_unit(self):
        assert Weight.zero().unit is Unit.UNIT

    def test_immutability(self):
        """Test that Weight is immutable."""
        w = Weight(1000, Unit.GRAM)
        with pytest.raises(ValidationError):
            w.value = Decimal("2000")

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Weight(1, Unit.GRAM))


class TestConversion:
    """Tests for Weight.to."""

    @pytest.mark.parametrize("unit", list(Unit))
    def test_same_unit_round_trip(self, unit):
        w = Weight("123.456", unit)
        converted = w.to(unit)
        assert converted.value == w.value
        assert converted.unit is unit

    def test_gram_to_ounce_is_exact_ratio(self):
        with localcontext() as ctx:
            ctx.prec = 28
            ctx.rounding = ROUND_HALF_UP
            expected = Decimal(1) / Decimal("28.34952")
        assert Weight(1, Unit.GRAM).to(Unit.OUNCE).value == expected

    def test_ounce_to_gram(self):
        assert Weight(1, Unit.OUNCE).to(Unit.GRAM).value == Decimal("28.34952")

    def test_pound_to_ounce(self):
        assert Weight(1, Unit.POUND).to(Unit.OUNCE).value == Decimal("16")

    def test_kilogram_to_gram(self):
        w = Weight(2, Unit.KILOGRAM).to(Unit.GRAM)
        assert w.value == Decimal("2000")
        assert str(w) == "2000 g"

    def test_kilogram_to_milligram(self):
        assert Weight("1.5", Unit.KILOGRAM).to(Unit.MILLIGRAM).value == Decimal("1500000")

    def test_milligram_to_kilogram(self):
        assert Weight(1, Unit.MILLIGRAM).to(Unit.KILOGRAM).value == Decimal("0.000001")

    def test_pound_to_kilogram(self):
        assert Weight("3.5", Unit.POUND).to(Unit.KILOGRAM).value == Decimal("1.587573295")

    def test_dimensionless_relabels(self):
        w = Weight(3, Unit.UNIT).to(Unit.GRAM)
        assert w.value == Decimal("3")
        assert w.unit is Unit.GRAM

    def test_target_by_name(self):
        assert Weight(1, Unit.KILOGRAM).to("g").value == Decimal("1000")
        assert Weight(1, Unit.KILOGRAM).convert("gram").unit is Unit.GRAM

    def test_unknown_target(self):
        with pytest.raises(InvalidArgumentError):
            Weight(1, Unit.GRAM).to("furlong")

    @pytest.mark.parametrize("magnitude", ["3.5", "1000", "0.001"])
    @pytest.mark.parametrize("source", list(Unit))
    @pytest.mark.parametrize("dest", list(Unit))
    def test_conversion_consistency(self, magnitude, source, dest):
        """Converting there and back never drifts beyond division precision."""
        from decimal_weight.conversions import Operator, lookup

        w = Weight(magnitude, source)
        back = w.to(dest).to(source)
        assert back.unit is source
        if lookup(source, dest).operator is Operator.MULTIPLY:
            assert back.value == w.value
        else:
            assert back.round(15).value == w.value

    LONG_MAGNITUDES = [
        "1234567890.1234567890123456789",
        "123456789012345678901234567891234567",
        "0.000000000000000000000000000012345678901234567",
    ]

    @pytest.mark.parametrize("magnitude", LONG_MAGNITUDES)
    @pytest.mark.parametrize("source", list(Unit))
    @pytest.mark.parametrize("dest", list(Unit))
    def test_conversion_consistency_beyond_division_precision(self, magnitude, source, dest):
        """Magnitudes longer than the division precision survive a round trip."""
        from decimal_weight.conversions import Operator, lookup

        w = Weight(magnitude, source)
        back = w.to(dest).to(source)
        if lookup(source, dest).operator is Operator.MULTIPLY:
            assert back.value == w.value
        else:
            assert abs(back.value - w.value) <= abs(w.value) * Decimal("1e-26")

    def test_kilogram_to_gram_is_exact(self):
        w = Weight("12345678901234567890123456.789", Unit.KILOGRAM)
        assert w.to(Unit.GRAM).value == Decimal("12345678901234567890123456789")

    def test_gram_to_kilogram_and_back_is_exact(self):
        w = Weight("1234567890.1234567890123456789", Unit.GRAM)
        assert w.to(Unit.KILOGRAM).to(Unit.GRAM).value == Decimal("1234567890.1234567890123456789")

    def test_milligram_to_kilogram_is_exact(self):
        w = Weight("123456789012345678901234567891", Unit.MILLIGRAM)
        assert w.to(Unit.KILOGRAM).value == Decimal("123456789012345678901234.567891")

    def test_milligram_to_gram_is_exact(self):
        w = Weight("98765432109876543210987654321.5", Unit.MILLIGRAM)
        assert w.to(Unit.GRAM).value == Decimal("98765432109876543210987654.3215")

    def test_ounce_to_pound_and_back_is_exact(self):
        w = Weight("1234567890123456789012345678901", Unit.OUNCE)
        assert w.to(Unit.POUND).to(Unit.OUNCE).value == w.value

    def test_non_terminating_conversion_uses_division_precision(self):
        ounces = Weight(1, Unit.GRAM).to(Unit.OUNCE).value
        assert len(ounces.as_tuple().digits) == 28



class TestArithmetic:
    """Tests for left-biased arithmetic."""

    def test_plus_converts_into_left_unit(self):
        total = Weight(5, Unit.POUND).plus(Weight(16, Unit.OUNCE))
        assert total.value == Decimal("6")
        assert total.unit is Unit.POUND

    def test_plus_operator(self):
        assert (Weight(5, Unit.POUND) + Weight(16, Unit.OUNCE)).eq(Weight(6, Unit.POUND))

    def test_left_bias(self):
        total = Weight(16, Unit.OUNCE) + Weight(1, Unit.POUND)
        assert total.unit is Unit.OUNCE
        assert total.value == Decimal("32")

    def test_minus(self):
        w = Weight(1, Unit.KILOGRAM) - Weight(250, Unit.GRAM)
        assert w.value == Decimal("0.75")
        assert str(w) == "0.75 kg"

    def test_addition_is_exact(self):
        w = Weight("0.1", Unit.GRAM) + Weight("0.2", Unit.GRAM)
        assert w.value == Decimal("0.3")

    def test_plus_requires_weight(self):
        with pytest.raises(InvalidArgumentError):
            Weight(1, Unit.GRAM).plus(5)

    def test_plus_operator_rejects_scalar(self):
        with pytest.raises(TypeError):
            Weight(1, Unit.GRAM) + 5

    def test_times_scalar(self):
        w = Weight("2.5", Unit.POUND).times(4)
        assert w.value == Decimal("10")
        assert w.unit is Unit.POUND

    def test_times_dimensionless_weight(self):
        w = Weight("2.5", Unit.POUND).times(Weight(3, Unit.UNIT))
        assert w.value == Decimal("7.5")
        assert w.unit is Unit.POUND

    def test_times_physical_weight_converts_first(self):
        w = Weight(2, Unit.POUND).times(Weight(16, Unit.OUNCE))
        assert w.value == Decimal("2")
        assert w.unit is Unit.POUND

    def test_times_operators(self):
        assert (3 * Weight(2, Unit.GRAM)).eq(Weight(6, Unit.GRAM))
        assert (Weight(2, Unit.GRAM) * Decimal("1.5")).eq(Weight(3, Unit.GRAM))

    def test_times_large_product_is_exact(self):
        big = "123456789012345678901234567890"
        w = Weight(big, Unit.GRAM).times(big)
        assert w.value == int(big) ** 2

    def test_times_invalid_scalar(self):
        with pytest.raises(InvalidArgumentError):
            Weight(2, Unit.GRAM).times("abc")

    def test_div_by_same_kind_weight_returns_ratio(self):
        ratio = Weight(10, Unit.GRAM).div(Weight(2, Unit.GRAM))
        assert isinstance(ratio, Decimal)
        assert ratio == Decimal("5")

    def test_div_by_scalar_returns_weight(self):
        w = Weight(10, Unit.GRAM).div(2)
        assert isinstance(w, Weight)
        assert w.value == Decimal("5")
        assert w.unit is Unit.GRAM

    def test_div_by_dimensionless_weight_returns_weight(self):
        w = Weight(10, Unit.GRAM).div(Weight(2, Unit.UNIT))
        assert isinstance(w, Weight)
        assert w.value == Decimal("5")
        assert w.unit is Unit.GRAM

    def test_div_dimensionless_by_dimensionless_returns_ratio(self):
        ratio = Weight(10, Unit.UNIT).div(Weight(4, Unit.UNIT))
        assert ratio == Decimal("2.5")

    def test_div_converts_across_units(self):
        assert Weight(1, Unit.KILOGRAM).div(Weight(500, Unit.GRAM)) == Decimal("2")

    def test_div_operator(self):
        assert Weight(1, Unit.POUND) / Weight(8, Unit.OUNCE) == Decimal("2")
        assert (Weight(9, Unit.OUNCE) / 3).eq(Weight(3, Unit.OUNCE))

    def test_div_by_zero(self):
        with pytest.raises(WeightDivisionByZeroError):
            Weight(1, Unit.GRAM).div(0)

    def test_div_by_zero_is_a_weight_error(self):
        with pytest.raises(WeightException) as exc_info:
            Weight(1, Unit.GRAM) / Decimal("0.000")
        assert isinstance(exc_info.value, ZeroDivisionError)
        assert exc_info.value.details == {"dividend": "1"}

    @pytest.mark.parametrize("divisor", [
        Weight(0, Unit.KILOGRAM),
        Weight(0, Unit.GRAM),
        Weight(0, Unit.UNIT),
    ])
    def test_zero_by_zero_weight(self, divisor):
        with pytest.raises(WeightDivisionByZeroError):
            Weight(0, Unit.GRAM).div(divisor)

    def test_div_by_zero_weight(self):
        with pytest.raises(WeightDivisionByZeroError):
            Weight(5, Unit.POUND) / Weight(0, Unit.OUNCE)

    def test_terminating_division_is_exact(self):
        w = Weight("123456789012345678901234567890.5", Unit.GRAM) / 2
        assert w.value == Decimal("61728394506172839450617283945.25")


    def test_div_uses_division_precision(self):
        third = Weight(1, Unit.GRAM) / 3
        assert len(str(third.value).split(".")[1]) == 28

        configure(WeightSettings(division_precision=12))
        assert (Weight(1, Unit.GRAM) / 3).value == Decimal("0.333333333333")

    def test_negation(self):
        w = -Weight(1000, Unit.GRAM)
        assert w.value == Decimal("-1000")
        assert w.unit is Unit.GRAM

    def test_abs(self):
        assert abs(Weight(-2, Unit.OUNCE)).value == Decimal("2")


class TestRounding:
    """Tests for Weight.round."""

    def test_default_precision(self):
        assert Weight("2.5", Unit.GRAM).round().value == Decimal("3")

    def test_half_away_from_zero(self):
        assert Weight("-2.5", Unit.GRAM).round().value == Decimal("-3")

    def test_precision(self):
        w = Weight("1.2345", Unit.KILOGRAM).round(2)
        assert w.value == Decimal("1.23")
        assert w.unit is Unit.KILOGRAM

    def test_builtin_round(self):
        assert round(Weight("1.235", Unit.KILOGRAM), 2).value == Decimal("1.24")

    def test_negative_precision(self):
        w = Weight(1234, Unit.GRAM).round(-2)
        assert w.value == Decimal("1200")
        assert str(w) == "1200 g"

    def test_configured_rounding_mode(self):
        configure(WeightSettings(rounding="half_even"))
        assert Weight("2.5", Unit.GRAM).round().value == Decimal("2")


class TestComparison:
    """Tests for cross-unit comparison."""

    def test_is_zero(self):
        assert Weight(0, Unit.KILOGRAM).is_zero()
        assert Weight("0.000", Unit.GRAM).is_zero()
        assert not Weight("0.0001", Unit.KILOGRAM).is_zero()

    def test_is_positive_negative(self):
        assert Weight(1, Unit.GRAM).is_positive()
        assert not Weight(0, Unit.GRAM).is_positive()
        assert Weight(-1, Unit.GRAM).is_negative()
        assert not Weight(0, Unit.GRAM).is_negative()

    def test_eq_across_units(self):
        assert Weight(1, Unit.POUND).eq(Weight(16, Unit.OUNCE))
        assert Weight(16, Unit.OUNCE) == Weight(1, Unit.POUND)
        assert Weight(1, Unit.KILOGRAM) != Weight(1, Unit.POUND)

    def test_ordering(self):
        kg = Weight(1, Unit.KILOGRAM)
        lb = Weight(1, Unit.POUND)
        assert kg.gt(lb)
        assert lb.lt(kg)
        assert not lb.gt(kg)
        assert kg > lb
        assert lb < kg
        assert lb <= Weight(16, Unit.OUNCE)
        assert lb >= Weight(16, Unit.OUNCE)
        assert kg.gte(lb)
        assert lb.lte(kg)

    def test_cmp(self):
        assert Weight(1, Unit.KILOGRAM).cmp(Weight(1, Unit.POUND)) == 1
        assert Weight(1, Unit.POUND).cmp(Weight(1, Unit.KILOGRAM)) == -1
        assert Weight(1000, Unit.MILLIGRAM).cmp(Weight(1, Unit.GRAM)) == 0

    @pytest.mark.parametrize("left", [
        Weight("1", Unit.POUND),
        Weight("453.59237", Unit.GRAM),
        Weight("0.5", Unit.KILOGRAM),
        Weight("17", Unit.OUNCE),
    ])
    @pytest.mark.parametrize("right", [
        Weight("16", Unit.OUNCE),
        Weight("0.45359237", Unit.KILOGRAM),
        Weight("500000", Unit.MILLIGRAM),
    ])
    def test_exactly_one_relation_holds(self, left, right):
        relations = [left.lt(right), left.eq(right), left.gt(right)]
        assert relations.count(True) == 1
        assert left.cmp(right) == [-1, 0, 1][relations.index(True)]

    def test_compare_with_non_weight(self):
        assert Weight(1, Unit.GRAM) != 1
        with pytest.raises(TypeError):
            Weight(1, Unit.GRAM) < 1
        with pytest.raises(InvalidArgumentError):
            Weight(1, Unit.GRAM).lt(1)

    def test_approximately_equals(self):
        lb = Weight(1, Unit.POUND)
        grams = Weight(454, Unit.GRAM)
        assert lb.approximately_equals(grams, tolerance=Weight(1, Unit.GRAM))
        assert not lb.approximately_equals(grams)
        assert lb.approximately_equals(grams, tolerance="0.001")

    def test_approximately_equals_exact_match(self):
        assert Weight(1000, Unit.GRAM).approximately_equals(Weight(1, Unit.KILOGRAM))

    def test_approximately_equals_non_weight(self):
        assert not Weight(1, Unit.GRAM).approximately_equals(1)


class TestSerialization:
    """Tests for text and structured output."""

    def test_str(self):
        assert str(Weight("3.50", Unit.POUND)) == "3.5 lb"

    def test_str_dimensionless(self):
        assert str(Weight(12, Unit.UNIT)) == "12"

    def test_str_small_value_is_fixed_point(self):
        assert str(Weight("1E-9", Unit.KILOGRAM)) == "0.000000001 kg"

    def test_repr(self):
        assert repr(Weight("1234", Unit.KILOGRAM)) == "Weight(1234 kilogram)"

    def test_to_structured(self):
        assert Weight("3.5", Unit.POUND).to_structured() == {"value": "3.5", "unit": "pound"}

    def test_structured_round_trip(self):
        w = Weight("0.000123", Unit.MILLIGRAM)
        restored = Weight.from_structured(w.to_structured())
        assert restored.value == w.value
        assert restored.unit is w.unit

    def test_model_dump_json(self):
        assert Weight(2, Unit.OUNCE).model_dump_json() == '{"value":"2","unit":"ounce"}'

    def test_unit_properties(self):
        w = Weight(1, Unit.MILLIGRAM)
        assert w.unit_abbreviation == "mg"
        assert w.unit_name == "milligram"
        assert Weight(1, Unit.UNIT).unit_abbreviation == ""
