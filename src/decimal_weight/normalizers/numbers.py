"""Decimal literal parsing and rendering."""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional


class NumberNormalizer:
    """Reads and writes the decimal text used by weights."""

    # Plain decimal literal with optional exponent: '3.5', '-.25', '1e3', '12.'
    DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)(e[+-]?\d+)?$", re.IGNORECASE)

    @classmethod
    def parse_decimal(cls, text: str) -> Optional[Decimal]:
        """
        Parse a decimal literal exactly.

        Stricter than ``Decimal()``: rejects 'NaN', 'Infinity', digit
        separators and surrounding text.

        Returns None if the text is not a decimal literal.
        """
        if not text or not cls.DECIMAL_PATTERN.match(text):
            return None
        try:
            return Decimal(text)
        except InvalidOperation:
            return None

    @staticmethod
    def format_decimal(value: Decimal) -> str:
        """
        Render a decimal in fixed-point without trailing fractional zeros.

        Equal values always render the same way:
        Decimal('1.500') -> '1.5'
        Decimal('5E+3') -> '5000'
        Decimal('1E-9') -> '0.000000001'
        Decimal('-0.00') -> '0'
        """
        if value.is_zero():
            return "0"
        text = format(value, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
