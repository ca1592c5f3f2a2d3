"""Decimal contexts shared by conversions and weights.

Addition, subtraction, multiplication and quantization run in a context wide
enough that they never round. Division is exact whenever the quotient
terminates; a non-terminating quotient is cut to ``division_precision``
significant digits from the active settings. Contexts are entered with
``localcontext`` and never touch the caller's thread context.
"""

from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    localcontext,
)
from typing import Union

from .config import get_settings
from .exceptions import WeightDivisionByZeroError

Numeric = Union[Decimal, int, float, str]

ZERO = Decimal("0")


def _exact_context() -> Context:
    return Context(
        prec=MAX_PREC,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        rounding=get_settings().rounding,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )


def to_decimal(value: Numeric) -> Decimal:
    """Convert a numeric value to a finite Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal('0.1')`` rather than
    its binary expansion.

    Raises:
        ValueError: If the value is not a finite decimal number.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid decimal magnitude: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation:
            raise ValueError(f"Invalid decimal magnitude: {value!r}") from None
    else:
        raise ValueError(f"Invalid decimal magnitude: {value!r}")

    if not result.is_finite():
        raise ValueError(f"Decimal magnitude must be finite: {value!r}")
    return result


def add(a: Decimal, b: Decimal) -> Decimal:
    with localcontext(_exact_context()):
        return a + b


def subtract(a: Decimal, b: Decimal) -> Decimal:
    with localcontext(_exact_context()):
        return a - b


def multiply(a: Decimal, b: Decimal) -> Decimal:
    with localcontext(_exact_context()):
        return a * b


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def divide(a: Decimal, b: Decimal) -> Decimal:
    """Divide exactly when the quotient terminates, else to the configured precision.

    A terminating quotient of ``a / b`` never needs more than
    ``digits(a) + 4 * digits(b)`` significant digits, so it is first computed at
    that width. Only a quotient left inexact there is recomputed at
    ``division_precision`` significant digits.

    Raises:
        WeightDivisionByZeroError: If ``b`` is zero (including ``0 / 0``).
    """
    if b.is_zero():
        raise WeightDivisionByZeroError(a)

    settings = get_settings()
    with localcontext(_exact_context()) as ctx:
        ctx.prec = max(_digits(a) + 4 * _digits(b) + 2, settings.division_precision)
        ctx.clear_flags()
        quotient = a / b
        if not ctx.flags[Inexact]:
            return quotient
        ctx.prec = settings.division_precision
        return a / b


def round_to(value: Decimal, precision: int = 0) -> Decimal:
    """Round to ``precision`` decimal places with the configured rounding mode.

    A negative precision rounds to tens, hundreds, and so on.
    """
    with localcontext(_exact_context()):
        return value.quantize(Decimal(1).scaleb(-precision))


def compare(a: Decimal, b: Decimal) -> int:
    """Three-way comparison: -1, 0 or 1."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0
