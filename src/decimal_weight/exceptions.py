"""Custom exceptions for decimal weights.

Every failure raised by the library derives from ``WeightException`` so callers
can catch the whole family at once, or a single category when they care about
the difference between bad input and a missing conversion.
"""

from typing import Optional, Any


class WeightException(Exception):
    """Base exception for all weight errors.

    Attributes:
        message: Human-readable error description
        details: Additional context for debugging
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# =============================================================================
# Input Errors
# =============================================================================

class InvalidArgumentError(WeightException):
    """Raised when an argument has the wrong type (e.g. parsing a non-string)."""

    def __init__(self, argument: Any, expected: str):
        super().__init__(
            f"Invalid argument: {expected} expected",
            {"argument_type": type(argument).__name__, "expected": expected}
        )
        self.argument = argument
        self.expected = expected


class InvalidWeightError(WeightException):
    """Raised when text cannot be read as a weight."""

    def __init__(self, input_value: str, reason: str):
        super().__init__(
            f"Invalid weight: '{input_value}'",
            {"input_value": input_value, "reason": reason}
        )
        self.input_value = input_value
        self.reason = reason


# =============================================================================
# Conversion Errors
# =============================================================================

class NoConversionError(WeightException):
    """Raised when the conversion table has no entry for a unit pair."""

    def __init__(self, source: Any, dest: Any):
        from .models.enums import unit_to_display_name

        source_name = unit_to_display_name(source)
        dest_name = unit_to_display_name(dest)
        super().__init__(
            f"No conversion from {source_name} to {dest_name}",
            {"source": source_name, "dest": dest_name}
        )
        self.source = source
        self.dest = dest


# =============================================================================
# Arithmetic Errors
# =============================================================================

class WeightDivisionByZeroError(WeightException, ZeroDivisionError):
    """Raised when a weight is divided by zero (a zero scalar or a zero weight)."""

    def __init__(self, dividend: Any):
        super().__init__(
            "Division by zero",
            {"dividend": str(dividend)}
        )
        self.dividend = dividend
