"""
Exact decimal weights

A value type pairing an arbitrary-precision decimal magnitude with a unit of
mass, with parsing, unit conversion, arithmetic and comparison that never goes
through binary floating point.
"""

from .models import (
    Unit,
    Weight,
    unit_to_abbreviation,
    unit_to_display_name,
    abbreviation_to_unit,
)
from .conversions import Conversion, Operator, lookup, has_conversion, convertible_units
from .exceptions import (
    WeightException,
    InvalidArgumentError,
    InvalidWeightError,
    NoConversionError,
    WeightDivisionByZeroError,
)
from .config import WeightSettings, ConfigurationError, get_settings, configure, reset_settings
from .logging import (
    configure_logging,
    get_logger,
    WeightLogger,
)

__version__ = "1.0.0"
__all__ = [
    "Unit",
    "Weight",
    "unit_to_abbreviation",
    "unit_to_display_name",
    "abbreviation_to_unit",
    # Conversions
    "Conversion",
    "Operator",
    "lookup",
    "has_conversion",
    "convertible_units",
    # Exceptions
    "WeightException",
    "InvalidArgumentError",
    "InvalidWeightError",
    "NoConversionError",
    "WeightDivisionByZeroError",
    # Configuration
    "WeightSettings",
    "ConfigurationError",
    "get_settings",
    "configure",
    "reset_settings",
    # Logging
    "configure_logging",
    "get_logger",
    "WeightLogger",
]
