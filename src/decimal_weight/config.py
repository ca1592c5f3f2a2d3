"""Configuration management for decimal weights.

Supports configuration via:
1. Environment variables
2. Dependency Injection (``configure`` / ``with_overrides``)
3. Default values

Environment Variables:
    DECIMAL_WEIGHT_DIVISION_PRECISION: Significant digits kept by division (default: 28)
    DECIMAL_WEIGHT_ROUNDING: Rounding mode used by ``Weight.round`` (default: ROUND_HALF_UP)
    DECIMAL_WEIGHT_LOG_FORMAT: Log format - 'json' or 'text' (default: text)
    DECIMAL_WEIGHT_LOG_LEVEL: Log level (default: WARNING)
"""

import decimal
from typing import Optional, Literal
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


ROUNDING_MODES = (
    decimal.ROUND_UP,
    decimal.ROUND_DOWN,
    decimal.ROUND_CEILING,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_05UP,
)


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, field: str, value, message: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid configuration for '{field}': {message} (got: {value})")


class WeightSettings(BaseSettings):
    """Arithmetic and logging configuration with environment variable support.

    Settings are loaded from environment variables with DECIMAL_WEIGHT_ prefix.
    Addition, subtraction and multiplication are always exact; only division
    (and conversions that divide) is bounded by ``division_precision``.
    """

    division_precision: int = Field(
        default=28,
        ge=1,
        le=1000,
        description="Significant digits kept when a division does not terminate"
    )
    rounding: str = Field(
        default=decimal.ROUND_HALF_UP,
        description="decimal rounding mode used by Weight.round and division"
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format: 'json' for structured, 'text' for human-readable"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level"
    )

    model_config = {
        "env_prefix": "DECIMAL_WEIGHT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("rounding", mode="before")
    @classmethod
    def normalize_rounding(cls, v: str) -> str:
        """Accept rounding modes in any case, with or without the ROUND_ prefix."""
        if isinstance(v, str):
            v = v.strip().upper()
            if not v.startswith("ROUND_"):
                v = f"ROUND_{v}"
        if v not in ROUNDING_MODES:
            raise ValueError(f"Rounding must be one of {', '.join(ROUNDING_MODES)}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return v

    @model_validator(mode="after")
    def validate_settings_combination(self) -> "WeightSettings":
        """Warn about settings that undermine exact arithmetic."""
        if self.division_precision < 10:
            import warnings
            warnings.warn(
                f"Division precision of {self.division_precision} digits is very low. "
                "Conversions between units that divide will lose accuracy.",
                UserWarning
            )
        return self

    @classmethod
    def from_env(cls) -> "WeightSettings":
        """Create settings from environment variables."""
        return cls()

    def with_overrides(
        self,
        division_precision: Optional[int] = None,
        rounding: Optional[str] = None,
        log_format: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> "WeightSettings":
        """Create new settings with overridden values (DI pattern)."""
        return WeightSettings(
            division_precision=division_precision or self.division_precision,
            rounding=rounding or self.rounding,
            log_format=log_format or self.log_format,
            log_level=log_level or self.log_level,
        )


# Global default settings instance (can be overridden)
_settings: Optional[WeightSettings] = None


def get_settings() -> WeightSettings:
    """Get current settings (lazy initialization from env)."""
    global _settings
    if _settings is None:
        _settings = WeightSettings.from_env()
    return _settings


def configure(settings: WeightSettings) -> None:
    """Configure global settings (useful for testing or DI)."""
    global _settings
    if not isinstance(settings, WeightSettings):
        raise ConfigurationError("settings", settings, "expected a WeightSettings instance")
    _settings = settings


def reset_settings() -> None:
    """Reset settings to reload from environment (useful for testing)."""
    global _settings
    _settings = None
