"""Configuration for the view pipeline using pydantic-settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dexview.models import DEFAULT_DECIMALS, GREEN, PRICE_PRECISION, RED


class ViewSettings(BaseSettings):
    """Pricing, bucketing and coloring parameters for the derived views.

    All fields configurable via the VIEWS_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="VIEWS_")

    price_precision: int = PRICE_PRECISION  # decimal places kept in token prices
    default_decimals: int = DEFAULT_DECIMALS  # used for tokens without explicit decimals
    candle_interval_seconds: int = 3600  # one candle per hour
    timezone: str = "UTC"  # candle boundaries and formatted timestamps
    up_color: str = GREEN
    down_color: str = RED

    @field_validator("candle_interval_seconds")
    @classmethod
    def _positive_interval(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("candle_interval_seconds must be positive")
        return value

    @field_validator("price_precision")
    @classmethod
    def _non_negative_precision(cls, value: int) -> int:
        if value < 0:
            raise ValueError("price_precision must not be negative")
        return value


class AppSettings(BaseSettings):
    """Root settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    views: ViewSettings = ViewSettings()
