"""
Configuration Management for the Roman Numeral Codec

Uses pydantic-settings for type-safe configuration from environment variables.

All configuration is centralized here. Codec options are read from
ROMAN_CODEC_* variables; application options from the environment or a
.env file.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from roman_codec.models.numeral import (
    EXTENDED_UPPER_BOUND,
    LOWER_BOUND,
    STANDARD_UPPER_BOUND,
)


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CodecSettings(BaseSettings):
    """Codec configuration (bounds and accepted notations)."""

    model_config = SettingsConfigDict(
        env_prefix="ROMAN_CODEC_",
        extra="ignore"
    )

    upper_bound: int = Field(
        default=STANDARD_UPPER_BOUND,
        ge=LOWER_BOUND,
        le=EXTENDED_UPPER_BOUND,
        description="Largest number accepted (3999 canonical, 4999 extended)"
    )
    allow_historical_aliases: bool = Field(
        default=False,
        description="Accept medieval aliases (O, F, P, G, Q, XIIX, IIXX) when decoding"
    )
    strict_canonical: bool = Field(
        default=True,
        description="Reject numerals that are not the canonical spelling of their value"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Standard library log level for structured logs"
    )
    audit_history_size: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Number of recent audit events kept in memory"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept standard library level names."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Sub-settings are loaded lazily so a bad value only fails its own section

    @property
    def codec(self) -> CodecSettings:
        return CodecSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    '<setting_name>_error' entry for each failure.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.codec
        results["codec"] = True
    except Exception as e:
        results["codec"] = False
        results["codec_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
