"""Configuration package."""

from roman_codec.config.settings import (
    AppSettings,
    CodecSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "CodecSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
