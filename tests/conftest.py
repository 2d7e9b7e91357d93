"""Shared fixtures: every test starts from default settings."""

import pytest

from roman_codec.config import get_settings


SETTINGS_ENV_VARS = (
    "ROMAN_CODEC_UPPER_BOUND",
    "ROMAN_CODEC_ALLOW_HISTORICAL_ALIASES",
    "ROMAN_CODEC_STRICT_CANONICAL",
    "APP_ENVIRONMENT",
    "DEBUG_MODE",
    "LOG_LEVEL",
    "AUDIT_HISTORY_SIZE",
)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Clear settings env vars and the settings cache."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
