"""Configuration for value_checks (pydantic-settings, .env and YAML)."""

from value_checks.config.settings import (
    CheckSettings,
    LoggingSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "CheckSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
    "reload_settings",
]
