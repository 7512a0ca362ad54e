"""Configuration package."""

from calcsuite.config.settings import (
    AppSettings,
    GeminiSettings,
    RatesSettings,
    Settings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "GeminiSettings",
    "RatesSettings",
    "Settings",
    "StorageSettings",
    "get_settings",
    "validate_all_settings",
]
