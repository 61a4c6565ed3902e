"""Configuration module for propchain.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from propchain.config import get_settings

    settings = get_settings()

    # Access validation settings
    fail_fast = settings.validation.stop_on_first_failure

    # Access logging settings
    level = settings.logging.log_level
"""

from propchain.config.settings import (
    LoggingSettings,
    Settings,
    ValidationSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "Settings",
    "ValidationSettings",
    "get_settings",
    "reset_settings",
]
