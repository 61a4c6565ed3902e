"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all propchain settings.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from propchain.const import ACCESSOR_ERROR_MESSAGE, PREDICATE_ERROR_MESSAGE

# Nested settings are built by default_factory, so each one reads the file itself
ENV_FILE = ".env"


class ValidationSettings(BaseSettings):
    """Validation chain behaviour."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding="utf-8", extra="ignore"
    )

    stop_on_first_failure: bool = Field(
        default=True,
        validation_alias="STOP_ON_FIRST_FAILURE",
        description="Skip remaining checks once one check has failed",
    )
    accessor_error_message: str = Field(
        default=ACCESSOR_ERROR_MESSAGE,
        validation_alias="ACCESSOR_ERROR_MESSAGE",
        description="Failure message recorded when a property cannot be read",
    )
    predicate_error_message: str = Field(
        default=PREDICATE_ERROR_MESSAGE,
        validation_alias="PREDICATE_ERROR_MESSAGE",
        description="Failure message recorded when a predicate raises",
    )

    @field_validator("accessor_error_message", "predicate_error_message")
    @classmethod
    def non_empty_message(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("error message must not be blank")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding="utf-8", extra="ignore"
    )

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for propchain namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from propchain.config import get_settings

        settings = get_settings()
        fail_fast = settings.validation.stop_on_first_failure
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
