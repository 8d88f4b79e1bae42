"""
Configuration — typed, validated logging settings loaded from environment/.env.

Uses pydantic-settings, so a bad value fails loudly at load time instead of
silently falling back:

    OKFAIL_LOG_LEVEL=debug      → log_level == "DEBUG"
    OKFAIL_JSON_LOGS=true       → JSON lines instead of console output
    OKFAIL_LOG_LEVEL=chatty     → ValidationError
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class LoggingSettings(BaseSettings):
    """
    Logging configuration for okfail's execution contexts.

    Load order (highest priority first):
      1. Environment variables (OKFAIL_ prefix)
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="OKFAIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum level emitted")
    json_logs: bool = Field(default=False, description="Render JSON lines instead of console output")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard level names in any case, normalised to upper case."""
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(
                f"log_level must be one of {', '.join(_LEVEL_NAMES)}, got {value!r}"
            )
        return level

    @property
    def level_number(self) -> int:
        """Numeric level for structlog's filtering logger."""
        return logging.getLevelNamesMapping()[self.log_level]
