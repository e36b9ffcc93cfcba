"""
Centralized application configuration using pydantic.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------- #
# Logging configuration (importing this module sets global logging defaults)
# ---------------------------------------------------------------------------- #
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
# Only configure the root logger if the application running this module
# has not configured logging yet.
if not logging.getLogger().handlers:
    logging.basicConfig(format=LOG_FORMAT, level=logging.INFO)
logger = logging.getLogger(__name__)

# The currently active settings instance, can be overridden for testing
_CURRENT_SETTINGS = None

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Validated settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ------------------------------------------------------------------ #
    # Output
    # ------------------------------------------------------------------ #
    # Verbose builds echo every shell command instead of the progress labels.
    TEK_VERBOSE: bool = False
    TEK_OUTPUT: Path = Path("Makefile")

    # ------------------------------------------------------------------ #
    # Processor configuration
    # ------------------------------------------------------------------ #
    TEK_CONFIG_FILE: Path = Path("tek.yml")

    # ------------------------------------------------------------------ #
    # Logging
    # ------------------------------------------------------------------ #
    TEK_LOG_LEVEL: str = "INFO"

    # ------------------------------------------------------------------ #
    @field_validator("TEK_LOG_LEVEL", mode="before")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:  # noqa: D401
        """Normalise the level name and reject unknown ones."""
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}', expected one of {_LOG_LEVELS}")
        return level


def get_settings(override_values: Optional[Dict[str, Any]] = None) -> Settings:
    """Get the current settings, with optional overrides for testing.

    Args:
        override_values: Optional dictionary of settings values to override

    Returns:
        Settings instance with overrides applied if any
    """
    global _CURRENT_SETTINGS

    # If no overrides and we already have settings, return cached instance
    if override_values is None and _CURRENT_SETTINGS is not None:
        return _CURRENT_SETTINGS

    if override_values:
        settings_instance = Settings(**override_values)
        logger.debug("Created settings with overrides: %s", override_values)
    else:
        settings_instance = Settings()

    # Store as current if no overrides
    if override_values is None:
        _CURRENT_SETTINGS = settings_instance

    logger.debug("Loaded settings: %s", settings_instance.model_dump())
    return settings_instance


def configure_logging(level: str) -> None:
    """Apply *level* to the root logger (used by the CLI --log-level option)."""
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
