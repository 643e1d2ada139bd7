"""Settings for DeskLayout loaded from the environment or a ``.env`` file."""
from __future__ import annotations

import logging

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import UnsetPolicy

_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class LayoutSettings(BaseSettings):
    """Environment driven defaults. Command line flags take precedence."""

    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )
    unset_policy: UnsetPolicy = Field(
        UnsetPolicy.BUFFER,
        description="How people without a dog status are seated: buffer, drop or raise.",
    )

    model_config = SettingsConfigDict(
        env_prefix="DESK_LAYOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> LayoutSettings:
    """Load and validate settings, falling back to INFO for unknown log levels."""
    try:
        settings = LayoutSettings()
    except ValidationError as e:
        logging.exception(f"Error loading desk layout settings: {e}")
        raise SystemExit("Failed to load desk layout settings. Exiting.")

    log_level_upper = settings.log_level.upper()
    if log_level_upper not in _LOG_LEVELS:
        logging.warning(f"Invalid log level '{settings.log_level}'. Using INFO.")
        settings.log_level = "INFO"
    else:
        settings.log_level = log_level_upper
    return settings
