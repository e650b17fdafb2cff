"""
Settings for tag matchers.
Values come from the environment, optionally seeded from a .env file.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

logger = logging.getLogger("tag_matchers.config")

ENV_PREFIX = "TAG_MATCHERS_"


class MatcherSettings(BaseModel):
    """Runtime settings shared by all matchers"""
    html_parser: str = "html.parser"
    log_level: str = "WARNING"
    max_rendered_length: int = 0

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("max_rendered_length")
    @classmethod
    def _non_negative_length(cls, value: int) -> int:
        if value < 0:
            raise ValueError("max_rendered_length must be zero or positive")
        return value


_settings: Optional[MatcherSettings] = None


def load_settings(dotenv_path: Optional[str] = None) -> MatcherSettings:
    """Build settings from environment variables.

    Args:
        dotenv_path: Optional path to a .env file. When omitted, python-dotenv
            searches upward from the working directory.

    Returns:
        MatcherSettings: Fresh settings instance
    """
    load_dotenv(dotenv_path)

    values = {}
    for field in MatcherSettings.model_fields:
        env_value = os.getenv(f"{ENV_PREFIX}{field.upper()}")
        if env_value is not None:
            values[field] = env_value

    settings = MatcherSettings(**values)
    logger.debug(f"Loaded settings: {settings.model_dump()}")
    return settings


def get_settings() -> MatcherSettings:
    """Return the cached settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
