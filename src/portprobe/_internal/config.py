"""Configuration management for the portprobe package.

Settings are read from environment variables with the ``PORTPROBE_`` prefix:
    PORTPROBE_LOG_LEVEL=DEBUG
    PORTPROBE_LOG_FILE=/tmp/portprobe.log
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PortProbeSettings(BaseSettings):
    """Environment-backed settings for portprobe."""

    model_config = SettingsConfigDict(env_prefix="PORTPROBE_", extra="ignore")

    log_level: str = "WARNING"
    """Level name for the ``portprobe`` logger."""

    log_file: str | None = None
    """Optional log file. When unset, logs only go to stderr."""

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and check the level name."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> PortProbeSettings:
    """Load and cache settings from the environment."""
    return PortProbeSettings()


__all__ = ["PortProbeSettings", "get_settings"]
