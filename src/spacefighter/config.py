"""Lightweight configuration for the spacefighter core."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SPACEFIGHTER_", env_file=".env", env_file_encoding="utf-8"
    )

    log_level: str = Field(default="INFO", description="Root log level for the package")
    event_log_path: Path | None = Field(
        default=None,
        description="Append committed domain events to this JSON-lines file when set",
    )
    leaderboard_size: int = Field(
        default=10,
        description="Number of entries kept by the default leaderboard",
        gt=0,
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    if settings.event_log_path is not None:
        settings.event_log_path.parent.mkdir(parents=True, exist_ok=True)
    return settings


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the package logger."""

    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {settings.log_level!r}")
    logging.getLogger("spacefighter").setLevel(level)
