# Application-wide configuration helpers.

from __future__ import annotations

import os
from dataclasses import dataclass

_SETTINGS_CACHE: Settings | None = None

DEFAULT_PORT = 3000
DEFAULT_VERSION = "1.0.0"
DEFAULT_ENVIRONMENT = "development"

# Level names accepted by both uvicorn and the logging module.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE")
_LOG_LEVEL_ALIASES = {"WARN": "WARNING"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration derived from environment variables."""

    port: int = DEFAULT_PORT
    version: str = DEFAULT_VERSION
    environment: str = DEFAULT_ENVIRONMENT
    host: str = "0.0.0.0"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables with sensible defaults."""
        port_raw = os.getenv("PORT") or str(DEFAULT_PORT)
        version = os.getenv("APP_VERSION") or DEFAULT_VERSION
        environment = os.getenv("NODE_ENV") or DEFAULT_ENVIRONMENT
        log_level_raw = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()

        try:
            port = int(port_raw)
        except ValueError as exc:
            raise ValueError("PORT must be an integer.") from exc

        if not 0 <= port <= 65535:
            raise ValueError("PORT must be between 0 and 65535.")

        log_level = _LOG_LEVEL_ALIASES.get(log_level_raw, log_level_raw)
        if log_level not in LOG_LEVELS:
            raise ValueError(
                "LOG_LEVEL must be one of: " + ", ".join(LOG_LEVELS).lower() + "."
            )

        return cls(
            port=port,
            version=version,
            environment=environment,
            log_level=log_level,
        )


def get_settings() -> Settings:
    """Return cached settings instance, constructing it on first access."""
    global _SETTINGS_CACHE

    if _SETTINGS_CACHE is None:
        _SETTINGS_CACHE = Settings.from_env()

    return _SETTINGS_CACHE


def set_settings(settings: Settings | None) -> None:
    """Override the cached settings value (mainly intended for tests)."""
    global _SETTINGS_CACHE
    _SETTINGS_CACHE = settings


__all__ = ["Settings", "get_settings", "set_settings"]
