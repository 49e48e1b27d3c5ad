"""Configuration settings for the OpenSky client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger("opensky.config")

DEFAULT_BASE_URL = "https://opensky-network.org/api"


def _get_optional(env_var: str) -> str | None:
    """Return an environment variable, treating empty strings as unset."""

    value = os.getenv(env_var)
    if not value:
        return None
    return value


def _get_float(env_var: str, default: float) -> float:
    """Parse an environment variable into a float, falling back on bad input."""

    value = os.getenv(env_var)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", env_var, value, default)
        return default


@dataclass
class Settings:
    """Client configuration loaded from environment variables.

    Values are read when an instance is created, so ``Settings()`` picks up
    the current environment.
    """

    base_url: str = field(
        default_factory=lambda: os.getenv("OPENSKY_BASE_URL", DEFAULT_BASE_URL)
    )
    timeout: float = field(default_factory=lambda: _get_float("OPENSKY_TIMEOUT", 300.0))
    username: str | None = field(default_factory=lambda: _get_optional("OPENSKY_USERNAME"))
    password: str | None = field(default_factory=lambda: _get_optional("OPENSKY_PASSWORD"))
    log_level: str = field(default_factory=lambda: os.getenv("OPENSKY_LOG_LEVEL", "INFO"))


settings = Settings()

__all__ = ["DEFAULT_BASE_URL", "settings", "Settings"]
