"""Application settings.

Settings are read once, at startup, from environment variables layered over
an optional ``.env`` file, and then passed explicitly to the components that
need them.  Nothing below the composition root reads the environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

from northwind.application.login import (
    DEFAULT_TOKEN_LIFETIME_MINUTES,
    AuthSettings,
    JwtSettings,
)
from northwind.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "NORTHWIND_"
DEFAULT_DATABASE_URL = "sqlite:///northwind.db"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    log_level: str = "WARNING"
    auth: AuthSettings = field(default_factory=AuthSettings)
    jwt: JwtSettings = field(default_factory=JwtSettings)

    @staticmethod
    def from_mapping(values: Mapping[str, str | None]) -> Settings:
        """Build settings from ``NORTHWIND_*`` keys; missing keys use defaults."""

        def get(name: str) -> str | None:
            value = values.get(ENV_PREFIX + name)
            return value if value not in (None, "") else None

        lifetime = get("JWT_LIFETIME_MINUTES")
        try:
            lifetime_minutes = int(lifetime) if lifetime else DEFAULT_TOKEN_LIFETIME_MINUTES
        except ValueError as exc:
            raise ValidationError(
                f"{ENV_PREFIX}JWT_LIFETIME_MINUTES must be an integer, got {lifetime!r}"
            ) from exc

        return Settings(
            database_url=get("DATABASE_URL") or DEFAULT_DATABASE_URL,
            sql_echo=(get("SQL_ECHO") or "").lower() in ("1", "true", "yes"),
            log_level=(get("LOG_LEVEL") or "WARNING").upper(),
            auth=AuthSettings(
                username=get("AUTH_USERNAME"),
                password=get("AUTH_PASSWORD"),
            ),
            jwt=JwtSettings(
                key=get("JWT_KEY") or "",
                issuer=get("JWT_ISSUER"),
                audience=get("JWT_AUDIENCE"),
                lifetime_minutes=lifetime_minutes,
            ),
        )


def load_settings(env_file: Path | None = None) -> Settings:
    """Load settings from the process environment and a ``.env`` file.

    Priority order (highest to lowest):
    1. Environment variables
    2. ``env_file`` (or ``./.env`` when not given)
    3. Defaults
    """
    path = env_file or Path.cwd() / ".env"
    values: dict[str, str | None] = {}
    if path.is_file():
        values.update(dotenv_values(path))
        logger.debug("Loaded settings file %s", path)
    elif env_file is not None:
        logger.warning("Settings file %s not found; using environment only", path)
    values.update(os.environ)
    return Settings.from_mapping(values)
