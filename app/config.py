# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.API_PORT)
#
# Values are loaded from (later sources win):
# 1. .env file in project root (if exists)
# 2. .env.<PROFILE> file (if exists), e.g. .env.dev
# 3. System environment variables
#
# Running with a different profile:
#   PROFILE=dev poetry run uvicorn app.main:app
# or put PROFILE=dev in .env itself.
# =============================================================================

import logging
import os
from functools import lru_cache
from typing import Literal

from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_ENV_FILE = ".env"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def parse_level(value: str) -> int:
    """
    Convert a level name ("debug", "INFO", ...) into a logging level number.

    Raises:
        ValueError: If the name is not a known logging level
    """
    name = value.strip().upper()
    if name not in _LEVEL_NAMES:
        raise ValueError(
            f"Unknown log level: {value!r} (expected one of {', '.join(_LEVEL_NAMES)})"
        )
    return logging.getLevelName(name)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env (and the active profile's file)
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    APP_NAME: str = Field(
        default="Masterclass API",
        min_length=1,
        description="Display name of the application"
    )

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    PROFILE: str = Field(
        default="",
        description="Active settings profile; loads .env.<PROFILE> on top of .env"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level (ignored when DEBUG is true)"
    )

    # e.g. "core.services=DEBUG,uvicorn.access=WARNING"
    LOG_LEVELS: str = Field(
        default="",
        description="Per-logger level overrides (comma-separated logger=LEVEL pairs)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=BASE_ENV_FILE,
        env_file_encoding="utf-8",
        # Empty env vars count as unset, so defaults and .env values apply
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        parse_level(value)
        return value.strip().upper()

    @field_validator("LOG_LEVELS")
    @classmethod
    def check_log_levels(cls, value: str) -> str:
        _parse_log_levels(value)
        return value

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def log_levels_map(self) -> dict[str, int]:
        """
        Parse LOG_LEVELS into a {logger_name: level} mapping.

        Example: "core=DEBUG, uvicorn.access=warning" -> {"core": 10, "uvicorn.access": 30}
        """
        return _parse_log_levels(self.LOG_LEVELS)

    @property
    def root_log_level(self) -> int:
        """DEBUG mode forces the root logger to DEBUG."""
        return logging.DEBUG if self.DEBUG else parse_level(self.LOG_LEVEL)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


def _parse_log_levels(value: str) -> dict[str, int]:
    levels: dict[str, int] = {}
    for pair in value.split(","):
        pair = pair.strip()
        if not pair:
            continue
        name, sep, level = pair.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Invalid logger override: {pair!r} (expected logger=LEVEL)")
        levels[name.strip()] = parse_level(level)
    return levels


def profile_env_files(profile: str | None = None) -> tuple[str, ...]:
    """
    Return the .env files to load for a profile, lowest priority first.

    Without an explicit profile, PROFILE is taken from the environment and
    then from the base .env file.

    Example:
        profile_env_files("dev") -> (".env", ".env.dev")
    """
    if profile is None:
        profile = os.environ.get("PROFILE") or dotenv_values(BASE_ENV_FILE).get("PROFILE") or ""
    profile = profile.strip()
    if not profile:
        return (BASE_ENV_FILE,)
    return (BASE_ENV_FILE, f"{BASE_ENV_FILE}.{profile}")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings(_env_file=profile_env_files())


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
