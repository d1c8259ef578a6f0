"""Centralized configuration management for the XIVAPI client.

Features:
- Environment variable support via .env files
- Fallback priority: explicit argument → .env / environment → hardcoded defaults
- Type-safe configuration using Pydantic
- Lazily created singleton for global access

Usage:
    from xivapi.utils import get_config

    config = get_config()
    client = XIVAPIClient(base_url=config.xivapi.base_url)
"""

from __future__ import annotations

import threading
from importlib.metadata import PackageNotFoundError, version
from logging import getLogger
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

logger = getLogger(__name__)

DISTRIBUTION_NAME = "xivapi-client"


def _package_version() -> str:
    """Return the installed distribution version, or a placeholder."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        logger.debug("Distribution %s is not installed", DISTRIBUTION_NAME)
        return "?.?.?"


class XIVAPIConfig(BaseSettings):
    """XIVAPI connection configuration."""

    base_url: str = Field(
        default="https://xivapi.com",
        description="Base URL for XIVAPI endpoints",
    )
    private_key: str | None = Field(
        default=None,
        description="Optional XIVAPI private key, sent as the last query parameter",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout in seconds",
    )
    user_agent: str = Field(
        default="",
        description="HTTP User-Agent header (auto-generated if empty)",
    )

    model_config = SettingsConfigDict(
        env_prefix="XIVAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and strip any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    @field_validator("private_key")
    @classmethod
    def validate_private_key(cls, v: str | None) -> str | None:
        """Treat an empty key as unset."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def computed_user_agent(self) -> str:
        """Generate User-Agent header if not explicitly set."""
        if self.user_agent:
            return self.user_agent
        return f"{DISTRIBUTION_NAME}/{_package_version()}"


class AppConfig(BaseSettings):
    """Application-wide configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class Config:
    """Main configuration container."""

    def __init__(self) -> None:
        """Initialize configuration from environment and defaults.

        Raises:
            ConfigurationError: If an environment value is invalid
        """
        try:
            self.app = AppConfig()
            self.xivapi = XIVAPIConfig()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def reload(self) -> None:
        """Reload configuration from environment variables."""
        self.__init__()

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(\n  app={self.app},\n  xivapi={self.xivapi}\n)"


# Global configuration instance (singleton)
_config_instance: Config | None = None
_config_lock = threading.Lock()


def get_config(config: Config | None = None) -> Config:
    """Get the global configuration instance (lazy initialization).

    Args:
        config: Optional config instance to use instead of singleton.
                If provided, it replaces the singleton.

    Returns:
        Global Config instance
    """
    global _config_instance  # noqa: PLW0603

    if config is not None:
        with _config_lock:
            _config_instance = config
        return _config_instance

    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = Config()

    assert _config_instance is not None
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment.

    Returns:
        Reloaded Config instance
    """
    global _config_instance  # noqa: PLW0603
    with _config_lock:
        _config_instance = Config()
    return _config_instance


def reset_config() -> None:
    """Reset the global config instance.

    Primarily for testing.
    """
    global _config_instance  # noqa: PLW0603
    with _config_lock:
        _config_instance = None
