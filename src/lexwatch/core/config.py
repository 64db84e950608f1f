"""Configuration models for lexwatch.

Defines Pydantic v2 models for the API connection, the job monitor cadence
and logging, plus the YAML loader used by the CLI.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from lexwatch.core.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_POLL_INTERVAL_SECONDS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_TOKEN_ENV,
    MAX_POLL_INTERVAL_SECONDS,
)
from lexwatch.core.exceptions import ConfigurationError
from lexwatch.core.logging import get_logger

_logger = get_logger("config")

CONFIG_ENV_VAR = "LEXWATCH_CONFIG"


class ApiConfig(BaseModel):
    """Connection settings for the administration API."""

    base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Base URL that job paths (/jobs/...) are appended to",
    )
    token_env: str = Field(
        default=DEFAULT_TOKEN_ENV,
        description="Environment variable holding the bearer token. "
        "The token itself is never stored in config files.",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT_SECONDS,
        gt=0,
        le=600,
        description="Total timeout per HTTP request. Expiry is reported as a network error.",
    )

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")

    def resolve_token(self) -> str:
        """Read the bearer token from the environment.

        Raises:
            ConfigurationError: If the variable is unset or empty.
        """
        token = os.environ.get(self.token_env, "").strip()
        if not token:
            raise ConfigurationError(
                f"No API token found. Set the {self.token_env} environment variable."
            )
        return token


class MonitorConfig(BaseModel):
    """Job monitor cadence."""

    poll_interval_seconds: float = Field(
        default=DEFAULT_POLL_INTERVAL_SECONDS,
        gt=0,
        le=MAX_POLL_INTERVAL_SECONDS,
        description="Fixed delay between status requests. No backoff is applied.",
    )


class LoggingConfig(BaseModel):
    """Structured logging settings; CLI flags take precedence."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["json", "console", "both"] = "console"
    file: Path | None = None


class LexwatchConfig(BaseModel):
    """Top-level lexwatch configuration."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    monitor: MonitorConfig = Field(default_factory=MonitorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_file: Path | None = None) -> LexwatchConfig:
    """Load configuration from YAML, or return defaults.

    When ``config_file`` is None the ``LEXWATCH_CONFIG`` environment variable
    is consulted; with neither set, defaults are returned.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, or
            fails validation.
    """
    if config_file is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return LexwatchConfig()
        config_file = Path(env_path)

    if not config_file.exists():
        raise ConfigurationError(f"Config file not found: {config_file}")

    try:
        with open(config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config root must be a mapping: {config_file}")

    try:
        config = LexwatchConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config {config_file}: {e}") from e

    _logger.debug("config.loaded", path=str(config_file))
    return config


__all__ = [
    "CONFIG_ENV_VAR",
    "ApiConfig",
    "LexwatchConfig",
    "LoggingConfig",
    "MonitorConfig",
    "load_config",
]
