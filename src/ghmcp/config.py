"""Server configuration — GitHub credentials, API location and logging.

Settings come from the environment (``GITHUB_TOKEN`` and friends) or from a
YAML file whose values may reference environment variables as ``${VAR}``.
Keys missing from the file fall back to the environment.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0

_ENV_VARS: dict[str, str] = {
    "token": "GITHUB_TOKEN",
    "api_url": "GITHUB_API_URL",
    "timeout": "GITHUB_TIMEOUT",
    "log_level": "GHMCP_LOG_LEVEL",
}


class ConfigError(Exception):
    """Raised when the server configuration is missing or invalid."""


class ServerConfig(BaseModel):
    """Everything the ``serve`` command needs to build its GitHub client."""

    token: str = Field(min_length=1, repr=False)
    api_url: str = DEFAULT_API_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    log_level: str = "WARNING"

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"unknown log level: {value}"
            raise ValueError(msg)
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Build a config from environment variables.

        Raises:
            ConfigError: If ``GITHUB_TOKEN`` is unset or a value is invalid.
        """
        env = os.environ if environ is None else environ
        return _validate(_from_environ(env))


def load_config(path: Path) -> ServerConfig:
    """Read a YAML config file, expanding ``${VAR}`` references first.

    Raises:
        ConfigError: On unreadable files, YAML errors or invalid values.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    expanded = os.path.expandvars(raw)

    try:
        data: Any = yaml.safe_load(expanded)
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parse error: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Config file must be a mapping")

    merged = _from_environ(os.environ)
    merged.update({key: value for key, value in data.items() if value is not None})
    return _validate(merged)


def _from_environ(env: Mapping[str, str]) -> dict[str, Any]:
    return {field: env[var] for field, var in _ENV_VARS.items() if env.get(var)}


def _validate(data: dict[str, Any]) -> ServerConfig:
    if not data.get("token"):
        raise ConfigError("GITHUB_TOKEN required")
    try:
        return ServerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
