"""
reelscroll Settings Management
Loads and validates settings from settings.yml, environment and CLI using Pydantic
"""

import os
from pathlib import Path
from typing import Mapping, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from reelscroll.modules.search.search_omdb import OMDB_BASE_URL

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "reelscroll" / "settings.yml"

# environment variable -> settings field
ENV_VARS = {
    "OMDB_API_KEY": "api_key",
    "REELSCROLL_BASE_URL": "base_url",
}

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Settings could not be read or did not validate."""


class Settings(BaseModel):
    """Main settings model"""
    api_key: str = Field(
        default="",
        description="OMDb API key (https://www.omdbapi.com/apikey.aspx)"
    )
    base_url: str = Field(
        default=OMDB_BASE_URL,
        description="OMDb endpoint root"
    )
    timeout: float = Field(
        default=30.0,
        ge=1,
        le=120,
        description="Per-request timeout in seconds (1-120)"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Write logs to this file"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum log level"
    )

    @field_validator('api_key', mode='before')
    @classmethod
    def coerce_api_key(cls, v):
        """YAML reads an all-digit key as an int"""
        if v is None:
            return ""
        return str(v)

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Only plain http(s) endpoints"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(sorted(LOG_LEVELS))}")
        return level

    def require_api_key(self) -> str:
        """Return the API key, or raise ConfigError when none is configured"""
        if not self.api_key.strip():
            raise ConfigError(
                "No OMDb API key configured. Pass --api-key, set OMDB_API_KEY, "
                f"or add api_key to {DEFAULT_CONFIG_PATH}"
            )
        return self.api_key.strip()


def _read_yaml(config_path: Path) -> dict:
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing settings YAML {config_path}: {e}") from e

    if config_data is None:
        logger.debug("Settings file {} is empty, using defaults", config_path)
        return {}
    if not isinstance(config_data, dict):
        raise ConfigError(f"Settings file {config_path} must contain a mapping")
    return config_data


def load_settings(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, object]] = None,
) -> Settings:
    """
    Build Settings from, lowest precedence first: defaults, YAML file,
    environment, explicit overrides (CLI flags).

    Args:
        config_path: Settings file. A missing default file is fine; a missing
            explicitly given file is an error.
        environ: Environment mapping, defaults to os.environ
        overrides: Field values; None entries are ignored
    """
    data: dict = {}

    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if path.exists():
        data.update(_read_yaml(path))
        logger.debug("Loaded settings from {}", path)
    elif config_path is not None:
        raise ConfigError(f"Settings file not found: {path}")

    env = os.environ if environ is None else environ
    for var, field in ENV_VARS.items():
        if env.get(var):
            data[field] = env[var]

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
