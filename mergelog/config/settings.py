"""Configuration management for mergelog."""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigError


NEW_TAG_PLACEHOLDER = "NEW_TAG_HERE"

STRATEGY_CLOSED_PULLS = "closed-pulls"
STRATEGY_TAG_DELTA = "tag-delta"
STRATEGIES = (STRATEGY_CLOSED_PULLS, STRATEGY_TAG_DELTA)

ENV_PREFIX = "MERGELOG_"

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Configuration settings for mergelog."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, case_sensitive=False)

    github_token: Optional[str] = None
    main_branch: str = "main"
    strategy: str = STRATEGY_CLOSED_PULLS
    tag: str = NEW_TAG_PLACEHOLDER
    api_url: str = "https://api.github.com"
    http_timeout: Optional[float] = None
    repo_path: Optional[str] = None

    @field_validator('api_url')
    @classmethod
    def normalize_api_url(cls, v):
        """Ensure the API URL has a protocol and no trailing slash."""
        if v and not v.startswith(('http://', 'https://')):
            v = f"https://{v}"
        return v.rstrip('/')

    @field_validator('strategy')
    @classmethod
    def check_strategy(cls, v):
        if v not in STRATEGIES:
            raise ValueError(f"unknown strategy {v!r}, expected one of {', '.join(STRATEGIES)}")
        return v

    @field_validator('main_branch', 'tag')
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


def load_json_config(config_path: str) -> dict:
    """Load configuration from JSON file.

    Args:
        config_path: Path to JSON configuration file

    Returns:
        Configuration dictionary
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Error loading config file {config_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Error loading config file {config_path}: expected a JSON object")
    return data


def find_config_file() -> Optional[str]:
    """Find configuration file in common locations.

    Returns:
        Path to config file or None if not found
    """
    search_paths = [
        "mergelog.json",
        ".mergelog.json",
        "~/.mergelog.json",
        "~/.config/mergelog/config.json",
    ]

    for path_str in search_paths:
        path = Path(path_str).expanduser()
        if path.exists() and path.is_file():
            return str(path)

    return None


def get_config(config_file: Optional[str] = None, **overrides) -> Config:
    """Load configuration from a JSON file, environment variables and overrides.

    Precedence, lowest first: JSON file, ``MERGELOG_*`` environment variables,
    explicit overrides (usually CLI flags). Overrides set to None are ignored.

    Args:
        config_file: Optional path to JSON config file
        **overrides: Explicit field values

    Returns:
        Configuration object
    """
    config_data = {}

    if config_file:
        config_data.update(load_json_config(config_file))
    else:
        found = find_config_file()
        if found:
            try:
                found_data = load_json_config(found)
                Config(**found_data)
            except ConfigError as e:
                logger.warning(f"Ignoring config file: {e}")
            except ValidationError as e:
                logger.warning(f"Ignoring config file {found}: {e}")
            else:
                config_data.update(found_data)

    # Environment variables override JSON config
    for name in Config.model_fields:
        value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            config_data[name] = value

    config_data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return Config(**config_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")
