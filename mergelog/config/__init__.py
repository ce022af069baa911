"""Configuration module."""

from .settings import (
    Config,
    NEW_TAG_PLACEHOLDER,
    STRATEGIES,
    STRATEGY_CLOSED_PULLS,
    STRATEGY_TAG_DELTA,
    get_config,
    load_json_config,
    find_config_file,
)

__all__ = [
    "Config",
    "NEW_TAG_PLACEHOLDER",
    "STRATEGIES",
    "STRATEGY_CLOSED_PULLS",
    "STRATEGY_TAG_DELTA",
    "get_config",
    "load_json_config",
    "find_config_file",
]
