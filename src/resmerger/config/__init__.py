"""Environment-driven configuration."""

from __future__ import annotations

from .cache import CacheConfig, get_cache_config
from .env import env_name, optional_setting, require_setting
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging, get_log_level
from .output import OutputLayout, get_output_layout

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "OutputLayout",
    "configure_logging",
    "env_name",
    "get_cache_config",
    "get_log_level",
    "get_output_layout",
    "optional_setting",
    "require_setting",
]
