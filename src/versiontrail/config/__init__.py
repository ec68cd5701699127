"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_float_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .logging import configure_logging
from .sharepoint import SharePointConfig, build_resilience_config, get_sharepoint_config

__all__ = [
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "SharePointConfig",
    "build_resilience_config",
    "configure_logging",
    "get_sharepoint_config",
    "optional_env_var",
    "optional_float_env_var",
    "require_env_var",
    "require_env_vars",
]
