"""Application configuration helpers."""

from __future__ import annotations

from .api import RecordApiConfig, get_record_api_config
from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .storage import DatabaseConfig, get_database_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "RateLimit",
    "RecordApiConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_database_config",
    "get_record_api_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
