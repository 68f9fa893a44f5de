"""Configuration for spox."""

from spox.config._loader import deep_merge, parse_env_vars, set_nested_key
from spox.config._models import (
    Config,
    LogFormat,
    LoggingConfig,
    LogLevel,
    SearchConfiguration,
    ValidationConfiguration,
)

__all__ = [
    "Config",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SearchConfiguration",
    "ValidationConfiguration",
    "deep_merge",
    "parse_env_vars",
    "set_nested_key",
]
