"""Configuration loading, schema, and defaults."""

from commitreview.config.loader import load_config
from commitreview.config.schema import ReviewConfig
from commitreview.errors import ConfigError

__all__ = [
    "ConfigError",
    "ReviewConfig",
    "load_config",
]
