"""Configuration loading, schema, and defaults."""

from issuebridge.config.loader import ConfigError, load_config
from issuebridge.config.schema import IssueBridgeConfig

__all__ = [
    "ConfigError",
    "IssueBridgeConfig",
    "load_config",
]
