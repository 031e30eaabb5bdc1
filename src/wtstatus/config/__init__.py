"""Configuration loading, schema, and defaults."""

from wtstatus.config.loader import CONFIG_FILENAME, ConfigError, load_config
from wtstatus.config.schema import WtStatusConfig

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "WtStatusConfig",
    "load_config",
]
