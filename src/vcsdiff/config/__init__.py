"""Configuration loading, schema, and defaults."""

from vcsdiff.config.loader import ConfigError, load_config
from vcsdiff.config.schema import DiffConfig, LogConfig, OutputConfig, VcsDiffConfig

__all__ = [
    "ConfigError",
    "DiffConfig",
    "LogConfig",
    "OutputConfig",
    "VcsDiffConfig",
    "load_config",
]
