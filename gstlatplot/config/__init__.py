"""Configuration management for gstlatplot."""

from .config import CONFIG_ENV_VAR, Config, ConfigManager
from .defaults import DEFAULT_CONFIG, OutputConfig, PlotterConfig

__all__ = [
    "Config",
    "ConfigManager",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG",
    "PlotterConfig",
    "OutputConfig",
]
