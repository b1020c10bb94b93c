"""Configuration management system for gstlatplot."""

import os
from dataclasses import asdict, fields, replace
from typing import Any, Dict, Optional

from ..utils.config_io import (
    load_json_file,
    load_yaml_file,
    save_json_file,
    save_yaml_file,
)
from ..utils.errors import ConfigError
from .defaults import DEFAULT_CONFIG, OutputConfig, PlotterConfig

CONFIG_ENV_VAR = "GSTLATPLOT_CONFIG"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Config:
    """Unified configuration container for gstlatplot."""

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """Initialize configuration.

        Args:
            config_dict: Optional dictionary to override defaults
        """
        self.config = {key: factory() for key, factory in DEFAULT_CONFIG.items()}
        if config_dict:
            self.update(config_dict)

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration with provided values.

        Args:
            config_dict: Dictionary with configuration overrides, e.g.
                ``{"plot": {"num_bins": 100}}``

        Raises:
            ConfigError: If a section or field is unknown
        """
        for key, value in config_dict.items():
            if key not in self.config:
                raise ConfigError(f"Unknown config section: {key}")
            if not isinstance(value, dict):
                raise ConfigError(f"Config section '{key}' must be a mapping")
            section = self.config[key]
            known = {f.name for f in fields(section)}
            unknown = set(value) - known
            if unknown:
                raise ConfigError(f"Unknown option(s) in '{key}': {sorted(unknown)}")
            self.config[key] = replace(section, **value)
        self.validate()

    def validate(self) -> None:
        """Check value types and ranges that would make the analysis meaningless."""
        plot = self.plot
        for name in ("num_bins", "max_plots"):
            value = getattr(plot, name)
            if not _is_int(value):
                raise ConfigError(f"plot.{name} must be an integer, got {value!r}")
        for name in ("begin", "end", "top"):
            value = getattr(plot, name)
            if not _is_number(value):
                raise ConfigError(f"plot.{name} must be a number, got {value!r}")
        if plot.tolerance is not None and not _is_number(plot.tolerance):
            raise ConfigError(f"plot.tolerance must be a number, got {plot.tolerance!r}")

        if plot.num_bins <= 0:
            raise ConfigError(f"plot.num_bins must be a positive integer, got {plot.num_bins!r}")
        if plot.begin > 0 and plot.end > 0 and plot.begin > plot.end:
            raise ConfigError(f"plot.begin ({plot.begin}) is after plot.end ({plot.end})")
        if plot.tolerance is not None and plot.tolerance < 0:
            raise ConfigError(f"plot.tolerance must be >= 0, got {plot.tolerance}")

        output = self.output
        for name in ("html", "png", "csv"):
            value = getattr(output, name)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"output.{name} must be a path, got {value!r}")
        if not isinstance(output.show, bool):
            raise ConfigError(f"output.show must be true or false, got {output.show!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key.

        Args:
            key: Configuration key (e.g., 'plot.num_bins')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.to_dict()
        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Configuration as dictionary
        """
        return {key: asdict(value) for key, value in self.config.items()}

    @property
    def plot(self) -> PlotterConfig:
        """Get plot configuration."""
        return self.config["plot"]

    @property
    def output(self) -> OutputConfig:
        """Get output configuration."""
        return self.config["output"]


class ConfigManager:
    """Manages loading and saving configuration files."""

    @staticmethod
    def load_yaml(filepath: str) -> Config:
        """Load configuration from YAML file.

        Args:
            filepath: Path to YAML configuration file

        Returns:
            Config object
        """
        return Config(load_yaml_file(filepath))

    @staticmethod
    def load_json(filepath: str) -> Config:
        """Load configuration from JSON file.

        Args:
            filepath: Path to JSON configuration file

        Returns:
            Config object
        """
        return Config(load_json_file(filepath))

    @staticmethod
    def save_yaml(config: Config, filepath: str) -> None:
        """Save configuration to YAML file."""
        save_yaml_file(filepath, config.to_dict())

    @staticmethod
    def save_json(config: Config, filepath: str) -> None:
        """Save configuration to JSON file."""
        save_json_file(filepath, config.to_dict())

    @staticmethod
    def load_or_default(filepath: Optional[str] = None) -> Config:
        """Load configuration from file or return defaults.

        Falls back to the file named by ``GSTLATPLOT_CONFIG`` when no path is given.

        Args:
            filepath: Optional path to configuration file

        Returns:
            Config object (loaded from file or defaults)

        Raises:
            ConfigError: If an explicitly requested file is missing or has an
                unsupported extension
        """
        filepath = filepath or os.environ.get(CONFIG_ENV_VAR)
        if not filepath:
            return Config()
        if not os.path.isfile(filepath):
            raise ConfigError(f"Config file not found: {filepath}")
        if filepath.endswith(".yaml") or filepath.endswith(".yml"):
            return ConfigManager.load_yaml(filepath)
        if filepath.endswith(".json"):
            return ConfigManager.load_json(filepath)
        raise ConfigError(f"Unsupported config format (use .yaml, .yml or .json): {filepath}")
