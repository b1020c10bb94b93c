"""Shared utilities for gstlatplot."""

from .config_io import (
    ensure_parent_dir,
    load_json_file,
    load_yaml_file,
    save_json_file,
    save_yaml_file,
)
from .errors import AggregationError, ConfigError, GstLatPlotError, InputFileError

__all__ = [
    "GstLatPlotError",
    "ConfigError",
    "InputFileError",
    "AggregationError",
    "ensure_parent_dir",
    "load_json_file",
    "load_yaml_file",
    "save_json_file",
    "save_yaml_file",
]
