"""Custom exceptions for gstlatplot.

Callers can tell a bad configuration, a missing trace file and an input that
cannot be aggregated apart from each other and from programming errors.
"""


class GstLatPlotError(Exception):
    """Base exception for all gstlatplot errors."""

    pass


class ConfigError(GstLatPlotError):
    """Raised when configuration is invalid or a config file cannot be used."""

    pass


class InputFileError(GstLatPlotError):
    """Raised when the trace log does not exist or is not a regular file."""

    pass


class AggregationError(GstLatPlotError):
    """Raised when parsed series cannot be combined into a total latency series."""

    pass
