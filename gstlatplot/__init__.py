"""gstlatplot - GStreamer pipeline latency plotter."""

__version__ = "1.0"
__description__ = "Per-element and total latency analysis of GStreamer latency tracer logs"

from .analyzers import ElementLatencyAnalyzer
from .config import Config, ConfigManager
from .core import (
    AnalysisResult,
    LatencyLogParser,
    Observation,
    Series,
    SeriesKind,
    SeriesStats,
    SeriesStore,
    StatsRow,
    TotalLatencyAligner,
    compute_stats,
    rank_series,
    stats_table,
)
from .reporting import LatencyChart, LatencyVisualizer, StatsTableReporter, export_series_csv
from .utils.errors import AggregationError, ConfigError, GstLatPlotError, InputFileError

__all__ = [
    "Config",
    "ConfigManager",
    # Core
    "AnalysisResult",
    "LatencyLogParser",
    "Observation",
    "Series",
    "SeriesKind",
    "SeriesStats",
    "SeriesStore",
    "StatsRow",
    "TotalLatencyAligner",
    "compute_stats",
    "rank_series",
    "stats_table",
    # Analyzers
    "ElementLatencyAnalyzer",
    # Reporting
    "LatencyChart",
    "LatencyVisualizer",
    "StatsTableReporter",
    "export_series_csv",
    # Errors
    "GstLatPlotError",
    "ConfigError",
    "InputFileError",
    "AggregationError",
]
