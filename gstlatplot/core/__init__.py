"""Core module for gstlatplot."""

from .aligner import DEFAULT_NUM_BINS, TotalLatencyAligner
from .base import AnalysisResult, BaseAnalyzer
from .latency_log import LatencyLogParser, Observation, to_signed64
from .ranking import rank_series
from .series import Series, SeriesKind, SeriesStats, SeriesStore
from .stats import StatsRow, annotate, compute_stats, stats_table, to_dataframe

__all__ = [
    "AnalysisResult",
    "BaseAnalyzer",
    # Log parsing
    "LatencyLogParser",
    "Observation",
    "to_signed64",
    # Series
    "Series",
    "SeriesKind",
    "SeriesStats",
    "SeriesStore",
    # Aggregation
    "TotalLatencyAligner",
    "DEFAULT_NUM_BINS",
    "StatsRow",
    "annotate",
    "compute_stats",
    "stats_table",
    "to_dataframe",
    "rank_series",
]
