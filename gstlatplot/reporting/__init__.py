"""Reporting module for gstlatplot."""

from .export_csv import export_series_csv, series_to_dataframe
from .plotly_chart import LatencyChart
from .terminal_table import StatsTableReporter
from .visualizer import LatencyVisualizer

__all__ = [
    "LatencyChart",
    "LatencyVisualizer",
    "StatsTableReporter",
    "export_series_csv",
    "series_to_dataframe",
]
