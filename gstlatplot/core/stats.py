"""Descriptive statistics over latency series."""

from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from .series import Series, SeriesStats

STATS_COLUMNS = ["median", "mean", "stdev", "var", "element"]


def compute_stats(values: Sequence[float]) -> SeriesStats:
    """Calculate median, mean, population variance and standard deviation.

    Args:
        values: Latency values in milliseconds

    Returns:
        SeriesStats for the values

    Raises:
        ValueError: If values is empty
    """
    if len(values) == 0:
        raise ValueError("Cannot compute statistics of an empty series")
    data = np.asarray(values, dtype=float)
    return SeriesStats(
        median=float(np.median(data)),
        mean=float(np.mean(data)),
        variance=float(np.var(data)),
        stdev=float(np.std(data)),
    )


def annotate(series: Series) -> SeriesStats:
    """Compute statistics for a series and attach them to it."""
    series.stats = compute_stats(series.latencies)
    return series.stats


@dataclass
class StatsRow:
    """One row of the statistics report."""

    median: float
    mean: float
    stdev: float
    variance: float
    label: str
    is_total: bool = False

    @classmethod
    def from_series(cls, series: Series) -> "StatsRow":
        stats = series.stats or annotate(series)
        return cls(
            median=stats.median,
            mean=stats.mean,
            stdev=stats.stdev,
            variance=stats.variance,
            label=series.label,
            is_total=series.is_total,
        )

    def to_list(self) -> List:
        return [self.median, self.mean, self.stdev, self.variance, self.label]

    def to_dict(self) -> Dict:
        return {
            "median": self.median,
            "mean": self.mean,
            "stdev": self.stdev,
            "var": self.variance,
            "element": self.label,
        }


def stats_table(series: Sequence[Series]) -> List[StatsRow]:
    """Build report rows in the given (emission) order."""
    return [StatsRow.from_series(s) for s in series]


def to_dataframe(rows: Sequence[StatsRow]) -> pd.DataFrame:
    """Render statistics rows as a DataFrame with the report's column names."""
    return pd.DataFrame([row.to_dict() for row in rows], columns=STATS_COLUMNS)
