"""Ordering of series by their contribution to latency."""

from typing import List, Sequence

from .series import Series
from .stats import compute_stats


def _mean(series: Series) -> float:
    if series.stats is not None:
        return series.stats.mean
    return compute_stats(series.latencies).mean


def rank_series(series: Sequence[Series], max_plots: int = -1) -> List[Series]:
    """Sort series by descending mean latency.

    The sort is stable, so equal means keep their input order. The total
    series takes part like any other. Input series are not modified.

    Args:
        series: Series to rank
        max_plots: Keep only the first N after sorting (<=0 keeps all)

    Returns:
        Ranked list of series
    """
    ranked = sorted(series, key=_mean, reverse=True)
    if max_plots > 0:
        ranked = ranked[:max_plots]
    return ranked
