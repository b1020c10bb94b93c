"""Resampling of per-element series onto a shared timeline.

Elements report latency whenever a buffer passes them, so every series has
its own irregular sampling. To estimate the latency of the whole pipeline the
aligner picks ``num_bins + 1`` evenly spaced sample times between the first
and the last sample of the log, looks up each element's nearest sample with a
forward-only cursor walk and sums the latencies per sample time.
"""

import logging
from typing import List, Optional, Sequence

from ..utils.errors import AggregationError
from .series import Series, SeriesKind

LOGGER = logging.getLogger(__name__)

DEFAULT_NUM_BINS = 300


class TotalLatencyAligner:
    """Build the ``total`` latency series from element series.

    Example usage:
        aligner = TotalLatencyAligner(num_bins=300)
        total = aligner.align(store.series())
    """

    def __init__(self, num_bins: int = DEFAULT_NUM_BINS, tolerance: Optional[float] = None):
        """Initialize aligner.

        Args:
            num_bins: Number of intervals; the total has num_bins + 1 points
            tolerance: Maximum distance in seconds between a bin and the
                selected sample for the sample to count. None keeps the
                historical guard, which compares the distance with the bin
                timestamp itself.
        """
        self.num_bins = num_bins
        self.tolerance = tolerance

    def _accepts(self, bin_ts: float, distance: float) -> bool:
        if self.tolerance is None:
            return distance < bin_ts
        return distance <= self.tolerance

    @staticmethod
    def nearest_index(timestamps: Sequence[float], bin_ts: float, start: int) -> int:
        """Walk forward from ``start`` while the next sample is strictly closer to bin_ts."""
        idx = start
        last = len(timestamps) - 1
        while idx < last and abs(bin_ts - timestamps[idx + 1]) < abs(bin_ts - timestamps[idx]):
            idx += 1
        return idx

    def bin_timestamps(self, series: Sequence[Series]) -> List[float]:
        """Evenly spaced sample times spanning all series."""
        min_ts = min(s.timestamps[0] for s in series)
        max_ts = max(s.timestamps[-1] for s in series)
        dt = (max_ts - min_ts) / self.num_bins
        return [min_ts + dt * n for n in range(self.num_bins + 1)]

    def align(self, series: Sequence[Series]) -> Series:
        """Compute the total latency series.

        Args:
            series: Element series with non-decreasing timestamps

        Returns:
            Series of kind TOTAL with exactly num_bins + 1 points

        Raises:
            AggregationError: If there is nothing to align or num_bins <= 0
        """
        if self.num_bins <= 0:
            raise AggregationError(f"num_bins must be positive, got {self.num_bins}")
        elements = [s for s in series if not s.is_total]
        if not elements:
            raise AggregationError("No element series to aggregate")
        for s in elements:
            if len(s) == 0:
                raise AggregationError(f"Series '{s.name}' has no samples")

        bins = self.bin_timestamps(elements)
        LOGGER.debug(
            "Aligning %d series onto %d points in [%f, %f]",
            len(elements),
            len(bins),
            bins[0],
            bins[-1],
        )

        total = Series(name="total", kind=SeriesKind.TOTAL)
        cursors = [0] * len(elements)
        for bin_ts in bins:
            sum_val = 0.0
            for i, element in enumerate(elements):
                idx = self.nearest_index(element.timestamps, bin_ts, cursors[i])
                cursors[i] = idx
                if self._accepts(bin_ts, abs(bin_ts - element.timestamps[idx])):
                    sum_val += element.latencies[idx]
            total.append(bin_ts, sum_val)
        return total
