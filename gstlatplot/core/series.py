"""Per-element latency time series and their accumulating store."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional

from .latency_log import Observation

TOTAL_LABEL = "TOTAL"


class SeriesKind(Enum):
    """Whether a series belongs to a pipeline element or is the summed total."""

    ELEMENT = "element"
    TOTAL = "total"


@dataclass
class SeriesStats:
    """Summary statistics of a series' latency values (milliseconds)."""

    median: float
    mean: float
    variance: float
    stdev: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "median": self.median,
            "mean": self.mean,
            "variance": self.variance,
            "stdev": self.stdev,
        }


@dataclass
class Series:
    """Latency samples of one element, or the aggregated total.

    Timestamps are in seconds, latencies in milliseconds. Both lists always
    have the same length.
    """

    name: str
    kind: SeriesKind = SeriesKind.ELEMENT
    timestamps: List[float] = field(default_factory=list)
    latencies: List[float] = field(default_factory=list)
    stats: Optional[SeriesStats] = None

    def append(self, timestamp_s: float, latency_ms: float) -> None:
        self.timestamps.append(timestamp_s)
        self.latencies.append(latency_ms)

    @property
    def is_total(self) -> bool:
        return self.kind is SeriesKind.TOTAL

    @property
    def display_name(self) -> str:
        """Legend and CSV name; the aggregate shows as TOTAL so it never clashes with an element."""
        return self.label

    @property
    def label(self) -> str:
        """Row label used by the statistics table."""
        return TOTAL_LABEL if self.is_total else self.name

    def __len__(self) -> int:
        return len(self.timestamps)

    def to_dict(self) -> Dict:
        return {
            "name": self.display_name,
            "kind": self.kind.value,
            "timestamps": list(self.timestamps),
            "latencies": list(self.latencies),
            "stats": self.stats.to_dict() if self.stats else None,
        }


class SeriesStore:
    """Accumulates Observations into one Series per element.

    Series keep the order in which elements first appear in the log, and
    samples keep log order. Timestamps are assumed non-decreasing per element;
    this is not checked.
    """

    def __init__(self):
        self._series: Dict[str, Series] = {}

    def record(self, observation: Observation) -> Series:
        """Append an observation to its element's series, creating it on first use."""
        series = self._series.get(observation.element)
        if series is None:
            series = Series(name=observation.element)
            self._series[observation.element] = series
        series.append(observation.timestamp_s, observation.latency_ms)
        return series

    def record_all(self, observations) -> int:
        """Record every observation of an iterable; return how many were stored."""
        count = 0
        for observation in observations:
            self.record(observation)
            count += 1
        return count

    def series(self) -> List[Series]:
        """Element series in first-encounter order."""
        return list(self._series.values())

    def names(self) -> List[str]:
        return list(self._series)

    def __getitem__(self, name: str) -> Series:
        return self._series[name]

    def __contains__(self, name: object) -> bool:
        return name in self._series

    def __iter__(self) -> Iterator[Series]:
        return iter(self._series.values())

    def __len__(self) -> int:
        return len(self._series)
