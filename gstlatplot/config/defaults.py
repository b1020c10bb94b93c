"""Default configuration for gstlatplot."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PlotterConfig:
    """Configuration for latency extraction and total latency computation."""

    num_bins: int = 300
    begin: float = -1.0  # <0 means start from the beginning
    end: float = -1.0  # <0 means consider values till EOF
    top: float = -1.0  # y-axis limit, <0 means automatic
    max_plots: int = -1  # <0 means plot every element
    tolerance: Optional[float] = None  # None keeps the legacy bin guard


@dataclass
class OutputConfig:
    """Configuration for report outputs."""

    html: Optional[str] = "latency.html"
    png: Optional[str] = None
    csv: Optional[str] = None
    show: bool = False


DEFAULT_CONFIG = {
    "plot": PlotterConfig,
    "output": OutputConfig,
}
