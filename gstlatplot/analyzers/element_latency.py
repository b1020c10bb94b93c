"""Element latency analyzer for GStreamer pipelines.

This analyzer processes the trace log of the GStreamer ``latency`` tracer to
provide:
- One latency time series per pipeline element
- An estimated total pipeline latency series on a shared timeline
- Median, mean, standard deviation and variance per series
- The elements ranked by mean latency

Example usage:
    analyzer = ElementLatencyAnalyzer({"num_bins": 300, "max_plots": 5})
    result = analyzer.analyze("trace.log")
    ranked = result.raw_data["ranked"]
"""

import logging
import os
from typing import Any, Dict, Iterable, Optional

from ..core import (
    AnalysisResult,
    BaseAnalyzer,
    LatencyLogParser,
    SeriesStore,
    TotalLatencyAligner,
    annotate,
    rank_series,
    stats_table,
)
from ..core.aligner import DEFAULT_NUM_BINS
from ..utils.errors import AggregationError, InputFileError

LOGGER = logging.getLogger(__name__)


class ElementLatencyAnalyzer(BaseAnalyzer):
    """Analyze per-element and total latency from a GStreamer trace log."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize analyzer.

        Args:
            config: Optional configuration with:
                - num_bins: Sample points of the total series minus one (default: 300)
                - begin / end: Time window in seconds, <=0 means unbounded
                - max_plots: Number of top series to keep, <=0 keeps all
                - tolerance: Aligner distance tolerance, None for the default guard
        """
        super().__init__("ElementLatencyAnalyzer")
        self.config = config or {}
        self.num_bins = self.config.get("num_bins", DEFAULT_NUM_BINS)
        self.begin = self.config.get("begin", -1.0)
        self.end = self.config.get("end", -1.0)
        self.max_plots = self.config.get("max_plots", -1)
        self.tolerance = self.config.get("tolerance")

    def analyze(self, filepath: str) -> AnalysisResult:
        """Analyze a trace log file.

        Args:
            filepath: Path to the GST_DEBUG_FILE output

        Returns:
            AnalysisResult with per-series statistics

        Raises:
            InputFileError: If the file is missing, not a regular file or unreadable
            AggregationError: If the log has no element latency records
        """
        if not os.path.isfile(filepath):
            raise InputFileError(f'"{filepath}" is not a valid file!')
        parser = self._make_parser()
        store = SeriesStore()
        try:
            store.record_all(parser.parse_file(filepath))
        except OSError as exc:
            raise InputFileError(f'"{filepath}" is not a valid file!') from exc
        return self._analyze_store(store, parser, source=filepath)

    def analyze_lines(self, lines: Iterable[str]) -> AnalysisResult:
        """Analyze trace log content given as lines."""
        parser = self._make_parser()
        store = SeriesStore()
        store.record_all(parser.parse_lines(lines))
        return self._analyze_store(store, parser, source="lines")

    def _make_parser(self) -> LatencyLogParser:
        return LatencyLogParser(begin=self.begin, end=self.end)

    def _analyze_store(
        self,
        store: SeriesStore,
        parser: LatencyLogParser,
        source: str = "unknown",
    ) -> AnalysisResult:
        if len(store) == 0:
            raise AggregationError(f"No element-latency records found in {source}")

        elements = store.series()
        for series in elements:
            annotate(series)

        total = TotalLatencyAligner(self.num_bins, self.tolerance).align(elements)
        annotate(total)

        # report order: elements as first seen, total last
        emitted = elements + [total]
        rows = stats_table(emitted)
        ranked = rank_series(emitted, self.max_plots)
        LOGGER.debug("Ranked %d of %d series", len(ranked), len(emitted))

        metrics = {
            "source": source,
            "num_elements": len(elements),
            "num_samples": sum(len(s) for s in elements),
            "lines_accepted": parser.accepted,
            "lines_rejected": parser.rejected,
            "lines_outside_window": parser.filtered,
            "num_bins": self.num_bins,
            "time_span_s": [total.timestamps[0], total.timestamps[-1]],
            "stats": [row.to_dict() for row in rows],
            "ranking": [s.display_name for s in ranked],
        }

        result = AnalysisResult(
            name="Element Latency Analysis",
            metrics=metrics,
            raw_data={
                "series": emitted,
                "total": total,
                "rows": rows,
                "ranked": ranked,
            },
        )
        self.add_result(result)
        return result
