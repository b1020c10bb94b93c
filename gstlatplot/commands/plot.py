"""Plot command handler for the gstlatplot CLI."""

from __future__ import annotations

import logging
from typing import Any

from ..analyzers import ElementLatencyAnalyzer
from ..config import Config
from ..core import AnalysisResult
from ..reporting import (
    LatencyChart,
    LatencyVisualizer,
    StatsTableReporter,
    export_series_csv,
)

LOGGER = logging.getLogger(__name__)


def run_plot(args: Any, config: Config, *, reporter: StatsTableReporter | None = None) -> AnalysisResult:
    """Analyze the trace log, print the statistics table and write the charts."""
    plot = config.plot
    output = config.output

    analyzer = ElementLatencyAnalyzer(
        {
            "num_bins": plot.num_bins,
            "begin": plot.begin,
            "end": plot.end,
            "max_plots": plot.max_plots,
            "tolerance": plot.tolerance,
        }
    )
    result = analyzer.analyze(args.input)
    metrics = result.metrics
    LOGGER.info(
        "%d element(s), %d sample(s) from %s",
        metrics["num_elements"],
        metrics["num_samples"],
        metrics["source"],
    )

    (reporter or StatsTableReporter()).render(result.raw_data["rows"])

    ranked = result.raw_data["ranked"]
    chart = LatencyChart(top=plot.top)
    if output.html:
        path = chart.write_html(ranked, output.html)
        print(f"Chart written to {path}")
    if output.png:
        path = LatencyVisualizer().save_png(ranked, output.png, top=plot.top)
        print(f"Image written to {path}")
    if output.csv:
        path = export_series_csv(ranked, output.csv)
        print(f"Series exported to {path}")
    if output.show:
        chart.show(ranked)
    return result
