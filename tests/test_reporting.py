"""Tests for chart, table and CSV reporting."""

from pathlib import Path

import pandas as pd
import pytest
from rich.console import Console

from gstlatplot.core.series import Series, SeriesKind
from gstlatplot.core.stats import stats_table
from gstlatplot.reporting import (
    LatencyChart,
    LatencyVisualizer,
    StatsTableReporter,
    export_series_csv,
    series_to_dataframe,
)


@pytest.fixture
def ranked_series():
    return [
        Series(name="total", kind=SeriesKind.TOTAL, timestamps=[0.0, 1.0, 2.0], latencies=[0.0, 20.0, 45.0]),
        Series(name="X", timestamps=[0.0, 1.0, 2.0], latencies=[10.0, 20.0, 30.0]),
        Series(name="Y", timestamps=[0.0, 2.0], latencies=[5.0, 15.0]),
    ]


class TestLatencyChart:
    """Tests for the plotly chart."""

    def test_build_traces(self, ranked_series):
        fig = LatencyChart().build(ranked_series)

        assert [trace.name for trace in fig.data] == ["TOTAL", "X", "Y"]
        assert fig.data[0].line.color == "#FF0000"
        assert list(fig.data[2].y) == [5.0, 15.0]
        assert fig.layout.title.text == "Latency per element"
        assert fig.layout.xaxis.title.text == "Time [s]"
        assert fig.layout.yaxis.title.text == "Latency [ms]"

    def test_top_limits_y_axis(self, ranked_series):
        fig = LatencyChart(top=40).build(ranked_series)

        assert tuple(fig.layout.yaxis.range) == (0, 40)

    def test_automatic_y_axis(self, ranked_series):
        fig = LatencyChart(top=-1).build(ranked_series)

        assert fig.layout.yaxis.range is None

    def test_write_html(self, ranked_series, temp_dir):
        path = LatencyChart().write_html(ranked_series, f"{temp_dir}/out/latency.html")

        content = Path(path).read_text(encoding="utf-8")
        assert "Latency per element" in content


class TestLatencyVisualizer:
    """Tests for the matplotlib chart."""

    def test_save_png(self, ranked_series, temp_dir):
        path = LatencyVisualizer().save_png(ranked_series, f"{temp_dir}/latency.png", top=50)

        assert Path(path).stat().st_size > 0

    def test_plot_series_limits(self, ranked_series):
        fig = LatencyVisualizer().plot_series(ranked_series, top=50)
        ax = fig.axes[0]

        assert ax.get_ylim() == (0, 50)
        assert [line.get_label() for line in ax.get_lines()] == ["TOTAL", "X", "Y"]


class TestStatsTableReporter:
    """Tests for the rich statistics table."""

    def test_render(self, ranked_series):
        console = Console(record=True, width=120)
        rows = stats_table(ranked_series[1:] + ranked_series[:1])

        StatsTableReporter(console=console).render(rows)

        text = console.export_text()
        for header in ["median", "mean", "stdev", "var", "element"]:
            assert header in text
        assert "TOTAL" in text
        assert "20.0000" in text
        assert text.index("X") < text.index("TOTAL")

    def test_build_row_count(self, ranked_series):
        table = StatsTableReporter(console=Console(width=120)).build(stats_table(ranked_series))

        assert table.row_count == 3


class TestCSVExport:
    """Tests for CSV export."""

    def test_long_format(self, ranked_series):
        df = series_to_dataframe(ranked_series)

        assert list(df.columns) == ["series", "kind", "timestamp_s", "latency_ms"]
        assert len(df) == 8
        assert set(df[df["kind"] == "total"]["series"]) == {"TOTAL"}

    def test_export(self, ranked_series, temp_dir):
        path = export_series_csv(ranked_series, f"{temp_dir}/series.csv")

        df = pd.read_csv(path)
        assert df[df["series"] == "Y"]["latency_ms"].tolist() == [5.0, 15.0]

    def test_empty(self):
        assert series_to_dataframe([]).empty
