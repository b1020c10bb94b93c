"""Interactive latency chart (plotly HTML)."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import plotly.graph_objects as go

from ..core.series import Series

CHART_TITLE = "Latency per element"
X_AXIS_TITLE = "Time [s]"
Y_AXIS_TITLE = "Latency [ms]"
TOTAL_COLOR = "#FF0000"


class LatencyChart:
    """Line chart with one trace per series; the total is drawn in red."""

    def __init__(self, title: str = CHART_TITLE, top: float = -1.0):
        """Initialize chart.

        Args:
            title: Figure title
            top: Upper y-axis limit in ms, <=0 means automatic
        """
        self.title = title
        self.top = top

    def build(self, series: Sequence[Series]) -> go.Figure:
        """Create the plotly figure for the ranked series."""
        fig = go.Figure()
        for s in series:
            line = dict(color=TOTAL_COLOR) if s.is_total else None
            fig.add_trace(
                go.Scatter(
                    x=list(s.timestamps),
                    y=list(s.latencies),
                    mode="lines",
                    name=s.display_name,
                    line=line,
                )
            )

        fig.update_layout(
            title=self.title,
            template="plotly_white",
            xaxis=dict(title=X_AXIS_TITLE),
            yaxis=dict(title=Y_AXIS_TITLE),
            margin=dict(l=48, r=48, t=84, b=48),
        )
        if self.top > 0:
            fig.update_yaxes(range=[0, self.top])
        return fig

    def write_html(self, series: Sequence[Series], output_path: str) -> str:
        """Write the chart to an HTML file and return its path."""
        fig = self.build(series)
        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(
            fig.to_html(
                full_html=True,
                include_plotlyjs="cdn",
                config={"displayModeBar": True, "displaylogo": False, "responsive": True},
            ),
            encoding="utf-8",
        )
        return str(output)

    def show(self, series: Sequence[Series]) -> None:
        """Open the chart in the default browser."""
        self.build(series).show()
