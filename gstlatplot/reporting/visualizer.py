"""Static latency chart (matplotlib PNG)."""

from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from ..core.series import Series  # noqa: E402
from .plotly_chart import CHART_TITLE, TOTAL_COLOR, X_AXIS_TITLE, Y_AXIS_TITLE  # noqa: E402


class LatencyVisualizer:
    """Render ranked latency series to an image file."""

    def __init__(self, style: str = "seaborn-v0_8-darkgrid"):
        """Initialize visualizer.

        Args:
            style: Matplotlib style to use
        """
        try:
            plt.style.use(style)
        except OSError:
            plt.style.use("default")

    def plot_series(self, series: Sequence[Series], top: float = -1.0, title: str = CHART_TITLE) -> plt.Figure:
        """Create a line plot of latency over time.

        Args:
            series: Ranked series to draw
            top: Upper y-axis limit in ms, <=0 means automatic
            title: Graph title

        Returns:
            Matplotlib figure
        """
        fig, ax = plt.subplots(figsize=(12, 6))
        for s in series:
            kwargs = {"color": TOTAL_COLOR, "linewidth": 2} if s.is_total else {"linewidth": 1}
            ax.plot(s.timestamps, s.latencies, label=s.display_name, **kwargs)

        ax.set_xlabel(X_AXIS_TITLE, fontsize=12, fontweight="bold")
        ax.set_ylabel(Y_AXIS_TITLE, fontsize=12, fontweight="bold")
        ax.set_title(title, fontsize=14, fontweight="bold")
        if top > 0:
            ax.set_ylim(0, top)
        ax.legend(loc="upper right", fontsize=8)
        ax.grid(alpha=0.3)

        plt.tight_layout()
        return fig

    def save_png(self, series: Sequence[Series], output_path: str, top: float = -1.0) -> str:
        """Write the chart to a PNG file and return its path."""
        fig = self.plot_series(series, top=top)
        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output, dpi=150)
        plt.close(fig)
        return str(output)
