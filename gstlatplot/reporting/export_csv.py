"""CSV export of latency series."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd

from ..core.series import Series

CSV_COLUMNS = ["series", "kind", "timestamp_s", "latency_ms"]


def series_to_dataframe(series: Sequence[Series]) -> pd.DataFrame:
    """Flatten series into a long-format DataFrame, one row per sample."""
    frames = [
        pd.DataFrame(
            {
                "series": s.display_name,
                "kind": s.kind.value,
                "timestamp_s": s.timestamps,
                "latency_ms": s.latencies,
            },
            columns=CSV_COLUMNS,
        )
        for s in series
    ]
    if not frames:
        return pd.DataFrame(columns=CSV_COLUMNS)
    return pd.concat(frames, ignore_index=True)


def export_series_csv(series: Sequence[Series], output_path: str) -> str:
    """Write series samples to CSV and return the path."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    series_to_dataframe(series).to_csv(output, index=False)
    return str(output)
