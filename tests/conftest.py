"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest


def make_latency_line(element: str, time_ns: int, ts_ns: int) -> str:
    """Build an element-latency line as written by the GStreamer latency tracer."""
    return (
        f"0:00:01.207937390 31063 0x55d5c0a0e4a0 TRACE             GST_TRACER :0:: "
        f"element-latency, element-id=(string)0x55d5c1b2c3d0, element=(string){element}, "
        f"src=(string)src, time=(guint64){time_ns}, ts=(guint64){ts_ns};"
    )


def _scenario_lines():
    """X at ts 0,1,2 with 10,20,30 ms; Y at ts 0,2 with 5,15 ms."""
    return [
        "0:00:00.000000000 31063 0x55d5c0a0e4a0 INFO GST_INIT gst.c:586:init_pre: Initializing GStreamer",
        make_latency_line("X", 10_000_000, 0),
        make_latency_line("Y", 5_000_000, 0),
        make_latency_line("X", 20_000_000, 1_000_000_000),
        "0:00:01.000000000 31063 0x55d5c0a0e4a0 TRACE GST_TRACER :0:: latency, src=(string)src, sink=(string)sink;",
        make_latency_line("X", 30_000_000, 2_000_000_000),
        make_latency_line("Y", 15_000_000, 2_000_000_000),
    ]


def _temp_trace_file(lines):
    """Create a temporary trace log (close before yield for Windows)."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".log", delete=False) as f:
        f.write("\n".join(lines) + "\n")
        f.flush()
        name = f.name
    try:
        yield name
    finally:
        Path(name).unlink(missing_ok=True)


@pytest.fixture
def scenario_lines():
    """Trace lines of the two-element reference scenario."""
    return _scenario_lines()


@pytest.fixture
def temp_trace_file():
    """Temporary trace log holding the two-element reference scenario."""
    yield from _temp_trace_file(_scenario_lines())


@pytest.fixture
def empty_trace_file():
    """Temporary trace log without any element-latency record."""
    yield from _temp_trace_file(["0:00:00.1 1 0x1 INFO GST_INIT gst.c:586:init_pre: hello"])


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir
