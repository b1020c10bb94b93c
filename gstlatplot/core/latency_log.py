"""GStreamer latency tracer log parsing.

The ``latency`` tracer with ``flags=element`` writes one line per buffer and
element through the GST_TRACER debug category, for example::

    0:00:01.207937390 31063 0x55d5c0 TRACE GST_TRACER :0:: element-latency,
    element-id=(string)0x55d5c1, element=(string)queue0, src=(string)src,
    time=(guint64)1502357, ts=(guint64)1207890123;

(all on one line). Record it with::

    GST_DEBUG_COLOR_MODE=off GST_TRACERS="latency(flags=pipeline+element)" \\
    GST_DEBUG=GST_TRACER:7 GST_DEBUG_FILE=trace.log <app>

# Classes:
- Observation: one element latency sample.
- LatencyLogParser: turns trace lines into Observations, dropping everything else.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

LOGGER = logging.getLogger(__name__)

UINT64_RANGE = 1 << 64
INT64_SIGN_BIT = 1 << 63

NANOSECONDS_PER_MILLISECOND = 1_000_000
NANOSECONDS_PER_SECOND = 1_000_000_000


def to_signed64(value: int) -> int:
    """Interpret an unsigned 64-bit value as two's-complement signed."""
    return value - UINT64_RANGE if value >= INT64_SIGN_BIT else value


@dataclass(frozen=True)
class Observation:
    """A single element latency sample."""

    element: str
    timestamp_s: float
    latency_ms: float


class LatencyLogParser:
    """Parser for ``element-latency`` records of a GStreamer trace log.

    Lines that are not element latency records, or whose numbers cannot be
    read, are rejected by returning ``None``. They are routine noise in a
    trace log and never raise.
    """

    TRACER_CATEGORY = "GST_TRACER"
    ELEMENT_LATENCY_RECORD = "element-latency,"
    NUM_COLUMNS = 12

    # Column index and fixed field prefix of each value we read
    ELEMENT_COLUMN, ELEMENT_PREFIX = 8, "element=(string)"
    TIME_COLUMN, TIME_PREFIX = 10, "time=(guint64)"
    TS_COLUMN, TS_PREFIX = 11, "ts=(guint64)"

    def __init__(self, begin: float = -1.0, end: float = -1.0):
        """Initialize parser.

        Args:
            begin: Drop samples before this time in seconds (<=0 means unbounded)
            end: Drop samples after this time in seconds (<=0 means unbounded)
        """
        self.begin = begin
        self.end = end
        self.accepted = 0
        self.rejected = 0
        self.filtered = 0

    @staticmethod
    def _field_value(token: str, prefix: str) -> str:
        # strip the prefix and the trailing ',' or ';'
        return token[len(prefix) : -1]

    @classmethod
    def _read_uint64(cls, token: str, prefix: str) -> Optional[int]:
        text = cls._field_value(token, prefix)
        if not (text.isascii() and text.isdigit()):
            return None
        value = int(text)
        if value >= UINT64_RANGE:
            return None
        return value

    def in_window(self, timestamp_s: float) -> bool:
        """Return True if the timestamp lies inside the configured window (inclusive)."""
        if self.begin > 0 and timestamp_s < self.begin:
            return False
        if self.end > 0 and timestamp_s > self.end:
            return False
        return True

    def parse_line(self, line: str) -> Optional[Observation]:
        """Parse a single trace log line.

        Args:
            line: Raw log line

        Returns:
            Observation, or None if the line is not a usable latency record
        """
        columns = line.split()
        if (
            len(columns) < 7
            or columns[4] != self.TRACER_CATEGORY
            or columns[6] != self.ELEMENT_LATENCY_RECORD
            or len(columns) != self.NUM_COLUMNS
        ):
            self.rejected += 1
            return None

        element = self._field_value(columns[self.ELEMENT_COLUMN], self.ELEMENT_PREFIX)
        time_ns = self._read_uint64(columns[self.TIME_COLUMN], self.TIME_PREFIX)
        ts_ns = self._read_uint64(columns[self.TS_COLUMN], self.TS_PREFIX)
        if not element or time_ns is None or ts_ns is None:
            self.rejected += 1
            return None

        timestamp_s = ts_ns / NANOSECONDS_PER_SECOND
        if not self.in_window(timestamp_s):
            self.filtered += 1
            return None

        self.accepted += 1
        return Observation(
            element=element,
            timestamp_s=timestamp_s,
            latency_ms=to_signed64(time_ns) / NANOSECONDS_PER_MILLISECOND,
        )

    def parse_lines(self, lines: Iterable[str]) -> Iterator[Observation]:
        """Yield an Observation for every accepted line."""
        for line in lines:
            observation = self.parse_line(line)
            if observation is not None:
                yield observation

    def parse_file(self, filepath: str) -> Iterator[Observation]:
        """Stream Observations from a trace log file.

        Args:
            filepath: Path to GST_DEBUG_FILE output

        Yields:
            Observation objects in log order
        """
        try:
            with open(filepath, encoding="utf-8", errors="replace") as f:
                yield from self.parse_lines(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Trace log not found: {filepath}")
        LOGGER.debug(
            "Parsed %s: %d accepted, %d rejected, %d outside time window",
            filepath,
            self.accepted,
            self.rejected,
            self.filtered,
        )
