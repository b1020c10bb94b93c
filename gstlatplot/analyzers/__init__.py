"""Analyzer module for gstlatplot."""

from .element_latency import ElementLatencyAnalyzer

__all__ = ["ElementLatencyAnalyzer"]
