"""Command handlers for the gstlatplot CLI."""

from .plot import run_plot

__all__ = ["run_plot"]
