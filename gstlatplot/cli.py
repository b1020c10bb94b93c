"""Command-line interface for gstlatplot.

Plots the latency of each element of a GStreamer pipeline, and the estimated
total latency, from a latency tracer log.
"""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from .commands import run_plot
from .config import Config, ConfigManager
from .utils.errors import GstLatPlotError

LOGGER = logging.getLogger(__name__)

EPILOG = """
Record a trace log of your application with:
  GST_DEBUG_COLOR_MODE=off GST_TRACERS="latency(flags=pipeline+element)" \\
  GST_DEBUG=GST_TRACER:7 GST_DEBUG_FILE=<yourTracefile> <YourApp>

Examples:
  gstlatplot trace.log
  gstlatplot -i trace.log --numbins 500 --begin 2 --end 10
  gstlatplot trace.log --maxplots 5 --top 40 --png latency.png --export-csv latency.csv

Environment Variables:
  GSTLATPLOT_CONFIG     Default config file path (YAML/JSON)
"""


def setup_parser() -> argparse.ArgumentParser:
    """Setup command-line argument parser.

    Returns:
        ArgumentParser configured for gstlatplot
    """
    parser = argparse.ArgumentParser(
        prog="gstlatplot",
        description="GStreamer logfile latency plotter. Plots the latency of each element of a pipeline.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument("input_file", nargs="?", metavar="FILE", help="The input logfile to process.")
    parser.add_argument("-i", "--input", metavar="FILE", help="The input logfile to process.")
    parser.add_argument(
        "-n",
        "--numbins",
        type=int,
        help="Number of measurement bins for TOTAL latency computation (default: 300).",
    )
    parser.add_argument(
        "-b",
        "--begin",
        type=float,
        help="Lower bound of time to consider for measurements. <0 means start from the beginning.",
    )
    parser.add_argument(
        "-e",
        "--end",
        type=float,
        help="Upper bound of time to consider for measurements. <0 means consider values till the EOF.",
    )
    parser.add_argument("-t", "--top", type=float, help="Y-axis (latency) limit. <0 means automatic.")
    parser.add_argument(
        "-m",
        "--maxplots",
        type=int,
        help="Plot only the N most important latency contributors. <0 means all.",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        help="Max distance in seconds between a bin and an element sample for TOTAL "
        "(default: legacy guard).",
    )
    parser.add_argument("--config", help="Path to configuration file (YAML/JSON)")
    parser.add_argument("-o", "--output", metavar="HTML", help="Output HTML chart (default: latency.html)")
    parser.add_argument("--png", metavar="PNG", help="Also save the chart as a PNG image")
    parser.add_argument("--export-csv", metavar="CSV", help="Export plotted series samples to CSV")
    parser.add_argument("--show", action="store_true", help="Open the chart in a browser")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _overrides_from_args(args: argparse.Namespace) -> Dict[str, Dict[str, Any]]:
    """Collect config values given on the command line."""
    plot = {
        "num_bins": args.numbins,
        "begin": args.begin,
        "end": args.end,
        "top": args.top,
        "max_plots": args.maxplots,
        "tolerance": args.tolerance,
    }
    output = {"html": args.output, "png": args.png, "csv": args.export_csv}
    overrides: Dict[str, Dict[str, Any]] = {
        "plot": {k: v for k, v in plot.items() if v is not None},
        "output": {k: v for k, v in output.items() if v is not None},
    }
    if args.show:
        overrides["output"]["show"] = True
    return overrides


def load_config(args: argparse.Namespace) -> Config:
    """Load the config file (if any) and apply command line overrides."""
    config = ConfigManager.load_or_default(args.config)
    config.update(_overrides_from_args(args))
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    args.input = args.input or args.input_file
    if not args.input:
        parser.print_help()
        return 2
    if not os.path.isfile(args.input):
        print(f'"{args.input}" is not a valid file!', file=sys.stderr)
        return 1

    try:
        config = load_config(args)
        LOGGER.debug("Configuration: %s", config.to_dict())
        run_plot(args, config)
    except GstLatPlotError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
