"""Tests for the gstlatplot command-line interface."""

import subprocess
import sys
from pathlib import Path

import pandas as pd

from gstlatplot.cli import load_config, main, setup_parser

ROOT = Path(__file__).resolve().parents[1]


class TestParser:
    """Tests for argument parsing."""

    def test_positional_and_flag_input(self):
        parser = setup_parser()

        assert parser.parse_args(["trace.log"]).input_file == "trace.log"
        assert parser.parse_args(["-i", "trace.log"]).input == "trace.log"

    def test_overrides(self, monkeypatch):
        monkeypatch.delenv("GSTLATPLOT_CONFIG", raising=False)
        args = setup_parser().parse_args(["t.log", "-n", "10", "-b", "1.5", "-m", "3", "--png", "a.png"])

        config = load_config(args)

        assert config.plot.num_bins == 10
        assert config.plot.begin == 1.5
        assert config.plot.end == -1
        assert config.plot.max_plots == 3
        assert config.output.png == "a.png"
        assert config.output.html == "latency.html"

    def test_help_mentions_tracer_setup(self):
        help_text = setup_parser().format_help()

        assert 'GST_TRACERS="latency(flags=pipeline+element)"' in help_text


class TestMain:
    """Tests for main()."""

    def test_full_run(self, temp_trace_file, temp_dir, capsys, monkeypatch):
        monkeypatch.delenv("GSTLATPLOT_CONFIG", raising=False)
        html = f"{temp_dir}/latency.html"
        png = f"{temp_dir}/latency.png"
        csv_path = f"{temp_dir}/series.csv"

        code = main([temp_trace_file, "-n", "2", "-o", html, "--png", png, "--export-csv", csv_path])

        assert code == 0
        out = capsys.readouterr().out
        assert "TOTAL" in out
        assert Path(html).exists()
        assert Path(png).exists()
        df = pd.read_csv(csv_path)
        assert df[df["series"] == "TOTAL"]["latency_ms"].tolist() == [0.0, 20.0, 45.0]

    def test_missing_input_prints_usage(self, capsys):
        assert main([]) == 2
        assert "usage: gstlatplot" in capsys.readouterr().out

    def test_invalid_file(self, capsys):
        assert main(["/nonexistent/trace.log"]) == 1
        assert '"/nonexistent/trace.log" is not a valid file!' in capsys.readouterr().err

    def test_invalid_num_bins(self, temp_trace_file, temp_dir, capsys):
        assert main([temp_trace_file, "-n", "0", "-o", f"{temp_dir}/x.html"]) == 1
        assert "[ERROR]" in capsys.readouterr().err

    def test_no_records(self, empty_trace_file, temp_dir, capsys):
        assert main([empty_trace_file, "-o", f"{temp_dir}/x.html"]) == 1
        assert "No element-latency records" in capsys.readouterr().err

    def test_module_entry_point(self):
        process = subprocess.run(
            [sys.executable, "-m", "gstlatplot", "--help"],
            cwd=str(ROOT),
            capture_output=True,
            text=True,
            check=False,
        )

        assert process.returncode == 0
        assert "GStreamer" in process.stdout

    def test_unreadable_file(self, temp_trace_file, temp_dir, capsys, monkeypatch):
        def _denied(*args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr("gstlatplot.core.latency_log.open", _denied, raising=False)

        assert main([temp_trace_file, "-o", f"{temp_dir}/x.html"]) == 1
        assert "[ERROR]" in capsys.readouterr().err

    def test_config_value_of_wrong_type(self, temp_trace_file, temp_dir, capsys):
        config_path = f"{temp_dir}/config.yaml"
        with open(config_path, "w", encoding="utf-8") as f:
            f.write("plot:\n  begin: soon\n")

        assert main([temp_trace_file, "--config", config_path, "-o", f"{temp_dir}/x.html"]) == 1
        assert "[ERROR] plot.begin must be a number" in capsys.readouterr().err
