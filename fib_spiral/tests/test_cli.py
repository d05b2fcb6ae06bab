"""End-to-end tests for the ``fib-spiral`` command line."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from fib_spiral.scripts.make_spiral import build_parser, main
from fib_spiral.utils import logging_config, validators


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    root = logging.getLogger()
    for handler in logging_config._installed_handlers:
        root.removeHandler(handler)
        handler.close()
    logging_config._installed_handlers.clear()
    logging.captureWarnings(False)
    root.setLevel(logging.WARNING)
    logging_config.pop_context()


class TestArguments:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.steps is None
        assert args.yaml is None
        assert args.gcode is None
        assert args.samples is False

    def test_short_flags(self) -> None:
        args = build_parser().parse_args(["-n", "7", "-c", "cfg.yaml"])
        assert args.steps == 7
        assert args.config == "cfg.yaml"


class TestMain:
    def test_summary(self, capsys) -> None:
        assert main(["--steps", "5"]) == 0
        out = capsys.readouterr().out
        assert "Steps:          5" in out
        assert "Fibonacci:      1, 1, 2, 3, 5" in out
        assert "Final radius:   5" in out
        assert "Continuous:     yes" in out

    def test_default_steps(self, capsys) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Steps:          10" in out
        assert "Final radius:   55" in out

    @pytest.mark.parametrize("steps", ["0", "-2"])
    def test_rejects_below_one(self, capsys, steps: str) -> None:
        assert main(["--steps", steps]) == 1
        captured = capsys.readouterr()
        assert "ERROR: Steps must be at least 1" in captured.err
        assert "Steps:" not in captured.out

    def test_clamps_above_max(self, capsys) -> None:
        assert main(["--steps", "60"]) == 0
        captured = capsys.readouterr()
        assert "WARNING: Steps clamped to 50" in captured.err
        assert "Steps:          50" in captured.out
        assert "Final radius:   12586269025" in captured.out

    def test_yaml_export(self, tmp_path: Path, capsys) -> None:
        out = tmp_path / "spiral.yaml"
        assert main(["--steps", "5", "--yaml", str(out), "--samples"]) == 0
        assert "YAML written:" in capsys.readouterr().out
        doc = validators.load_spiral_document(out)
        assert doc.steps == 5
        assert len(doc.spiral_points) == 5 * 32 + 1

    def test_gcode_export(self, tmp_path: Path, capsys) -> None:
        out = tmp_path / "spiral.gcode"
        assert main(["--gcode", str(out)]) == 0
        assert "G-code written:" in capsys.readouterr().out
        text = out.read_text(encoding="utf-8")
        assert text.count("\nG3 ") == 10

    def test_gcode_out_of_bounds(self, tmp_path: Path, capsys) -> None:
        out = tmp_path / "spiral.gcode"
        assert main(["--steps", "20", "--gcode", str(out)]) == 2
        assert "Export failed" in capsys.readouterr().err
        assert not out.exists()

    def test_missing_config(self, tmp_path: Path, capsys) -> None:
        assert main(["--config", str(tmp_path / "nope.yaml")]) == 2
        assert "Configuration error" in capsys.readouterr().err

    def test_json_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "run.jsonl"
        assert main(["--steps", "4", "--log-file", str(log_file), "--json-logs"]) == 0
        for handler in logging_config._installed_handlers:
            handler.flush()
        entries = [
            json.loads(line)
            for line in log_file.read_text(encoding="utf-8").splitlines()
        ]
        assert entries
        assert all(e["app"] == "fib-spiral" for e in entries)
        assert any(e["msg"].startswith("Assembled spiral: 4 steps") for e in entries)
        assert all(e["steps"] == 4 for e in entries)
