"""Tests for the YAML configuration loader."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from fib_spiral.configs.loader import (
    ConfigError,
    GCodeConfig,
    SpiralConfig,
    load_config,
)


def _base() -> dict:
    default = Path(__file__).resolve().parents[1] / "configs" / "spiral.yaml"
    with open(default, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _write(tmp_path: Path, data: dict | None) -> Path:
    path = tmp_path / "spiral.yaml"
    path.write_text(yaml.safe_dump(data) if data is not None else "", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Default config
# ---------------------------------------------------------------------------


class TestDefaultConfig:
    def test_loads(self) -> None:
        cfg = load_config()
        assert isinstance(cfg, SpiralConfig)
        assert cfg.steps.default == 10
        assert cfg.steps.max == 50
        assert cfg.export.arc_samples == 33
        assert cfg.gcode.origin_mm == (105.0, 148.5)
        assert cfg.gcode.work_area_mm == (210.0, 297.0)
        assert cfg.gcode.draw_squares is True
        assert cfg.logging.level == "INFO"
        assert cfg.logging.file is None

    def test_frozen(self) -> None:
        cfg = load_config()
        with pytest.raises(AttributeError):
            cfg.steps.max = 60  # type: ignore[misc]

    def test_to_machine(self) -> None:
        g = GCodeConfig(
            scale_mm=2.0,
            origin_mm=(10.0, 20.0),
            work_area_mm=(100.0, 100.0),
            feed_mm_s=1.0,
            travel_feed_mm_s=1.0,
            plunge_feed_mm_s=1.0,
            z_travel_mm=1.0,
            z_work_mm=0.0,
        )
        assert g.to_machine(-3.0, 4.0) == (4.0, 28.0)

    def test_explicit_path(self, tmp_path: Path) -> None:
        data = _base()
        data["steps"]["default"] = 4
        cfg = load_config(_write(tmp_path, data))
        assert cfg.steps.default == 4

    def test_logging_level_normalised(self, tmp_path: Path) -> None:
        data = _base()
        data["logging"]["level"] = "debug"
        assert load_config(_write(tmp_path, data)).logging.level == "DEBUG"

    def test_optional_sections_default(self, tmp_path: Path) -> None:
        data = _base()
        del data["export"]
        del data["logging"]
        cfg = load_config(_write(tmp_path, data))
        assert cfg.export.arc_samples == 33
        assert cfg.logging.json is False


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestInvalidConfig:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Empty configuration file"):
            load_config(_write(tmp_path, None))

    def test_missing_section(self, tmp_path: Path) -> None:
        data = _base()
        del data["gcode"]
        with pytest.raises(ConfigError, match="Missing required configuration key"):
            load_config(_write(tmp_path, data))

    def test_missing_gcode_key(self, tmp_path: Path) -> None:
        data = _base()
        del data["gcode"]["feed_mm_s"]
        with pytest.raises(ConfigError, match="feed_mm_s"):
            load_config(_write(tmp_path, data))

    @pytest.mark.parametrize("max_steps", [0, 78, 80])
    def test_max_out_of_range(self, tmp_path: Path, max_steps: int) -> None:
        data = _base()
        data["steps"]["max"] = max_steps
        with pytest.raises(ConfigError, match=r"steps\.max must be in \[1, 77\]"):
            load_config(_write(tmp_path, data))

    def test_max_above_fifty_allowed(self, tmp_path: Path) -> None:
        data = _base()
        data["steps"]["max"] = 60
        assert load_config(_write(tmp_path, data)).steps.max == 60

    def test_default_above_max(self, tmp_path: Path) -> None:
        data = _base()
        data["steps"]["default"] = 30
        data["steps"]["max"] = 20
        with pytest.raises(ConfigError, match=r"steps\.default must be in"):
            load_config(_write(tmp_path, data))

    def test_non_numeric_value(self, tmp_path: Path) -> None:
        data = _base()
        data["gcode"]["scale_mm"] = "big"
        with pytest.raises(ConfigError, match="Invalid configuration value"):
            load_config(_write(tmp_path, data))

    def test_bad_pair(self, tmp_path: Path) -> None:
        data = _base()
        data["gcode"]["origin_mm"] = [1.0, 2.0, 3.0]
        with pytest.raises(ConfigError, match="2-element list"):
            load_config(_write(tmp_path, data))

    def test_origin_outside_work_area(self, tmp_path: Path) -> None:
        data = _base()
        data["gcode"]["origin_mm"] = [300.0, 10.0]
        with pytest.raises(ConfigError, match="outside the work area"):
            load_config(_write(tmp_path, data))

    def test_z_travel_not_above_work(self, tmp_path: Path) -> None:
        data = _base()
        data["gcode"]["z_travel_mm"] = 0.0
        with pytest.raises(ConfigError, match="must be above"):
            load_config(_write(tmp_path, data))

    @pytest.mark.parametrize(
        "section,key,value",
        [
            ("export", "arc_samples", 1),
            ("export", "float_precision", -1),
            ("gcode", "scale_mm", 0.0),
            ("gcode", "travel_feed_mm_s", -5.0),
            ("logging", "level", "LOUD"),
        ],
    )
    def test_rejected_values(
        self, tmp_path: Path, section: str, key: str, value: object
    ) -> None:
        data = _base()
        data[section][key] = value
        with pytest.raises(ConfigError):
            load_config(_write(tmp_path, data))
