"""Configuration loader for the spiral generator.

Loads and validates ``spiral.yaml`` into typed, frozen dataclasses.  The
step bounds, export settings, plotter mapping and logging defaults all
come from the config.

Feed rates are stored in **mm/s**.  Conversion to the G-code ``F``
parameter (mm/min) happens only in the G-code exporter.

Usage::

    from fib_spiral.configs.loader import load_config
    cfg = load_config()                       # default path
    cfg = load_config("/custom/spiral.yaml")  # explicit path
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fib_spiral.construction.assembler import MAX_EXACT_STEPS
from fib_spiral.utils.fs import read_yaml

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# ---------------------------------------------------------------------------
# Dataclasses -- mirror the YAML structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StepsConfig:
    """Step-count bounds.

    ``max`` is the clamp ceiling.  It may be raised up to
    ``MAX_EXACT_STEPS``; beyond that float coordinates stop being exact.
    """

    default: int
    max: int


@dataclass(frozen=True)
class ExportConfig:
    """Sampling / formatting for exported geometry."""

    arc_samples: int
    float_precision: int


@dataclass(frozen=True)
class GCodeConfig:
    """Plotter mapping.  Lengths in mm, feeds in mm/s."""

    scale_mm: float
    origin_mm: tuple[float, float]
    work_area_mm: tuple[float, float]
    feed_mm_s: float
    travel_feed_mm_s: float
    plunge_feed_mm_s: float
    z_travel_mm: float
    z_work_mm: float
    draw_squares: bool = True

    def to_machine(self, x: float, y: float) -> tuple[float, float]:
        """Map spiral units to absolute machine mm."""
        ox, oy = self.origin_mm
        return (ox + x * self.scale_mm, oy + y * self.scale_mm)


@dataclass(frozen=True)
class LoggingConfig:
    """Defaults for :func:`fib_spiral.utils.logging_config.setup_logging`."""

    level: str
    file: str | None
    json: bool


@dataclass(frozen=True)
class SpiralConfig:
    """Top-level configuration."""

    steps: StepsConfig
    export: ExportConfig
    gcode: GCodeConfig
    logging: LoggingConfig


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def _parse_pair(name: str, raw: Any) -> tuple[float, float]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ConfigError(f"{name} must be a 2-element list, got {raw!r}")
    return (float(raw[0]), float(raw[1]))


def _parse_gcode(data: dict[str, Any]) -> GCodeConfig:
    return GCodeConfig(
        scale_mm=float(data["scale_mm"]),
        origin_mm=_parse_pair("gcode.origin_mm", data["origin_mm"]),
        work_area_mm=_parse_pair("gcode.work_area_mm", data["work_area_mm"]),
        feed_mm_s=float(data["feed_mm_s"]),
        travel_feed_mm_s=float(data["travel_feed_mm_s"]),
        plunge_feed_mm_s=float(data["plunge_feed_mm_s"]),
        z_travel_mm=float(data["z_travel_mm"]),
        z_work_mm=float(data["z_work_mm"]),
        draw_squares=bool(data.get("draw_squares", True)),
    )


def _parse_logging(data: dict[str, Any]) -> LoggingConfig:
    log_file = data.get("file")
    return LoggingConfig(
        level=str(data.get("level", "INFO")).upper(),
        file=str(log_file) if log_file else None,
        json=bool(data.get("json", False)),
    )


def _validate_config(cfg: SpiralConfig) -> None:
    """Cross-field checks.

    Raises
    ------
    ConfigError
        On the first violated constraint.
    """
    s = cfg.steps
    if not 1 <= s.max <= MAX_EXACT_STEPS:
        raise ConfigError(
            f"steps.max must be in [1, {MAX_EXACT_STEPS}], got {s.max}"
        )
    if not 1 <= s.default <= s.max:
        raise ConfigError(
            f"steps.default must be in [1, steps.max={s.max}], got {s.default}"
        )
    if s.max > 50:
        logger.warning(
            "steps.max=%d: spiral radii will exceed 1e10 units", s.max
        )

    e = cfg.export
    if e.arc_samples < 2:
        raise ConfigError(f"export.arc_samples must be >= 2, got {e.arc_samples}")
    if e.float_precision < 0:
        raise ConfigError(
            f"export.float_precision must be >= 0, got {e.float_precision}"
        )

    g = cfg.gcode
    if g.scale_mm <= 0:
        raise ConfigError(f"gcode.scale_mm must be > 0, got {g.scale_mm}")
    for name in ("feed_mm_s", "travel_feed_mm_s", "plunge_feed_mm_s"):
        value = getattr(g, name)
        if value <= 0:
            raise ConfigError(f"gcode.{name} must be > 0, got {value}")
    wx, wy = g.work_area_mm
    if wx <= 0 or wy <= 0:
        raise ConfigError(f"gcode.work_area_mm must be positive, got {g.work_area_mm}")
    ox, oy = g.origin_mm
    if not (0 <= ox <= wx and 0 <= oy <= wy):
        raise ConfigError(
            f"gcode.origin_mm {g.origin_mm} is outside the work area {g.work_area_mm}"
        )
    if g.z_travel_mm <= g.z_work_mm:
        raise ConfigError(
            f"gcode.z_travel_mm ({g.z_travel_mm}) must be above "
            f"z_work_mm ({g.z_work_mm})"
        )

    if cfg.logging.level not in _LOG_LEVELS:
        raise ConfigError(
            f"logging.level must be one of {_LOG_LEVELS}, got {cfg.logging.level!r}"
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(path: str | Path | None = None) -> SpiralConfig:
    """Load and validate the spiral configuration from YAML.

    Parameters
    ----------
    path : str | Path | None
        Path to ``spiral.yaml``.  ``None`` loads the default shipped
        alongside this module.

    Returns
    -------
    SpiralConfig
        Fully validated, frozen configuration object.

    Raises
    ------
    ConfigError
        If any field is missing or fails validation.
    FileNotFoundError
        If *path* does not exist.
    """
    if path is None:
        path = Path(__file__).parent / "spiral.yaml"
    else:
        path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.info("Loading configuration from %s", path)

    data: dict[str, Any] = read_yaml(path)
    if data is None:
        raise ConfigError(f"Empty configuration file: {path}")

    try:
        sd = data["steps"]
        steps = StepsConfig(
            default=int(sd.get("default", 10)),
            max=int(sd.get("max", 50)),
        )

        ed = data.get("export", {}) or {}
        export = ExportConfig(
            arc_samples=int(ed.get("arc_samples", 33)),
            float_precision=int(ed.get("float_precision", 6)),
        )

        gcode = _parse_gcode(data["gcode"])
        log_cfg = _parse_logging(data.get("logging", {}) or {})

        config = SpiralConfig(
            steps=steps,
            export=export,
            gcode=gcode,
            logging=log_cfg,
        )

        _validate_config(config)
        logger.info("Configuration loaded successfully")
        return config

    except KeyError as exc:
        raise ConfigError(
            f"Missing required configuration key: {exc}"
        ) from exc
    except (TypeError, ValueError, AttributeError) as exc:
        raise ConfigError(
            f"Invalid configuration value: {exc}"
        ) from exc
