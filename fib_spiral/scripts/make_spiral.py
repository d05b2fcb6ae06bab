#!/usr/bin/env python3
"""
Make Spiral Script.

Build a Fibonacci spiral and optionally export it.

Usage:
    python -m fib_spiral.scripts.make_spiral --steps 12
    python -m fib_spiral.scripts.make_spiral --steps 8 --yaml out/spiral.yaml
    python -m fib_spiral.scripts.make_spiral --steps 10 --gcode out/spiral.gcode
    fib-spiral --steps 60 --log-level DEBUG

Exit status:
    0  success (warnings such as clamping are allowed)
    1  rejected input (steps < 1)
    2  configuration or export failure
"""

from __future__ import annotations

import argparse
import logging
import sys

from fib_spiral.component import SpiralComponent
from fib_spiral.configs.loader import ConfigError, SpiralConfig, load_config
from fib_spiral.construction.assembler import SpiralGeometry
from fib_spiral.export.document import save_spiral_document
from fib_spiral.export.gcode import GCodeError, SpiralGCodeGenerator
from fib_spiral.utils import fs
from fib_spiral.utils.logging_config import push_context, setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a Fibonacci spiral of squares and quarter-circle arcs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--steps",
        "-n",
        type=int,
        default=None,
        help="Number of Fibonacci steps (default: from config)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="Configuration file path",
    )

    # Outputs
    parser.add_argument(
        "--yaml",
        type=str,
        help="Write a spiral.v1 YAML document to this path",
    )
    parser.add_argument(
        "--samples",
        action="store_true",
        help="Include the sampled spiral polyline in the YAML document",
    )
    parser.add_argument(
        "--gcode",
        type=str,
        help="Write plotter G-code to this path",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: from config)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also log to this file",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="JSON-lines format for the log file",
    )
    return parser


def format_summary(geometry: SpiralGeometry, precision: int) -> str:
    """One-screen text summary of a built spiral."""
    spiral = geometry.spiral
    lines = [
        f"Steps:          {geometry.steps}",
        f"Fibonacci:      {', '.join(str(v) for v in geometry.fibonacci[:8])}"
        + (" ..." if geometry.steps > 8 else ""),
        f"Final radius:   {geometry.fibonacci[-1]}",
        f"Spiral start:   ({spiral.start.x:.{precision}g}, {spiral.start.y:.{precision}g})",
        f"Spiral end:     ({spiral.end.x:.{precision}g}, {spiral.end.y:.{precision}g})",
        f"Spiral length:  {spiral.length:.{precision}g}",
        f"Continuous:     {'yes' if spiral.is_continuous() else 'NO'}",
    ]
    return "\n".join(lines)


def _export(args: argparse.Namespace, cfg: SpiralConfig, geometry: SpiralGeometry) -> None:
    if args.yaml:
        samples = cfg.export.arc_samples if args.samples else None
        save_spiral_document(geometry, args.yaml, samples_per_arc=samples)
        print(f"YAML written:   {args.yaml}")
    if args.gcode:
        gcode = SpiralGCodeGenerator(cfg.gcode).generate(geometry)
        fs.atomic_write(args.gcode, gcode)
        print(f"G-code written: {args.gcode}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (ConfigError, FileNotFoundError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    setup_logging(
        args.log_level or cfg.logging.level,
        args.log_file or cfg.logging.file,
        json=args.json_logs or cfg.logging.json,
        context={"app": "fib-spiral"},
    )

    requested = args.steps if args.steps is not None else cfg.steps.default
    push_context(steps=requested)

    result = SpiralComponent(cfg).solve(requested)

    for message in result.messages:
        print(str(message), file=sys.stderr)
    if not result.ok or result.geometry is None:
        return EXIT_INPUT_ERROR

    print(format_summary(result.geometry, cfg.export.float_precision))

    try:
        _export(args, cfg, result.geometry)
    except (GCodeError, RuntimeError) as exc:
        logger.error("Export failed: %s", exc)
        print(f"Export failed: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
