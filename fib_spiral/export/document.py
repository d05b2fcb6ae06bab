"""YAML document export (``spiral.v1``).

Builds a plain-dict document from a :class:`SpiralGeometry` and writes it
atomically.  Field order follows the component outputs: rectangles, arcs,
spiral.  Coordinates are written as Python floats; PyYAML emits them with
``repr`` so they read back bit-identical, which keeps the junction check
in :class:`fib_spiral.utils.validators.SpiralDocumentV1` exact.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any

from fib_spiral.construction.assembler import SpiralGeometry
from fib_spiral.geometry.curves import Arc
from fib_spiral.utils import fs
from fib_spiral.utils.validators import SPIRAL_SCHEMA_VERSION

logger = logging.getLogger(__name__)


def _arc_record(arc: Arc) -> dict[str, Any]:
    return {
        "center": [arc.center.x, arc.center.y],
        "radius": arc.radius,
        "start": [arc.start.x, arc.start.y],
        "end": [arc.end.x, arc.end.y],
        "start_angle_deg": math.degrees(arc.start_angle),
        "sweep_deg": arc.sweep_degrees,
    }


def spiral_to_document(
    geometry: SpiralGeometry,
    samples_per_arc: int | None = None,
) -> dict[str, Any]:
    """Convert *geometry* to a ``spiral.v1`` document dict.

    Parameters
    ----------
    geometry : SpiralGeometry
        Assembled spiral.
    samples_per_arc : int | None
        When given, a ``spiral_points`` list of the sampled curve is
        included (junction points appear once).
    """
    doc: dict[str, Any] = {
        "schema_version": SPIRAL_SCHEMA_VERSION,
        "steps": geometry.steps,
        "fibonacci": list(geometry.fibonacci),
        "rectangles": [
            [[p.x, p.y] for p in square.points] for square in geometry.squares
        ],
        "arcs": [_arc_record(arc) for arc in geometry.arcs],
        "spiral": {
            "segments": len(geometry.spiral),
            "length": geometry.spiral.length,
        },
    }
    if samples_per_arc is not None:
        doc["spiral_points"] = geometry.spiral.sample(samples_per_arc).tolist()
    return doc


def save_spiral_document(
    geometry: SpiralGeometry,
    path: str | Path,
    samples_per_arc: int | None = None,
) -> Path:
    """Write *geometry* as a ``spiral.v1`` YAML file (atomic).

    Returns
    -------
    Path
        The written path.
    """
    path = Path(path)
    fs.dump_yaml(spiral_to_document(geometry, samples_per_arc), path)
    logger.info("Wrote spiral document (%d steps) to %s", geometry.steps, path)
    return path
