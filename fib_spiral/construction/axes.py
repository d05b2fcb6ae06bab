"""Quadrant axis pairs.

The spiral turns 90 degrees counter-clockwise at every step.  Axes come
from a fixed table of cardinal unit vectors instead of ``cos`` / ``sin``
(``math.cos(math.pi / 2)`` is ``6.1e-17``, not ``0``), so square corners
stay on exact integer coordinates.

    step % 4 == 0  ->    0 deg   x_axis = +X,  y_axis = +Y
    step % 4 == 1  ->   90 deg   x_axis = +Y,  y_axis = -X
    step % 4 == 2  ->  180 deg   x_axis = -X,  y_axis = -Y
    step % 4 == 3  ->  270 deg   x_axis = -Y,  y_axis = +X
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from fib_spiral.geometry.primitives import X_AXIS, Y_AXIS, Vector2d


@dataclass(frozen=True, slots=True)
class AxisPair:
    """Local frame of one square: ``x_axis`` runs along the arc tangent."""

    x_axis: Vector2d
    y_axis: Vector2d


# Negatives are literals: -X_AXIS would carry a -0.0 component.
_NEG_X = Vector2d(-1.0, 0.0)
_NEG_Y = Vector2d(0.0, -1.0)

QUADRANT_AXES: Final[tuple[AxisPair, AxisPair, AxisPair, AxisPair]] = (
    AxisPair(x_axis=X_AXIS, y_axis=Y_AXIS),
    AxisPair(x_axis=Y_AXIS, y_axis=_NEG_X),
    AxisPair(x_axis=_NEG_X, y_axis=_NEG_Y),
    AxisPair(x_axis=_NEG_Y, y_axis=X_AXIS),
)


def axis_pair(step: int) -> AxisPair:
    """Axis pair for 1-based *step*: ``QUADRANT_AXES[step % 4]``."""
    return QUADRANT_AXES[step % 4]
