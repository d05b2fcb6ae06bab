"""Single Fibonacci step: one square and one inscribed quarter-circle arc.

Corner layout in the step's local frame::

    p3 -------- p2      Side length L = F(n).  p0 is the current
     |          |       origin; the other corners are offsets along
     |          |       the step's x / y axes.
    p0 -------- p1

The arc runs from p0 to p2, tangent to ``x_axis`` at p0, centred on p3.
p2 becomes the next step's origin.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fib_spiral.construction.axes import AxisPair
from fib_spiral.geometry.curves import Arc, Polyline
from fib_spiral.geometry.primitives import Point2d

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FibonacciStep:
    """Everything produced by one step.

    ``next_origin`` is the same object as ``corners[2]`` and ``arc.end``.
    """

    index: int
    side: int
    axes: AxisPair
    corners: tuple[Point2d, Point2d, Point2d, Point2d]
    square: Polyline
    arc: Arc
    next_origin: Point2d


def build_step(
    origin: Point2d,
    side: int,
    axes: AxisPair,
    index: int = 0,
) -> FibonacciStep:
    """Build the square and arc for one step.

    Parameters
    ----------
    origin : Point2d
        Current origin (p0).
    side : int
        Side length L, the Fibonacci value for this step.
    axes : AxisPair
        Exact axis pair for this step's quadrant.
    index : int
        1-based step number, recorded on the result.

    Returns
    -------
    FibonacciStep
    """
    scale = float(side)
    p0 = origin
    p1 = p0 + axes.x_axis * scale
    p2 = p1 + axes.y_axis * scale
    p3 = p0 + axes.y_axis * scale

    square = Polyline(points=(p0, p1, p2, p3, p0))
    arc = Arc.from_start_tangent_end(p0, axes.x_axis, p2)

    logger.debug(
        "Step %d: side=%d origin=(%s, %s) -> (%s, %s)",
        index, side, p0.x, p0.y, p2.x, p2.y,
    )

    return FibonacciStep(
        index=index,
        side=side,
        axes=axes,
        corners=(p0, p1, p2, p3),
        square=square,
        arc=arc,
        next_origin=p2,
    )
