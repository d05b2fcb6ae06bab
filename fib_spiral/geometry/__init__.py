"""
Geometry module.

Immutable 2D value types (points, vectors, polylines, arcs) and the
``PolyCurve`` chain used for the joined spiral.
"""

from fib_spiral.geometry.curves import Arc, PolyCurve, Polyline
from fib_spiral.geometry.primitives import ORIGIN, X_AXIS, Y_AXIS, Point2d, Vector2d

__all__ = [
    "Arc",
    "PolyCurve",
    "Polyline",
    "Point2d",
    "Vector2d",
    "ORIGIN",
    "X_AXIS",
    "Y_AXIS",
]
