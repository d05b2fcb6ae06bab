"""Point and vector value types.

Both types are immutable, slotted dataclasses holding two ``float``
coordinates.  Arithmetic is plain IEEE-754: adding a vector whose
components are exactly ``0.0`` / ``±1.0`` scaled by an integer-valued
length never introduces rounding while magnitudes stay below ``2**53``.

Operator summary::

    Point2d + Vector2d -> Point2d
    Point2d - Vector2d -> Point2d
    Point2d - Point2d  -> Vector2d
    Vector2d * float   -> Vector2d
    -Vector2d          -> Vector2d
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector2d:
    """Direction / displacement in the plane.

    Parameters
    ----------
    x, y : float
        Components.
    """

    x: float
    y: float

    def __add__(self, other: Vector2d) -> Vector2d:
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2d) -> Vector2d:
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vector2d:
        if isinstance(scale, (Vector2d, Point2d)):
            return NotImplemented
        return Vector2d(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2d:
        return Vector2d(-self.x, -self.y)

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: Vector2d) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2d) -> float:
        """Z component of the 3D cross product (positive = CCW turn)."""
        return self.x * other.y - self.y * other.x

    def unit(self) -> Vector2d:
        """Return the normalised vector.

        Raises
        ------
        ValueError
            If the vector has zero length.
        """
        n = self.length
        if n == 0.0:
            raise ValueError("Cannot normalise a zero-length vector")
        return Vector2d(self.x / n, self.y / n)

    def rotated_ccw(self) -> Vector2d:
        """Rotate by exactly +90 degrees (no trigonometry)."""
        return Vector2d(-self.y, self.x)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Point2d:
    """Location in the plane.

    Parameters
    ----------
    x, y : float
        Coordinates.
    """

    x: float
    y: float

    def __add__(self, offset: Vector2d) -> Point2d:
        if not isinstance(offset, Vector2d):
            return NotImplemented
        return Point2d(self.x + offset.x, self.y + offset.y)

    def __sub__(self, other: Point2d | Vector2d) -> Point2d | Vector2d:
        if isinstance(other, Point2d):
            return Vector2d(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2d):
            return Point2d(self.x - other.x, self.y - other.y)
        return NotImplemented

    def distance_to(self, other: Point2d) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point2d(0.0, 0.0)
"""Coordinate-system origin; every spiral starts here."""

# World axes, also the frame of every fourth step
X_AXIS = Vector2d(1.0, 0.0)
Y_AXIS = Vector2d(0.0, 1.0)
