"""Curve value types: closed polylines, circular arcs and poly-curves.

``Polyline`` and ``Arc`` are immutable once created.  ``PolyCurve`` is an
ordered container that grows by sequential :meth:`PolyCurve.append`; it
never measures endpoint distances and never merges or reorders segments.

Arcs keep the exact ``start`` / ``end`` points they were built from.
Evaluation at ``t = 0`` and ``t = 1`` returns those stored points rather
than recomputing them from the centre and angles, so chaining arcs that
share endpoints stays bit-exact.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from fib_spiral.geometry.primitives import Point2d, Vector2d


# ---------------------------------------------------------------------------
# Polyline
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Polyline:
    """Ordered vertices joined by straight segments.

    Parameters
    ----------
    points : tuple[Point2d, ...]
        Vertices.  Must contain >= 2 points.  A closed polyline repeats
        its first vertex as the last one.
    """

    points: tuple[Point2d, ...]

    def __post_init__(self) -> None:
        if len(self.points) < 2:
            raise ValueError(
                f"Polyline requires >= 2 points, got {len(self.points)}"
            )

    @property
    def is_closed(self) -> bool:
        return self.points[0] == self.points[-1]

    @property
    def segment_count(self) -> int:
        return len(self.points) - 1

    @property
    def corners(self) -> tuple[Point2d, ...]:
        """Distinct vertices (the closing point is dropped)."""
        if self.is_closed:
            return self.points[:-1]
        return self.points

    @property
    def length(self) -> float:
        return math.fsum(
            a.distance_to(b) for a, b in zip(self.points, self.points[1:])
        )

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)``."""
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_array(self) -> np.ndarray:
        """Vertices as a ``(N, 2)`` float64 array."""
        return np.array([p.as_tuple() for p in self.points], dtype=np.float64)


# ---------------------------------------------------------------------------
# Arc
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Arc:
    """Circular arc.

    Parameters
    ----------
    center : Point2d
        Centre of curvature.
    radius : float
        Radius, > 0.
    start, end : Point2d
        Endpoints.  Stored as given.
    start_angle : float
        Polar angle of ``start`` about ``center`` (radians).
    sweep_angle : float
        Signed angular span in radians.  Positive is counter-clockwise.
    """

    center: Point2d
    radius: float
    start: Point2d
    end: Point2d
    start_angle: float
    sweep_angle: float

    def __post_init__(self) -> None:
        if not self.radius > 0.0:
            raise ValueError(f"Arc radius must be > 0, got {self.radius}")
        if self.sweep_angle == 0.0:
            raise ValueError("Arc sweep angle must be non-zero")

    @classmethod
    def from_start_tangent_end(
        cls,
        start: Point2d,
        tangent: Vector2d,
        end: Point2d,
    ) -> Arc:
        """Build the unique arc through *start* and *end* tangent to *tangent* at *start*.

        The chord ``end - start`` is split into ``c`` (along the tangent)
        and ``h`` (across it).  The radius is ``(c * (c / h) + h) / 2``,
        which evaluates without rounding when the tangent is a cardinal
        unit vector and ``c``, ``h`` are integer-valued.

        Raises
        ------
        ValueError
            If *end* lies on the tangent line (no finite arc exists).
        """
        t = tangent.unit()
        chord = end - start
        c = chord.dot(t)
        side = t.cross(chord)
        if side == 0.0:
            raise ValueError(
                f"End point {end} lies on the tangent line through {start}"
            )

        h = abs(side)
        normal = t.rotated_ccw() if side > 0.0 else -t.rotated_ccw()
        radius = (c * (c / h) + h) / 2.0
        center = start + normal * radius

        start_angle = math.atan2(start.y - center.y, start.x - center.x)
        sweep = 2.0 * math.atan2(h, c)
        if side < 0.0:
            sweep = -sweep

        return cls(
            center=center,
            radius=radius,
            start=start,
            end=end,
            start_angle=start_angle,
            sweep_angle=sweep,
        )

    @property
    def is_clockwise(self) -> bool:
        return self.sweep_angle < 0.0

    @property
    def length(self) -> float:
        return abs(self.sweep_angle) * self.radius

    @property
    def sweep_degrees(self) -> float:
        return math.degrees(self.sweep_angle)

    @property
    def mid_point(self) -> Point2d:
        return self.point_at(0.5)

    def point_at(self, t: float) -> Point2d:
        """Point at normalised parameter *t* in ``[0, 1]``."""
        if t == 0.0:
            return self.start
        if t == 1.0:
            return self.end
        angle = self.start_angle + t * self.sweep_angle
        return Point2d(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    def tangent_at(self, t: float) -> Vector2d:
        """Unit tangent in the direction of travel at parameter *t*."""
        angle = self.start_angle + t * self.sweep_angle
        direction = Vector2d(-math.sin(angle), math.cos(angle))
        return -direction if self.is_clockwise else direction

    def sample(self, n: int) -> np.ndarray:
        """Sample *n* evenly spaced points (endpoints included).

        Returns
        -------
        np.ndarray
            Shape ``(n, 2)``.  Row 0 and row ``n - 1`` are the stored
            endpoints.
        """
        if n < 2:
            raise ValueError(f"Arc sampling needs n >= 2, got {n}")
        angles = self.start_angle + np.linspace(0.0, 1.0, n) * self.sweep_angle
        pts = np.empty((n, 2), dtype=np.float64)
        pts[:, 0] = self.center.x + self.radius * np.cos(angles)
        pts[:, 1] = self.center.y + self.radius * np.sin(angles)
        pts[0] = self.start.as_tuple()
        pts[-1] = self.end.as_tuple()
        return pts


# ---------------------------------------------------------------------------
# PolyCurve
# ---------------------------------------------------------------------------


class PolyCurve:
    """Ordered chain of arcs.

    Segments are appended in the order given.  No distance tolerance is
    applied: the caller guarantees that each segment starts where the
    previous one ends.

    Parameters
    ----------
    segments : Iterable[Arc] | None
        Initial segments, appended in order.
    """

    def __init__(self, segments: Iterable[Arc] | None = None) -> None:
        self._segments: list[Arc] = []
        if segments is not None:
            for seg in segments:
                self.append(seg)

    def append(self, segment: Arc) -> None:
        self._segments.append(segment)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Arc]:
        return iter(self._segments)

    def __repr__(self) -> str:
        return f"PolyCurve(segments={len(self._segments)}, length={self.length:.6g})"

    @property
    def segments(self) -> tuple[Arc, ...]:
        return tuple(self._segments)

    @property
    def start(self) -> Point2d:
        if not self._segments:
            raise ValueError("Empty PolyCurve has no start point")
        return self._segments[0].start

    @property
    def end(self) -> Point2d:
        if not self._segments:
            raise ValueError("Empty PolyCurve has no end point")
        return self._segments[-1].end

    @property
    def length(self) -> float:
        return math.fsum(seg.length for seg in self._segments)

    def is_continuous(self) -> bool:
        """True when every junction matches exactly (no tolerance)."""
        return all(
            a.end == b.start for a, b in zip(self._segments, self._segments[1:])
        )

    def sample(self, points_per_segment: int = 16) -> np.ndarray:
        """Sample the whole chain as one ``(M, 2)`` array.

        Junction points shared by consecutive segments appear once.
        """
        if not self._segments:
            return np.empty((0, 2), dtype=np.float64)
        parts = [self._segments[0].sample(points_per_segment)]
        for seg in self._segments[1:]:
            parts.append(seg.sample(points_per_segment)[1:])
        return np.concatenate(parts, axis=0)
