"""Tests for single-step square and arc construction."""

from __future__ import annotations

import math

import pytest

from fib_spiral.construction.axes import QUADRANT_AXES, axis_pair
from fib_spiral.construction.steps import build_step
from fib_spiral.geometry.primitives import ORIGIN, Point2d


class TestBuildStep:
    def test_first_step_corners(self) -> None:
        step = build_step(ORIGIN, 1, axis_pair(1), index=1)
        p0, p1, p2, p3 = step.corners
        assert p0 == Point2d(0.0, 0.0)
        assert p1 == Point2d(0.0, 1.0)
        assert p2 == Point2d(-1.0, 1.0)
        assert p3 == Point2d(-1.0, 0.0)

    def test_square_is_closed_five_points(self) -> None:
        step = build_step(ORIGIN, 3, axis_pair(4))
        assert len(step.square.points) == 5
        assert step.square.is_closed
        assert step.square.points[:4] == step.corners

    @pytest.mark.parametrize("k", range(4))
    def test_square_side_lengths(self, k: int) -> None:
        step = build_step(Point2d(7.0, -4.0), 8, QUADRANT_AXES[k])
        pts = step.square.points
        for a, b in zip(pts, pts[1:]):
            assert a.distance_to(b) == 8.0

    @pytest.mark.parametrize("k", range(4))
    def test_arc_geometry(self, k: int) -> None:
        step = build_step(Point2d(3.0, 1.0), 5, QUADRANT_AXES[k])
        arc = step.arc
        assert arc.radius == 5.0
        assert arc.center == step.corners[3]
        assert not arc.is_clockwise
        assert arc.sweep_angle == pytest.approx(math.pi / 2)
        assert arc.length == pytest.approx(math.pi / 2 * 5)

    @pytest.mark.parametrize("k", range(4))
    def test_arc_tangent_is_x_axis(self, k: int) -> None:
        axes = QUADRANT_AXES[k]
        step = build_step(ORIGIN, 2, axes)
        t = step.arc.tangent_at(0.0)
        assert t.x == pytest.approx(axes.x_axis.x, abs=1e-12)
        assert t.y == pytest.approx(axes.x_axis.y, abs=1e-12)

    def test_next_origin_shared_with_arc_and_square(self) -> None:
        origin = Point2d(-2.0, 6.0)
        step = build_step(origin, 8, axis_pair(6), index=6)
        assert step.arc.start is origin
        assert step.corners[0] is origin
        assert step.next_origin is step.corners[2]
        assert step.next_origin is step.arc.end
        assert step.square.points[2] is step.next_origin

    def test_records_index_and_side(self) -> None:
        step = build_step(ORIGIN, 13, axis_pair(7), index=7)
        assert step.index == 7
        assert step.side == 13
        assert step.axes is axis_pair(7)

    def test_large_side_stays_exact(self) -> None:
        side = 12586269025
        origin = Point2d(-4807526976.0, 7778742049.0)
        step = build_step(origin, side, axis_pair(50))
        assert step.arc.radius == float(side)
        assert step.arc.center == step.corners[3]
        for p in step.corners:
            assert p.x.is_integer() and p.y.is_integer()
