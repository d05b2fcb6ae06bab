"""G-code exporter -- spiral geometry to pen-plotter G-code.

Squares are drawn as ``G1`` polylines.  The spiral is drawn in one pen-down
pass as consecutive ``G2`` / ``G3`` moves in centre-offset (I/J) form, so
the controller interpolates true circular arcs instead of a sampled
polyline.

Coordinates:
    Spiral units are mapped to absolute machine mm by
    ``GCodeConfig.to_machine`` (scale + origin offset).  Every square
    corner is checked against the work area before any output is
    produced; each quarter arc lies inside its square, so the corners
    bound the whole drawing.

Feed rate convention:
    Feeds are stored in **mm/s** and converted to the G-code ``F``
    parameter (mm/min) here::

        F_value = feed_mm_s * 60.0
"""

from __future__ import annotations

import logging
from io import StringIO

from fib_spiral.configs.loader import GCodeConfig
from fib_spiral.construction.assembler import SpiralGeometry
from fib_spiral.geometry.curves import Arc, Polyline

logger = logging.getLogger(__name__)


class GCodeError(Exception):
    """Raised when G-code generation fails due to invalid input."""

    pass


def _f(feed_mm_s: float) -> str:
    """Convert mm/s feed rate to G-code ``F`` parameter (mm/min)."""
    return f"F{feed_mm_s * 60.0:.1f}"


class SpiralGCodeGenerator:
    """Convert a :class:`SpiralGeometry` to G-code.

    Parameters
    ----------
    config : GCodeConfig
        Validated plotter mapping.
    """

    def __init__(self, config: GCodeConfig) -> None:
        self._cfg = config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, geometry: SpiralGeometry) -> str:
        """Generate a complete program (header, squares, spiral, footer).

        Raises
        ------
        GCodeError
            If any square corner maps outside the work area.
        """
        for record in geometry.records:
            for corner in record.corners:
                self._validate_xy(*self._cfg.to_machine(corner.x, corner.y))

        buf = StringIO()
        self._write_header(buf, geometry)

        if self._cfg.draw_squares:
            buf.write("; --- Squares ---\n")
            for square in geometry.squares:
                self._gen_polyline(square, buf)

        buf.write("; --- Spiral ---\n")
        self._gen_spiral(list(geometry.spiral), buf)

        self._write_footer(buf)
        logger.info(
            "Generated G-code for %d steps (%d squares, %d arcs)",
            geometry.steps,
            len(geometry.squares) if self._cfg.draw_squares else 0,
            len(geometry.arcs),
        )
        return buf.getvalue()

    # ------------------------------------------------------------------
    # Individual generators
    # ------------------------------------------------------------------

    def _tool_up(self, buf: StringIO) -> None:
        buf.write(f"G0 Z{self._cfg.z_travel_mm:.3f} {_f(self._cfg.plunge_feed_mm_s)}\n")

    def _tool_down(self, buf: StringIO) -> None:
        buf.write(f"G1 Z{self._cfg.z_work_mm:.3f} {_f(self._cfg.plunge_feed_mm_s)}\n")

    def _rapid(self, x: float, y: float, buf: StringIO) -> None:
        mx, my = self._cfg.to_machine(x, y)
        buf.write(f"G0 X{mx:.3f} Y{my:.3f} {_f(self._cfg.travel_feed_mm_s)}\n")

    def _gen_polyline(self, poly: Polyline, buf: StringIO) -> None:
        first = poly.points[0]
        self._rapid(first.x, first.y, buf)
        self._tool_down(buf)
        for p in poly.points[1:]:
            mx, my = self._cfg.to_machine(p.x, p.y)
            buf.write(f"G1 X{mx:.3f} Y{my:.3f} {_f(self._cfg.feed_mm_s)}\n")
        self._tool_up(buf)

    def _gen_spiral(self, arcs: list[Arc], buf: StringIO) -> None:
        if not arcs:
            return
        start = arcs[0].start
        self._rapid(start.x, start.y, buf)
        self._tool_down(buf)
        scale = self._cfg.scale_mm
        for arc in arcs:
            mx, my = self._cfg.to_machine(arc.end.x, arc.end.y)
            i = (arc.center.x - arc.start.x) * scale
            j = (arc.center.y - arc.start.y) * scale
            cmd = "G2" if arc.is_clockwise else "G3"
            buf.write(
                f"{cmd} X{mx:.3f} Y{my:.3f} I{i:.3f} J{j:.3f} "
                f"{_f(self._cfg.feed_mm_s)}\n"
            )
        self._tool_up(buf)

    # ------------------------------------------------------------------
    # Header / footer
    # ------------------------------------------------------------------

    def _write_header(self, buf: StringIO, geometry: SpiralGeometry) -> None:
        buf.write("; Generated by fib_spiral G-code exporter\n")
        buf.write(f"; Fibonacci spiral, {geometry.steps} steps\n")
        buf.write("; Units: mm, absolute positioning\n")
        buf.write("G21 ; mm mode\n")
        buf.write("G90 ; absolute positioning\n")
        self._tool_up(buf)
        buf.write("\n")

    def _write_footer(self, buf: StringIO) -> None:
        buf.write("\n")
        buf.write("; --- End of job ---\n")
        self._tool_up(buf)
        buf.write(f"G0 X0 Y0 {_f(self._cfg.travel_feed_mm_s)}\n")
        buf.write("M400 ; wait for motion complete\n")

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate_xy(self, mx: float, my: float) -> None:
        """Reject positions outside the work area.

        Raises
        ------
        GCodeError
            If either coordinate is out of bounds.
        """
        wx, wy = self._cfg.work_area_mm
        if mx < 0 or mx > wx:
            raise GCodeError(f"X={mx:.3f} mm outside work area [0, {wx:.1f}]")
        if my < 0 or my > wy:
            raise GCodeError(f"Y={my:.3f} mm outside work area [0, {wy:.1f}]")
