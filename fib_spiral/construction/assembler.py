"""Spiral assembly -- run every Fibonacci step and join the arcs.

Two entry points:

``assemble_spiral(steps)``
    Pure construction for an already-validated step count.

``generate_spiral(steps, max_steps)``
    Boundary checks first (reject ``steps < 1``, clamp ``steps > max_steps``
    with a ``StepCountClampedWarning``), then ``assemble_spiral``.

Joining is a sequential ``PolyCurve.append`` in generation order with no
distance tolerance.  Consecutive arcs share the same endpoint object, so
the chain stays exact even when radii reach ~1e10 near 50 steps.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Final

from fib_spiral.construction.axes import axis_pair
from fib_spiral.construction.fibonacci import fibonacci_table
from fib_spiral.construction.steps import FibonacciStep, build_step
from fib_spiral.geometry.curves import Arc, PolyCurve, Polyline
from fib_spiral.geometry.primitives import ORIGIN

logger = logging.getLogger(__name__)

DEFAULT_STEPS: Final[int] = 10
DEFAULT_MAX_STEPS: Final[int] = 50

# Largest step count whose vertices all stay below 2**53 in magnitude,
# i.e. float coordinates remain exact integers.  Step 77 peaks at
# 6472224534451830; step 78 reaches 10472279279564026.
MAX_EXACT_STEPS: Final[int] = 77


# ---------------------------------------------------------------------------
# Exceptions / warnings
# ---------------------------------------------------------------------------


class InvalidStepCountError(ValueError):
    """Raised when the requested step count is below 1."""

    pass


class StepCountClampedWarning(UserWarning):
    """Issued when the requested step count exceeds the configured maximum."""

    pass


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SpiralGeometry:
    """The three outputs of one run plus the per-step records.

    Attributes
    ----------
    steps : int
        Step count actually built (after clamping).
    fibonacci : tuple[int, ...]
        Side lengths, ``fibonacci[n - 1] == F(n)``.
    squares : tuple[Polyline, ...]
        Closed 5-point polylines, one per step.
    arcs : tuple[Arc, ...]
        Quarter-circle arcs, one per step.
    spiral : PolyCurve
        All arcs joined in generation order.
    records : tuple[FibonacciStep, ...]
        Full per-step construction data.
    """

    steps: int
    fibonacci: tuple[int, ...]
    squares: tuple[Polyline, ...]
    arcs: tuple[Arc, ...]
    spiral: PolyCurve
    records: tuple[FibonacciStep, ...]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def assemble_spiral(steps: int) -> SpiralGeometry:
    """Build squares, arcs and the joined spiral for *steps* steps.

    No validation beyond what ``fibonacci_table`` does; use
    :func:`generate_spiral` at input boundaries.
    """
    fib = fibonacci_table(steps)
    origin = ORIGIN

    records: list[FibonacciStep] = []
    for n in range(1, steps + 1):
        step = build_step(origin, fib[n - 1], axis_pair(n), index=n)
        records.append(step)
        origin = step.next_origin

    arcs = tuple(r.arc for r in records)

    spiral = PolyCurve()
    for arc in arcs:
        spiral.append(arc)

    logger.info(
        "Assembled spiral: %d steps, final radius %d, length %.6g",
        steps, fib[-1], spiral.length,
    )

    return SpiralGeometry(
        steps=steps,
        fibonacci=fib,
        squares=tuple(r.square for r in records),
        arcs=arcs,
        spiral=spiral,
        records=tuple(records),
    )


def resolve_step_count(steps: int, max_steps: int = DEFAULT_MAX_STEPS) -> int:
    """Validate *steps* against ``[1, max_steps]``.

    Returns
    -------
    int
        *steps*, or *max_steps* if it was larger (a
        ``StepCountClampedWarning`` is issued and a WARNING record is
        logged on every such call).

    Raises
    ------
    InvalidStepCountError
        If ``steps < 1``.
    ValueError
        If *max_steps* is outside ``[1, MAX_EXACT_STEPS]``.
    """
    if not 1 <= max_steps <= MAX_EXACT_STEPS:
        raise ValueError(
            f"max_steps must be in [1, {MAX_EXACT_STEPS}], got {max_steps}"
        )
    if steps < 1:
        raise InvalidStepCountError("Steps must be at least 1")
    if steps > max_steps:
        logger.warning("Steps clamped to %d (requested %d)", max_steps, steps)
        warnings.warn(
            f"Steps clamped to {max_steps}",
            StepCountClampedWarning,
            stacklevel=3,
        )
        return max_steps
    return steps


def generate_spiral(
    steps: int = DEFAULT_STEPS,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> SpiralGeometry:
    """Validate/clamp *steps*, then assemble the spiral.

    Parameters
    ----------
    steps : int
        Requested step count.
    max_steps : int
        Clamp ceiling, at most ``MAX_EXACT_STEPS``.

    Raises
    ------
    InvalidStepCountError
        If ``steps < 1``.  Nothing is built.
    """
    return assemble_spiral(resolve_step_count(steps, max_steps))
