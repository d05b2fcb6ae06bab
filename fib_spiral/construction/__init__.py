"""
Construction module.

Fibonacci side lengths, exact quadrant axes, per-step square/arc
building and spiral assembly.
"""

from fib_spiral.construction.assembler import (
    DEFAULT_MAX_STEPS,
    DEFAULT_STEPS,
    MAX_EXACT_STEPS,
    InvalidStepCountError,
    SpiralGeometry,
    StepCountClampedWarning,
    assemble_spiral,
    generate_spiral,
    resolve_step_count,
)
from fib_spiral.construction.axes import QUADRANT_AXES, AxisPair, axis_pair
from fib_spiral.construction.fibonacci import fibonacci_table
from fib_spiral.construction.steps import FibonacciStep, build_step

__all__ = [
    "DEFAULT_MAX_STEPS",
    "DEFAULT_STEPS",
    "MAX_EXACT_STEPS",
    "InvalidStepCountError",
    "SpiralGeometry",
    "StepCountClampedWarning",
    "assemble_spiral",
    "generate_spiral",
    "resolve_step_count",
    "QUADRANT_AXES",
    "AxisPair",
    "axis_pair",
    "fibonacci_table",
    "FibonacciStep",
    "build_step",
]
