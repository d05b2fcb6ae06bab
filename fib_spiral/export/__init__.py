"""
Export module.

Writes assembled spirals as ``spiral.v1`` YAML documents or as
pen-plotter G-code.
"""

from fib_spiral.export.document import save_spiral_document, spiral_to_document
from fib_spiral.export.gcode import GCodeError, SpiralGCodeGenerator

__all__ = [
    "save_spiral_document",
    "spiral_to_document",
    "GCodeError",
    "SpiralGCodeGenerator",
]
