"""
Fibonacci Spiral Package.

Generates the golden (Fibonacci) spiral as axis-aligned squares with
inscribed quarter-circle arcs, joined into one continuous curve.  Square
sides come from the exact integer Fibonacci recurrence and square
orientation from a fixed table of cardinal axes, so every vertex sits on
exact integer coordinates and consecutive arcs share their endpoints
bit-for-bit.

Subpackages:
    geometry: Point, vector, polyline, arc and poly-curve value types
    construction: Fibonacci table, axis selection, step building, assembly
    configs: YAML configuration loading and validation
    export: YAML document and G-code export
    utils: Logging, atomic file I/O, schema validation
    scripts: Command-line entry point

Quick use::

    from fib_spiral.construction import generate_spiral
    geometry = generate_spiral(10)
    geometry.squares, geometry.arcs, geometry.spiral
"""

__version__ = "1.0.0"

__all__ = ["geometry", "construction", "component", "configs", "export", "utils", "scripts"]
