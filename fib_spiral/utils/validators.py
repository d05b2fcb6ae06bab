"""Schema validation for exported spiral documents.

Centralised pydantic models for the ``spiral.v1`` YAML document written by
``fib_spiral.export.document``.  Loading a document back goes through
these models for fail-fast errors naming the offending field.

Checks beyond field types:
    - schema_version is exactly "spiral.v1"
    - every rectangle is a closed 5-point polyline
    - arc radii are positive and equal the Fibonacci value of their step
    - counts of fibonacci / rectangles / arcs / spiral segments match steps
    - consecutive arcs share their junction point exactly (no tolerance)

Usage:
    from fib_spiral.utils import validators
    doc = validators.load_spiral_document("out/spiral.yaml")
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator, model_validator


SPIRAL_SCHEMA_VERSION = "spiral.v1"

PointXY = Tuple[float, float]


class ArcRecord(BaseModel):
    """One quarter-circle arc."""
    center: PointXY = Field(..., description="Centre of curvature (x, y)")
    radius: float = Field(..., gt=0.0, description="Radius, equals F(n)")
    start: PointXY = Field(..., description="Start point (x, y)")
    end: PointXY = Field(..., description="End point (x, y)")
    start_angle_deg: float = Field(..., description="Polar angle of start about centre")
    sweep_deg: float = Field(..., ge=-360.0, le=360.0, description="Signed sweep, CCW positive")

    @field_validator('sweep_deg')
    @classmethod
    def validate_sweep_nonzero(cls, v: float) -> float:
        if v == 0.0:
            raise ValueError("sweep_deg must be non-zero")
        return v


class SpiralSummary(BaseModel):
    """Joined spiral curve summary."""
    segments: int = Field(..., ge=1)
    length: float = Field(..., gt=0.0)


class SpiralDocumentV1(BaseModel):
    """Complete exported spiral: rectangles, arcs and joined curve."""
    schema_version: str = Field(..., description="Must be 'spiral.v1'")
    steps: int = Field(..., ge=1, description="Step count actually built")
    fibonacci: List[int] = Field(..., description="F(1)..F(steps)")
    rectangles: List[List[PointXY]] = Field(..., description="Closed 5-point polylines")
    arcs: List[ArcRecord]
    spiral: SpiralSummary
    spiral_points: Optional[List[PointXY]] = Field(None, description="Sampled curve, optional")

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != SPIRAL_SCHEMA_VERSION:
            raise ValueError(f"Expected schema_version '{SPIRAL_SCHEMA_VERSION}', got '{v}'")
        return v

    @field_validator('rectangles')
    @classmethod
    def validate_rectangles_closed(cls, v: List[List[PointXY]]) -> List[List[PointXY]]:
        for i, rect in enumerate(v):
            if len(rect) != 5:
                raise ValueError(f"rectangles[{i}] must have 5 points, got {len(rect)}")
            if tuple(rect[0]) != tuple(rect[-1]):
                raise ValueError(f"rectangles[{i}] is not closed: {rect[0]} != {rect[-1]}")
        return v

    @model_validator(mode='after')
    def validate_consistency(self) -> 'SpiralDocumentV1':
        counts = {
            'fibonacci': len(self.fibonacci),
            'rectangles': len(self.rectangles),
            'arcs': len(self.arcs),
            'spiral.segments': self.spiral.segments,
        }
        for name, count in counts.items():
            if count != self.steps:
                raise ValueError(f"{name} has {count} entries, expected steps={self.steps}")

        for i, (arc, fib) in enumerate(zip(self.arcs, self.fibonacci)):
            if arc.radius != fib:
                raise ValueError(f"arcs[{i}].radius={arc.radius} does not match fibonacci[{i}]={fib}")

        for i in range(1, len(self.arcs)):
            if tuple(self.arcs[i].start) != tuple(self.arcs[i - 1].end):
                raise ValueError(
                    f"arcs[{i}] starts at {self.arcs[i].start}, "
                    f"previous arc ends at {self.arcs[i - 1].end}"
                )
        return self


# ============================================================================
# PUBLIC API
# ============================================================================

def validate_spiral_document(data: dict) -> SpiralDocumentV1:
    """Validate an in-memory document dict.

    Raises
    ------
    ValueError
        If validation fails
    """
    try:
        return SpiralDocumentV1(**data)
    except Exception as e:
        raise ValueError(f"Spiral document validation failed: {e}") from e


def load_spiral_document(path: Union[str, Path]) -> SpiralDocumentV1:
    """Load and validate a spiral document from YAML.

    Parameters
    ----------
    path : Union[str, Path]
        Path to a spiral.v1 YAML file

    Returns
    -------
    SpiralDocumentV1
        Validated document

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If validation fails (message names the file)
    """
    from . import fs

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Spiral document not found: {path}")

    data = fs.read_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Spiral document {path} must be a mapping, got {type(data).__name__}")
    try:
        return SpiralDocumentV1(**data)
    except Exception as e:
        raise ValueError(f"Spiral document validation failed at {path}: {e}") from e
