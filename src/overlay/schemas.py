"""Pydantic models for recognized text regions and overlay paths."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from .geometry import NormalizedQuadrilateral, NormalizedRect, PixelPoint


class ShapeStyle(str, Enum):
    """Overlay shape drawn around each text region."""

    BOX = "box"
    QUAD = "quad"
    ROUNDED = "rounded"
    EXPANDED = "expanded"


class RecognizedObservation(BaseModel):
    """One text region reported by the OCR engine, in normalized coordinates."""

    text: str = Field("", description="Recognized text content.")
    confidence: float = Field(
        1.0, description="Recognition confidence score between 0 and 1."
    )
    bounding_box: NormalizedRect = Field(
        ..., description="Axis-aligned box covering the region."
    )
    quadrilateral: NormalizedQuadrilateral | None = Field(
        None, description="Four corners of the region, when the engine provides them."
    )

    @classmethod
    def from_quadrilateral(
        cls, quad: NormalizedQuadrilateral, text: str = "", confidence: float = 1.0
    ) -> "RecognizedObservation":
        return cls(
            text=text,
            confidence=confidence,
            bounding_box=quad.bounding_rect(),
            quadrilateral=quad,
        )

    def region(self) -> NormalizedQuadrilateral:
        """Returns the quadrilateral, falling back to the bounding box corners."""
        if self.quadrilateral is not None:
            return self.quadrilateral
        return self.bounding_box.to_quadrilateral()


class MoveTo(BaseModel):
    kind: Literal["move"] = "move"
    point: PixelPoint


class LineTo(BaseModel):
    kind: Literal["line"] = "line"
    point: PixelPoint


class QuadCurveTo(BaseModel):
    """Quadratic curve from the current point to ``point``."""

    kind: Literal["quad_curve"] = "quad_curve"
    point: PixelPoint
    control: PixelPoint


class ClosePath(BaseModel):
    kind: Literal["close"] = "close"


PathSegment = Annotated[
    MoveTo | LineTo | QuadCurveTo | ClosePath, Field(discriminator="kind")
]


class OverlayPath(BaseModel):
    """Closed path description in pixel coordinates."""

    segments: list[PathSegment] = Field(default_factory=list)

    @property
    def is_closed(self) -> bool:
        return bool(self.segments) and isinstance(self.segments[-1], ClosePath)

    def vertices(self) -> list[PixelPoint]:
        """Returns the end point of every drawing segment, in order."""
        return [s.point for s in self.segments if not isinstance(s, ClosePath)]

    def flatten(self, curve_steps: int = 8) -> list[tuple[float, float]]:
        """Approximates the path as a polyline for raster renderers.

        Each quadratic curve is sampled ``curve_steps`` times.
        """
        points: list[tuple[float, float]] = []
        current = None
        for segment in self.segments:
            if isinstance(segment, ClosePath):
                continue
            if isinstance(segment, QuadCurveTo) and current is not None:
                for step in range(1, curve_steps + 1):
                    t = step / curve_steps
                    points.append(
                        _quad_bezier(current, segment.control, segment.point, t)
                    )
            else:
                points.append(segment.point.as_tuple())
            current = segment.point
        return points

    def bounds(self) -> tuple[float, float, float, float]:
        """Returns (min_x, min_y, max_x, max_y) over all vertices."""
        vertices = self.vertices()
        if not vertices:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [p.x for p in vertices]
        ys = [p.y for p in vertices]
        return (min(xs), min(ys), max(xs), max(ys))


class OverlayShape(BaseModel):
    """A rendered observation: its label and the path drawn around it."""

    text: str = ""
    confidence: float = 1.0
    style: ShapeStyle
    path: OverlayPath


def _quad_bezier(
    start: PixelPoint, control: PixelPoint, end: PixelPoint, t: float
) -> tuple[float, float]:
    u = 1 - t
    return (
        u * u * start.x + 2 * u * t * control.x + t * t * end.x,
        u * u * start.y + 2 * u * t * control.y + t * t * end.y,
    )
