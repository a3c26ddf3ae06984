"""Normalized and pixel-space geometry for text overlays.

Normalized coordinates live in the unit square with the origin at the lower-left
corner and y increasing upward. Pixel space has its origin at the upper-left
corner of the target rectangle and y increasing downward. ``map_point`` and its
inverse ``unmap_point`` are the only places where the two are converted.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field


class NormalizedPoint(BaseModel):
    """A point expressed as a fraction of the image width and height."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="Horizontal position, 0.0 at the left edge.")
    y: float = Field(..., description="Vertical position, 0.0 at the bottom edge.")


class PixelPoint(BaseModel):
    """A point in the pixel space of a target rectangle."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class TargetRect(BaseModel):
    """Axis-aligned pixel rectangle that normalized shapes are projected into."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def contains(self, point: PixelPoint) -> bool:
        """Returns True if the point lies on or inside the rectangle."""
        return self.x <= point.x <= self.max_x and self.y <= point.y <= self.max_y


class NormalizedQuadrilateral(BaseModel):
    """Four normalized corners of a detected text region.

    The corners are used in the order the OCR engine reports them. Ordering and
    convexity are not checked: crossed corners draw a self-intersecting shape.
    """

    model_config = ConfigDict(frozen=True)

    top_left: NormalizedPoint
    top_right: NormalizedPoint
    bottom_left: NormalizedPoint
    bottom_right: NormalizedPoint

    def corners(self) -> tuple[NormalizedPoint, ...]:
        """Returns the corners in drawing order: TL, TR, BR, BL."""
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    def centroid(self) -> NormalizedPoint:
        return centroid(self.corners())

    def bounding_rect(self) -> "NormalizedRect":
        """Returns the smallest normalized rectangle enclosing all four corners."""
        xs = [p.x for p in self.corners()]
        ys = [p.y for p in self.corners()]
        return NormalizedRect(
            x=min(xs), y=min(ys), width=max(xs) - min(xs), height=max(ys) - min(ys)
        )


class NormalizedRect(BaseModel):
    """Normalized axis-aligned bounding box; (x, y) is its lower-left corner."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    def to_quadrilateral(self) -> NormalizedQuadrilateral:
        left, right = self.x, self.x + self.width
        bottom, top = self.y, self.y + self.height
        return NormalizedQuadrilateral(
            top_left=NormalizedPoint(x=left, y=top),
            top_right=NormalizedPoint(x=right, y=top),
            bottom_left=NormalizedPoint(x=left, y=bottom),
            bottom_right=NormalizedPoint(x=right, y=bottom),
        )


def map_point(point: NormalizedPoint, rect: TargetRect) -> PixelPoint:
    """Projects a normalized point into the pixel space of ``rect``.

    The vertical axis is flipped. Points outside the unit square land outside
    the rectangle.
    """
    return PixelPoint(
        x=rect.x + point.x * rect.width,
        y=rect.y + (1 - point.y) * rect.height,
    )


def unmap_point(point: PixelPoint, rect: TargetRect) -> NormalizedPoint:
    """Inverse of ``map_point``.

    Raises:
        ValueError: If ``rect`` has a zero width or height.
    """
    if rect.width == 0 or rect.height == 0:
        raise ValueError(
            f"Cannot normalize against an empty rectangle ({rect.width}x{rect.height})."
        )
    return NormalizedPoint(
        x=(point.x - rect.x) / rect.width,
        y=1 - (point.y - rect.y) / rect.height,
    )


def centroid(points: Iterable[NormalizedPoint]) -> NormalizedPoint:
    """Arithmetic mean of the x and y components."""
    points = list(points)
    if not points:
        raise ValueError("Cannot compute the centroid of an empty point set.")
    return NormalizedPoint(
        x=sum(p.x for p in points) / len(points),
        y=sum(p.y for p in points) / len(points),
    )
