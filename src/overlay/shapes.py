"""Builds pixel-space overlay paths from normalized text regions.

Every builder is a pure function of its inputs. All corner projection goes
through ``map_point``.
"""

from collections.abc import Iterable

from .config import (
    DEFAULT_CORNER_RADIUS,
    DEFAULT_EXPANSION_FACTOR,
    OverlayConfig,
)
from .geometry import (
    NormalizedPoint,
    NormalizedQuadrilateral,
    NormalizedRect,
    PixelPoint,
    TargetRect,
    map_point,
)
from .schemas import (
    ClosePath,
    LineTo,
    MoveTo,
    OverlayPath,
    OverlayShape,
    QuadCurveTo,
    RecognizedObservation,
    ShapeStyle,
)


def _polygon_path(points: list[PixelPoint]) -> OverlayPath:
    segments = [MoveTo(point=points[0])]
    segments.extend(LineTo(point=p) for p in points[1:])
    segments.append(ClosePath())
    return OverlayPath(segments=segments)


def _offset(point: PixelPoint, dx: float = 0.0, dy: float = 0.0) -> PixelPoint:
    return PixelPoint(x=point.x + dx, y=point.y + dy)


def map_rect(rect: NormalizedRect, target: TargetRect) -> TargetRect:
    """Maps a normalized bounding box to the enclosing pixel rectangle."""
    a = map_point(NormalizedPoint(x=rect.x, y=rect.y), target)
    b = map_point(
        NormalizedPoint(x=rect.x + rect.width, y=rect.y + rect.height), target
    )
    left, right = sorted((a.x, b.x))
    top, bottom = sorted((a.y, b.y))
    return TargetRect(x=left, y=top, width=right - left, height=bottom - top)


def axis_aligned_box(rect: NormalizedRect, target: TargetRect) -> OverlayPath:
    """Closed rectangle path around a normalized bounding box."""
    box = map_rect(rect, target)
    return _polygon_path(
        [
            PixelPoint(x=box.x, y=box.y),
            PixelPoint(x=box.max_x, y=box.y),
            PixelPoint(x=box.max_x, y=box.max_y),
            PixelPoint(x=box.x, y=box.max_y),
        ]
    )


def straight_quad(quad: NormalizedQuadrilateral, target: TargetRect) -> OverlayPath:
    """Connects the corners TL -> TR -> BR -> BL and closes the path."""
    return _polygon_path([map_point(corner, target) for corner in quad.corners()])


def rounded_quad(
    quad: NormalizedQuadrilateral,
    target: TargetRect,
    corner_radius: float = DEFAULT_CORNER_RADIUS,
) -> OverlayPath:
    """Quadrilateral with approximately rounded corners.

    Each edge stops ``corner_radius`` pixels short of the corner along the x or
    y axis, and a quadratic curve with the corner as its control point joins it
    to the next edge. This only looks right for roughly upright regions whose
    edges are longer than twice the radius; the radius is not clamped.
    """
    tl, tr, br, bl = (map_point(corner, target) for corner in quad.corners())
    r = corner_radius

    segments = [
        MoveTo(point=_offset(tl, dx=r)),
        # Top edge, top-right corner
        LineTo(point=_offset(tr, dx=-r)),
        QuadCurveTo(point=_offset(tr, dy=r), control=tr),
        # Right edge, bottom-right corner
        LineTo(point=_offset(br, dy=-r)),
        QuadCurveTo(point=_offset(br, dx=-r), control=br),
        # Bottom edge, bottom-left corner
        LineTo(point=_offset(bl, dx=r)),
        QuadCurveTo(point=_offset(bl, dy=-r), control=bl),
        # Left edge, top-left corner
        LineTo(point=_offset(tl, dy=r)),
        QuadCurveTo(point=_offset(tl, dx=r), control=tl),
        ClosePath(),
    ]
    return OverlayPath(segments=segments)


def expand_quadrilateral(
    quad: NormalizedQuadrilateral,
    expansion_factor: float = DEFAULT_EXPANSION_FACTOR,
) -> NormalizedQuadrilateral:
    """Scales the corners about their centroid in normalized space.

    A factor above 1 grows the region and a factor below 1 shrinks it.
    """
    if expansion_factor == 1:
        return quad

    center = quad.centroid()

    def expand(point: NormalizedPoint) -> NormalizedPoint:
        return NormalizedPoint(
            x=center.x + (point.x - center.x) * expansion_factor,
            y=center.y + (point.y - center.y) * expansion_factor,
        )

    return NormalizedQuadrilateral(
        top_left=expand(quad.top_left),
        top_right=expand(quad.top_right),
        bottom_left=expand(quad.bottom_left),
        bottom_right=expand(quad.bottom_right),
    )


def expanded_quad(
    quad: NormalizedQuadrilateral,
    target: TargetRect,
    expansion_factor: float = DEFAULT_EXPANSION_FACTOR,
) -> OverlayPath:
    """Straight quadrilateral drawn around the expanded region."""
    return straight_quad(expand_quadrilateral(quad, expansion_factor), target)


def build_shape(
    observation: RecognizedObservation,
    target: TargetRect,
    config: OverlayConfig | None = None,
) -> OverlayShape:
    """Builds the overlay shape for one observation in the configured style."""
    config = config or OverlayConfig()

    if config.style is ShapeStyle.BOX:
        path = axis_aligned_box(observation.bounding_box, target)
    elif config.style is ShapeStyle.ROUNDED:
        path = rounded_quad(observation.region(), target, config.corner_radius)
    elif config.style is ShapeStyle.EXPANDED:
        path = expanded_quad(observation.region(), target, config.expansion_factor)
    else:
        path = straight_quad(observation.region(), target)

    return OverlayShape(
        text=observation.text,
        confidence=observation.confidence,
        style=config.style,
        path=path,
    )


def build_shapes(
    observations: Iterable[RecognizedObservation],
    target: TargetRect,
    config: OverlayConfig | None = None,
) -> list[OverlayShape]:
    """Builds one shape per observation, preserving order."""
    config = config or OverlayConfig()
    return [build_shape(obs, target, config) for obs in observations]
