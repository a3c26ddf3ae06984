"""Geometry and shape building for text-region overlays."""

from .config import OverlayConfig
from .geometry import (
    NormalizedPoint,
    NormalizedQuadrilateral,
    NormalizedRect,
    PixelPoint,
    TargetRect,
    map_point,
    unmap_point,
)
from .schemas import OverlayPath, OverlayShape, RecognizedObservation, ShapeStyle
from .shapes import (
    axis_aligned_box,
    build_shape,
    build_shapes,
    expand_quadrilateral,
    expanded_quad,
    map_rect,
    rounded_quad,
    straight_quad,
)

__all__ = [
    "NormalizedPoint",
    "NormalizedQuadrilateral",
    "NormalizedRect",
    "OverlayConfig",
    "OverlayPath",
    "OverlayShape",
    "PixelPoint",
    "RecognizedObservation",
    "ShapeStyle",
    "TargetRect",
    "axis_aligned_box",
    "build_shape",
    "build_shapes",
    "expand_quadrilateral",
    "expanded_quad",
    "map_point",
    "map_rect",
    "rounded_quad",
    "straight_quad",
    "unmap_point",
]
