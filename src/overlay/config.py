"""Configuration for overlay shape building and rendering."""

from dataclasses import dataclass

from .schemas import ShapeStyle

DEFAULT_CORNER_RADIUS = 10.0
DEFAULT_EXPANSION_FACTOR = 1.1


@dataclass
class OverlayConfig:
    """Configuration for drawing text-region overlays.

    Attributes:
        style: Shape drawn around each region.
        corner_radius: Corner rounding in pixels for the rounded style. Values
            larger than half the shortest edge produce overlapping curves.
        expansion_factor: Scale about the region centroid for the expanded
            style (1.1 grows each region by 10%).
        outline_color: Outline color of the shapes.
        outline_width: Outline width in pixels.
        label_color: Background color of the text labels.
        text_color: Color of the label text.
        draw_labels: Whether to draw the recognized text above each shape.
        font_size: Label font size.
        curve_steps: Samples per curve when flattening paths for drawing.
    """

    style: ShapeStyle = ShapeStyle.QUAD
    corner_radius: float = DEFAULT_CORNER_RADIUS
    expansion_factor: float = DEFAULT_EXPANSION_FACTOR

    # Rendering
    outline_color: str = "lime"
    outline_width: int = 3
    label_color: str = "lime"
    text_color: str = "black"
    draw_labels: bool = True
    font_size: int = 20
    curve_steps: int = 8

    def __post_init__(self):
        """Convert string styles to ShapeStyle."""
        if isinstance(self.style, str):
            self.style = ShapeStyle(self.style)
