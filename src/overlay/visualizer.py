"""Draws text-region overlays onto images."""

import logging
import os
from collections.abc import Iterable

from PIL import Image, ImageDraw, ImageFont

from .config import OverlayConfig
from .geometry import TargetRect
from .schemas import OverlayShape, RecognizedObservation
from .shapes import build_shapes

logger = logging.getLogger(__name__)


class OverlayVisualizer:
    """Renders overlay shapes for recognized text with Pillow."""

    def __init__(self, config: OverlayConfig | None = None):
        """Initializes the visualizer with an overlay configuration."""
        self.config = config or OverlayConfig()

    def _load_font(self):
        try:
            return ImageFont.truetype("arial.ttf", self.config.font_size)
        except OSError:
            return ImageFont.load_default()

    def draw_shapes(self, image: Image.Image, shapes: Iterable[OverlayShape]):
        """Draws the shapes onto ``image`` in place."""
        draw = ImageDraw.Draw(image)
        font = self._load_font()

        for shape in shapes:
            polygon = shape.path.flatten(self.config.curve_steps)
            if len(polygon) < 2:
                continue

            draw.polygon(
                polygon,
                outline=self.config.outline_color,
                width=self.config.outline_width,
            )

            if not (self.config.draw_labels and shape.text):
                continue

            # Anchor the label on the top-most vertex, leftmost on ties
            top_point = sorted(polygon, key=lambda p: (p[1], p[0]))[0]
            text_w = draw.textlength(shape.text, font=font)
            text_h = self.config.font_size
            draw.rectangle(
                [
                    top_point[0],
                    top_point[1] - text_h,
                    top_point[0] + text_w,
                    top_point[1],
                ],
                fill=self.config.label_color,
            )
            draw.text(
                (top_point[0], top_point[1] - text_h),
                shape.text,
                fill=self.config.text_color,
                font=font,
            )

    def annotate(
        self, image: Image.Image, observations: Iterable[RecognizedObservation]
    ) -> Image.Image:
        """Returns an RGB copy of ``image`` with an overlay per observation."""
        img = image.convert("RGB")
        target = TargetRect(width=img.width, height=img.height)
        shapes = build_shapes(observations, target, self.config)
        self.draw_shapes(img, shapes)
        return img

    def annotate_file(
        self,
        image_path: str,
        observations: Iterable[RecognizedObservation],
        output_filename: str,
    ) -> Image.Image:
        """Annotates the image at ``image_path`` and saves it."""
        with Image.open(image_path) as source:
            img = self.annotate(source, observations)

        dir_name = os.path.dirname(output_filename)
        if dir_name:
            os.makedirs(dir_name, exist_ok=True)
        img.save(output_filename)
        logger.info("Saved: %s", output_filename)
        return img
