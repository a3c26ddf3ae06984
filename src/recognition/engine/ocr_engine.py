"""Engine to perform OCR on images."""

import logging
from abc import ABC, abstractmethod

import cv2
import numpy as np
from pydantic import BaseModel, Field

from overlay.geometry import (
    NormalizedQuadrilateral,
    PixelPoint,
    TargetRect,
    unmap_point,
)
from overlay.schemas import RecognizedObservation

from ..exceptions import UnsupportedImageError

logger = logging.getLogger(__name__)


class Polygon(BaseModel):
    """Text region outline in image pixel coordinates."""

    points: list[tuple[float, float]] = Field(
        ...,
        description="Corners ordered top-left, top-right, bottom-right, bottom-left.",
    )


class DetectionResult(BaseModel):
    """Raw detection reported by an OCR backend."""

    text: str
    polygon: Polygon
    confidence: float = Field(..., description="Confidence score between 0 and 1.")


def decode_image(image_bytes: bytes) -> np.ndarray:
    """Decodes encoded image bytes (PNG, JPEG, ...) into a BGR array.

    Raises:
        UnsupportedImageError: If the data is empty or not a decodable image.
    """
    if not image_bytes:
        raise UnsupportedImageError("Image data is empty.")

    buffer = np.frombuffer(image_bytes, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
    if image is None:
        raise UnsupportedImageError("Image data could not be decoded.")
    return image


def polygon_to_quadrilateral(
    polygon: Polygon, width: int, height: int
) -> NormalizedQuadrilateral:
    """Normalizes a pixel polygon against an image of the given size.

    Polygons that do not have exactly four points are replaced by their
    axis-aligned bounds.
    """
    points = polygon.points
    if len(points) != 4:
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        left, right, top, bottom = min(xs), max(xs), min(ys), max(ys)
        points = [(left, top), (right, top), (right, bottom), (left, bottom)]

    frame = TargetRect(width=width, height=height)
    tl, tr, br, bl = (unmap_point(PixelPoint(x=x, y=y), frame) for x, y in points)
    return NormalizedQuadrilateral(
        top_left=tl, top_right=tr, bottom_left=bl, bottom_right=br
    )


class OCREngine(ABC):
    """Abstract base class for OCR engines.

    Attributes:
        min_confidence: Detections scoring below this are dropped by
            ``recognize``.
    """

    min_confidence: float = 0.0

    @abstractmethod
    def extract_with_polygons(self, image: np.ndarray) -> list[DetectionResult]:
        """Returns the detected text regions of a BGR image.

        We return 4 corners to support rotated/diagonal text boxes.
        """
        pass

    def recognize(self, image_bytes: bytes) -> list[RecognizedObservation]:
        """Runs OCR on encoded image bytes.

        Returns:
            Observations in normalized coordinates, in the order the backend
            reported them.

        Raises:
            RecognitionError: If the image cannot be decoded or the backend
                fails.
        """
        image = decode_image(image_bytes)
        height, width = image.shape[:2]

        detections = self.extract_with_polygons(image)

        observations = []
        for detection in detections:
            if not detection.polygon.points:
                continue
            if detection.confidence < self.min_confidence:
                continue
            quad = polygon_to_quadrilateral(detection.polygon, width, height)
            observations.append(
                RecognizedObservation.from_quadrilateral(
                    quad, text=detection.text, confidence=detection.confidence
                )
            )

        logger.debug(
            "%s kept %d of %d detections on a %dx%d image.",
            self.__class__.__name__,
            len(observations),
            len(detections),
            width,
            height,
        )
        return observations
