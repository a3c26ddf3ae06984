"""Mock OCR engine returning fixed or annotated detections."""

import json

import numpy as np

from .ocr_engine import DetectionResult, OCREngine, Polygon


class MockOCREngine(OCREngine):
    """Mock OCR engine that returns predefined detections for every image."""

    def __init__(
        self,
        detections: list[DetectionResult] | None = None,
        error: Exception | None = None,
        min_confidence: float = 0.0,
    ):
        """Initializes the mock engine.

        Args:
            detections: Detections returned for every image.
            error: If set, raised by every extraction instead of returning.
            min_confidence: Detections scoring below this are dropped.
        """
        self.detections = list(detections or [])
        self.error = error
        self.min_confidence = min_confidence
        self.calls = 0

    @classmethod
    def from_coco(cls, annotations_path: str, file_name: str) -> "MockOCREngine":
        """Builds a mock engine from the COCO text annotations of one image.

        Args:
            annotations_path: Path to the COCO annotations JSON file.
            file_name: ``file_name`` of the image entry to load.
        """
        with open(annotations_path) as f:
            data = json.load(f)

        image_ids = [
            img["id"] for img in data["images"] if img["file_name"] == file_name
        ]
        if not image_ids:
            raise ValueError(f"Image {file_name} not found in annotations.")
        img_id = image_ids[0]

        detections = []
        for ann in data["annotations"]:
            if ann["image_id"] != img_id:
                continue
            text = ann.get("attributes", {}).get("text", "")
            if not text:
                continue

            # Segmentation is [[x1, y1, x2, y2, ...]]
            seg = ann.get("segmentation", [[]])[0]
            points = [(float(seg[i]), float(seg[i + 1])) for i in range(0, len(seg), 2)]
            if not points:
                continue

            detections.append(
                DetectionResult(
                    text=text, polygon=Polygon(points=points), confidence=1.0
                )
            )

        return cls(detections=detections)

    def extract_with_polygons(self, image: np.ndarray) -> list[DetectionResult]:
        """Returns the configured detections, ignoring the image content."""
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.detections)
