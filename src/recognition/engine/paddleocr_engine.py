"""Engine to perform OCR on images using PaddleOCR."""

import numpy as np

from ..exceptions import EngineUnavailableError, RecognitionError
from .ocr_engine import DetectionResult, OCREngine, Polygon

try:
    from paddleocr import PaddleOCR
except ImportError:  # pragma: no cover - reported when the engine is created.
    PaddleOCR = None


class PaddleOCREngine(OCREngine):
    """Engine to perform OCR on images using PaddleOCR."""

    def __init__(self, use_gpu: bool = False, min_confidence: float = 0.0):
        """Initializes PaddleOCR."""
        if PaddleOCR is None:
            raise EngineUnavailableError(
                "PaddleOCR is not installed. Install it with: pip install paddleocr"
            )

        self.min_confidence = min_confidence
        try:
            self.ocr = PaddleOCR(
                use_textline_orientation=True,
                text_detection_model_name="PP-OCRv5_mobile_det",
                text_recognition_model_name="PP-OCRv5_mobile_rec",
                device="gpu" if use_gpu else "cpu",
            )
        except Exception as exc:
            raise EngineUnavailableError(
                f"Failed to initialize PaddleOCR: {exc}"
            ) from exc

    def extract_with_polygons(self, image: np.ndarray) -> list[DetectionResult]:
        """Extracts text and bounding polygons using PaddleOCR.

        PaddleOCR natively returns 4-point coordinates for every detection.
        """
        try:
            result = self.ocr.predict(image)
        except Exception as exc:
            raise RecognitionError(f"PaddleOCR inference failed: {exc}") from exc

        parsed_results = []

        for res in result or []:
            for poly, text, score in zip(
                res["rec_polys"], res["rec_texts"], res["rec_scores"], strict=True
            ):
                points = [(float(x), float(y)) for x, y in poly]
                parsed_results.append(
                    DetectionResult(
                        text=text, polygon=Polygon(points=points), confidence=score
                    )
                )

        return parsed_results
