"""Engine to perform OCR on images using EasyOCR."""

import numpy as np

from ..exceptions import EngineUnavailableError, RecognitionError
from .ocr_engine import DetectionResult, OCREngine, Polygon

try:
    import easyocr
except ImportError:  # pragma: no cover - reported when the engine is created.
    easyocr = None


class EasyOCREngine(OCREngine):
    """Engine to perform OCR on images using EasyOCR."""

    def __init__(
        self,
        languages: list[str] | None = None,
        use_gpu: bool = False,
        rotations: list[int] | None = None,
        min_confidence: float = 0.0,
    ):
        """Initializes the EasyOCREngine with an EasyOCR reader.

        Args:
            languages: Language codes for the reader. Defaults to ["en"].
            use_gpu: Whether EasyOCR may use the GPU.
            rotations: List of angles to check. Defaults to [90, 180, 270].
                Note: Adding angles increases processing time.
            min_confidence: Detections scoring below this are dropped.
        """
        if easyocr is None:
            raise EngineUnavailableError(
                "EasyOCR is not installed. Install it with: pip install easyocr"
            )

        self.languages = languages or ["en"]
        self.rotations = [90, 180, 270] if rotations is None else rotations
        self.min_confidence = min_confidence

        try:
            self.reader = easyocr.Reader(self.languages, gpu=use_gpu, verbose=False)
        except Exception as exc:
            raise EngineUnavailableError(
                f"Failed to initialize EasyOCR reader: {exc}"
            ) from exc

    def extract_with_polygons(self, image: np.ndarray) -> list[DetectionResult]:
        """Extract text with polygons."""
        try:
            raw_output = self.reader.readtext(
                image, rotation_info=self.rotations or None
            )
        except Exception as exc:
            raise RecognitionError(f"EasyOCR inference failed: {exc}") from exc

        results = []
        for coord, text, conf in raw_output:
            polygon = Polygon(points=[(float(x), float(y)) for x, y in coord])
            results.append(
                DetectionResult(text=text, polygon=polygon, confidence=float(conf))
            )

        return results
