"""Engine to perform OCR on images using Tesseract."""

import cv2
import numpy as np
from PIL import Image

from ..exceptions import EngineUnavailableError, RecognitionError
from .ocr_engine import DetectionResult, OCREngine, Polygon

try:
    import pytesseract
except ImportError:  # pragma: no cover - reported when the engine is created.
    pytesseract = None

# Tesseract names its language packs with ISO 639-2 codes
TESSERACT_LANGUAGES = {
    "en": "eng",
    "de": "deu",
    "fr": "fra",
    "es": "spa",
    "ja": "jpn",
    "zh": "chi_sim",
}


class TesseractEngine(OCREngine):
    """Engine to perform OCR on images using Tesseract."""

    def __init__(self, languages: list[str] | None = None, min_confidence: float = 0.0):
        """Initializes the engine.

        Args:
            languages: Language codes, either two-letter ("en") or Tesseract
                pack names ("eng"). Defaults to English.
            min_confidence: Detections scoring below this are dropped.
        """
        if pytesseract is None:
            raise EngineUnavailableError(
                "pytesseract is not installed. Install it with: pip install pytesseract"
            )

        languages = languages or ["en"]
        self.lang = "+".join(TESSERACT_LANGUAGES.get(code, code) for code in languages)
        self.min_confidence = min_confidence

    def extract_with_polygons(self, image: np.ndarray) -> list[DetectionResult]:
        """Extracts text and bounding polygons from an image using Tesseract."""
        img = Image.fromarray(cv2.cvtColor(image, cv2.COLOR_BGR2RGB))
        try:
            data = pytesseract.image_to_data(
                img, lang=self.lang, output_type=pytesseract.Output.DICT
            )
        except Exception as exc:
            raise RecognitionError(f"Tesseract failed: {exc}") from exc

        results = []
        n_boxes = len(data["text"])
        for i in range(n_boxes):
            conf = float(data["conf"][i])
            if conf > 0 and data["text"][i].strip():
                text = data["text"][i]
                x, y, w, h = (
                    data["left"][i],
                    data["top"][i],
                    data["width"][i],
                    data["height"][i],
                )

                # Tesseract only gives upright rectangles, but we convert
                # them to 4 points to match the interface.
                points = [
                    (x, y),  # TL
                    (x + w, y),  # TR
                    (x + w, y + h),  # BR
                    (x, y + h),  # BL
                ]
                results.append(
                    DetectionResult(
                        text=text,
                        polygon=Polygon(points=points),
                        confidence=conf / 100.0,
                    )
                )
        return results
