"""Init file for the engine module.

Backend engines (EasyOCR, PaddleOCR, Tesseract) are imported from their own
modules or created through ``create_engine``.
"""

from .factory import ENGINE_NAMES, create_engine
from .mock_ocr_engine import MockOCREngine
from .ocr_engine import DetectionResult, OCREngine, Polygon, decode_image

__all__ = [
    "DetectionResult",
    "ENGINE_NAMES",
    "MockOCREngine",
    "OCREngine",
    "Polygon",
    "create_engine",
    "decode_image",
]
