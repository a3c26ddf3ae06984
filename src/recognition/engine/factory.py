"""OCR factory for creating the configured engine."""

import logging

from ..config import RecognitionConfig
from .ocr_engine import OCREngine

logger = logging.getLogger(__name__)

ENGINE_NAMES = ("easyocr", "paddleocr", "tesseract")


def create_engine(config: RecognitionConfig | None = None) -> OCREngine:
    """Creates the OCR engine named in ``config``.

    Backends are imported lazily so only the selected one has to be installed.

    Raises:
        ValueError: If the engine name is unknown.
        EngineUnavailableError: If the backend is not installed.
    """
    config = config or RecognitionConfig()

    if config.engine == "easyocr":
        from .easyocr_engine import EasyOCREngine

        engine = EasyOCREngine(
            languages=config.languages,
            use_gpu=config.use_gpu,
            rotations=config.rotations,
            min_confidence=config.min_confidence,
        )
    elif config.engine == "paddleocr":
        from .paddleocr_engine import PaddleOCREngine

        engine = PaddleOCREngine(
            use_gpu=config.use_gpu, min_confidence=config.min_confidence
        )
    elif config.engine == "tesseract":
        from .tesseract_engine import TesseractEngine

        engine = TesseractEngine(
            languages=config.languages, min_confidence=config.min_confidence
        )
    else:
        raise ValueError(
            f"Unknown OCR engine {config.engine!r}. "
            f"Choose from: {', '.join(ENGINE_NAMES)}"
        )

    logger.info("Using %s", engine.__class__.__name__)
    return engine
