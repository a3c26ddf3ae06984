"""Configuration for text recognition."""

from dataclasses import dataclass, field


@dataclass
class RecognitionConfig:
    """Configuration for the OCR engine behind a recognition session.

    Attributes:
        engine: Backend name ("easyocr", "paddleocr" or "tesseract").
        languages: Language codes to recognize (e.g., "en", "ja").
        rotations: Extra rotation angles EasyOCR tries for each region.
            Adding angles increases processing time.
        min_confidence: Detections scoring below this are discarded.
        use_gpu: Run the backend on the GPU when it supports one.
    """

    engine: str = "easyocr"
    languages: list[str] = field(default_factory=lambda: ["en"])
    rotations: list[int] = field(default_factory=lambda: [90, 180, 270])
    min_confidence: float = 0.0
    use_gpu: bool = False

    def __post_init__(self):
        """Normalize the engine name and accept a single language string."""
        self.engine = self.engine.strip().lower()
        if isinstance(self.languages, str):
            self.languages = [self.languages]
