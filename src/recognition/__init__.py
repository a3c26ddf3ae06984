"""Text recognition: OCR engine adapters and the recognition session."""

from .config import RecognitionConfig
from .exceptions import EngineUnavailableError, RecognitionError, UnsupportedImageError
from .session import RecognitionSession

__all__ = [
    "EngineUnavailableError",
    "RecognitionConfig",
    "RecognitionError",
    "RecognitionSession",
    "UnsupportedImageError",
]
