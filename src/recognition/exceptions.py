class RecognitionError(Exception):
    """Raised when the OCR engine cannot recognize text in an image."""


class UnsupportedImageError(RecognitionError):
    """Raised when the image data is empty or cannot be decoded."""


class EngineUnavailableError(RecognitionError):
    """Raised when an OCR backend is not installed or fails to initialize."""
