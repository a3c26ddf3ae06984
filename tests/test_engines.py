from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from recognition.config import RecognitionConfig
from recognition.engine import easyocr_engine, paddleocr_engine, tesseract_engine
from recognition.engine.factory import create_engine
from recognition.exceptions import EngineUnavailableError, RecognitionError


@pytest.fixture
def image():
    return np.zeros((40, 60, 3), dtype=np.uint8)


# --- EasyOCR ---


class TestEasyOCREngine:
    def test_parses_readtext_output(self, image):
        fake = MagicMock()
        fake.Reader.return_value.readtext.return_value = [
            ([[10, 20], [50, 20], [50, 40], [10, 40]], "Hello", 0.93),
        ]

        with patch.object(easyocr_engine, "easyocr", fake):
            engine = easyocr_engine.EasyOCREngine(languages=["en", "ja"])
            results = engine.extract_with_polygons(image)

        fake.Reader.assert_called_once_with(["en", "ja"], gpu=False, verbose=False)
        kwargs = fake.Reader.return_value.readtext.call_args.kwargs
        assert kwargs["rotation_info"] == [90, 180, 270]

        assert len(results) == 1
        assert results[0].text == "Hello"
        assert results[0].confidence == 0.93
        assert results[0].polygon.points == [(10, 20), (50, 20), (50, 40), (10, 40)]

    def test_no_rotations(self, image):
        fake = MagicMock()
        fake.Reader.return_value.readtext.return_value = []

        with patch.object(easyocr_engine, "easyocr", fake):
            engine = easyocr_engine.EasyOCREngine(rotations=[])
            assert engine.extract_with_polygons(image) == []

        kwargs = fake.Reader.return_value.readtext.call_args.kwargs
        assert kwargs["rotation_info"] is None

    def test_missing_library(self):
        with (
            patch.object(easyocr_engine, "easyocr", None),
            pytest.raises(EngineUnavailableError),
        ):
            easyocr_engine.EasyOCREngine()

    def test_reader_init_failure(self):
        fake = MagicMock()
        fake.Reader.side_effect = RuntimeError("no models")

        with (
            patch.object(easyocr_engine, "easyocr", fake),
            pytest.raises(EngineUnavailableError, match="no models"),
        ):
            easyocr_engine.EasyOCREngine()

    def test_inference_failure(self, image):
        fake = MagicMock()
        fake.Reader.return_value.readtext.side_effect = RuntimeError("boom")

        with patch.object(easyocr_engine, "easyocr", fake):
            engine = easyocr_engine.EasyOCREngine()
            with pytest.raises(RecognitionError, match="boom"):
                engine.extract_with_polygons(image)


# --- PaddleOCR ---


class TestPaddleOCREngine:
    def test_parses_predict_output(self, image):
        fake_cls = MagicMock()
        fake_cls.return_value.predict.return_value = [
            {
                "rec_polys": [np.array([[1, 2], [30, 2], [30, 12], [1, 12]])],
                "rec_texts": ["Paddle"],
                "rec_scores": [0.75],
            }
        ]

        with patch.object(paddleocr_engine, "PaddleOCR", fake_cls):
            engine = paddleocr_engine.PaddleOCREngine()
            results = engine.extract_with_polygons(image)

        assert fake_cls.call_args.kwargs["device"] == "cpu"
        assert len(results) == 1
        assert results[0].text == "Paddle"
        assert results[0].confidence == 0.75
        assert results[0].polygon.points == [(1, 2), (30, 2), (30, 12), (1, 12)]

    def test_empty_result(self, image):
        fake_cls = MagicMock()
        fake_cls.return_value.predict.return_value = None

        with patch.object(paddleocr_engine, "PaddleOCR", fake_cls):
            assert paddleocr_engine.PaddleOCREngine().extract_with_polygons(image) == []

    def test_missing_library(self):
        with (
            patch.object(paddleocr_engine, "PaddleOCR", None),
            pytest.raises(EngineUnavailableError),
        ):
            paddleocr_engine.PaddleOCREngine()

    def test_inference_failure(self, image):
        fake_cls = MagicMock()
        fake_cls.return_value.predict.side_effect = ValueError("bad input")

        with patch.object(paddleocr_engine, "PaddleOCR", fake_cls):
            engine = paddleocr_engine.PaddleOCREngine()
            with pytest.raises(RecognitionError, match="bad input"):
                engine.extract_with_polygons(image)


# --- Tesseract ---


class TestTesseractEngine:
    @pytest.fixture
    def fake_tesseract(self):
        fake = MagicMock()
        fake.image_to_data.return_value = {
            "text": ["", "Hi", "faint", "  "],
            "conf": [-1, 95.0, "0", 80],
            "left": [0, 5, 10, 0],
            "top": [0, 6, 10, 0],
            "width": [60, 20, 5, 1],
            "height": [40, 10, 5, 1],
        }
        return fake

    def test_parses_image_to_data(self, image, fake_tesseract):
        with patch.object(tesseract_engine, "pytesseract", fake_tesseract):
            engine = tesseract_engine.TesseractEngine()
            results = engine.extract_with_polygons(image)

        assert len(results) == 1
        assert results[0].text == "Hi"
        assert results[0].confidence == pytest.approx(0.95)
        assert results[0].polygon.points == [(5, 6), (25, 6), (25, 16), (5, 16)]

    def test_language_codes(self, fake_tesseract):
        with patch.object(tesseract_engine, "pytesseract", fake_tesseract):
            engine = tesseract_engine.TesseractEngine(languages=["en", "ja", "kor"])
        assert engine.lang == "eng+jpn+kor"

    def test_missing_library(self):
        with (
            patch.object(tesseract_engine, "pytesseract", None),
            pytest.raises(EngineUnavailableError),
        ):
            tesseract_engine.TesseractEngine()

    def test_tesseract_failure(self, image, fake_tesseract):
        fake_tesseract.image_to_data.side_effect = OSError("tesseract not found")

        with patch.object(tesseract_engine, "pytesseract", fake_tesseract):
            engine = tesseract_engine.TesseractEngine()
            with pytest.raises(RecognitionError, match="tesseract not found"):
                engine.extract_with_polygons(image)


# --- Factory ---


class TestCreateEngine:
    def test_tesseract(self):
        with patch.object(tesseract_engine, "pytesseract", MagicMock()):
            engine = create_engine(
                RecognitionConfig(engine="Tesseract", min_confidence=0.4)
            )

        assert isinstance(engine, tesseract_engine.TesseractEngine)
        assert engine.min_confidence == 0.4

    def test_easyocr_receives_config(self):
        fake = MagicMock()
        config = RecognitionConfig(
            engine="easyocr", languages="de", rotations=[180], use_gpu=True
        )

        with patch.object(easyocr_engine, "easyocr", fake):
            engine = create_engine(config)

        assert isinstance(engine, easyocr_engine.EasyOCREngine)
        assert engine.rotations == [180]
        fake.Reader.assert_called_once_with(["de"], gpu=True, verbose=False)

    def test_paddleocr(self):
        with patch.object(paddleocr_engine, "PaddleOCR", MagicMock()):
            engine = create_engine(RecognitionConfig(engine="paddleocr"))
        assert isinstance(engine, paddleocr_engine.PaddleOCREngine)

    def test_unknown_engine(self):
        with pytest.raises(ValueError, match="Unknown OCR engine"):
            create_engine(RecognitionConfig(engine="vision"))

    def test_unavailable_backend(self):
        with (
            patch.object(easyocr_engine, "easyocr", None),
            pytest.raises(EngineUnavailableError),
        ):
            create_engine(RecognitionConfig(engine="easyocr"))
