"""Run OCR on a photo and draw overlays around the recognized text."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from overlay.config import (  # noqa: E402
    DEFAULT_CORNER_RADIUS,
    DEFAULT_EXPANSION_FACTOR,
    OverlayConfig,
)
from overlay.schemas import RecognizedObservation, ShapeStyle  # noqa: E402
from overlay.visualizer import OverlayVisualizer  # noqa: E402
from recognition.config import RecognitionConfig  # noqa: E402
from recognition.engine import ENGINE_NAMES, create_engine  # noqa: E402
from recognition.exceptions import RecognitionError  # noqa: E402
from recognition.session import RecognitionSession  # noqa: E402

OBSERVATIONS_ADAPTER = TypeAdapter(list[RecognizedObservation])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recognize text in an image and draw overlays around it."
    )
    parser.add_argument("--image", type=str, required=True, help="Path to input image.")
    parser.add_argument(
        "--engine",
        type=str,
        default="easyocr",
        choices=ENGINE_NAMES,
        help="OCR backend.",
    )
    parser.add_argument(
        "--languages",
        nargs="+",
        default=["en"],
        help="Language codes to recognize.",
    )
    parser.add_argument(
        "--style",
        type=str,
        default=ShapeStyle.QUAD.value,
        choices=[s.value for s in ShapeStyle],
        help="Overlay shape.",
    )
    parser.add_argument(
        "--corner-radius",
        type=float,
        default=DEFAULT_CORNER_RADIUS,
        help="Corner radius in pixels for the rounded style.",
    )
    parser.add_argument(
        "--expansion-factor",
        type=float,
        default=DEFAULT_EXPANSION_FACTOR,
        help="Scale about the region centre for the expanded style.",
    )
    parser.add_argument(
        "--min-confidence",
        type=float,
        default=0.0,
        help="Drop detections scoring below this.",
    )
    parser.add_argument("--gpu", action="store_true", help="Use the GPU if available.")
    parser.add_argument(
        "--output-dir",
        type=str,
        default="output/demo",
        help="Directory to write demo outputs.",
    )
    parser.add_argument(
        "--save-json",
        action="store_true",
        help="Also write the observations as JSON next to the image.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the demo."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = build_parser().parse_args(argv)

    image_path = Path(args.image).expanduser().resolve()
    if not image_path.exists():
        print(f"Image not found: {image_path}")
        return 2

    recognition_config = RecognitionConfig(
        engine=args.engine,
        languages=args.languages,
        min_confidence=args.min_confidence,
        use_gpu=args.gpu,
    )
    overlay_config = OverlayConfig(
        style=args.style,
        corner_radius=args.corner_radius,
        expansion_factor=args.expansion_factor,
    )

    try:
        session = RecognitionSession(create_engine(recognition_config))
    except RecognitionError as exc:
        print(f"Could not create OCR engine: {exc}")
        return 1

    session.subscribe(lambda obs: print(f"Observations updated: {len(obs)} regions"))

    print(f"--- Processing {image_path.name} with {args.engine} ---")
    try:
        observations = asyncio.run(session.recognize(image_path.read_bytes()))
    except RecognitionError as exc:
        print(f"Recognition failed: {exc}")
        return 1

    for obs in observations:
        print(f"  {obs.confidence:.2f}  {obs.text}")

    output_dir = Path(args.output_dir)
    output_path = output_dir / f"{image_path.stem}_{overlay_config.style.value}.png"
    OverlayVisualizer(overlay_config).annotate_file(
        str(image_path), observations, str(output_path)
    )

    if args.save_json:
        json_path = output_dir / f"{image_path.stem}_observations.json"
        json_path.write_bytes(
            OBSERVATIONS_ADAPTER.dump_json(list(observations), indent=2)
        )
        print(f"Saved observations to {json_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
