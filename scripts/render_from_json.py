#!/usr/bin/env python3
"""Simple runner: load saved observations JSON and draw overlays on an image."""
import argparse
import sys
from pathlib import Path

from pydantic import TypeAdapter

repo_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(repo_root / "src"))

from overlay.config import OverlayConfig  # noqa: E402
from overlay.schemas import RecognizedObservation, ShapeStyle  # noqa: E402
from overlay.visualizer import OverlayVisualizer  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("image", help="Image the observations were recognized on.")
    parser.add_argument("observations", help="Observations JSON written by run_demo.")
    parser.add_argument("output", help="Path of the annotated image.")
    parser.add_argument(
        "--style",
        default=ShapeStyle.QUAD.value,
        choices=[s.value for s in ShapeStyle],
    )
    args = parser.parse_args(argv)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"Image not found: {image_path}")
        return 2

    input_path = Path(args.observations)
    if not input_path.exists():
        print(f"Input file not found: {input_path}")
        return 2

    observations = TypeAdapter(list[RecognizedObservation]).validate_json(
        input_path.read_bytes()
    )

    visualizer = OverlayVisualizer(OverlayConfig(style=args.style))
    visualizer.annotate_file(args.image, observations, args.output)
    print(f"Drew {len(observations)} overlays into {args.output}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
