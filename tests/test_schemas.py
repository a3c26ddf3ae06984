import pytest

from overlay.geometry import (
    NormalizedPoint,
    NormalizedQuadrilateral,
    NormalizedRect,
    PixelPoint,
)
from overlay.schemas import (
    ClosePath,
    LineTo,
    MoveTo,
    OverlayPath,
    OverlayShape,
    QuadCurveTo,
    RecognizedObservation,
    ShapeStyle,
)


def make_path() -> OverlayPath:
    return OverlayPath(
        segments=[
            MoveTo(point=PixelPoint(x=0, y=0)),
            LineTo(point=PixelPoint(x=10, y=0)),
            QuadCurveTo(point=PixelPoint(x=20, y=10), control=PixelPoint(x=20, y=0)),
            ClosePath(),
        ]
    )


class TestOverlayPath:
    def test_is_closed(self):
        assert make_path().is_closed
        assert not OverlayPath(segments=[MoveTo(point=PixelPoint(x=0, y=0))]).is_closed
        assert not OverlayPath().is_closed

    def test_vertices_skip_close(self):
        assert [v.as_tuple() for v in make_path().vertices()] == [
            (0, 0),
            (10, 0),
            (20, 10),
        ]

    def test_flatten_samples_curves(self):
        points = make_path().flatten(curve_steps=2)

        assert points[:2] == [(0, 0), (10, 0)]
        # Midpoint of the curve from (10, 0) to (20, 10) with control (20, 0)
        assert points[2] == pytest.approx((17.5, 2.5))
        assert points[3] == (20, 10)
        assert len(points) == 4

    def test_flatten_without_curves_returns_vertices(self):
        path = OverlayPath(
            segments=[
                MoveTo(point=PixelPoint(x=1, y=2)),
                LineTo(point=PixelPoint(x=3, y=4)),
                ClosePath(),
            ]
        )
        assert path.flatten() == [(1, 2), (3, 4)]

    def test_bounds(self):
        assert make_path().bounds() == (0, 0, 20, 10)
        assert OverlayPath().bounds() == (0.0, 0.0, 0.0, 0.0)

    def test_segments_validate_from_json(self):
        data = make_path().model_dump_json()
        restored = OverlayPath.model_validate_json(data)

        assert restored == make_path()
        assert isinstance(restored.segments[2], QuadCurveTo)


class TestRecognizedObservation:
    def test_from_quadrilateral_sets_bounding_box(self):
        quad = NormalizedQuadrilateral(
            top_left=NormalizedPoint(x=0.25, y=0.75),
            top_right=NormalizedPoint(x=0.75, y=0.875),
            bottom_left=NormalizedPoint(x=0.25, y=0.5),
            bottom_right=NormalizedPoint(x=0.75, y=0.625),
        )
        obs = RecognizedObservation.from_quadrilateral(quad, text="abc", confidence=0.5)

        assert obs.text == "abc"
        assert obs.confidence == 0.5
        assert obs.quadrilateral == quad
        assert obs.bounding_box == NormalizedRect(
            x=0.25, y=0.5, width=0.5, height=0.375
        )

    def test_region_prefers_quadrilateral(self):
        quad = NormalizedRect(x=0, y=0, width=0.5, height=0.5).to_quadrilateral()
        obs = RecognizedObservation(
            bounding_box=NormalizedRect(x=0, y=0, width=1, height=1),
            quadrilateral=quad,
        )
        assert obs.region() == quad

    def test_region_falls_back_to_bounding_box(self):
        rect = NormalizedRect(x=0.1, y=0.2, width=0.3, height=0.4)
        obs = RecognizedObservation(bounding_box=rect)
        assert obs.quadrilateral is None
        assert obs.region() == rect.to_quadrilateral()


def test_overlay_shape_style_from_string():
    shape = OverlayShape(style="rounded", path=make_path())
    assert shape.style is ShapeStyle.ROUNDED
