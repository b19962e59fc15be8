"""Unit tests for path sampling and the shape-recognition evaluator."""

import pytest

from alphaquest.config import CurveMode
from alphaquest.core.recognition import recognize_shape, sample_points_along_path
from alphaquest.core.transform import ScaledGeometry, scale_geometry
from alphaquest.domain import Point, Size, Stroke, TracePath, line_to, move_to, quad_to
from alphaquest.io.converter import svg_to_trace_path


def _stroke(*points: tuple[float, float], width: float = 8.0) -> Stroke:
    return Stroke(points=tuple(Point(x, y) for x, y in points), width=width)


@pytest.fixture
def line() -> TracePath:
    return TracePath.from_commands([move_to(0, 0), line_to(100, 0)])


class TestSamplePointsAlongPath:
    """Tests for sample_points_along_path."""

    def test_first_sample_half_spacing_in(self, line: TracePath) -> None:
        """Test that samples sit at the centers of equal length intervals."""
        samples = sample_points_along_path(line, 4)
        assert [p.x for p in samples] == pytest.approx([12.5, 37.5, 62.5, 87.5])
        assert all(p.y == 0 for p in samples)

    def test_count_respected(self, line: TracePath) -> None:
        """Test that exactly count samples come back for a normal path."""
        assert len(sample_points_along_path(line, 20)) == 20

    def test_distance_carries_across_segments(self) -> None:
        """Test spacing across a corner."""
        path = TracePath.from_commands([move_to(0, 0), line_to(10, 0), line_to(10, 10)])
        samples = sample_points_along_path(path, 2)
        assert samples == [Point(5, 0), Point(10, 5)]

    def test_move_gap_skipped(self) -> None:
        """Test that a pen lift contributes no length and no samples."""
        path = TracePath.from_commands(
            [move_to(0, 0), line_to(10, 0), move_to(0, 50), line_to(10, 50)]
        )
        samples = sample_points_along_path(path, 2)
        assert samples == [Point(5, 0), Point(5, 50)]

    def test_zero_length_path_single_sample(self) -> None:
        """Test that a degenerate path yields its single point."""
        path = svg_to_trace_path("M50 50 L50 50")
        assert sample_points_along_path(path, 20) == [Point(50, 50)]

    def test_empty_and_zero_count(self, line: TracePath) -> None:
        """Test that an empty path or a zero count yields nothing."""
        assert sample_points_along_path(TracePath(), 10) == []
        assert sample_points_along_path(line, 0) == []

    def test_chord_vs_flatten(self) -> None:
        """Test that FLATTEN samples lie on the curve, CHORD samples on the chord."""
        path = TracePath.from_commands([move_to(0, 0), quad_to(50, 100, 100, 0)])
        chord = sample_points_along_path(path, 1, CurveMode.CHORD)
        curve = sample_points_along_path(path, 1, CurveMode.FLATTEN, flatten_tolerance=0.1)
        assert chord[0] == Point(50, 0)
        assert curve[0].x == pytest.approx(50, abs=1)
        assert curve[0].y == pytest.approx(50, abs=1)


class TestRecognizeShape:
    """Tests for recognize_shape."""

    def test_half_line_scores_about_half(self, line: TracePath) -> None:
        """Test that drawing half a straight line scores about 50%."""
        geometry = ScaledGeometry.unscaled(line)
        result = recognize_shape(geometry, [_stroke((0, 0), (50, 0), width=2)], sample_count=20)
        assert result.tested_count == 20
        assert abs(result.percentage - 50.0) <= 5.0 + 1e-9

    def test_full_line(self, line: TracePath) -> None:
        """Test that drawing the whole line scores 100%."""
        geometry = ScaledGeometry.unscaled(line)
        assert recognize_shape(geometry, [_stroke((0, 0), (100, 0))]).percentage == pytest.approx(100.0)

    def test_tolerance_is_wider_than_half_width(self, line: TracePath) -> None:
        """Test the width / 2 * multiplier + buffer tolerance."""
        geometry = ScaledGeometry.unscaled(line)
        # radius = 4 * 1.5 + 2 = 8
        near = recognize_shape(geometry, [_stroke((0, 8), (100, 8))])
        far = recognize_shape(geometry, [_stroke((0, 9), (100, 9))])
        assert near.percentage == pytest.approx(100.0)
        assert far.percentage == 0.0

    def test_degenerate_reference_covered(self) -> None:
        """Test a zero-length reference scored by its one sample."""
        geometry = ScaledGeometry.unscaled(svg_to_trace_path("M50 50 L50 50"), Size(100, 100))
        hit = recognize_shape(geometry, [_stroke((50, 50), (52, 50))])
        miss = recognize_shape(geometry, [_stroke((90, 90), (95, 95))])
        assert (hit.tested_count, hit.percentage) == (1, 100.0)
        assert (miss.tested_count, miss.percentage) == (1, 0.0)

    def test_no_strokes(self, line: TracePath) -> None:
        """Test that an empty drawing scores 0%."""
        assert recognize_shape(ScaledGeometry.unscaled(line), []).percentage == 0.0

    def test_unfittable_reference(self, line: TracePath) -> None:
        """Test that a reference that cannot be fitted scores 0%."""
        geometry = scale_geometry(line, Size(400, 300))
        assert recognize_shape(geometry, [_stroke((0, 0), (400, 300))]).percentage == 0.0

    def test_monotonic_in_strokes(self, line: TracePath) -> None:
        """Test that adding ink never lowers the score."""
        geometry = ScaledGeometry.unscaled(line)
        strokes: list[Stroke] = []
        last = 0.0
        for start in (80, 0, 40, 20, 60):
            strokes.append(_stroke((start, 0), (start + 10, 0), width=2))
            percentage = recognize_shape(geometry, strokes).percentage
            assert percentage >= last
            last = percentage
