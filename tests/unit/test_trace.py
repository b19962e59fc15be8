"""Unit tests for the trace-coverage evaluator."""

import pytest

from alphaquest.config import CurveMode
from alphaquest.core.geometry import Segment
from alphaquest.core.trace import is_point_near_segments, trace_coverage
from alphaquest.core.transform import ScaledGeometry, scale_geometry
from alphaquest.domain import Point, Size, Stroke, TracePath, line_to, move_to, quad_to


def _stroke(*points: tuple[float, float], width: float = 8.0) -> Stroke:
    return Stroke(points=tuple(Point(x, y) for x, y in points), width=width)


@pytest.fixture
def horizontal_line() -> ScaledGeometry[TracePath]:
    return ScaledGeometry.unscaled(TracePath.from_commands([move_to(0, 0), line_to(100, 0)]))


class TestIsPointNearSegments:
    """Tests for is_point_near_segments."""

    def test_straight_segment_tolerance(self) -> None:
        """Test the plain tolerance on straight segments."""
        segments = [Segment(Point(0, 0), Point(100, 0))]
        assert is_point_near_segments(Point(50, 5), segments, tolerance=5)
        assert not is_point_near_segments(Point(50, 6), segments, tolerance=5)

    def test_chord_tolerance_widened(self) -> None:
        """Test that curve chords use tolerance times the curve factor."""
        segments = [Segment(Point(0, 0), Point(100, 0), is_chord=True)]
        assert is_point_near_segments(Point(50, 7), segments, tolerance=5, curve_tolerance_factor=1.5)
        assert not is_point_near_segments(Point(50, 8), segments, tolerance=5, curve_tolerance_factor=1.5)


class TestTraceCoverage:
    """Tests for trace_coverage."""

    def test_identical_stroke_full_coverage(self, horizontal_line: ScaledGeometry[TracePath]) -> None:
        """Test that tracing the guide exactly scores 100%."""
        result = trace_coverage(horizontal_line, [_stroke((0, 0), (100, 0))], proximity_tolerance=5)
        assert result.tested_count == 11
        assert result.percentage == pytest.approx(100.0)

    def test_offset_stroke_no_coverage(self, horizontal_line: ScaledGeometry[TracePath]) -> None:
        """Test that a stroke 20 units off the guide scores 0%."""
        result = trace_coverage(horizontal_line, [_stroke((0, 20), (100, 20))], proximity_tolerance=5)
        assert result.percentage == pytest.approx(0.0)

    def test_half_traced(self, horizontal_line: ScaledGeometry[TracePath]) -> None:
        """Test that tracing half the guide scores about half."""
        result = trace_coverage(horizontal_line, [_stroke((0, 0), (50, 0))])
        # Points up to x = 56 are within width / 2 + buffer of the stroke
        assert result.covered_count == 6
        assert result.percentage == pytest.approx(6 / 11 * 100)

    def test_stray_ink_does_not_lower_score(self, horizontal_line: ScaledGeometry[TracePath]) -> None:
        """Test that ink away from the guide never reduces coverage."""
        on_guide = [_stroke((0, 0), (100, 0))]
        with_stray = on_guide + [_stroke((0, 80), (100, 80), width=30)]
        assert trace_coverage(horizontal_line, with_stray).percentage == pytest.approx(100.0)

    def test_empty_path(self) -> None:
        """Test that an empty guide scores 0%."""
        geometry = scale_geometry(TracePath(), Size(400, 300))
        assert trace_coverage(geometry, [_stroke((0, 0), (10, 0))]).percentage == 0.0

    def test_no_strokes(self, horizontal_line: ScaledGeometry[TracePath]) -> None:
        """Test that an empty drawing scores 0%."""
        assert trace_coverage(horizontal_line, []).percentage == 0.0

    def test_curve_chord_mode(self) -> None:
        """Test a curved guide traced along its chord in CHORD mode."""
        guide = ScaledGeometry.unscaled(TracePath.from_commands([move_to(0, 0), quad_to(50, 10, 100, 0)]))
        result = trace_coverage(guide, [_stroke((0, 0), (100, 0), width=20)], curve_mode=CurveMode.CHORD)
        assert result.percentage == pytest.approx(100.0)

    def test_curve_flatten_mode_follows_bulge(self) -> None:
        """Test that FLATTEN mode finds on-path points along the curve itself."""
        guide = ScaledGeometry.unscaled(TracePath.from_commands([move_to(0, 0), quad_to(50, 100, 100, 0)]))
        chord_only = [_stroke((0, 0), (100, 0), width=8)]
        chord = trace_coverage(guide, chord_only, curve_mode=CurveMode.CHORD)
        flattened = trace_coverage(guide, chord_only, curve_mode=CurveMode.FLATTEN)
        assert chord.percentage == pytest.approx(100.0)
        assert flattened.percentage < 50.0

    def test_monotonic_in_strokes(self, horizontal_line: ScaledGeometry[TracePath]) -> None:
        """Test that adding ink never lowers the score."""
        strokes: list[Stroke] = []
        last = 0.0
        for start in range(0, 100, 20):
            strokes.append(_stroke((start, 0), (start + 10, 0)))
            percentage = trace_coverage(horizontal_line, strokes).percentage
            assert percentage >= last
            last = percentage
