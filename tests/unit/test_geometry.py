"""Unit tests for geometry operations and the sampling grid."""

import math

import pytest

from alphaquest.config import CurveMode
from alphaquest.core.coverage import coverage_radius, grid_points, is_point_covered
from alphaquest.core.geometry import (
    distance,
    distance_to_segment,
    flatten_curve,
    path_bounds,
    path_length,
    path_segments,
    point_in_outline,
)
from alphaquest.domain import (
    Outline,
    Point,
    Rect,
    Stroke,
    TracePath,
    close_path,
    curve_to,
    line_to,
    move_to,
    quad_to,
)


@pytest.fixture
def square() -> Outline:
    return Outline.from_commands(
        [move_to(0, 0), line_to(100, 0), line_to(100, 100), line_to(0, 100), close_path()]
    )


@pytest.fixture
def square_with_hole() -> Outline:
    return Outline.from_commands(
        [
            move_to(0, 0), line_to(100, 0), line_to(100, 100), line_to(0, 100), close_path(),
            move_to(25, 25), line_to(75, 25), line_to(75, 75), line_to(25, 75), close_path(),
        ]
    )


class TestDistanceToSegment:
    """Tests for distance_to_segment."""

    def test_perpendicular_projection(self) -> None:
        """Test a point projecting onto the segment interior."""
        assert distance_to_segment(Point(5, 3), Point(0, 0), Point(10, 0)) == pytest.approx(3.0)

    def test_clamped_to_start(self) -> None:
        """Test a point beyond the start measures to the start point."""
        assert distance_to_segment(Point(-3, 4), Point(0, 0), Point(10, 0)) == pytest.approx(5.0)

    def test_clamped_to_end(self) -> None:
        """Test a point beyond the end measures to the end point."""
        assert distance_to_segment(Point(13, 4), Point(0, 0), Point(10, 0)) == pytest.approx(5.0)

    def test_zero_length_segment(self) -> None:
        """Test that a degenerate segment measures point-to-point."""
        assert distance_to_segment(Point(3, 4), Point(0, 0), Point(0, 0)) == pytest.approx(5.0)

    def test_point_on_segment(self) -> None:
        """Test a point on the segment has zero distance."""
        assert distance_to_segment(Point(2, 2), Point(0, 0), Point(4, 4)) == pytest.approx(0.0)

    def test_distance(self) -> None:
        """Test plain Euclidean distance."""
        assert distance(Point(0, 0), Point(3, 4)) == 5.0


class TestPathSegments:
    """Tests for path_segments and path_length."""

    def test_outline_closing_segment(self, square: Outline) -> None:
        """Test that CLOSE contributes the segment back to the start."""
        segments = path_segments(square)
        assert len(segments) == 4
        assert segments[-1].end == Point(0, 0)
        assert path_length(square) == pytest.approx(400.0)

    def test_outline_implicit_close(self) -> None:
        """Test that an unclosed outline subpath still gets its closing segment."""
        outline = Outline.from_commands([move_to(0, 0), line_to(10, 0), line_to(10, 10)])
        assert path_length(outline) == pytest.approx(20 + math.hypot(10, 10))

    def test_trace_path_stays_open(self) -> None:
        """Test that trace paths get no implicit closing segment."""
        path = TracePath.from_commands([move_to(0, 0), line_to(10, 0), line_to(10, 10)])
        assert path_length(path) == pytest.approx(20.0)

    def test_move_gap_adds_no_length(self) -> None:
        """Test that the jump between subpaths is not part of the length."""
        path = TracePath.from_commands(
            [move_to(0, 0), line_to(10, 0), move_to(100, 100), line_to(100, 110)]
        )
        assert path_length(path) == pytest.approx(20.0)

    def test_curve_as_chord(self) -> None:
        """Test that CHORD mode replaces a curve by its endpoints' line."""
        path = TracePath.from_commands([move_to(0, 0), quad_to(50, 100, 100, 0)])
        segments = path_segments(path, CurveMode.CHORD)
        assert len(segments) == 1
        assert segments[0].is_chord
        assert path_length(path, CurveMode.CHORD) == pytest.approx(100.0)

    def test_curve_flattened(self) -> None:
        """Test that FLATTEN mode follows the curve and is longer than the chord."""
        path = TracePath.from_commands([move_to(0, 0), quad_to(50, 100, 100, 0)])
        segments = path_segments(path, CurveMode.FLATTEN, flatten_tolerance=0.5)
        assert len(segments) > 1
        assert not any(s.is_chord for s in segments)
        # Arc length of this parabola is about 147.9
        assert path_length(path, CurveMode.FLATTEN, 0.5) == pytest.approx(147.9, abs=1.0)

    def test_flatten_curve_endpoints(self) -> None:
        """Test that flattening keeps both endpoints."""
        control = [Point(0, 0), Point(0, 50), Point(100, 50), Point(100, 0)]
        polyline = flatten_curve(control, tolerance=1.0)
        assert polyline[0] == Point(0, 0)
        assert polyline[-1] == Point(100, 0)

    def test_flatten_curve_rejects_bad_input(self) -> None:
        """Test that flatten_curve needs 2 to 4 points."""
        with pytest.raises(ValueError, match="Expected 2-4 points"):
            flatten_curve([Point(0, 0)])


class TestPathBounds:
    """Tests for path_bounds."""

    def test_empty_path(self) -> None:
        """Test that an empty path has no bounds."""
        assert path_bounds(TracePath()) is None

    def test_polygon_bounds(self, square: Outline) -> None:
        """Test bounds of a square."""
        assert path_bounds(square) == Rect(0, 0, 100, 100)

    def test_curve_extrema_included(self) -> None:
        """Test that curve bounds follow the curve, not the control points."""
        path = TracePath.from_commands([move_to(0, 0), curve_to(0, 100, 100, 100, 100, 0)])
        bounds = path_bounds(path)
        assert bounds is not None
        assert bounds.max_y == pytest.approx(75.0)

    def test_degenerate_line_bounds(self) -> None:
        """Test that a horizontal line has zero height."""
        bounds = path_bounds(TracePath.from_commands([move_to(0, 0), line_to(100, 0)]))
        assert bounds is not None
        assert bounds.height == 0


class TestPointInOutline:
    """Tests for point_in_outline."""

    def test_inside_and_outside(self, square: Outline) -> None:
        """Test a clearly inside and a clearly outside point."""
        assert point_in_outline(Point(50, 50), square)
        assert not point_in_outline(Point(150, 50), square)

    def test_even_odd_hole(self, square_with_hole: Outline) -> None:
        """Test that points inside the hole are outside the filled area."""
        assert not point_in_outline(Point(50, 50), square_with_hole)
        assert point_in_outline(Point(10, 10), square_with_hole)

    def test_hole_winding_irrelevant(self) -> None:
        """Test that a hole wound the same way as the outer contour is still a hole."""
        outline = Outline.from_commands(
            [
                move_to(0, 0), line_to(100, 0), line_to(100, 100), line_to(0, 100), close_path(),
                move_to(25, 25), line_to(75, 25), line_to(75, 75), line_to(25, 75), close_path(),
            ]
        )
        reversed_hole = Outline.from_commands(
            [
                move_to(0, 0), line_to(100, 0), line_to(100, 100), line_to(0, 100), close_path(),
                move_to(25, 25), line_to(25, 75), line_to(75, 75), line_to(75, 25), close_path(),
            ]
        )
        assert point_in_outline(Point(50, 50), outline) == point_in_outline(Point(50, 50), reversed_hole)

    def test_curved_outline(self) -> None:
        """Test containment against a curved contour."""
        outline = Outline.from_commands(
            [move_to(0, 0), line_to(100, 0), quad_to(50, 100, 0, 0), close_path()]
        )
        assert point_in_outline(Point(50, 30), outline)
        assert not point_in_outline(Point(50, 60), outline)

    def test_empty_outline(self) -> None:
        """Test that nothing is inside an empty outline."""
        assert not point_in_outline(Point(0, 0), Outline())


class TestGridPoints:
    """Tests for grid_points."""

    def test_inclusive_of_far_edge(self) -> None:
        """Test that the grid reaches the max edge when it falls on a step."""
        points = list(grid_points(Rect(0, 0, 20, 10), 10))
        assert len(points) == 3 * 2
        assert Point(20, 10) in points

    def test_zero_height_box_gives_one_row(self) -> None:
        """Test that a flat box still yields a row of points."""
        points = list(grid_points(Rect(0, 0, 100, 0), 10))
        assert len(points) == 11
        assert all(p.y == 0 for p in points)

    def test_none_and_bad_step(self) -> None:
        """Test that missing bounds or a non-positive step yield nothing."""
        assert list(grid_points(None, 10)) == []
        assert list(grid_points(Rect(0, 0, 10, 10), 0)) == []


class TestIsPointCovered:
    """Tests for is_point_covered and coverage_radius."""

    def test_radius(self) -> None:
        """Test radius formula width / 2 * multiplier + buffer."""
        stroke = Stroke(points=(Point(0, 0),), width=8.0)
        assert coverage_radius(stroke) == 4.0
        assert coverage_radius(stroke, 1.5, 2.0) == 8.0

    def test_covered_within_half_width(self) -> None:
        """Test coverage within and beyond half the stroke width."""
        strokes = [Stroke(points=(Point(0, 0), Point(100, 0)), width=10.0)]
        assert is_point_covered(Point(50, 5), strokes)
        assert not is_point_covered(Point(50, 5.5), strokes)

    def test_tap_covers_a_disc(self) -> None:
        """Test that a single-point stroke covers a disc around it."""
        strokes = [Stroke(points=(Point(10, 10),), width=6.0)]
        assert is_point_covered(Point(12, 10), strokes)
        assert not is_point_covered(Point(14, 10), strokes)

    def test_each_stroke_uses_its_own_width(self) -> None:
        """Test that coverage radius follows each stroke's width."""
        strokes = [
            Stroke(points=(Point(0, 0), Point(10, 0)), width=2.0),
            Stroke(points=(Point(0, 50), Point(10, 50)), width=40.0),
        ]
        assert not is_point_covered(Point(5, 5), strokes)
        assert is_point_covered(Point(5, 35), strokes)

    def test_no_strokes(self) -> None:
        """Test that nothing is covered without strokes."""
        assert not is_point_covered(Point(0, 0), [])
