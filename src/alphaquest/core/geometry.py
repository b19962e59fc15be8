"""Geometric operations shared by the evaluators.

This module provides core mathematical utilities for:
- Point-to-segment distance (projection and clamp)
- Segment extraction from paths (curves as chords or flattened)
- Path length estimation
- Exact path bounds and even-odd interior tests (fontTools pens)

All functions are pure and stateless.
"""

import math
from typing import NamedTuple

from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.pointInsidePen import PointInsidePen

from alphaquest.config import CurveMode
from alphaquest.core._bezier import flatten
from alphaquest.domain import CommandKind, Outline, Point, Rect, TracePath

PathLike = Outline | TracePath


class Segment(NamedTuple):
    """A straight piece of a path.

    Attributes:
        start: Segment start point
        end: Segment end point
        is_chord: True if the segment stands in for a whole curve
    """

    start: Point
    end: Point
    is_chord: bool = False

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Find the distance from a point to a line segment.

    Projects the point onto the infinite line, clamps the projection to the
    segment endpoints and measures the distance to the clamped point. A
    zero-length segment degenerates to point-to-point distance.

    Args:
        point: The point to measure from
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Euclidean distance from point to the closest point of the segment

    Examples:
        >>> distance_to_segment(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        1.0
        >>> distance_to_segment(Point(3.0, 4.0), Point(0.0, 0.0), Point(0.0, 0.0))
        5.0
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq == 0.0:
        return math.hypot(point.x - seg_start.x, point.y - seg_start.y)

    # t = dot(point - start, end - start) / ||end - start||^2
    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest_x = seg_start.x + t * dx
    nearest_y = seg_start.y + t * dy
    return math.hypot(point.x - nearest_x, point.y - nearest_y)


def flatten_curve(control: list[Point], tolerance: float = 1.0) -> list[Point]:
    """Convert a Bezier curve to a polyline.

    Args:
        control: 2 (line), 3 (quadratic) or 4 (cubic) control points
        tolerance: Maximum distance from true curve

    Returns:
        Polyline points from the first to the last control point

    Raises:
        ValueError: If control does not hold 2 to 4 points
    """
    if len(control) == 2:
        return list(control)
    if len(control) in (3, 4):
        return flatten(list(control), tolerance)
    raise ValueError(f"Expected 2-4 points for Bezier curve, got {len(control)}")


def path_segments(
    path: PathLike,
    curve_mode: CurveMode = CurveMode.CHORD,
    flatten_tolerance: float = 1.0,
) -> list[Segment]:
    """Break a path into straight segments in drawing order.

    Close commands contribute the segment back to the subpath start. For
    outlines, subpaths without an explicit close get the same implicit
    closing segment. Move commands contribute nothing.

    Args:
        path: Outline or trace path
        curve_mode: CHORD replaces each curve by the line between its
            endpoints; FLATTEN subdivides it
        flatten_tolerance: Flattening tolerance for FLATTEN mode

    Returns:
        List of segments
    """
    segments: list[Segment] = []
    close_implicitly = isinstance(path, Outline)

    for subpath in path.subpaths():
        start = subpath[0].points[0]
        current = start
        closed = False
        for command in subpath[1:]:
            if command.kind == CommandKind.LINE_TO:
                end = command.points[0]
                segments.append(Segment(current, end))
                current = end
            elif command.kind in (CommandKind.QUAD_TO, CommandKind.CURVE_TO):
                end = command.points[-1]
                if curve_mode == CurveMode.FLATTEN:
                    polyline = flatten_curve([current, *command.points], flatten_tolerance)
                    for a, b in zip(polyline, polyline[1:]):
                        segments.append(Segment(a, b))
                else:
                    segments.append(Segment(current, end, is_chord=True))
                current = end
            elif command.kind == CommandKind.CLOSE:
                segments.append(Segment(current, start))
                current = start
                closed = True
        if close_implicitly and not closed and current != start:
            segments.append(Segment(current, start))

    return segments


def path_length(
    path: PathLike,
    curve_mode: CurveMode = CurveMode.CHORD,
    flatten_tolerance: float = 1.0,
) -> float:
    """Estimate path length by summing its straight segments.

    In CHORD mode curvature within a segment is ignored, so curved letters
    come out somewhat short.
    """
    return sum(s.length for s in path_segments(path, curve_mode, flatten_tolerance))


def path_bounds(path: PathLike) -> Rect | None:
    """Calculate the exact bounding box of a path, curve extrema included.

    Returns:
        Rect, or None for an empty path
    """
    if path.is_empty:
        return None

    pen = BoundsPen(None)
    path.draw(pen)
    if pen.bounds is None:
        return None

    min_x, min_y, max_x, max_y = pen.bounds
    return Rect(min_x, min_y, max_x, max_y)


def point_in_outline(point: Point, outline: Outline) -> bool:
    """Determine if a point is inside an outline using the even-odd rule.

    A point inside the outer contour and inside a hole crosses the boundary
    an even number of times and is therefore outside. Curves are tested
    exactly, not as chords.

    Args:
        point: The point to test
        outline: The outline; every subpath is treated as closed

    Returns:
        True if point is inside the filled area, False otherwise
    """
    if outline.is_empty:
        return False

    pen = PointInsidePen(None, point.to_tuple(), evenOdd=True)
    outline.draw(pen)
    return bool(pen.getResult())
