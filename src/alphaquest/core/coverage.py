"""Sampling grid and stroke-proximity test shared by the evaluators."""

from collections.abc import Iterator, Sequence

from alphaquest.core.geometry import distance_to_segment
from alphaquest.domain import Point, Rect, Stroke

# Slack for floating-point drift when stepping up to the far edge
_GRID_EPSILON = 1e-9


def _axis(start: float, stop: float, step: float) -> Iterator[float]:
    i = 0
    value = start
    while value <= stop + _GRID_EPSILON:
        yield value
        i += 1
        value = start + i * step


def grid_points(bounds: Rect | None, step: float) -> Iterator[Point]:
    """Enumerate a regular grid over a bounding box.

    Columns and rows start at the minimum corner and advance by step up to
    and including the maximum edge, so a box with zero height still yields
    one row.

    Args:
        bounds: Box to cover (None yields nothing)
        step: Grid spacing (non-positive yields nothing)

    Yields:
        Grid points, column by column
    """
    if bounds is None or step <= 0:
        return
    for x in _axis(bounds.min_x, bounds.max_x, step):
        for y in _axis(bounds.min_y, bounds.max_y, step):
            yield Point(x, y)


def coverage_radius(stroke: Stroke, multiplier: float = 1.0, buffer: float = 0.0) -> float:
    """Distance within which a stroke counts as covering a point."""
    return stroke.width / 2 * multiplier + buffer


def is_point_covered(
    point: Point,
    strokes: Sequence[Stroke],
    multiplier: float = 1.0,
    buffer: float = 0.0,
) -> bool:
    """Check if a point lies under any stroke's ink.

    A point is covered if its distance to some segment of some stroke is at
    most width / 2 * multiplier + buffer for that stroke.

    Args:
        point: The point to test
        strokes: Finalized strokes
        multiplier: Scale applied to half the stroke width
        buffer: Fixed extra tolerance

    Returns:
        True if covered, False otherwise
    """
    for stroke in strokes:
        radius = coverage_radius(stroke, multiplier, buffer)
        for seg_start, seg_end in stroke.segments():
            if distance_to_segment(point, seg_start, seg_end) <= radius:
                return True
    return False
