"""Internal Bezier curve flattening.

This is an internal module containing helper functions for
geometry.flatten_curve. Not intended for public use.
"""

import math

from alphaquest.domain import Point

# Recursion guard for pathological control polygons
_MAX_DEPTH = 16


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def _split(control: list[Point]) -> tuple[list[Point], list[Point]]:
    """Split a Bezier curve of any degree at t=0.5 (De Casteljau).

    Returns:
        Control points of the left and right halves
    """
    left = [control[0]]
    right = [control[-1]]
    level = control
    while len(level) > 1:
        level = [_midpoint(level[i], level[i + 1]) for i in range(len(level) - 1)]
        left.append(level[0])
        right.append(level[-1])
    right.reverse()
    return left, right


def _flatness(control: list[Point]) -> float:
    """Largest distance of an inner control point from the chord."""
    start, end = control[0], control[-1]
    dx = end.x - start.x
    dy = end.y - start.y
    chord = math.hypot(dx, dy)
    worst = 0.0
    for p in control[1:-1]:
        if chord == 0.0:
            d = math.hypot(p.x - start.x, p.y - start.y)
        else:
            d = abs(dy * (p.x - start.x) - dx * (p.y - start.y)) / chord
        worst = max(worst, d)
    return worst


def flatten(control: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic or cubic curve by recursive subdivision.

    The control-polygon distance bounds the curve's distance from its chord,
    so a flat control polygon guarantees the chord is within tolerance.

    Args:
        control: Control points [p0, ..., pn] including both endpoints
        tolerance: Maximum distance from the true curve
        depth: Current recursion depth

    Returns:
        Polyline points from p0 to pn inclusive
    """
    if depth >= _MAX_DEPTH or _flatness(control) <= tolerance:
        return [control[0], control[-1]]

    left, right = _split(control)
    head = flatten(left, tolerance, depth + 1)
    tail = flatten(right, tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return head[:-1] + tail
