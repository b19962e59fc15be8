"""Shape-recognition evaluator for the free-draw level.

This is a coverage heuristic, not shape matching: points are sampled along
the reference path and the score is the share of samples under ink. It
cannot tell a mirrored or rotated letter apart, nor ink in an unexpected
place that happens to cross the samples.
"""

import logging
from collections.abc import Sequence

from alphaquest.config import CurveMode
from alphaquest.core.coverage import is_point_covered
from alphaquest.core.geometry import PathLike, distance, path_segments
from alphaquest.core.transform import ScaledGeometry
from alphaquest.domain import CoverageResult, Point, Stroke

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_COUNT = 20
DEFAULT_TOLERANCE_MULTIPLIER = 1.5
DEFAULT_STROKE_BUFFER = 2.0


def sample_points_along_path(
    path: PathLike,
    count: int,
    curve_mode: CurveMode = CurveMode.CHORD,
    flatten_tolerance: float = 1.0,
) -> list[Point]:
    """Sample approximately equidistant points along a path.

    The first sample sits half a spacing into the path and each further
    sample one spacing later, where spacing is total length / count. The
    leftover distance carries across segment and subpath boundaries; the
    gap jumped by a move command is not part of the length. If fewer than
    count samples fit, the pen's final position is appended.

    Args:
        path: Reference path
        count: Number of samples wanted
        curve_mode: How curves are turned into segments
        flatten_tolerance: Flattening tolerance (FLATTEN mode only)

    Returns:
        At most count points; a zero-length path yields its single point
    """
    if count <= 0 or path.is_empty:
        return []

    segments = path_segments(path, curve_mode, flatten_tolerance)
    total_length = sum(s.length for s in segments)
    last_point = path.current_point

    if total_length <= 0:
        return [last_point] if last_point is not None else []

    spacing = total_length / count
    remaining = spacing / 2
    points: list[Point] = []

    for segment in segments:
        seg_len = segment.length
        dx = segment.end.x - segment.start.x
        dy = segment.end.y - segment.start.y
        while remaining <= seg_len and len(points) < count:
            fraction = remaining / seg_len
            points.append(Point(segment.start.x + fraction * dx, segment.start.y + fraction * dy))
            remaining += spacing
        remaining -= seg_len

    if len(points) < count and last_point is not None:
        if not points or distance(points[-1], last_point) > 1e-6:
            points.append(last_point)

    return points[:count]


def recognize_shape(
    geometry: ScaledGeometry,
    strokes: Sequence[Stroke],
    sample_count: int = DEFAULT_SAMPLE_COUNT,
    tolerance_multiplier: float = DEFAULT_TOLERANCE_MULTIPLIER,
    stroke_buffer: float = DEFAULT_STROKE_BUFFER,
    curve_mode: CurveMode = CurveMode.CHORD,
    flatten_tolerance: float = 1.0,
) -> CoverageResult:
    """Score a freehand drawing against a reference path.

    Args:
        geometry: Reference path scaled to the canvas
        strokes: Finalized strokes, read only
        sample_count: Number of samples along the reference
        tolerance_multiplier: Scale applied to half the stroke width
        stroke_buffer: Fixed extra tolerance
        curve_mode: How curves are turned into segments
        flatten_tolerance: Flattening tolerance (FLATTEN mode only)

    Returns:
        CoverageResult over the samples; 0% for an empty reference or an
        empty drawing
    """
    path = geometry.path
    if path.is_empty or not strokes:
        return CoverageResult.empty()

    samples = sample_points_along_path(path, sample_count, curve_mode, flatten_tolerance)
    if not samples:
        return CoverageResult.empty()

    covered = sum(
        1
        for point in samples
        if is_point_covered(point, strokes, multiplier=tolerance_multiplier, buffer=stroke_buffer)
    )

    result = CoverageResult.from_counts(len(samples), covered)
    logger.debug(
        "Shape recognition: samples=%d covered=%d percentage=%.2f",
        len(samples),
        covered,
        result.percentage,
    )
    return result
