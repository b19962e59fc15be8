"""Trace-coverage evaluator for the tracing level.

Samples the guide rather than the ink: grid points close to the guide are
"on-path", and the score is the share of on-path points under ink. Extra
strokes away from the guide therefore never lower the score; only leaving
parts of the guide untraced does.
"""

import logging
from collections.abc import Sequence

from alphaquest.config import CurveMode
from alphaquest.core.coverage import grid_points, is_point_covered
from alphaquest.core.geometry import Segment, distance_to_segment, path_bounds, path_segments
from alphaquest.core.transform import ScaledGeometry
from alphaquest.domain import CoverageResult, Outline, Point, Stroke, TracePath

logger = logging.getLogger(__name__)

DEFAULT_GRID_STEP = 10.0
DEFAULT_PROXIMITY_TOLERANCE = 5.0
DEFAULT_STROKE_BUFFER = 2.0
DEFAULT_CURVE_TOLERANCE_FACTOR = 1.5


def is_point_near_segments(
    point: Point,
    segments: Sequence[Segment],
    tolerance: float,
    curve_tolerance_factor: float = DEFAULT_CURVE_TOLERANCE_FACTOR,
) -> bool:
    """Check if a point is within tolerance of any segment.

    Chords that stand in for curves get tolerance * curve_tolerance_factor,
    since the real curve bows away from its chord.
    """
    for segment in segments:
        limit = tolerance * curve_tolerance_factor if segment.is_chord else tolerance
        if distance_to_segment(point, segment.start, segment.end) <= limit:
            return True
    return False


def trace_coverage(
    geometry: ScaledGeometry[TracePath] | ScaledGeometry[Outline],
    strokes: Sequence[Stroke],
    grid_step: float = DEFAULT_GRID_STEP,
    proximity_tolerance: float = DEFAULT_PROXIMITY_TOLERANCE,
    stroke_buffer: float = DEFAULT_STROKE_BUFFER,
    curve_mode: CurveMode = CurveMode.CHORD,
    curve_tolerance_factor: float = DEFAULT_CURVE_TOLERANCE_FACTOR,
    flatten_tolerance: float = 1.0,
) -> CoverageResult:
    """Estimate the percentage of a guide path traced over by ink.

    Args:
        geometry: Guide path scaled to the canvas
        strokes: Finalized strokes, read only
        grid_step: Spacing of the sampling grid over the guide's bounding box
        proximity_tolerance: Maximum distance from the guide for on-path points
        stroke_buffer: Extra distance added to half the stroke width
        curve_mode: How curves are turned into segments
        curve_tolerance_factor: Widening for curve chords (CHORD mode only)
        flatten_tolerance: Flattening tolerance (FLATTEN mode only)

    Returns:
        CoverageResult over the on-path grid points; 0% for an empty guide,
        an empty drawing or no on-path points
    """
    path = geometry.path
    if path.is_empty or not strokes:
        return CoverageResult.empty()

    segments = path_segments(path, curve_mode, flatten_tolerance)
    if not segments:
        return CoverageResult.empty()

    on_path = 0
    covered = 0
    for point in grid_points(path_bounds(path), grid_step):
        if not is_point_near_segments(point, segments, proximity_tolerance, curve_tolerance_factor):
            continue
        on_path += 1
        if is_point_covered(point, strokes, buffer=stroke_buffer):
            covered += 1

    result = CoverageResult.from_counts(on_path, covered)
    logger.debug(
        "Trace check: on_path=%d covered=%d percentage=%.2f",
        on_path,
        covered,
        result.percentage,
    )
    return result
