"""Fill-coverage evaluator for the fill-in level.

Estimates how much of a letter's interior the child has colored in by
testing a regular grid of points: points inside the outline (even-odd rule,
so holes are excluded) are counted, and those under ink are counted as
covered.
"""

import logging
from collections.abc import Sequence

from alphaquest.core.coverage import grid_points, is_point_covered
from alphaquest.core.geometry import path_bounds, point_in_outline
from alphaquest.core.transform import ScaledGeometry
from alphaquest.domain import CoverageResult, Outline, Stroke

logger = logging.getLogger(__name__)

DEFAULT_GRID_STEP = 15.0


def fill_coverage(
    geometry: ScaledGeometry[Outline],
    strokes: Sequence[Stroke],
    grid_step: float = DEFAULT_GRID_STEP,
) -> CoverageResult:
    """Estimate the percentage of an outline's interior covered by ink.

    Args:
        geometry: Outline scaled to the canvas
        strokes: Finalized strokes, read only
        grid_step: Spacing of the sampling grid in canvas units

    Returns:
        CoverageResult over the inside grid points; 0% for an empty outline,
        an empty drawing or an outline with no inside grid points
    """
    outline = geometry.path
    if outline.is_empty or not strokes:
        return CoverageResult.empty()

    inside = 0
    covered = 0
    for point in grid_points(path_bounds(outline), grid_step):
        if not point_in_outline(point, outline):
            continue
        inside += 1
        if is_point_covered(point, strokes):
            covered += 1

    result = CoverageResult.from_counts(inside, covered)
    logger.debug(
        "Fill check: inside=%d covered=%d percentage=%.2f",
        inside,
        covered,
        result.percentage,
    )
    return result
