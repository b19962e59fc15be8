"""Core evaluation algorithms for AlphaQuest.

This module contains the core algorithms for:

- Geometry operations (segment distance, path length, even-odd containment)
- Coordinate fitting (scale and center a path inside a canvas)
- Coverage evaluation (fill, trace and shape recognition)
- Level attempts (stroke capture, check and retry)

All evaluators are designed to be:
- Pure (they never mutate the geometry or strokes they read)
- Deterministic (same input, same percentage)
- Total (degenerate input yields 0%, never an exception)

Key functions:
- fit: Compute the transform that fits bounds into a canvas
- scale_geometry: Apply a fit to an Outline or TracePath
- fill_coverage: Share of the outline interior covered by ink
- trace_coverage: Share of the guide neighbourhood covered by ink
- recognize_shape: Share of reference samples covered by ink
- sample_points_along_path: Evenly spaced samples along a path

Key classes:
- FitTransform: Fit result with scale, offset and validity
- ScaledGeometry: A path fitted to a specific canvas size
- LevelAttempt: One try at one level
"""

from alphaquest.core.attempt import LevelAttempt, evaluate_level, level_threshold
from alphaquest.core.coverage import coverage_radius, grid_points, is_point_covered
from alphaquest.core.fill import fill_coverage
from alphaquest.core.geometry import (
    Segment,
    distance,
    distance_to_segment,
    path_bounds,
    path_length,
    path_segments,
    point_in_outline,
)
from alphaquest.core.recognition import recognize_shape, sample_points_along_path
from alphaquest.core.trace import trace_coverage
from alphaquest.core.transform import FitTransform, ScaledGeometry, fit, scale_geometry

__all__ = [
    # Fitting
    "FitTransform",
    # Attempts
    "LevelAttempt",
    "ScaledGeometry",
    # Geometry
    "Segment",
    "coverage_radius",
    "distance",
    "distance_to_segment",
    "evaluate_level",
    # Evaluators
    "fill_coverage",
    "fit",
    "grid_points",
    "is_point_covered",
    "level_threshold",
    "path_bounds",
    "path_length",
    "path_segments",
    "point_in_outline",
    "recognize_shape",
    "sample_points_along_path",
    "scale_geometry",
    "trace_coverage",
]
