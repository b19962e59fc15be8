"""Coordinate fitting: scale a letter path to fit a canvas.

The fit preserves aspect ratio, leaves a padding margin and centers the
scaled bounds in the target rectangle. Degenerate input never raises; it
produces an invalid fit and an empty ScaledGeometry, which every evaluator
scores as 0%.
"""

import logging
import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from fontTools.misc.transform import Identity, Transform
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.transformPen import TransformPen

from alphaquest.core.geometry import path_bounds
from alphaquest.domain import Outline, Rect, Size, TracePath
from alphaquest.io.converter import recording_to_commands

logger = logging.getLogger(__name__)

P = TypeVar("P", Outline, TracePath)


@dataclass(frozen=True)
class FitTransform:
    """Scale and translation that fit source bounds into a target size.

    Attributes:
        transform: fontTools affine transform (scale, then translate)
        scale: Uniform scale factor
        offset_x: Horizontal translation applied after scaling
        offset_y: Vertical translation applied after scaling
        is_valid: False if the inputs were degenerate; the geometry must
            then be treated as absent
    """

    transform: Transform
    scale: float
    offset_x: float
    offset_y: float
    is_valid: bool

    @classmethod
    def invalid(cls) -> "FitTransform":
        return cls(transform=Identity, scale=1.0, offset_x=0.0, offset_y=0.0, is_valid=False)


def fit(bounds: Rect | None, target: Size, padding_fraction: float = 0.2) -> FitTransform:
    """Compute the transform that fits bounds into target.

    scale = min(target.width / bounds.width, target.height / bounds.height)
    multiplied by (1 - padding_fraction); the scaled bounds are centered
    in the target.

    Args:
        bounds: Source bounding box (must have positive width and height)
        target: Canvas size
        padding_fraction: Share of the available space left as margin,
            clamped to [0, 1)

    Returns:
        FitTransform; is_valid is False for degenerate bounds, a degenerate
        target or a non-finite scale
    """
    if bounds is None or bounds.is_empty:
        logger.debug("Fit skipped: degenerate bounds %s", bounds)
        return FitTransform.invalid()
    if not (target.width > 0 and target.height > 0):
        logger.debug("Fit skipped: degenerate target %s", target)
        return FitTransform.invalid()

    padding = min(max(padding_fraction, 0.0), 1.0 - 1e-9)
    scale = min(target.width / bounds.width, target.height / bounds.height) * (1.0 - padding)

    if not math.isfinite(scale) or scale <= 0:
        logger.debug("Fit skipped: invalid scale %r", scale)
        return FitTransform.invalid()

    scaled_width = bounds.width * scale
    scaled_height = bounds.height * scale
    offset_x = (target.width - scaled_width) / 2 - bounds.min_x * scale
    offset_y = (target.height - scaled_height) / 2 - bounds.min_y * scale

    if not (math.isfinite(offset_x) and math.isfinite(offset_y)):
        return FitTransform.invalid()

    return FitTransform(
        transform=Transform(scale, 0, 0, scale, offset_x, offset_y),
        scale=scale,
        offset_x=offset_x,
        offset_y=offset_y,
        is_valid=True,
    )


def apply_transform(path: P, transform: Transform) -> P:
    """Return a transformed copy of a path.

    The path is replayed through a fontTools TransformPen into a
    RecordingPen and converted back to domain commands.
    """
    recording = RecordingPen()
    path.draw(TransformPen(recording, transform))
    commands = recording_to_commands(recording.value, keep_open=isinstance(path, TracePath))
    return type(path)(commands=tuple(commands))


@dataclass(frozen=True)
class ScaledGeometry(Generic[P]):
    """A path transformed for one specific canvas size.

    Valid only for target; recompute when the canvas is resized.

    Attributes:
        path: Transformed copy of the source path (empty if the fit failed)
        target: Canvas size the geometry was fitted to
        fit: The transform that produced path
    """

    path: P
    target: Size
    fit: FitTransform

    @property
    def is_empty(self) -> bool:
        return self.path.is_empty

    @classmethod
    def unscaled(cls, path: P, target: Size | None = None) -> "ScaledGeometry[P]":
        """Wrap a path that is already in canvas coordinates."""
        bounds = path_bounds(path)
        if target is None:
            target = Size(bounds.max_x, bounds.max_y) if bounds else Size(0.0, 0.0)
        identity = FitTransform(
            transform=Identity, scale=1.0, offset_x=0.0, offset_y=0.0, is_valid=True
        )
        return cls(path=path, target=target, fit=identity)


def scale_geometry(path: P, target: Size, padding_fraction: float = 0.2) -> ScaledGeometry[P]:
    """Fit a path to a canvas.

    Args:
        path: Outline or trace path in its local coordinate space
        target: Canvas size
        padding_fraction: Share of the canvas left as margin

    Returns:
        ScaledGeometry; its path is empty if the path could not be fitted
    """
    result = fit(path_bounds(path), target, padding_fraction)
    if not result.is_valid:
        return ScaledGeometry(path=type(path)(), target=target, fit=result)

    scaled = apply_transform(path, result.transform)
    logger.debug(
        "Scaled %s to %sx%s (scale=%.4f, offset=(%.2f, %.2f))",
        type(path).__name__,
        target.width,
        target.height,
        result.scale,
        result.offset_x,
        result.offset_y,
    )
    return ScaledGeometry(path=scaled, target=target, fit=result)
