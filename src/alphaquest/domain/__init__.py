"""Domain models for AlphaQuest.

This module contains the core domain models representing letter geometry,
user ink and evaluation results. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of fontTools implementation details

Key classes:
- Point, Size, Rect: 2D value types
- PathCommand: A single move/line/curve/close command
- Outline: Closed letter outline with optional holes
- TracePath: Open guide stroke for tracing
- Stroke, StrokeSession, StrokeCapture: User ink
- LetterData: Reference geometry for one letter
- CoverageResult: Evaluator output
"""

from alphaquest.domain.letter import LetterData
from alphaquest.domain.path import (
    CommandKind,
    Outline,
    PathCommand,
    Point,
    Rect,
    Size,
    TracePath,
    close_path,
    curve_to,
    line_to,
    move_to,
    quad_to,
)
from alphaquest.domain.result import AttemptState, CoverageResult, LevelKind
from alphaquest.domain.stroke import PALETTE, Stroke, StrokeCapture, StrokeSession

__all__: list[str] = [
    # Enums
    "AttemptState",
    "CommandKind",
    "LevelKind",
    # Core types
    "CoverageResult",
    "LetterData",
    "Outline",
    "PALETTE",
    "PathCommand",
    "Point",
    "Rect",
    "Size",
    "Stroke",
    "StrokeCapture",
    "StrokeSession",
    "TracePath",
    # Command helpers
    "close_path",
    "curve_to",
    "line_to",
    "move_to",
    "quad_to",
]
