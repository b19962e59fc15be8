"""Converters between fontTools pen recordings, SVG path data and domain paths.

Letter geometry is authored as SVG path data and parsed with fontTools'
svgLib into a RecordingPen. The recording is then converted into domain
PathCommand objects. The same conversion is used after replaying a path
through a TransformPen.
"""

from collections.abc import Sequence
from typing import Any

from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment
from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib.path import parse_path

from alphaquest.domain.path import (
    CommandKind,
    Outline,
    PathCommand,
    Point,
    TracePath,
)
from alphaquest.exceptions import PathCommandError

Recording = Sequence[tuple[str, tuple[Any, ...]]]


def _point(pt: Sequence[float]) -> Point:
    x, y = pt
    return Point(float(x), float(y))


def recording_to_commands(recording: Recording, keep_open: bool = True) -> list[PathCommand]:
    """Convert RecordingPen output to domain path commands.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), ..., (xn, yn)))  # one or more quadratic segments
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # cubic, or a super-Bezier run
    - ('closePath', ())
    - ('endPath', ())

    Multi-control quadratic runs are split into single QUAD_TO commands with
    implied on-curve points; super-Bezier runs are split into cubics.

    Args:
        recording: List of drawing commands from RecordingPen
        keep_open: If False, endPath closes the subpath like closePath

    Returns:
        List of PathCommand objects

    Raises:
        PathCommandError: If the recording holds a contour with no on-curve point
    """
    commands: list[PathCommand] = []

    for operator, args in recording:
        if operator == "moveTo":
            commands.append(PathCommand(CommandKind.MOVE_TO, (_point(args[0]),)))

        elif operator == "lineTo":
            commands.append(PathCommand(CommandKind.LINE_TO, (_point(args[0]),)))

        elif operator == "qCurveTo":
            if args[-1] is None:
                raise PathCommandError("Quadratic contours without on-curve points are not supported")
            if len(args) == 1:
                commands.append(PathCommand(CommandKind.LINE_TO, (_point(args[0]),)))
                continue
            for control, end in decomposeQuadraticSegment(args):
                commands.append(PathCommand(CommandKind.QUAD_TO, (_point(control), _point(end))))

        elif operator == "curveTo":
            if len(args) == 1:
                commands.append(PathCommand(CommandKind.LINE_TO, (_point(args[0]),)))
            elif len(args) == 2:
                commands.append(PathCommand(CommandKind.QUAD_TO, (_point(args[0]), _point(args[1]))))
            else:
                for c1, c2, end in decomposeSuperBezierSegment(args):
                    commands.append(
                        PathCommand(CommandKind.CURVE_TO, (_point(c1), _point(c2), _point(end)))
                    )

        elif operator == "closePath":
            commands.append(PathCommand(CommandKind.CLOSE))

        elif operator == "endPath":
            if not keep_open:
                commands.append(PathCommand(CommandKind.CLOSE))

    return commands


def path_to_recording(path: Outline | TracePath) -> list[tuple[str, tuple[Any, ...]]]:
    """Replay a domain path into a RecordingPen and return its value."""
    pen = RecordingPen()
    path.draw(pen)
    return list(pen.value)


def _parse_svg(path_data: str) -> list[tuple[str, tuple[Any, ...]]]:
    pen = RecordingPen()
    try:
        parse_path(path_data, pen)
    except (ValueError, IndexError) as e:
        raise PathCommandError(f"Invalid SVG path data: {e}") from e
    return list(pen.value)


def svg_to_outline(path_data: str) -> Outline:
    """Parse SVG path data into an Outline.

    Every subpath is closed, with or without an explicit Z.

    Args:
        path_data: SVG 'd' attribute (M/L/H/V/Q/T/C/S/A/Z, absolute or relative)

    Returns:
        Outline instance
    """
    return Outline(commands=tuple(recording_to_commands(_parse_svg(path_data), keep_open=False)))


def svg_to_trace_path(path_data: str) -> TracePath:
    """Parse SVG path data into a TracePath; subpaths stay open unless closed with Z."""
    return TracePath(commands=tuple(recording_to_commands(_parse_svg(path_data), keep_open=True)))
