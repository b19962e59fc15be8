"""Core geometric types for letter outlines and guide paths.

This module defines the resolution-independent path types used throughout
AlphaQuest:
- Point, Size, Rect: plain 2D value types
- CommandKind, PathCommand: a single drawing command
- Outline: closed subpaths tested for interior containment (fill level)
- TracePath: open guide strokes tested by proximity (trace and draw levels)

Paths replay themselves onto any fontTools-style pen through draw(), so the
io and core layers can use pens without the domain depending on fontTools.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, ClassVar

from alphaquest.exceptions import PathCommandError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Size:
    """Width and height of a target rectangle."""

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle given by its minimum and maximum corners."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def is_empty(self) -> bool:
        """True if the rectangle has no area."""
        return not (self.width > 0 and self.height > 0)

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def contains(self, point: Point, tolerance: float = 0.0) -> bool:
        """Check if point lies inside the rectangle (boundary inclusive)."""
        return (
            self.min_x - tolerance <= point.x <= self.max_x + tolerance
            and self.min_y - tolerance <= point.y <= self.max_y + tolerance
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)


class CommandKind(Enum):
    """Drawing command type.

    - MOVE_TO: start a new subpath at one point
    - LINE_TO: straight segment to one point
    - QUAD_TO: quadratic Bezier (control, end)
    - CURVE_TO: cubic Bezier (control1, control2, end)
    - CLOSE: straight segment back to the subpath start
    """

    MOVE_TO = auto()
    LINE_TO = auto()
    QUAD_TO = auto()
    CURVE_TO = auto()
    CLOSE = auto()


_ARITY: dict[CommandKind, int] = {
    CommandKind.MOVE_TO: 1,
    CommandKind.LINE_TO: 1,
    CommandKind.QUAD_TO: 2,
    CommandKind.CURVE_TO: 3,
    CommandKind.CLOSE: 0,
}


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single path command.

    Attributes:
        kind: Command type
        points: Control and end points; the last point is the on-curve end
    """

    kind: CommandKind
    points: tuple[Point, ...] = ()

    @property
    def end(self) -> Point | None:
        """On-curve end point of the command (None for CLOSE)."""
        return self.points[-1] if self.points else None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.name.lower(),
            "points": [list(p.to_tuple()) for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathCommand":
        """Deserialize from dictionary."""
        try:
            kind = CommandKind[str(data["kind"]).upper()]
        except KeyError as e:
            raise PathCommandError(f"Unknown path command: {data.get('kind')!r}") from e
        points = tuple(Point(float(x), float(y)) for x, y in data.get("points", []))
        return cls(kind=kind, points=points)


def move_to(x: float, y: float) -> PathCommand:
    return PathCommand(CommandKind.MOVE_TO, (Point(x, y),))


def line_to(x: float, y: float) -> PathCommand:
    return PathCommand(CommandKind.LINE_TO, (Point(x, y),))


def quad_to(cx: float, cy: float, x: float, y: float) -> PathCommand:
    return PathCommand(CommandKind.QUAD_TO, (Point(cx, cy), Point(x, y)))


def curve_to(
    c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
) -> PathCommand:
    return PathCommand(CommandKind.CURVE_TO, (Point(c1x, c1y), Point(c2x, c2y), Point(x, y)))


def close_path() -> PathCommand:
    return PathCommand(CommandKind.CLOSE)


def _validate_commands(commands: tuple[PathCommand, ...]) -> None:
    """Check arity and that every subpath starts with MOVE_TO.

    Raises:
        PathCommandError: If the command stream is malformed
    """
    open_subpath = False
    for index, command in enumerate(commands):
        expected = _ARITY[command.kind]
        if len(command.points) != expected:
            raise PathCommandError(
                f"Command {index} ({command.kind.name}) expects {expected} points, "
                f"got {len(command.points)}"
            )
        if command.kind == CommandKind.MOVE_TO:
            open_subpath = True
        elif not open_subpath:
            raise PathCommandError(
                f"Command {index} ({command.kind.name}) has no current point; "
                "a subpath must start with MOVE_TO"
            )
        elif command.kind == CommandKind.CLOSE:
            open_subpath = False


class _PathCommands:
    """Behaviour shared by Outline and TracePath."""

    commands: tuple[PathCommand, ...]
    closes_subpaths: ClassVar[bool] = False

    def _normalize(self) -> None:
        commands = tuple(self.commands)
        _validate_commands(commands)
        object.__setattr__(self, "commands", commands)

    @property
    def is_empty(self) -> bool:
        """True if the path has no commands at all."""
        return len(self.commands) == 0

    def subpaths(self) -> list[tuple[PathCommand, ...]]:
        """Split the command stream at each MOVE_TO."""
        result: list[tuple[PathCommand, ...]] = []
        current: list[PathCommand] = []
        for command in self.commands:
            if command.kind == CommandKind.MOVE_TO and current:
                result.append(tuple(current))
                current = []
            current.append(command)
        if current:
            result.append(tuple(current))
        return result

    def anchor_points(self) -> list[Point]:
        """On-curve points in drawing order (MOVE/LINE/curve ends)."""
        return [c.points[-1] for c in self.commands if c.points]

    @property
    def current_point(self) -> Point | None:
        """Pen position after the last command.

        After CLOSE the pen returns to the start of the closed subpath.
        """
        position: Point | None = None
        start: Point | None = None
        for command in self.commands:
            if command.kind == CommandKind.MOVE_TO:
                start = command.points[0]
                position = start
            elif command.kind == CommandKind.CLOSE:
                position = start
            else:
                position = command.points[-1]
        return position

    def draw(self, pen: Any) -> None:
        """Replay the path onto a fontTools-style pen.

        Open subpaths end with endPath(), unless this path type treats every
        subpath as closed, in which case closePath() is emitted.
        """
        for subpath in self.subpaths():
            closed = False
            for command in subpath:
                if command.kind == CommandKind.MOVE_TO:
                    pen.moveTo(command.points[0].to_tuple())
                elif command.kind == CommandKind.LINE_TO:
                    pen.lineTo(command.points[0].to_tuple())
                elif command.kind == CommandKind.QUAD_TO:
                    pen.qCurveTo(*(p.to_tuple() for p in command.points))
                elif command.kind == CommandKind.CURVE_TO:
                    pen.curveTo(*(p.to_tuple() for p in command.points))
                else:
                    pen.closePath()
                    closed = True
            if not closed:
                if self.closes_subpaths:
                    pen.closePath()
                else:
                    pen.endPath()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"commands": [c.to_dict() for c in self.commands]}

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)


@dataclass(frozen=True)
class Outline(_PathCommands):
    """A letter outline made of closed subpaths.

    The first subpath is normally the outer contour and any further subpaths
    are holes. Interior tests use the even-odd rule, so hole winding does not
    matter. Subpaths without an explicit CLOSE are closed implicitly.

    Attributes:
        commands: Path commands in a local coordinate space (nominally 0-100)
    """

    commands: tuple[PathCommand, ...] = ()
    closes_subpaths: ClassVar[bool] = True

    def __post_init__(self) -> None:
        self._normalize()

    @classmethod
    def from_commands(cls, commands: Iterable[PathCommand]) -> "Outline":
        return cls(commands=tuple(commands))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Outline":
        """Deserialize from dictionary."""
        return cls(commands=tuple(PathCommand.from_dict(c) for c in data["commands"]))


@dataclass(frozen=True)
class TracePath(_PathCommands):
    """A single-stroke guide line for tracing.

    May contain several open subpaths (pen lifts). Evaluated by proximity and
    length, never by containment.

    Attributes:
        commands: Path commands in a local coordinate space (nominally 0-100)
    """

    commands: tuple[PathCommand, ...] = ()

    def __post_init__(self) -> None:
        self._normalize()

    @classmethod
    def from_commands(cls, commands: Iterable[PathCommand]) -> "TracePath":
        return cls(commands=tuple(commands))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TracePath":
        """Deserialize from dictionary."""
        return cls(commands=tuple(PathCommand.from_dict(c) for c in data["commands"]))
