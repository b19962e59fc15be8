"""User ink: strokes, the live stroke being captured and the stroke session.

A stroke starts when a drag gesture begins, grows while it continues and is
finalized into the session when it ends. Strokes are immutable once
finalized; only StrokeCapture mutates the live point list.
"""

import math
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from alphaquest.domain.path import Point
from alphaquest.exceptions import StrokeError

# Brush colors from the art style guide
PALETTE: dict[str, str] = {
    "sky_blue": "#6ECFF6",
    "sunny_yellow": "#FFE066",
    "coral_red": "#FF6F61",
    "leaf_green": "#8BC34A",
    "lavender": "#B39DDB",
}

DEFAULT_COLOR = "#000000"
DEFAULT_WIDTH = 5.0

_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


def _check_brush(color: str, width: float) -> None:
    if not _COLOR_PATTERN.match(color):
        raise StrokeError(f"Invalid stroke color {color!r}; expected #RRGGBB")
    if not math.isfinite(width) or width <= 0:
        raise StrokeError(f"Stroke width must be a positive number, got {width!r}")


@dataclass(frozen=True, slots=True)
class Stroke:
    """A finalized user-drawn polyline.

    Attributes:
        points: Points in drawing order
        color: Brush color as #RRGGBB, captured when the stroke began
        width: Brush diameter, captured when the stroke began
    """

    points: tuple[Point, ...]
    color: str = DEFAULT_COLOR
    width: float = DEFAULT_WIDTH

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "color", self.color.upper())
        _check_brush(self.color, self.width)

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    def segments(self) -> Iterator[tuple[Point, Point]]:
        """Yield consecutive point pairs.

        A single-point stroke (a tap) yields one degenerate segment so that
        distance tests still see it as a dot.
        """
        if len(self.points) == 1:
            yield self.points[0], self.points[0]
            return
        for i in range(len(self.points) - 1):
            yield self.points[i], self.points[i + 1]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "points": [list(p.to_tuple()) for p in self.points],
            "color": self.color,
            "width": self.width,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stroke":
        """Deserialize from dictionary."""
        points = tuple(Point(float(x), float(y)) for x, y in data.get("points", []))
        return cls(
            points=points,
            color=data.get("color", DEFAULT_COLOR),
            width=float(data.get("width", DEFAULT_WIDTH)),
        )


class StrokeSession:
    """Ordered list of finalized strokes for one attempt at one level.

    The revision counter increases on every mutation so owners can tell when
    a cached coverage result is stale.
    """

    def __init__(self, strokes: Iterable[Stroke] = ()) -> None:
        self._strokes: list[Stroke] = [s for s in strokes if not s.is_empty]
        self._revision = 0

    @property
    def strokes(self) -> tuple[Stroke, ...]:
        """Snapshot of the finalized strokes."""
        return tuple(self._strokes)

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def is_empty(self) -> bool:
        return not self._strokes

    def add(self, stroke: Stroke) -> bool:
        """Append a finalized stroke.

        Returns:
            False if the stroke had no points and was discarded
        """
        if stroke.is_empty:
            return False
        self._strokes.append(stroke)
        self._revision += 1
        return True

    def clear(self) -> None:
        """Remove every stroke (retry)."""
        self._strokes.clear()
        self._revision += 1

    def __len__(self) -> int:
        return len(self._strokes)

    def __iter__(self) -> Iterator[Stroke]:
        return iter(tuple(self._strokes))

    def to_dict(self) -> dict[str, Any]:
        return {"strokes": [s.to_dict() for s in self._strokes]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StrokeSession":
        return cls(Stroke.from_dict(s) for s in data.get("strokes", []))


class StrokeCapture:
    """Turns gesture events into strokes for a session.

    The brush (color and width) can change at any time; a stroke keeps the
    brush that was selected when it began.

    Example:
        capture = StrokeCapture(session, color="#FF6F61", width=20.0)
        capture.begin(Point(10, 10))
        capture.move(Point(20, 15))
        capture.end()
    """

    def __init__(
        self,
        session: StrokeSession,
        color: str = DEFAULT_COLOR,
        width: float = DEFAULT_WIDTH,
    ) -> None:
        _check_brush(color.upper(), width)
        self._session = session
        self._color = color.upper()
        self._width = width
        self._live_points: list[Point] = []
        self._live_color = self._color
        self._live_width = self._width
        self._live = False

    @property
    def color(self) -> str:
        return self._color

    @property
    def width(self) -> float:
        return self._width

    def set_brush(self, color: str | None = None, width: float | None = None) -> None:
        """Select the brush used by the next stroke."""
        new_color = self._color if color is None else color.upper()
        new_width = self._width if width is None else width
        _check_brush(new_color, new_width)
        self._color = new_color
        self._width = new_width

    @property
    def is_live(self) -> bool:
        return self._live

    @property
    def live_points(self) -> tuple[Point, ...]:
        return tuple(self._live_points)

    def begin(self, point: Point) -> None:
        """Start a new stroke, finalizing any stroke still in progress."""
        if self._live:
            self.end()
        self._live = True
        self._live_points = [point]
        self._live_color = self._color
        self._live_width = self._width

    def move(self, point: Point) -> None:
        """Extend the live stroke; starts one if no gesture is in progress."""
        if not self._live:
            self.begin(point)
            return
        self._live_points.append(point)

    def end(self) -> Stroke | None:
        """Finalize the live stroke into the session.

        Returns:
            The finalized stroke, or None if there was nothing to finalize
        """
        points = self._live_points
        self._live = False
        self._live_points = []
        if not points:
            return None
        stroke = Stroke(points=tuple(points), color=self._live_color, width=self._live_width)
        self._session.add(stroke)
        return stroke

    def cancel(self) -> None:
        """Drop the live stroke without finalizing it."""
        self._live = False
        self._live_points = []
