"""Reading and writing stroke session files.

File format:
    {"strokes": [{"points": [[x, y], ...], "color": "#RRGGBB", "width": 8.0}]}
"""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from alphaquest.domain.path import Point
from alphaquest.domain.stroke import DEFAULT_COLOR, DEFAULT_WIDTH, Stroke, StrokeSession
from alphaquest.exceptions import StrokeFileError


class StrokeRecord(BaseModel):
    """One stroke as stored on disk."""

    points: list[tuple[float, float]] = Field(default_factory=list)
    color: str = Field(default=DEFAULT_COLOR, pattern=r"^#[0-9A-Fa-f]{6}$")
    width: float = Field(default=DEFAULT_WIDTH, gt=0, allow_inf_nan=False)

    @classmethod
    def from_stroke(cls, stroke: Stroke) -> "StrokeRecord":
        return cls(
            points=[p.to_tuple() for p in stroke.points],
            color=stroke.color,
            width=stroke.width,
        )

    def to_stroke(self) -> Stroke:
        return Stroke(
            points=tuple(Point(x, y) for x, y in self.points),
            color=self.color,
            width=self.width,
        )


class StrokeFile(BaseModel):
    """Top-level stroke file document."""

    strokes: list[StrokeRecord]


def load_stroke_session(path: Path) -> StrokeSession:
    """Load strokes from a JSON file.

    Strokes without points are dropped.

    Raises:
        StrokeFileError: If the file is missing, not JSON or malformed
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise StrokeFileError(str(path), str(e)) from e

    try:
        document = StrokeFile.model_validate_json(raw)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        detail = f"{location}: {first['msg']}" if location else first["msg"]
        raise StrokeFileError(str(path), f"malformed stroke file ({detail})") from e

    return StrokeSession(record.to_stroke() for record in document.strokes)


def save_stroke_session(session: StrokeSession, path: Path) -> None:
    """Write strokes to a JSON file."""
    document = StrokeFile(strokes=[StrokeRecord.from_stroke(s) for s in session])
    path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
