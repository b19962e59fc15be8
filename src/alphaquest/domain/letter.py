"""Per-letter reference data."""

from dataclasses import dataclass
from typing import Any

from alphaquest.domain.path import Outline, TracePath


@dataclass(frozen=True)
class LetterData:
    """Static reference geometry for one letter.

    Attributes:
        letter_id: The letter itself, upper case (e.g., "A")
        outline: Hollow outline used by the fill level
        trace_path: Guide stroke used by the trace and free-draw levels
    """

    letter_id: str
    outline: Outline
    trace_path: TracePath

    def to_dict(self) -> dict[str, Any]:
        return {
            "letter_id": self.letter_id,
            "outline": self.outline.to_dict(),
            "trace_path": self.trace_path.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LetterData":
        return cls(
            letter_id=data["letter_id"],
            outline=Outline.from_dict(data["outline"]),
            trace_path=TracePath.from_dict(data["trace_path"]),
        )
