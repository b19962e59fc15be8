"""Evaluation results and level state types."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LevelKind(str, Enum):
    """The three drawing mini-games."""

    FILL = "fill"
    TRACE = "trace"
    FREE_DRAW = "draw"


class AttemptState(Enum):
    """Lifecycle of one attempt at a level.

    DRAWING -> EVALUATING -> PASSED | FAILED; retry returns to DRAWING.
    """

    DRAWING = "drawing"
    EVALUATING = "evaluating"
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class CoverageResult:
    """Outcome of one evaluator run.

    Attributes:
        percentage: Covered share of the tested samples, in [0, 100]
        tested_count: Samples that belong to the target (inside, on-path or sampled)
        covered_count: Tested samples that are under ink
    """

    percentage: float
    tested_count: int
    covered_count: int

    @classmethod
    def empty(cls) -> "CoverageResult":
        """Result for a degenerate target or an empty drawing."""
        return cls(percentage=0.0, tested_count=0, covered_count=0)

    @classmethod
    def from_counts(cls, tested: int, covered: int) -> "CoverageResult":
        """Build a result, returning 0% when nothing was tested."""
        if tested <= 0:
            return cls(percentage=0.0, tested_count=0, covered_count=0)
        return cls(
            percentage=covered / tested * 100.0,
            tested_count=tested,
            covered_count=covered,
        )

    def passes(self, threshold_percent: float) -> bool:
        """Check whether this result meets a pass threshold."""
        return self.percentage >= threshold_percent

    def to_dict(self) -> dict[str, Any]:
        return {
            "percentage": self.percentage,
            "tested": self.tested_count,
            "covered": self.covered_count,
        }
