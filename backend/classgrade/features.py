"""Lightweight content signals that nudge the grading baseline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

LENGTH_UNIT_CHARS = 500
LENGTH_BONUS_CAP = 3.0
RUBRIC_UNIT_CHARS = 200
RUBRIC_BONUS_CAP = 2.0


@dataclass(frozen=True)
class ContentFeatures:
    length_score: float
    rubric_score: float

    @property
    def bonus(self) -> float:
        return self.length_score + self.rubric_score


def extract_features(submission_text: str, rubric: Optional[str] = None) -> ContentFeatures:
    """Longer submissions earn up to +3, more detailed rubrics up to +2."""
    length_score = min(len(submission_text) / LENGTH_UNIT_CHARS, LENGTH_BONUS_CAP)
    rubric_score = min(len(rubric) / RUBRIC_UNIT_CHARS, RUBRIC_BONUS_CAP) if rubric else 0.0
    return ContentFeatures(length_score=length_score, rubric_score=rubric_score)


__all__ = ["ContentFeatures", "extract_features"]
