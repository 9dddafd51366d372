"""Data models for grading requests and the structured results they produce."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .subjects import SubjectCategory

MAX_SCORE = 100
LIST_LENGTH = 3
CONCEPTS_PER_GROUP = 2
OVERALL_MASTERY_RANGE = (70, 89)
GROWTH_LEVEL_RANGE = (40, 69)


class GradingRequest(BaseModel):
    """Everything the grading service needs about one submission."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    submission_text: str
    rubric: Optional[str] = None
    student_name: Optional[str] = None
    course_label: Optional[str] = None
    subject_hint: Optional[str] = None
    assignment_type: Optional[str] = None


class _ResultModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class GrowthArea(_ResultModel):
    """A concept flagged for improvement with suggested practice."""

    concept: str
    current_level: int = Field(ge=GROWTH_LEVEL_RANGE[0], le=GROWTH_LEVEL_RANGE[1])
    suggested_activities: List[str] = Field(default_factory=list)


class MasteryReport(_ResultModel):
    """Per-concept breakdown of what the student has mastered or still needs."""

    overall_mastery: int = Field(ge=OVERALL_MASTERY_RANGE[0], le=OVERALL_MASTERY_RANGE[1])
    concepts_mastered: List[str] = Field(min_length=CONCEPTS_PER_GROUP, max_length=CONCEPTS_PER_GROUP)
    concepts_in_progress: List[str] = Field(min_length=CONCEPTS_PER_GROUP, max_length=CONCEPTS_PER_GROUP)
    concepts_to_improve: List[str] = Field(min_length=CONCEPTS_PER_GROUP, max_length=CONCEPTS_PER_GROUP)
    growth_areas: List[GrowthArea] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_partition(self) -> "MasteryReport":
        mastered = set(self.concepts_mastered)
        in_progress = set(self.concepts_in_progress)
        to_improve = set(self.concepts_to_improve)
        if mastered & in_progress or mastered & to_improve or in_progress & to_improve:
            raise ValueError("Mastery concept groups must not overlap.")
        if [area.concept for area in self.growth_areas] != list(self.concepts_to_improve):
            raise ValueError("Growth areas must follow concepts_to_improve one-to-one.")
        return self


class GradingResult(_ResultModel):
    """Top-level grading record persisted on a submission."""

    score: int = Field(ge=0)
    max_score: int = MAX_SCORE
    feedback: str = Field(min_length=1)
    strengths: List[str] = Field(min_length=LIST_LENGTH, max_length=LIST_LENGTH)
    areas_for_improvement: List[str] = Field(min_length=LIST_LENGTH, max_length=LIST_LENGTH)
    resources: List[str] = Field(min_length=LIST_LENGTH, max_length=LIST_LENGTH)
    subject_mastery: MasteryReport
    subject: SubjectCategory = SubjectCategory.GENERAL
    graded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def _check_score(self) -> "GradingResult":
        if self.score > self.max_score:
            raise ValueError(f"Score {self.score} exceeds max score {self.max_score}.")
        return self

    def as_record(self) -> dict:
        """JSON-ready payload for the submission's grading column."""
        return self.model_dump(mode="json", by_alias=True)


__all__ = [
    "GradingRequest",
    "GradingResult",
    "GrowthArea",
    "CONCEPTS_PER_GROUP",
    "GROWTH_LEVEL_RANGE",
    "LIST_LENGTH",
    "MAX_SCORE",
    "OVERALL_MASTERY_RANGE",
    "MasteryReport",
]
