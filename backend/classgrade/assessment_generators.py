"""Generators for each facet of a grading result.

Every generator is a pure function of its arguments. Randomness only comes
from the ``random.Random`` passed in, so a seeded source reproduces a result
exactly. Shapes are fixed regardless of the draw: three strengths, three
improvements, three resources and a mastery report split into three pairs.
"""

from __future__ import annotations

import math
import random
from typing import List, Optional, Sequence

from . import lexicons
from .features import ContentFeatures
from .grading_result import (
    CONCEPTS_PER_GROUP,
    GROWTH_LEVEL_RANGE,
    MAX_SCORE,
    OVERALL_MASTERY_RANGE,
    GrowthArea,
    MasteryReport,
)
from .subjects import SubjectCategory

BASELINE_MIN = 75
BASELINE_MAX = 89
SUBJECT_PICKS = 2


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _compose(
    rng: random.Random,
    subject_items: Sequence[str],
    shared_items: Sequence[str],
) -> List[str]:
    # Items are drawn without replacement so a list never repeats itself.
    picks = rng.sample(list(subject_items), SUBJECT_PICKS)
    picks.append(rng.choice(list(shared_items)))
    return picks


def generate_score(features: ContentFeatures, rng: random.Random) -> int:
    baseline = rng.randint(BASELINE_MIN, BASELINE_MAX)
    return _clamp(_round_half_up(baseline + features.bonus), 0, MAX_SCORE)


def generate_feedback(subject: SubjectCategory, student_name: Optional[str] = None) -> str:
    paragraph = lexicons.FEEDBACK_PARAGRAPHS.get(subject, lexicons.GENERAL_FEEDBACK_PARAGRAPH)
    name = (student_name or "").strip()
    prefix = f"{name}, " if name else ""
    return f"{prefix}{paragraph} {lexicons.FEEDBACK_CLOSING}"


def generate_strengths(subject: SubjectCategory, rng: random.Random) -> List[str]:
    subject_items = lexicons.SUBJECT_STRENGTHS.get(
        subject, lexicons.SUBJECT_STRENGTHS[lexicons.FALLBACK_SUBJECT]
    )
    return _compose(rng, subject_items, lexicons.COMMON_STRENGTHS)


def generate_improvements(subject: SubjectCategory, rng: random.Random) -> List[str]:
    subject_items = lexicons.SUBJECT_IMPROVEMENTS.get(
        subject, lexicons.SUBJECT_IMPROVEMENTS[lexicons.FALLBACK_SUBJECT]
    )
    return _compose(rng, subject_items, lexicons.COMMON_IMPROVEMENTS)


def generate_resources(
    subject: SubjectCategory,
    rng: random.Random,
    assignment_type: Optional[str] = None,
) -> List[str]:
    subject_items = lexicons.SUBJECT_RESOURCES.get(subject)
    if subject_items is None:
        return rng.sample(list(lexicons.GENERAL_RESOURCES), SUBJECT_PICKS + 1)
    preferred = lexicons.ASSIGNMENT_TYPE_RESOURCES.get((assignment_type or "").strip().lower())
    if preferred is None:
        return _compose(rng, subject_items, lexicons.GENERAL_RESOURCES)
    return rng.sample(list(subject_items), SUBJECT_PICKS) + [preferred]


def suggested_activities(concept: str) -> List[str]:
    return [template.format(concept=concept) for template in lexicons.GROWTH_ACTIVITY_TEMPLATES]


def generate_mastery(subject: SubjectCategory, rng: random.Random) -> MasteryReport:
    concepts = list(
        lexicons.SUBJECT_CONCEPTS.get(subject, lexicons.SUBJECT_CONCEPTS[lexicons.FALLBACK_SUBJECT])
    )
    rng.shuffle(concepts)

    size = CONCEPTS_PER_GROUP
    mastered = concepts[0:size]
    in_progress = concepts[size:size * 2]
    to_improve = concepts[size * 2:size * 3]

    overall = rng.randint(*OVERALL_MASTERY_RANGE)
    growth_areas = [
        GrowthArea(
            concept=concept,
            current_level=rng.randint(*GROWTH_LEVEL_RANGE),
            suggested_activities=suggested_activities(concept),
        )
        for concept in to_improve
    ]
    return MasteryReport(
        overall_mastery=overall,
        concepts_mastered=mastered,
        concepts_in_progress=in_progress,
        concepts_to_improve=to_improve,
        growth_areas=growth_areas,
    )


__all__ = [
    "generate_feedback",
    "generate_improvements",
    "generate_mastery",
    "generate_resources",
    "generate_score",
    "generate_strengths",
    "suggested_activities",
]
