"""Subject routing for grading requests."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class SubjectCategory(str, Enum):
    ENGLISH = "english"
    MATH = "math"
    SCIENCE = "science"
    HISTORY = "history"
    COMPUTER_SCIENCE = "computer_science"
    GENERAL = "general"


# Scan order is the tie-break when a label hits several categories.
SUBJECT_KEYWORDS: Tuple[Tuple[SubjectCategory, Tuple[str, ...]], ...] = (
    (SubjectCategory.ENGLISH, ("literature", "writing", "composition", "english")),
    (SubjectCategory.MATH, ("math", "algebra", "calculus", "statistics", "geometry")),
    (SubjectCategory.SCIENCE, ("biology", "chemistry", "physics", "science", "environmental")),
    (SubjectCategory.HISTORY, ("history", "social studies", "civics", "government")),
    (SubjectCategory.COMPUTER_SCIENCE, ("computer", "programming", "data structures", "algorithm")),
)


def _normalize_hint(value: str) -> str:
    return "_".join(value.strip().lower().replace("-", " ").split())


def parse_subject(value: Optional[str]) -> Optional[SubjectCategory]:
    """Return the named category for ``value`` or ``None`` when it names none.

    ``general`` is never returned: it is a fallback, not something a caller
    can request explicitly.
    """
    if not value or not value.strip():
        return None
    try:
        category = SubjectCategory(_normalize_hint(value))
    except ValueError:
        return None
    if category is SubjectCategory.GENERAL:
        return None
    return category


def classify(course_label: Optional[str] = None, subject_hint: Optional[str] = None) -> SubjectCategory:
    hinted = parse_subject(subject_hint)
    if hinted is not None:
        return hinted

    label = (course_label or "").lower()
    for category, keywords in SUBJECT_KEYWORDS:
        if any(keyword in label for keyword in keywords):
            return category
    return SubjectCategory.GENERAL


__all__ = ["SUBJECT_KEYWORDS", "SubjectCategory", "classify", "parse_subject"]
