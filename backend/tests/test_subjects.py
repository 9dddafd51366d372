from __future__ import annotations

import pytest

from classgrade.subjects import SubjectCategory, classify, parse_subject


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("Intro to Computer Programming", SubjectCategory.COMPUTER_SCIENCE),
        ("English Literature 101", SubjectCategory.ENGLISH),
        ("AP Calculus BC", SubjectCategory.MATH),
        ("Environmental Biology", SubjectCategory.SCIENCE),
        ("US Government and Civics", SubjectCategory.HISTORY),
        ("anything unmatched", SubjectCategory.GENERAL),
        ("", SubjectCategory.GENERAL),
    ],
)
def test_classify_from_course_label(label: str, expected: SubjectCategory) -> None:
    assert classify(label) is expected


def test_classify_handles_missing_label() -> None:
    assert classify(None, None) is SubjectCategory.GENERAL


def test_subject_hint_overrides_course_label() -> None:
    assert classify("English Literature 101", "math") is SubjectCategory.MATH
    assert classify("anything", "MATH") is SubjectCategory.MATH


def test_subject_hint_accepts_spaced_names() -> None:
    assert classify(None, "Computer Science") is SubjectCategory.COMPUTER_SCIENCE
    assert classify(None, "computer-science") is SubjectCategory.COMPUTER_SCIENCE


def test_unknown_hint_falls_back_to_label() -> None:
    assert classify("World History", "art") is SubjectCategory.HISTORY
    assert classify("World History", "   ") is SubjectCategory.HISTORY


def test_general_hint_is_not_a_category_choice() -> None:
    assert parse_subject("general") is None
    assert classify("Creative Writing", "general") is SubjectCategory.ENGLISH


def test_table_order_breaks_ties() -> None:
    # "science" is scanned before the computer science keywords.
    assert classify("Computer Science Principles") is SubjectCategory.SCIENCE
    assert classify("Writing about History") is SubjectCategory.ENGLISH
