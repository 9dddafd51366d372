from __future__ import annotations

import random
from collections import Counter

import pytest

from classgrade import lexicons
from classgrade.assessment_generators import (
    generate_feedback,
    generate_improvements,
    generate_mastery,
    generate_resources,
    generate_score,
    generate_strengths,
    suggested_activities,
)
from classgrade.features import ContentFeatures
from classgrade.subjects import SubjectCategory


NAMED_SUBJECTS = [subject for subject in SubjectCategory if subject is not SubjectCategory.GENERAL]


def test_score_stays_in_baseline_window_without_bonus() -> None:
    rng = random.Random(3)
    scores = {generate_score(ContentFeatures(0.0, 0.0), rng) for _ in range(500)}
    assert min(scores) >= 75
    assert max(scores) <= 89


def test_score_with_full_bonus_never_exceeds_max() -> None:
    rng = random.Random(5)
    for _ in range(500):
        score = generate_score(ContentFeatures(3.0, 2.0), rng)
        assert 80 <= score <= 94


def test_score_rounds_half_up() -> None:
    class FixedBaseline(random.Random):
        def randint(self, a: int, b: int) -> int:
            return 80

    assert generate_score(ContentFeatures(0.5, 0.0), FixedBaseline()) == 81
    assert generate_score(ContentFeatures(0.4, 0.0), FixedBaseline()) == 80


def test_feedback_addresses_student_by_name() -> None:
    feedback = generate_feedback(SubjectCategory.MATH, "Jane")
    assert feedback.startswith("Jane, Your problem-solving approach")
    assert feedback.endswith(lexicons.FEEDBACK_CLOSING)


def test_feedback_without_name_has_no_prefix() -> None:
    assert generate_feedback(SubjectCategory.HISTORY).startswith("Your historical analysis")
    assert generate_feedback(SubjectCategory.HISTORY, "   ").startswith("Your historical analysis")


def test_general_feedback_uses_generic_paragraph() -> None:
    assert generate_feedback(SubjectCategory.GENERAL).startswith(lexicons.GENERAL_FEEDBACK_PARAGRAPH)


@pytest.mark.parametrize("subject", NAMED_SUBJECTS)
def test_strengths_and_improvements_composition(subject: SubjectCategory) -> None:
    rng = random.Random(11)
    for _ in range(200):
        strengths = generate_strengths(subject, rng)
        assert len(strengths) == 3
        assert len(set(strengths)) == 3
        assert set(strengths[:2]) <= set(lexicons.SUBJECT_STRENGTHS[subject])
        assert strengths[2] in lexicons.COMMON_STRENGTHS

        improvements = generate_improvements(subject, rng)
        assert len(set(improvements)) == 3
        assert set(improvements[:2]) <= set(lexicons.SUBJECT_IMPROVEMENTS[subject])
        assert improvements[2] in lexicons.COMMON_IMPROVEMENTS


def test_general_strengths_borrow_english_lexicon() -> None:
    strengths = generate_strengths(SubjectCategory.GENERAL, random.Random(1))
    assert set(strengths[:2]) <= set(lexicons.SUBJECT_STRENGTHS[SubjectCategory.ENGLISH])


def test_resources_mix_subject_and_general() -> None:
    rng = random.Random(2)
    for _ in range(200):
        resources = generate_resources(SubjectCategory.SCIENCE, rng, "essay")
        assert len(set(resources)) == 3
        assert set(resources[:2]) <= set(lexicons.SUBJECT_RESOURCES[SubjectCategory.SCIENCE])
        assert resources[2] in lexicons.GENERAL_RESOURCES


@pytest.mark.parametrize(
    "assignment_type, expected",
    [
        ("lab", "Video: 'Effective Research Strategies'"),
        (" Report ", "Video: 'Effective Research Strategies'"),
        ("project", "Tutorial: 'Critical Thinking Skills Development'"),
    ],
)
def test_assignment_type_picks_the_general_resource(assignment_type: str, expected: str) -> None:
    rng = random.Random(6)
    for _ in range(50):
        resources = generate_resources(SubjectCategory.MATH, rng, assignment_type)
        assert resources[2] == expected
        assert set(resources[:2]) <= set(lexicons.SUBJECT_RESOURCES[SubjectCategory.MATH])


def test_general_resources_come_from_general_lexicon() -> None:
    resources = generate_resources(SubjectCategory.GENERAL, random.Random(4))
    assert sorted(resources) == sorted(lexicons.GENERAL_RESOURCES)


@pytest.mark.parametrize("subject", list(SubjectCategory))
def test_mastery_partitions_concept_vocabulary(subject: SubjectCategory) -> None:
    vocabulary = set(
        lexicons.SUBJECT_CONCEPTS.get(subject, lexicons.SUBJECT_CONCEPTS[SubjectCategory.ENGLISH])
    )
    rng = random.Random(7)
    for _ in range(100):
        report = generate_mastery(subject, rng)
        groups = [report.concepts_mastered, report.concepts_in_progress, report.concepts_to_improve]
        assert [len(group) for group in groups] == [2, 2, 2]
        combined = [concept for group in groups for concept in group]
        assert set(combined) == vocabulary
        assert 70 <= report.overall_mastery <= 89
        assert [area.concept for area in report.growth_areas] == report.concepts_to_improve
        for area in report.growth_areas:
            assert 40 <= area.current_level <= 69
            assert area.suggested_activities == suggested_activities(area.concept)


def test_mastery_shuffle_reaches_every_concept() -> None:
    rng = random.Random(13)
    counts: Counter[str] = Counter()
    runs = 600
    for _ in range(runs):
        counts.update(generate_mastery(SubjectCategory.MATH, rng).concepts_mastered)
    vocabulary = lexicons.SUBJECT_CONCEPTS[SubjectCategory.MATH]
    assert set(counts) == set(vocabulary)
    # Each concept should land in "mastered" about a third of the time.
    for concept in vocabulary:
        assert runs * 0.2 < counts[concept] < runs * 0.47


def test_suggested_activities_interpolate_concept() -> None:
    assert suggested_activities("Data Analysis") == [
        "Practice exercise: Data Analysis fundamentals",
        "Review guide: Advanced Data Analysis techniques",
        "Complete the interactive Data Analysis module",
    ]
