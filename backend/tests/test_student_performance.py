"""Tests for a student's own submissions and per-subject averages."""

from __future__ import annotations

import asyncio
import random
from datetime import datetime, timedelta, timezone

from classgrade.assignments import AssignmentStore
from classgrade.grading_service import GradingService
from classgrade.submission_lifecycle import SubmissionLifecycle
from classgrade.submissions import SubmissionStore


def _due() -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=3)


def test_summary_groups_graded_work_by_subject(database: None, grading_service: GradingService) -> None:
    submissions, assignments = SubmissionStore(), AssignmentStore()
    lifecycle = SubmissionLifecycle(submissions, assignments, grading_service)
    algebra = assignments.create("teacher-1", "Algebra Set", "Algebra II", _due(), subject="Math")
    geometry = assignments.create("teacher-1", "Proofs", "Geometry", _due(), subject="Math")
    reflection = assignments.create("teacher-1", "Reflection", "Homeroom", _due())
    pending = assignments.create("teacher-1", "Timeline", "World History", _due(), subject="History")

    scores = []
    for index, assignment in enumerate((algebra, geometry, reflection)):
        created = lifecycle.submit(assignment.assignment_id, "student-1", "Jane", f"Answer {index}")
        graded = asyncio.run(lifecycle.grade(created.submission_id, rng=random.Random(index)))
        scores.append(graded.grading_result.score)  # type: ignore[union-attr]
    lifecycle.save_teacher_feedback(graded.submission_id, "Thoughtful.")
    lifecycle.submit(pending.assignment_id, "student-1", "Jane", "Not graded yet")
    lifecycle.submit(algebra.assignment_id, "student-2", "Sam", "Someone else's work")

    summary = {item.subject: item for item in submissions.performance_summary("student-1")}

    assert set(summary) == {"Math", "General"}
    assert summary["Math"].assignments_completed == 2
    assert summary["Math"].average_score == int((scores[0] + scores[1]) / 2 + 0.5)
    assert summary["General"].assignments_completed == 1
    assert summary["General"].average_score == scores[2]


def test_list_for_student_only_returns_their_work(database: None) -> None:
    submissions, assignments = SubmissionStore(), AssignmentStore()
    essay = assignments.create("teacher-1", "Essay", "English 101", _due())
    report = assignments.create("teacher-1", "Report", "Biology", _due())
    submissions.record(essay.assignment_id, "student-1", "Jane", "Essay text")
    submissions.record(report.assignment_id, "student-1", "Jane", "Report text")
    submissions.record(essay.assignment_id, "student-2", "Sam", "Other essay")

    mine = submissions.list_for_student("student-1")

    assert {item.assignment_id for item in mine} == {essay.assignment_id, report.assignment_id}
    assert all(item.student_id == "student-1" for item in mine)
    assert submissions.performance_summary("student-1") == []
    assert submissions.list_for_student("nobody") == []
