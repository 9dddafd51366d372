"""Status transitions around grading a submission.

    submitted -> grading -> graded -> reviewed
                    \\-> submitted (grading failed)
    graded | reviewed -> grading (regrade)

``grading`` acts as a lock: a second grade request for the same submission is
rejected while the first is outstanding.
"""

from __future__ import annotations

import asyncio
import logging
import random
from functools import lru_cache
from typing import Optional

from .assignments import Assignment, AssignmentStore, assignment_store
from .errors import GradingInProgress
from .grading_result import GradingRequest
from .grading_service import GradingService, get_grading_service
from .submissions import Submission, SubmissionStore, submission_store
from .telemetry import emit_event


logger = logging.getLogger(__name__)


def build_grading_request(submission: Submission, assignment: Assignment) -> GradingRequest:
    return GradingRequest(
        submission_text=submission.content,
        rubric=assignment.rubric or None,
        student_name=submission.student_name or None,
        course_label=assignment.course,
        subject_hint=assignment.subject or None,
        assignment_type=assignment.assignment_type or None,
    )


class SubmissionLifecycle:
    def __init__(
        self,
        submissions: SubmissionStore,
        assignments: AssignmentStore,
        grading_service: GradingService,
    ) -> None:
        self._submissions = submissions
        self._assignments = assignments
        self._grading = grading_service

    def submit(self, assignment_id: str, student_id: str, student_name: str, content: str) -> Submission:
        submission = self._submissions.record(assignment_id, student_id, student_name, content)
        emit_event(
            "submission_received",
            submission_id=submission.submission_id,
            assignment_id=assignment_id,
            student_id=submission.student_id,
        )
        return submission

    async def grade(self, submission_id: str, rng: Optional[random.Random] = None) -> Submission:
        """Grade or regrade a submission and persist the new result.

        Raises ``GradingInProgress`` when another run holds the submission. Any
        grading failure returns the submission to ``submitted`` before the
        error propagates; a result from an earlier run is left in place.
        """
        try:
            claimed, previous = self._submissions.claim_for_grading(submission_id)
        except GradingInProgress:
            emit_event("grading_rejected", submission_id=submission_id, reason="in_progress")
            raise
        emit_event("grading_started", submission_id=submission_id, previous_status=previous)

        try:
            assignment = self._assignments.get(claimed.assignment_id)
            request = build_grading_request(claimed, assignment)
            result = await self._grading.grade_assignment(request, rng=rng)
        except (Exception, asyncio.CancelledError) as exc:
            try:
                self._submissions.release_grading(submission_id)
            except Exception:  # noqa: BLE001
                logger.exception("Could not release submission %s after a failed grading run", submission_id)
            logger.warning("Grading failed for submission %s: %s", submission_id, exc)
            emit_event("grading_failed", submission_id=submission_id, error=type(exc).__name__)
            raise

        graded = self._submissions.complete_grading(submission_id, result)
        emit_event(
            "grading_completed",
            submission_id=submission_id,
            score=result.score,
            subject=result.subject,
        )
        return graded

    def save_teacher_feedback(self, submission_id: str, feedback: str) -> Submission:
        reviewed = self._submissions.save_teacher_feedback(submission_id, feedback)
        emit_event("submission_reviewed", submission_id=submission_id)
        return reviewed


@lru_cache
def get_lifecycle() -> SubmissionLifecycle:
    return SubmissionLifecycle(submission_store, assignment_store, get_grading_service())


__all__ = ["SubmissionLifecycle", "build_grading_request", "get_lifecycle"]
