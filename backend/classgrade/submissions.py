"""Persistence for student submissions and their grading records."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from .db.models import AssignmentModel, SubmissionModel
from .db.session import session_scope
from .errors import AssignmentNotFound, GradingInProgress, InvalidTransition, SubmissionNotFound
from .grading_result import GradingResult


logger = logging.getLogger(__name__)

SubmissionStatus = Literal["submitted", "grading", "graded", "reviewed"]

GRADABLE_STATUSES: Tuple[SubmissionStatus, ...] = ("submitted", "graded", "reviewed")
REVIEWABLE_STATUSES: Tuple[SubmissionStatus, ...] = ("graded", "reviewed")
DEFAULT_PERFORMANCE_SUBJECT = "General"


class Submission(BaseModel):
    submission_id: str
    assignment_id: str
    student_id: str
    student_name: str = ""
    content: str = ""
    status: SubmissionStatus = "submitted"
    submitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    grading_result: Optional[GradingResult] = None
    teacher_feedback: Optional[str] = None


class SubjectPerformance(BaseModel):
    """Graded work for one student, aggregated by assignment subject."""

    subject: str
    assignments_completed: int
    average_score: int


class SubmissionStore:
    """Database-backed submission log.

    Status changes go through conditional UPDATEs so a transition only lands
    when the row is still in the expected state. That is what keeps a single
    grading run in flight per submission.
    """

    def record(
        self,
        assignment_id: str,
        student_id: str,
        student_name: str,
        content: str,
    ) -> Submission:
        student = student_id.strip()
        if not student:
            raise ValueError("Student id cannot be empty when recording submissions.")
        with session_scope() as session:
            if session.get(AssignmentModel, assignment_id) is None:
                raise AssignmentNotFound(f"Assignment '{assignment_id}' was not found.")
            stmt = select(SubmissionModel).where(
                SubmissionModel.assignment_id == assignment_id,
                SubmissionModel.student_id == student,
            )
            model = session.execute(stmt).scalar_one_or_none()
            if model is None:
                model = SubmissionModel(assignment_id=assignment_id, student_id=student)
                session.add(model)
            elif model.status == "grading":
                raise GradingInProgress(f"Submission '{model.id}' is being graded; resubmit once it finishes.")
            model.student_name = student_name.strip()
            model.content = content
            model.status = "submitted"
            model.grading_result = None
            model.teacher_feedback = None
            model.submitted_at = datetime.now(timezone.utc)
            session.flush()
            logger.info("Stored submission %s for assignment %s", model.id, assignment_id)
            return self._model_to_domain(model)

    def get(self, submission_id: str) -> Submission:
        with session_scope(commit=False) as session:
            return self._model_to_domain(self._require(session, submission_id))

    def list_for_assignment(self, assignment_id: str) -> List[Submission]:
        stmt = (
            select(SubmissionModel)
            .where(SubmissionModel.assignment_id == assignment_id)
            .order_by(SubmissionModel.submitted_at.asc())
        )
        with session_scope(commit=False) as session:
            rows = session.execute(stmt).scalars().all()
            return [self._model_to_domain(row) for row in rows]

    def list_for_student(self, student_id: str) -> List[Submission]:
        stmt = (
            select(SubmissionModel)
            .where(SubmissionModel.student_id == student_id)
            .order_by(SubmissionModel.submitted_at.desc())
        )
        with session_scope(commit=False) as session:
            rows = session.execute(stmt).scalars().all()
            return [self._model_to_domain(row) for row in rows]

    def performance_summary(self, student_id: str) -> List[SubjectPerformance]:
        """Average score per subject over a student's graded and reviewed work.

        Assignments without a subject are grouped under ``General``. Subjects are
        listed in the order the student first submitted graded work for them.
        """
        stmt = (
            select(AssignmentModel.subject, SubmissionModel.grading_result)
            .select_from(SubmissionModel)
            .join(SubmissionModel.assignment)
            .where(
                SubmissionModel.student_id == student_id,
                SubmissionModel.status.in_(REVIEWABLE_STATUSES),
            )
            .order_by(SubmissionModel.submitted_at.asc())
        )
        scores: Dict[str, List[int]] = {}
        with session_scope(commit=False) as session:
            for subject, record in session.execute(stmt):
                score = int((record or {}).get("score", 0))
                scores.setdefault(subject or DEFAULT_PERFORMANCE_SUBJECT, []).append(score)
        return [
            SubjectPerformance(
                subject=subject,
                assignments_completed=len(values),
                average_score=int(math.floor(sum(values) / len(values) + 0.5)),
            )
            for subject, values in scores.items()
        ]

    def claim_for_grading(self, submission_id: str) -> Tuple[Submission, SubmissionStatus]:
        """Move a submission into ``grading`` and return it with its previous status."""
        with session_scope() as session:
            model = self._require(session, submission_id)
            previous = model.status
            if previous not in GRADABLE_STATUSES:
                raise GradingInProgress(f"Submission '{submission_id}' is already being graded.")
            if not self._transition(session, submission_id, [previous], status="grading"):
                raise GradingInProgress(f"Submission '{submission_id}' is already being graded.")
            session.refresh(model)
            logger.info("Submission %s claimed for grading (was %s)", submission_id, previous)
            return self._model_to_domain(model), previous  # type: ignore[return-value]

    def complete_grading(self, submission_id: str, result: GradingResult) -> Submission:
        with session_scope() as session:
            model = self._require(session, submission_id)
            applied = self._transition(
                session,
                submission_id,
                ["grading"],
                status="graded",
                grading_result=result.as_record(),
            )
            if not applied:
                raise InvalidTransition(
                    f"Submission '{submission_id}' is '{model.status}', not 'grading'; result discarded."
                )
            session.refresh(model)
            logger.info("Attached grading result to submission %s (score=%d)", submission_id, result.score)
            return self._model_to_domain(model)

    def release_grading(self, submission_id: str) -> Submission:
        """Roll a failed grading run back to ``submitted``, keeping any earlier result."""
        with session_scope() as session:
            model = self._require(session, submission_id)
            if self._transition(session, submission_id, ["grading"], status="submitted"):
                session.refresh(model)
                logger.info("Rolled submission %s back to submitted", submission_id)
            return self._model_to_domain(model)

    def save_teacher_feedback(self, submission_id: str, feedback: str) -> Submission:
        with session_scope() as session:
            model = self._require(session, submission_id)
            applied = self._transition(
                session,
                submission_id,
                REVIEWABLE_STATUSES,
                status="reviewed",
                teacher_feedback=feedback,
            )
            if not applied:
                raise InvalidTransition(
                    f"Submission '{submission_id}' is '{model.status}'; only graded work can be reviewed."
                )
            session.refresh(model)
            logger.info("Saved teacher feedback for submission %s", submission_id)
            return self._model_to_domain(model)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require(self, session: Session, submission_id: str) -> SubmissionModel:
        model = session.get(SubmissionModel, submission_id)
        if model is None:
            raise SubmissionNotFound(f"Submission '{submission_id}' was not found.")
        return model

    def _transition(
        self,
        session: Session,
        submission_id: str,
        expected: Iterable[str],
        **values: object,
    ) -> bool:
        stmt = (
            update(SubmissionModel)
            .where(
                SubmissionModel.id == submission_id,
                SubmissionModel.status.in_(list(expected)),
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        return session.execute(stmt).rowcount == 1

    def _model_to_domain(self, model: SubmissionModel) -> Submission:
        grading = GradingResult.model_validate(model.grading_result) if model.grading_result else None
        return Submission(
            submission_id=model.id,
            assignment_id=model.assignment_id,
            student_id=model.student_id,
            student_name=model.student_name or "",
            content=model.content or "",
            status=model.status,  # type: ignore[arg-type]
            submitted_at=model.submitted_at,
            grading_result=grading,
            teacher_feedback=model.teacher_feedback,
        )


submission_store = SubmissionStore()

__all__ = [
    "GRADABLE_STATUSES",
    "REVIEWABLE_STATUSES",
    "SubjectPerformance",
    "Submission",
    "SubmissionStatus",
    "SubmissionStore",
    "submission_store",
]
