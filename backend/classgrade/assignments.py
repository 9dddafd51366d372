"""Assignment records owned by teachers."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field
from sqlalchemy import select

from .db.models import AssignmentModel
from .db.session import session_scope
from .errors import AssignmentNotFound


logger = logging.getLogger(__name__)

AssignmentStatus = Literal["draft", "active", "graded", "archived"]

_UPDATABLE_FIELDS = (
    "title",
    "description",
    "course",
    "subject",
    "assignment_type",
    "rubric",
    "due_date",
    "status",
)
REQUIRED_ASSIGNMENT_FIELDS = ("title", "course", "due_date", "status")


class Assignment(BaseModel):
    assignment_id: str
    teacher_id: str
    title: str
    description: str = ""
    course: str
    subject: Optional[str] = None
    assignment_type: Optional[str] = None
    rubric: Optional[str] = None
    due_date: datetime
    status: AssignmentStatus = "active"
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class AssignmentStore:
    """Database-backed assignment catalogue."""

    def create(
        self,
        teacher_id: str,
        title: str,
        course: str,
        due_date: datetime,
        *,
        description: str = "",
        subject: Optional[str] = None,
        assignment_type: Optional[str] = None,
        rubric: Optional[str] = None,
        status: AssignmentStatus = "active",
    ) -> Assignment:
        if not title.strip():
            raise ValueError("Assignment title cannot be empty.")
        with session_scope() as session:
            model = AssignmentModel(
                teacher_id=teacher_id,
                title=title.strip(),
                description=description,
                course=course.strip(),
                subject=subject,
                assignment_type=assignment_type,
                rubric=rubric,
                due_date=due_date,
                status=status,
            )
            session.add(model)
            session.flush()
            logger.info("Created assignment %s for teacher %s", model.id, teacher_id)
            return self._model_to_domain(model)

    def get(self, assignment_id: str) -> Assignment:
        with session_scope(commit=False) as session:
            model = session.get(AssignmentModel, assignment_id)
            if model is None:
                raise AssignmentNotFound(f"Assignment '{assignment_id}' was not found.")
            return self._model_to_domain(model)

    def list_all(
        self,
        teacher_id: Optional[str] = None,
        status: Optional[AssignmentStatus] = None,
    ) -> List[Assignment]:
        stmt = select(AssignmentModel).order_by(AssignmentModel.due_date.asc())
        if teacher_id:
            stmt = stmt.where(AssignmentModel.teacher_id == teacher_id)
        if status:
            stmt = stmt.where(AssignmentModel.status == status)
        with session_scope(commit=False) as session:
            rows = session.execute(stmt).scalars().all()
            return [self._model_to_domain(row) for row in rows]

    def update(self, assignment_id: str, changes: Dict[str, Any]) -> Assignment:
        unknown = set(changes) - set(_UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update assignment fields: {', '.join(sorted(unknown))}")
        changes = dict(changes)
        for name in ("title", "course"):
            if name in changes:
                changes[name] = (changes[name] or "").strip()
        missing = sorted(name for name in REQUIRED_ASSIGNMENT_FIELDS if name in changes and not changes[name])
        if missing:
            raise ValueError(f"Assignment fields cannot be empty: {', '.join(missing)}")
        with session_scope() as session:
            model = session.get(AssignmentModel, assignment_id)
            if model is None:
                raise AssignmentNotFound(f"Assignment '{assignment_id}' was not found.")
            for key, value in changes.items():
                setattr(model, key, value)
            session.flush()
            logger.info("Updated assignment %s (%s)", assignment_id, ", ".join(sorted(changes)))
            return self._model_to_domain(model)

    def _model_to_domain(self, model: AssignmentModel) -> Assignment:
        return Assignment(
            assignment_id=model.id,
            teacher_id=model.teacher_id,
            title=model.title,
            description=model.description or "",
            course=model.course,
            subject=model.subject,
            assignment_type=model.assignment_type,
            rubric=model.rubric,
            due_date=model.due_date,
            status=model.status,  # type: ignore[arg-type]
            created_at=model.created_at,
        )


assignment_store = AssignmentStore()

__all__ = ["REQUIRED_ASSIGNMENT_FIELDS", "Assignment", "AssignmentStatus", "AssignmentStore", "assignment_store"]
