"""Assignment endpoints for teachers and student submission intake."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field, model_validator

from .assignments import REQUIRED_ASSIGNMENT_FIELDS, Assignment, AssignmentStatus, assignment_store
from .errors import AssignmentNotFound, GradingInProgress
from .submission_lifecycle import SubmissionLifecycle, get_lifecycle
from .submissions import Submission, submission_store


router = APIRouter(prefix="/api/assignments", tags=["assignments"])


class AssignmentCreateRequest(BaseModel):
    teacher_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    course: str = Field(..., min_length=1)
    due_date: datetime
    description: str = ""
    subject: Optional[str] = None
    assignment_type: Optional[str] = None
    rubric: Optional[str] = None
    status: AssignmentStatus = "active"


class AssignmentUpdateRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    course: Optional[str] = Field(default=None, min_length=1)
    subject: Optional[str] = None
    assignment_type: Optional[str] = None
    rubric: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[AssignmentStatus] = None

    @model_validator(mode="before")
    @classmethod
    def _reject_required_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = sorted(name for name in REQUIRED_ASSIGNMENT_FIELDS if name in data and data[name] is None)
            if nulls:
                raise ValueError(f"These assignment fields cannot be null: {', '.join(nulls)}")
        return data


class SubmissionCreateRequest(BaseModel):
    student_id: str = Field(..., min_length=1)
    student_name: str = ""
    content: str = ""


def _not_found(exc: LookupError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post("", response_model=Assignment, status_code=status.HTTP_201_CREATED)
def create_assignment(payload: AssignmentCreateRequest) -> Assignment:
    return assignment_store.create(
        payload.teacher_id,
        payload.title,
        payload.course,
        payload.due_date,
        description=payload.description,
        subject=payload.subject,
        assignment_type=payload.assignment_type,
        rubric=payload.rubric,
        status=payload.status,
    )


@router.get("", response_model=List[Assignment])
def list_assignments(
    teacher_id: Optional[str] = Query(default=None),
    assignment_status: Optional[AssignmentStatus] = Query(default=None, alias="status"),
) -> List[Assignment]:
    return assignment_store.list_all(teacher_id=teacher_id, status=assignment_status)


@router.get("/{assignment_id}", response_model=Assignment)
def get_assignment(assignment_id: str) -> Assignment:
    try:
        return assignment_store.get(assignment_id)
    except AssignmentNotFound as exc:
        raise _not_found(exc) from exc


@router.patch("/{assignment_id}", response_model=Assignment)
def update_assignment(assignment_id: str, payload: AssignmentUpdateRequest) -> Assignment:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Provide at least one field to update.",
        )
    try:
        return assignment_store.update(assignment_id, changes)
    except AssignmentNotFound as exc:
        raise _not_found(exc) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc


@router.post(
    "/{assignment_id}/submissions",
    response_model=Submission,
    status_code=status.HTTP_201_CREATED,
)
def create_submission(
    assignment_id: str,
    payload: SubmissionCreateRequest,
    lifecycle: SubmissionLifecycle = Depends(get_lifecycle),
) -> Submission:
    try:
        return lifecycle.submit(assignment_id, payload.student_id, payload.student_name, payload.content)
    except AssignmentNotFound as exc:
        raise _not_found(exc) from exc
    except GradingInProgress as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@router.get("/{assignment_id}/submissions", response_model=List[Submission])
def list_submissions(assignment_id: str) -> List[Submission]:
    try:
        assignment_store.get(assignment_id)
    except AssignmentNotFound as exc:
        raise _not_found(exc) from exc
    return submission_store.list_for_assignment(assignment_id)
