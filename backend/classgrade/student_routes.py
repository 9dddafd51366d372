"""Student-facing views over their own submissions."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter

from .submissions import SubjectPerformance, Submission, submission_store


router = APIRouter(prefix="/api/students", tags=["students"])


@router.get("/{student_id}/submissions", response_model=List[Submission])
def list_student_submissions(student_id: str) -> List[Submission]:
    return submission_store.list_for_student(student_id)


@router.get("/{student_id}/performance", response_model=List[SubjectPerformance])
def student_performance(student_id: str) -> List[SubjectPerformance]:
    return submission_store.performance_summary(student_id)
