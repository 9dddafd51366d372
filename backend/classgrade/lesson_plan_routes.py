"""Lesson planning endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from .errors import InvalidRequest
from .lesson_plans import LessonPlan, lesson_planner


router = APIRouter(prefix="/api/lesson-plans", tags=["lesson-plans"])


class LessonPlanRequest(BaseModel):
    teacher_id: str = Field(..., min_length=1)
    subject: str = ""
    student_performance_data: Optional[Dict[str, Any]] = None


@router.post("", response_model=LessonPlan, status_code=status.HTTP_201_CREATED)
def create_lesson_plan(payload: LessonPlanRequest) -> LessonPlan:
    try:
        return lesson_planner.generate(
            payload.teacher_id,
            payload.subject,
            payload.student_performance_data,
        )
    except InvalidRequest as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except PermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc


@router.get("", response_model=List[LessonPlan])
def list_lesson_plans(teacher_id: str = Query(..., min_length=1)) -> List[LessonPlan]:
    return lesson_planner.list_for_teacher(teacher_id)
