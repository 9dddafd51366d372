"""Grading, regrading and teacher review endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from .errors import GradingInProgress, GradingServiceError, InvalidRequest, InvalidTransition, SubmissionNotFound
from .grading_service import GradingService, get_grading_service
from .submission_lifecycle import SubmissionLifecycle, get_lifecycle
from .submissions import Submission, submission_store


router = APIRouter(prefix="/api", tags=["grading"])
logger = logging.getLogger(__name__)


class TeacherFeedbackRequest(BaseModel):
    feedback: str = Field(..., min_length=1)


class FeedbackPromptRequest(BaseModel):
    prompt: str


class FeedbackPromptResponse(BaseModel):
    feedback: str


@router.get("/submissions/{submission_id}", response_model=Submission)
def get_submission(submission_id: str) -> Submission:
    try:
        return submission_store.get(submission_id)
    except SubmissionNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("/submissions/{submission_id}/grade", response_model=Submission)
async def grade_submission(
    submission_id: str,
    lifecycle: SubmissionLifecycle = Depends(get_lifecycle),
) -> Submission:
    try:
        return await lifecycle.grade(submission_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except GradingInProgress as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except InvalidRequest as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except GradingServiceError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Failed to grade submission: {exc} Please try again.",
        ) from exc


@router.put("/submissions/{submission_id}/feedback", response_model=Submission)
def save_teacher_feedback(
    submission_id: str,
    payload: TeacherFeedbackRequest,
    lifecycle: SubmissionLifecycle = Depends(get_lifecycle),
) -> Submission:
    try:
        return lifecycle.save_teacher_feedback(submission_id, payload.feedback)
    except SubmissionNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except InvalidTransition as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@router.post("/grading/feedback", response_model=FeedbackPromptResponse)
async def prompt_feedback(
    payload: FeedbackPromptRequest,
    service: GradingService = Depends(get_grading_service),
) -> FeedbackPromptResponse:
    try:
        feedback = await service.generate_feedback(payload.prompt)
    except InvalidRequest as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except GradingServiceError as exc:
        logger.warning("Prompt feedback failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return FeedbackPromptResponse(feedback=feedback)
