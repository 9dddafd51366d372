"""Grading orchestrator: turns a submission into a structured assessment."""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from . import lexicons
from .assessment_generators import (
    generate_feedback,
    generate_improvements,
    generate_mastery,
    generate_resources,
    generate_score,
    generate_strengths,
)
from .config import Settings, get_settings
from .errors import GradingServiceError, InvalidRequest
from .features import extract_features
from .grading_result import GradingRequest, GradingResult
from .subjects import classify


logger = logging.getLogger(__name__)

DEFAULT_ASSIGNMENT_TYPE = "essay"


@dataclass(frozen=True)
class GradingServiceConfig:
    api_key: Optional[str] = None
    model: str = "gemini-pro"
    latency_seconds: float = 2.0
    feedback_latency_seconds: float = 1.5
    timeout_seconds: Optional[float] = 30.0
    max_submission_chars: int = 200_000

    @classmethod
    def from_settings(cls, settings: Settings) -> "GradingServiceConfig":
        return cls(
            api_key=settings.grading_api_key,
            model=settings.grading_model,
            latency_seconds=settings.grading_latency_seconds,
            feedback_latency_seconds=settings.feedback_latency_seconds,
            timeout_seconds=settings.grading_timeout_seconds,
            max_submission_chars=settings.max_submission_chars,
        )


class GradingService:
    """Grades submissions against an optional rubric.

    The remote model call is simulated by ``_call_service``; the rest of the
    pipeline (validation, subject routing, feature extraction and result
    assembly) is the contract a model-backed implementation has to keep.
    """

    def __init__(self, config: GradingServiceConfig, rng: Optional[random.Random] = None) -> None:
        self._config = config
        self._rng = rng if rng is not None else random.Random()

    @property
    def config(self) -> GradingServiceConfig:
        return self._config

    def is_configured(self) -> bool:
        return bool(self._config.api_key and self._config.api_key.strip())

    async def grade_assignment(
        self,
        request: GradingRequest,
        rng: Optional[random.Random] = None,
    ) -> GradingResult:
        self._validate_text(request.submission_text, "Submission text")
        self._ensure_configured()
        logger.info(
            "Sending grading request to %s (%d chars, rubric=%s)",
            self._config.model,
            len(request.submission_text),
            bool(request.rubric),
        )
        await self._complete_call(self._config.latency_seconds)

        source = rng if rng is not None else self._rng
        subject = classify(request.course_label, request.subject_hint)
        features = extract_features(request.submission_text, request.rubric)
        assignment_type = request.assignment_type or DEFAULT_ASSIGNMENT_TYPE

        score = generate_score(features, source)
        feedback = generate_feedback(subject, request.student_name)
        strengths = generate_strengths(subject, source)
        improvements = generate_improvements(subject, source)
        resources = generate_resources(subject, source, assignment_type)
        mastery = generate_mastery(subject, source)

        logger.info("Grading complete: subject=%s score=%d", subject.value, score)
        return GradingResult(
            score=score,
            feedback=feedback,
            strengths=strengths,
            areas_for_improvement=improvements,
            resources=resources,
            subject_mastery=mastery,
            subject=subject,
        )

    async def generate_feedback(self, prompt: str) -> str:
        """Free-form narrative feedback for a teacher-authored prompt."""
        self._validate_text(prompt, "Prompt")
        self._ensure_configured()
        logger.info("Sending feedback prompt to %s (%d chars)", self._config.model, len(prompt))
        await self._complete_call(self._config.feedback_latency_seconds)
        return lexicons.PROMPT_FEEDBACK_RESPONSE

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _validate_text(self, value: str, label: str) -> None:
        if not value or not value.strip():
            raise InvalidRequest(f"{label} cannot be empty.")
        if len(value) > self._config.max_submission_chars:
            raise InvalidRequest(
                f"{label} is {len(value)} characters; the limit is {self._config.max_submission_chars}."
            )

    def _ensure_configured(self) -> None:
        if not self.is_configured():
            raise GradingServiceError("Grading service is not configured with an API key.")

    async def _complete_call(self, delay: float) -> None:
        timeout = self._config.timeout_seconds
        try:
            if timeout is None:
                await self._call_service(delay)
            else:
                await asyncio.wait_for(self._call_service(delay), timeout=timeout)
        except asyncio.TimeoutError as exc:
            logger.warning("Grading service call timed out after %.1fs", timeout)
            raise GradingServiceError(f"Grading service timed out after {timeout:.1f}s.") from exc
        except OSError as exc:
            logger.warning("Grading service unreachable: %s", exc)
            raise GradingServiceError(f"Grading service unreachable: {exc}") from exc

    async def _call_service(self, delay: float) -> None:
        await asyncio.sleep(delay)


@lru_cache
def get_grading_service() -> GradingService:
    settings = get_settings()
    rng = random.Random(settings.grading_seed) if settings.grading_seed is not None else None
    return GradingService(GradingServiceConfig.from_settings(settings), rng=rng)


__all__ = [
    "GradingService",
    "GradingServiceConfig",
    "get_grading_service",
]
