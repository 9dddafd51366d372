"""Lesson plan generation tailored to the weak areas of a class."""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field
from sqlalchemy import select

from . import lexicons
from .db.models import LessonPlanModel
from .db.session import session_scope
from .errors import InvalidRequest
from .profiles import ProfileStore, profile_store
from .subjects import parse_subject
from .telemetry import emit_event


logger = logging.getLogger(__name__)


class LessonPlan(BaseModel):
    lesson_plan_id: str
    teacher_id: str
    subject: str
    title: str
    content: str
    student_performance_data: Optional[Dict[str, Any]] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def _weak_areas(performance: Optional[Dict[str, Any]]) -> List[str]:
    if not performance:
        return []
    raw = performance.get("weakAreas") or performance.get("weak_areas") or []
    if not isinstance(raw, list):
        return []
    return [str(item).strip() for item in raw if str(item).strip()]


def render_lesson_plan(subject: str, topic: str, weak_areas: List[str]) -> str:
    """Markdown for a 60 minute lesson on ``topic``."""
    focus = ""
    if weak_areas:
        focus = (
            "Based on student performance data, this lesson will focus particularly on "
            f"improving skills in: {', '.join(weak_areas)}."
        )
    lowered = subject.lower()
    return f"""# {subject} Lesson Plan: {topic}

## Lesson Objectives
- Understand the core concepts of {topic}
- Apply {topic} principles to solve real-world problems
- Develop critical thinking skills through {lowered} challenges

{focus}

## Lesson Structure (60 minutes)

### 1. Introduction (10 minutes)
- Brief overview of {topic}
- Connect to previous knowledge and real-world applications
- Set clear expectations for the lesson

### 2. Direct Instruction (15 minutes)
- Present key concepts of {topic}
- Provide visual aids and examples
- Check for understanding through quick questions

### 3. Guided Practice (20 minutes)
- Work through example problems as a class
- Gradually release responsibility to students
- Provide immediate feedback and support

### 4. Independent Practice (10 minutes)
- Students work individually or in pairs on practice problems
- Teacher circulates to provide individualized support
- Differentiated tasks based on student readiness

### 5. Closure (5 minutes)
- Summarize key takeaways from the lesson
- Preview upcoming content
- Exit ticket assessment

## Resources and Materials
- Digital presentation slides
- Student worksheets
- Online interactive tools
- Assessment rubrics

## Assessment Strategy
- Formative assessment through questioning and observation
- Exit ticket to gauge individual understanding
- Homework assignment for extended practice

## Differentiation Strategies
- Provide scaffolded worksheets for struggling students
- Extension activities for advanced learners
- Visual supports for visual learners
- Collaborative options for interpersonal learners

## Homework/Follow-up
- Practice problems related to {topic}
- Preparation reading for next lesson
- Real-world application project
"""


class LessonPlanner:
    def __init__(self, profiles: ProfileStore, rng: Optional[random.Random] = None) -> None:
        self._profiles = profiles
        self._rng = rng if rng is not None else random.Random()

    def generate(
        self,
        teacher_id: str,
        subject: str,
        student_performance_data: Optional[Dict[str, Any]] = None,
        rng: Optional[random.Random] = None,
    ) -> LessonPlan:
        subject = (subject or "").strip()
        if not subject:
            raise InvalidRequest("Subject is required.")
        profile = self._profiles.get(teacher_id)
        if profile is None or profile.role != "teacher":
            raise PermissionError("Only teachers can generate lesson plans.")

        category = parse_subject(subject)
        topics = lexicons.LESSON_TOPICS.get(category, lexicons.GENERIC_LESSON_TOPICS)
        topic = (rng or self._rng).choice(list(topics))
        content = render_lesson_plan(subject, topic, _weak_areas(student_performance_data))

        with session_scope() as session:
            model = LessonPlanModel(
                teacher_id=teacher_id,
                subject=subject,
                title=f"{subject} Lesson Plan",
                content=content,
                student_performance_data=student_performance_data or None,
            )
            session.add(model)
            session.flush()
            plan = self._model_to_domain(model)

        logger.info("Generated lesson plan %s (%s) for teacher %s", plan.lesson_plan_id, topic, teacher_id)
        emit_event("lesson_plan_generated", teacher_id=teacher_id, subject=subject, topic=topic)
        return plan

    def list_for_teacher(self, teacher_id: str) -> List[LessonPlan]:
        stmt = (
            select(LessonPlanModel)
            .where(LessonPlanModel.teacher_id == teacher_id)
            .order_by(LessonPlanModel.created_at.desc())
        )
        with session_scope(commit=False) as session:
            return [self._model_to_domain(row) for row in session.execute(stmt).scalars().all()]

    def _model_to_domain(self, model: LessonPlanModel) -> LessonPlan:
        return LessonPlan(
            lesson_plan_id=model.id,
            teacher_id=model.teacher_id,
            subject=model.subject,
            title=model.title,
            content=model.content,
            student_performance_data=model.student_performance_data,
            created_at=model.created_at,
        )


lesson_planner = LessonPlanner(profile_store)

__all__ = ["LessonPlan", "LessonPlanner", "lesson_planner", "render_lesson_plan"]
