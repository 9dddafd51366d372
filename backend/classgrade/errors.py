"""Exceptions raised by the grading engine and the submission lifecycle."""

from __future__ import annotations


class GradingError(Exception):
    """Base class for failures surfaced by the grading engine."""


class InvalidRequest(GradingError, ValueError):
    """The grading request failed local validation and was never sent."""


class GradingServiceError(GradingError):
    """The grading service could not complete the call; safe to retry."""


class SubmissionNotFound(LookupError):
    pass


class AssignmentNotFound(LookupError):
    pass


class GradingInProgress(RuntimeError):
    """A grading run is already outstanding for the submission."""


class InvalidTransition(RuntimeError):
    """The requested status change is not allowed from the current status."""


__all__ = [
    "AssignmentNotFound",
    "GradingError",
    "GradingInProgress",
    "GradingServiceError",
    "InvalidRequest",
    "InvalidTransition",
    "SubmissionNotFound",
]
