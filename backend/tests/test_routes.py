"""HTTP tests for assignment, grading and lesson plan endpoints."""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from classgrade.assignments import assignment_store
from classgrade.grading_service import GradingService, GradingServiceConfig, get_grading_service
from classgrade.main import app
from classgrade.submission_lifecycle import SubmissionLifecycle, get_lifecycle
from classgrade.submissions import submission_store


class OfflineGradingService(GradingService):
    async def _call_service(self, delay: float) -> None:
        raise ConnectionError("offline")


@pytest.fixture
def client(database: None, grading_service: GradingService) -> Iterator[TestClient]:
    app.dependency_overrides[get_grading_service] = lambda: grading_service
    app.dependency_overrides[get_lifecycle] = lambda: SubmissionLifecycle(
        submission_store, assignment_store, grading_service
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def _create_assignment(client: TestClient) -> str:
    response = client.post(
        "/api/assignments",
        json={
            "teacher_id": "teacher-1",
            "title": "Lab Report",
            "course": "AP Chemistry",
            "due_date": "2026-11-01T00:00:00Z",
            "rubric": "Hypothesis, method, analysis, conclusion.",
            "assignment_type": "report",
        },
    )
    assert response.status_code == 201
    return response.json()["assignment_id"]


def _submit(client: TestClient, assignment_id: str, content: str = "Titration results...") -> str:
    response = client.post(
        f"/api/assignments/{assignment_id}/submissions",
        json={"student_id": "student-1", "student_name": "Jane", "content": content},
    )
    assert response.status_code == 201
    assert response.json()["status"] == "submitted"
    return response.json()["submission_id"]


def test_healthz_reports_grading_configuration(client: TestClient) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "grading_configured": True}


def test_database_health(client: TestClient) -> None:
    response = client.get("/healthz/database")
    assert response.status_code == 200
    assert "connects" in response.json()["pool"]


def test_assignment_crud(client: TestClient) -> None:
    assignment_id = _create_assignment(client)

    listed = client.get("/api/assignments", params={"teacher_id": "teacher-1"})
    assert [item["assignment_id"] for item in listed.json()] == [assignment_id]

    updated = client.patch(f"/api/assignments/{assignment_id}", json={"status": "archived"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "archived"
    assert client.get("/api/assignments", params={"status": "active"}).json() == []

    assert client.patch(f"/api/assignments/{assignment_id}", json={}).status_code == 422
    assert client.get("/api/assignments/missing").status_code == 404


@pytest.mark.parametrize("field", ["title", "course", "due_date", "status"])
def test_patch_rejects_null_for_required_fields(client: TestClient, field: str) -> None:
    assignment_id = _create_assignment(client)

    response = client.patch(f"/api/assignments/{assignment_id}", json={field: None})

    assert response.status_code == 422
    assert client.get(f"/api/assignments/{assignment_id}").json()["title"] == "Lab Report"


def test_patch_strips_title_and_rejects_blank(client: TestClient) -> None:
    assignment_id = _create_assignment(client)

    renamed = client.patch(f"/api/assignments/{assignment_id}", json={"title": "  Final Lab Report  "})
    assert renamed.status_code == 200
    assert renamed.json()["title"] == "Final Lab Report"

    blank = client.patch(f"/api/assignments/{assignment_id}", json={"course": "   "})
    assert blank.status_code == 422
    assert client.get(f"/api/assignments/{assignment_id}").json()["course"] == "AP Chemistry"


def test_patch_allows_clearing_optional_fields(client: TestClient) -> None:
    assignment_id = _create_assignment(client)

    response = client.patch(f"/api/assignments/{assignment_id}", json={"rubric": None})

    assert response.status_code == 200
    assert response.json()["rubric"] is None


def test_student_views(client: TestClient) -> None:
    assignment_id = _create_assignment(client)
    submission_id = _submit(client, assignment_id)
    graded = client.post(f"/api/submissions/{submission_id}/grade").json()

    mine = client.get("/api/students/student-1/submissions")
    assert mine.status_code == 200
    assert [item["submission_id"] for item in mine.json()] == [submission_id]

    performance = client.get("/api/students/student-1/performance")
    assert performance.status_code == 200
    assert performance.json() == [
        {
            "subject": "General",
            "assignments_completed": 1,
            "average_score": graded["grading_result"]["score"],
        }
    ]
    assert client.get("/api/students/student-2/performance").json() == []


def test_grade_and_review_flow(client: TestClient) -> None:
    assignment_id = _create_assignment(client)
    submission_id = _submit(client, assignment_id)

    graded = client.post(f"/api/submissions/{submission_id}/grade")
    assert graded.status_code == 200
    body = graded.json()
    assert body["status"] == "graded"
    result = body["grading_result"]
    assert result["maxScore"] == 100
    assert result["feedback"].startswith("Jane, ")
    assert result["subject"] == "science"
    assert len(result["subjectMastery"]["growthAreas"]) == 2

    reviewed = client.put(f"/api/submissions/{submission_id}/feedback", json={"feedback": "Nice work."})
    assert reviewed.status_code == 200
    assert reviewed.json()["status"] == "reviewed"

    listing = client.get(f"/api/assignments/{assignment_id}/submissions")
    assert [item["status"] for item in listing.json()] == ["reviewed"]


def test_feedback_before_grading_conflicts(client: TestClient) -> None:
    submission_id = _submit(client, _create_assignment(client))
    response = client.put(f"/api/submissions/{submission_id}/feedback", json={"feedback": "Early"})
    assert response.status_code == 409


def test_grading_empty_submission_is_unprocessable(client: TestClient) -> None:
    submission_id = _submit(client, _create_assignment(client), content="")
    response = client.post(f"/api/submissions/{submission_id}/grade")
    assert response.status_code == 422
    assert client.get(f"/api/submissions/{submission_id}").json()["status"] == "submitted"


def test_grading_while_in_progress_conflicts(client: TestClient) -> None:
    submission_id = _submit(client, _create_assignment(client))
    submission_store.claim_for_grading(submission_id)
    response = client.post(f"/api/submissions/{submission_id}/grade")
    assert response.status_code == 409
    assert client.get(f"/api/submissions/{submission_id}").json()["status"] == "grading"


def test_service_failure_returns_503_and_rolls_back(client: TestClient) -> None:
    submission_id = _submit(client, _create_assignment(client))
    offline = OfflineGradingService(GradingServiceConfig(api_key="key", latency_seconds=0.0))
    app.dependency_overrides[get_lifecycle] = lambda: SubmissionLifecycle(
        submission_store, assignment_store, offline
    )

    response = client.post(f"/api/submissions/{submission_id}/grade")
    assert response.status_code == 503
    assert "try again" in response.json()["detail"]
    assert client.get(f"/api/submissions/{submission_id}").json()["status"] == "submitted"


def test_unknown_submission_is_404(client: TestClient) -> None:
    assert client.post("/api/submissions/missing/grade").status_code == 404
    assert client.get("/api/submissions/missing").status_code == 404


def test_prompt_feedback_endpoint(client: TestClient) -> None:
    response = client.post("/api/grading/feedback", json={"prompt": "Summarise this essay."})
    assert response.status_code == 200
    assert response.json()["feedback"].startswith("This submission demonstrates")
    assert client.post("/api/grading/feedback", json={"prompt": " "}).status_code == 422


def test_lesson_plan_endpoints(client: TestClient) -> None:
    assert client.put("/api/profiles/teacher-1", json={"role": "teacher", "full_name": "Ms. Rivera"}).status_code == 200
    created = client.post(
        "/api/lesson-plans",
        json={"teacher_id": "teacher-1", "subject": "Science", "student_performance_data": {"weakAreas": ["Stoichiometry"]}},
    )
    assert created.status_code == 201
    assert "Stoichiometry" in created.json()["content"]

    listed = client.get("/api/lesson-plans", params={"teacher_id": "teacher-1"})
    assert len(listed.json()) == 1

    assert client.post("/api/lesson-plans", json={"teacher_id": "teacher-1"}).status_code == 400
    assert client.post("/api/lesson-plans", json={"teacher_id": "student-9", "subject": "Math"}).status_code == 403
