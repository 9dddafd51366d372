from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from classgrade.config import get_settings
from classgrade.db.session import create_schema, dispose_engine
from classgrade.grading_service import GradingService, GradingServiceConfig
from classgrade.telemetry import clear_listeners


@pytest.fixture
def database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("CLASSGRADE_DATABASE_URL", f"sqlite:///{tmp_path / 'classgrade.db'}")
    get_settings.cache_clear()
    dispose_engine()
    create_schema()
    yield
    dispose_engine()
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Iterator[None]:
    clear_listeners()
    yield
    clear_listeners()


@pytest.fixture
def grading_service() -> GradingService:
    return GradingService(
        GradingServiceConfig(
            api_key="test-key",
            latency_seconds=0.0,
            feedback_latency_seconds=0.0,
        )
    )
