from __future__ import annotations

from sqlalchemy import create_engine, text

from classgrade.config import Settings
from classgrade.db import monitoring
from classgrade.db.session import engine_options


def test_instrumented_engine_emits_pool_status(monkeypatch) -> None:
    emitted: list[tuple[str, dict[str, object]]] = []

    def record(event_name: str, **payload: object) -> None:
        emitted.append((event_name, payload))

    monkeypatch.setattr(monitoring, "_EMIT_INTERVAL", 0)
    monkeypatch.setattr(monitoring, "emit_event", record)

    engine = create_engine("sqlite:///:memory:", future=True)
    try:
        monitoring.instrument_engine(engine)
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        assert emitted, "Expected telemetry emission when instrumentation is active."
        event_name, payload = emitted[0]
        assert event_name == "db_pool_status"
        assert payload["connects"] >= 1
        snapshot = monitoring.pool_snapshot(engine)
        assert snapshot["checkouts"] >= 1
        assert snapshot["checkins"] >= 1
    finally:
        engine.dispose()


def test_snapshot_for_uninstrumented_engine_is_zeroed() -> None:
    engine = create_engine("sqlite:///:memory:", future=True)
    try:
        snapshot = monitoring.pool_snapshot(engine)
        assert snapshot["connects"] == 0
    finally:
        engine.dispose()


def test_engine_options_by_backend() -> None:
    sqlite = Settings(CLASSGRADE_DATABASE_URL="sqlite:///grades.db")
    postgres = Settings(
        CLASSGRADE_DATABASE_URL="postgresql+psycopg://localhost/grades",
        CLASSGRADE_DATABASE_POOL_SIZE=4,
    )

    assert engine_options(sqlite)["connect_args"] == {"check_same_thread": False}
    assert "pool_size" not in engine_options(sqlite)
    assert engine_options(postgres)["pool_size"] == 4
    assert "connect_args" not in engine_options(postgres)
