"""Connection pool counters surfaced on the database health check."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from typing import Dict
from weakref import WeakKeyDictionary

from sqlalchemy import event
from sqlalchemy.engine import Engine

from ..telemetry import emit_event


@dataclass
class PoolCounters:
    connects: int = 0
    checkouts: int = 0
    checkins: int = 0
    last_emit: float = field(default=0.0, repr=False)

    def as_dict(self) -> Dict[str, int]:
        return {"connects": self.connects, "checkouts": self.checkouts, "checkins": self.checkins}


_COUNTERS: "WeakKeyDictionary[Engine, PoolCounters]" = WeakKeyDictionary()
_EMIT_INTERVAL = float(os.getenv("CLASSGRADE_DB_TELEMETRY_INTERVAL", "30"))


def instrument_engine(engine: Engine) -> None:
    """Count pool connects/checkouts/checkins and periodically emit ``db_pool_status``."""
    if engine in _COUNTERS:
        return
    counters = PoolCounters()
    _COUNTERS[engine] = counters

    def bump(attribute: str) -> None:
        setattr(counters, attribute, getattr(counters, attribute) + 1)
        now = time.time()
        if _EMIT_INTERVAL > 0 and (now - counters.last_emit) < _EMIT_INTERVAL:
            return
        counters.last_emit = now
        emit_event("db_pool_status", status=pool_status(engine), trigger=attribute, **counters.as_dict())

    event.listen(engine, "connect", lambda *_: bump("connects"))
    event.listen(engine, "checkout", lambda *_: bump("checkouts"))
    event.listen(engine, "checkin", lambda *_: bump("checkins"))


def pool_snapshot(engine: Engine) -> Dict[str, object]:
    counters = _COUNTERS.get(engine) or PoolCounters()
    return {"status": pool_status(engine), **counters.as_dict()}


def pool_status(engine: Engine) -> str:
    try:
        return engine.pool.status()  # type: ignore[no-untyped-call]
    except Exception as exc:  # noqa: BLE001
        return f"unavailable: {exc}"


__all__ = [
    "PoolCounters",
    "instrument_engine",
    "pool_snapshot",
    "pool_status",
]
