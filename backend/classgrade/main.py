import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from .assignment_routes import router as assignment_router
from .config import get_settings
from .db.monitoring import pool_snapshot
from .db.session import create_schema, get_engine
from .grading_service import GradingService, get_grading_service
from .lesson_plan_routes import router as lesson_plan_router
from .logging_config import configure_logging
from .profile_routes import router as profile_router
from .student_routes import router as student_router
from .submission_routes import router as submission_router


configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    if settings.database_url:
        create_schema()
    logger.info("Grading service configured: %s", bool(settings.grading_api_key))
    yield


app = FastAPI(title="Classgrade Backend", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(assignment_router)
app.include_router(submission_router)
app.include_router(profile_router)
app.include_router(lesson_plan_router)
app.include_router(student_router)


@app.get("/healthz")
def health(service: GradingService = Depends(get_grading_service)) -> Dict[str, Any]:
    return {"status": "ok", "grading_configured": service.is_configured()}


@app.get("/healthz/database")
def database_health() -> Dict[str, Any]:
    try:
        engine = get_engine()
    except RuntimeError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return {"status": "ok", "pool": pool_snapshot(engine)}
