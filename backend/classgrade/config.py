import os
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    grading_api_key: Optional[str] = Field(None, alias="CLASSGRADE_GRADING_API_KEY")
    grading_model: str = Field("gemini-pro", alias="CLASSGRADE_GRADING_MODEL")
    grading_latency_seconds: float = Field(2.0, ge=0.0, alias="CLASSGRADE_GRADING_LATENCY")
    feedback_latency_seconds: float = Field(1.5, ge=0.0, alias="CLASSGRADE_FEEDBACK_LATENCY")
    grading_timeout_seconds: Optional[float] = Field(30.0, gt=0.0, alias="CLASSGRADE_GRADING_TIMEOUT")
    grading_seed: Optional[int] = Field(None, alias="CLASSGRADE_GRADING_SEED")
    max_submission_chars: int = Field(200_000, gt=0, alias="CLASSGRADE_MAX_SUBMISSION_CHARS")
    database_url: Optional[str] = Field(None, alias="CLASSGRADE_DATABASE_URL")
    database_pool_size: int = Field(10, alias="CLASSGRADE_DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(10, alias="CLASSGRADE_DATABASE_MAX_OVERFLOW")
    database_echo: bool = Field(False, alias="CLASSGRADE_DATABASE_ECHO")

    class Config:
        env_file = os.getenv("ENV_FILE", ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()  # type: ignore[arg-type]
    except ValidationError as exc:
        raise RuntimeError(f"Invalid backend configuration: {exc}") from exc
