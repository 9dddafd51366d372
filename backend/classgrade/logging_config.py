import logging
import os
from logging.config import dictConfig
from typing import Dict, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HTTP_LOGGERS = ("httpx", "uvicorn.access")


def _logger_levels() -> Dict[str, Dict[str, str]]:
    loggers: Dict[str, Dict[str, str]] = {}
    telemetry_level = os.getenv("CLASSGRADE_TELEMETRY_LOG_LEVEL")
    if telemetry_level:
        loggers["classgrade.telemetry"] = {"level": telemetry_level.upper()}
    if os.getenv("CLASSGRADE_DEBUG_HTTP", "0") == "1":
        for name in HTTP_LOGGERS:
            loggers[name] = {"level": "DEBUG"}
    return loggers


def configure_logging(level: Optional[str] = None) -> None:
    """Send every backend logger to stderr at ``CLASSGRADE_LOG_LEVEL``.

    ``CLASSGRADE_TELEMETRY_LOG_LEVEL`` quiets or raises the ``TELEMETRY`` lines
    on their own, and ``CLASSGRADE_DEBUG_HTTP=1`` turns on request logging.
    """
    root_level = (level or os.getenv("CLASSGRADE_LOG_LEVEL", "INFO")).upper()
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"plain": {"format": LOG_FORMAT}},
            "handlers": {"stderr": {"class": "logging.StreamHandler", "formatter": "plain"}},
            "loggers": _logger_levels(),
            "root": {"handlers": ["stderr"], "level": root_level},
        }
    )
    logging.getLogger(__name__).debug("Logging configured at %s", root_level)
