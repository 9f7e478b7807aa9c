"""Structured logging setup for applications embedding fieldtypes."""

import logging
from typing import Optional

import structlog

from fieldtypes.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog processors and the minimum log level.

    Uses the console renderer in DEBUG mode and JSON lines otherwise. Call this
    once at startup: per-field debug events (field_validated, event_recorded) are
    only emitted after structlog has been configured.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
