"""Structured logging setup using structlog."""

import logging
import sys

import structlog
from structlog.types import Processor

from core.config import settings


def setup_logging() -> None:
    """Configure structlog and the stdlib root logger.

    JSON lines in production (or when ``LOG_JSON`` is set), coloured console
    output otherwise. Context bound through ``structlog.contextvars`` (request
    id, method, path) is merged into every event.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    as_json = settings.is_production if settings.log_json is None else settings.log_json

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: Processor
    if as_json:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # SQLAlchemy and uvicorn log through stdlib logging
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
