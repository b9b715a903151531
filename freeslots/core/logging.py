from __future__ import annotations

import logging

import structlog

from freeslots.core.config import settings

log = structlog.get_logger("freeslots")


def configure_logging(level: str | None = None, json: bool | None = None) -> None:
    """Configure structlog for applications embedding the library.

    Importing ``freeslots`` never calls this; structlog defaults apply until
    the host application opts in.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    use_json = settings.LOG_JSON if json is None else json

    renderer = structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level_name)),
        cache_logger_on_first_use=False,
    )
