"""
Structlog configuration.
"""

from __future__ import annotations

import logging

import structlog


def setup_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog for the application.

    Args:
        log_level: Log level name (e.g., "INFO"). Defaults to INFO.
        log_format: "json" or "console". Defaults to json.
    """
    level_name = (log_level or "INFO").upper()
    fmt = (log_format or "json").lower()
    level = getattr(logging, level_name, logging.INFO)

    # stdlib logging so Django and other libraries log too
    logging.basicConfig(level=level, format="%(message)s")

    renderer = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
