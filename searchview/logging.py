"""Structured logging helpers.

Every event carries ``component="searchview"``; ``configure_logging`` can also
stamp the deployment environment onto all events through structlog contextvars.
"""

from __future__ import annotations

import logging

import structlog

COMPONENT = "searchview"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | str = logging.INFO, *, environment: str | None = None) -> None:
    numeric_level = _resolve_level(level)
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )
    structlog.contextvars.clear_contextvars()
    if environment:
        structlog.contextvars.bind_contextvars(environment=environment)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.set_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(**initial_values):
    """Return a lazily configured logger tagged with this project's component."""

    return structlog.get_logger(component=COMPONENT, **initial_values)


logger = get_logger()

__all__ = ["COMPONENT", "configure_logging", "get_logger", "logger"]
