"""Structured logging for the compiler.

Level and renderer default to `Settings.log_level` / `Settings.json_logs`,
so services embedding the compiler can switch to JSON logs through
`REELPLAN_JSON_LOGS` without touching code.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from reelplan.common.config import get_settings


def _level(name: str) -> int:
    return getattr(logging, name.upper())


def _processors(json_logs: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_logs:
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return processors


def setup_logging(log_level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure structlog for the compiler and its callers.

    Arguments left as None are read from settings.
    """
    settings = get_settings()
    level = _level(log_level or settings.log_level)
    if json_logs is None:
        json_logs = settings.json_logs

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    structlog.configure(
        processors=_processors(json_logs),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
