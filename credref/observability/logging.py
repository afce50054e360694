"""structlog setup shared by the bootstrap and the CLI."""

from __future__ import annotations

import logging
import sys

import structlog

_VALID_LEVELS = ("debug", "info", "warning", "error")


def setup_logging(level: str = "info", json_output: bool = True) -> None:
    """Configure structlog to write to stderr.

    JSON lines are used when running in-cluster; the CLI passes
    ``json_output=False`` for human-readable console output.
    """
    if level.lower() not in _VALID_LEVELS:
        raise ValueError(f"Invalid log level: {level}. Must be one of {_VALID_LEVELS}")
    log_level = getattr(logging, level.upper())

    renderer: structlog.typing.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            structlog.dev.set_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(component=component)  # type: ignore[return-value]
