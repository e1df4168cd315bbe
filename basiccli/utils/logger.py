"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog


def configure_logging(
    log_level: str = "INFO",
    *,
    colors: bool | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure structlog to render leveled, timestamped lines.

    Logs go to stderr by default so command output on stdout stays parseable.
    Colors are enabled automatically when the target stream is a terminal.
    """
    output = stream if stream is not None else sys.stderr
    if colors is None:
        colors = bool(getattr(output, "isatty", lambda: False)())

    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%dT%H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally bound to initial context."""
    return structlog.get_logger(name, **initial_values)
