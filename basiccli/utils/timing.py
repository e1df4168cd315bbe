"""Timing helpers that report elapsed time through a structured logger."""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

PROGRESS_BAR_LENGTH = 30


def format_elapsed(seconds: float) -> str:
    """Format an elapsed duration for log output.

    Durations above a minute render as ``"Xm Ys"``, from one second as
    ``"X.XXs"`` and anything shorter in milliseconds.
    """
    if seconds > 60:
        minutes, secs = divmod(round(seconds), 60)
        return f"{minutes}m {secs}s"
    if seconds >= 1:
        return f"{seconds:.2f}s"
    return f"{seconds * 1000:.2f}ms"


@contextmanager
def log_timing(logger: Any, operation: str) -> Generator[None, None, None]:
    """Log the start, completion or failure of a block with its elapsed time."""
    start = time.perf_counter()
    logger.info("operation_started", operation=operation)
    try:
        yield
    except Exception as exc:
        logger.error(
            "operation_failed",
            operation=operation,
            elapsed=format_elapsed(time.perf_counter() - start),
            error=str(exc),
        )
        raise
    logger.info(
        "operation_completed",
        operation=operation,
        elapsed=format_elapsed(time.perf_counter() - start),
    )


def progress_bar(current: int, total: int, length: int = PROGRESS_BAR_LENGTH) -> str:
    """Render ``current`` out of ``total`` as a fixed-width bar of filled/empty cells."""
    filled = min(length, max(0, round(length * current / total)))
    return "█" * filled + "░" * (length - filled)


def log_progress(
    logger: Any,
    current: int,
    total: int,
    event: str = "progress",
    *,
    level: str = "info",
) -> None:
    """Log how far through ``total`` steps a task is, with a percentage and bar."""
    if total <= 0:
        msg = "total must be > 0"
        raise ValueError(msg)
    getattr(logger, level)(
        event,
        current=current,
        total=total,
        percent=round(current / total * 100, 1),
        bar=progress_bar(current, total),
    )
