"""Helpers for asyncio.Task done-callbacks in the monitor.

Timer loops and ticks run as background tasks; their done-callbacks use
``log_task_exception`` so a crash is reported with the job it belonged to
instead of vanishing with the task.
"""

from __future__ import annotations

import asyncio
from typing import Any

from lexwatch.core.logging import LexwatchLogger


def log_task_exception(
    task: asyncio.Task[Any],
    logger: LexwatchLogger,
    event: str,
    **context: Any,
) -> BaseException | None:
    """Log the exception a finished task died with, if any.

    Args:
        task: A task that has completed.
        logger: Component logger to report through.
        event: Dotted event name, e.g. ``"periodic.loop_died"``.
        **context: Extra fields for the log entry (job_id, domain...).

    Returns:
        The exception, or None when the task returned or was cancelled.
    """
    if task.cancelled():
        return None
    exc = task.exception()
    if exc is not None:
        logger.error(
            event,
            error=str(exc),
            error_type=type(exc).__name__,
            task_name=task.get_name(),
            **context,
        )
    return exc


__all__ = ["log_task_exception"]
