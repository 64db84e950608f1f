"""Cancellable fixed-interval timer for async callbacks.

A PeriodicTask owns one asyncio task that sleeps for the interval and then
spawns the callback as its own task. Firings never overlap: when the previous
callback is still running at the next firing, that firing is skipped.
Cancelling stops future firings only; a callback already running finishes on
its own and its owner decides whether the result still matters.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from lexwatch.core.logging import get_logger
from lexwatch.monitor.task_utils import log_task_exception

_logger = get_logger("monitor.periodic")

TickCallback = Callable[[], Awaitable[None]]


class PeriodicTask:
    """Fixed-interval timer; the first firing happens one interval after start()."""

    def __init__(self, callback: TickCallback, interval: float, *, name: str = "periodic") -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._callback = callback
        self._interval = interval
        self._name = name
        self._loop_task: asyncio.Task[None] | None = None
        self._inflight: asyncio.Task[None] | None = None
        self.fired_count = 0
        self.skipped_count = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_active(self) -> bool:
        """True between start() and cancel()."""
        return self._loop_task is not None

    @property
    def inflight(self) -> asyncio.Task[None] | None:
        """The callback task still running, if any."""
        if self._inflight is not None and not self._inflight.done():
            return self._inflight
        return None

    def start(self) -> bool:
        """Start firing. Returns False if already started."""
        if self._loop_task is not None:
            return False
        self._loop_task = asyncio.create_task(self._run(), name=f"{self._name}.loop")
        self._loop_task.add_done_callback(self._on_loop_done)
        _logger.debug("periodic.started", timer=self._name, interval=self._interval)
        return True

    def cancel(self) -> None:
        """Stop future firings. Idempotent; does not wait or touch a running callback."""
        task = self._loop_task
        if task is None:
            return
        self._loop_task = None
        task.cancel()
        _logger.debug(
            "periodic.cancelled",
            timer=self._name,
            fired=self.fired_count,
            skipped=self.skipped_count,
        )

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self._fire()

    def _fire(self) -> None:
        if self.inflight is not None:
            self.skipped_count += 1
            _logger.debug("periodic.tick_skipped", timer=self._name)
            return
        self.fired_count += 1
        self._inflight = asyncio.create_task(self._callback(), name=f"{self._name}.tick")
        self._inflight.add_done_callback(self._on_tick_done)

    def _on_loop_done(self, task: asyncio.Task[None]) -> None:
        if log_task_exception(task, _logger, "periodic.loop_died", timer=self._name) is not None:
            if self._loop_task is task:
                self._loop_task = None

    def _on_tick_done(self, task: asyncio.Task[None]) -> None:
        log_task_exception(task, _logger, "periodic.tick_failed", timer=self._name)


__all__ = ["PeriodicTask", "TickCallback"]
