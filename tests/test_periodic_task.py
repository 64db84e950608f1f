"""Tests for lexwatch.monitor.periodic and task_utils."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest

from lexwatch.monitor.periodic import PeriodicTask
from lexwatch.monitor.task_utils import log_task_exception


class TestPeriodicTask:
    def test_rejects_non_positive_interval(self) -> None:
        async def _noop() -> None:
            return None

        with pytest.raises(ValueError, match="positive"):
            PeriodicTask(_noop, 0)

    @pytest.mark.asyncio
    async def test_fires_repeatedly_until_cancelled(self) -> None:
        calls = 0

        async def _tick() -> None:
            nonlocal calls
            calls += 1

        timer = PeriodicTask(_tick, 0.01, name="test")
        assert timer.start() is True
        await asyncio.sleep(0.08)
        timer.cancel()
        fired = calls
        assert fired >= 2
        await asyncio.sleep(0.05)
        assert calls == fired
        assert timer.is_active is False

    @pytest.mark.asyncio
    async def test_first_fire_waits_one_interval(self) -> None:
        called = asyncio.Event()

        async def _tick() -> None:
            called.set()

        timer = PeriodicTask(_tick, 0.2)
        timer.start()
        await asyncio.sleep(0.05)
        assert not called.is_set()
        timer.cancel()

    @pytest.mark.asyncio
    async def test_second_start_is_noop(self) -> None:
        async def _tick() -> None:
            return None

        timer = PeriodicTask(_tick, 0.5)
        assert timer.start() is True
        assert timer.start() is False
        timer.cancel()

    @pytest.mark.asyncio
    async def test_cancel_is_idempotent(self) -> None:
        async def _tick() -> None:
            return None

        timer = PeriodicTask(_tick, 0.5)
        timer.cancel()
        timer.start()
        timer.cancel()
        timer.cancel()
        assert timer.is_active is False

    @pytest.mark.asyncio
    async def test_overlapping_fire_is_skipped(self) -> None:
        release = asyncio.Event()
        started = 0

        async def _slow_tick() -> None:
            nonlocal started
            started += 1
            await release.wait()

        timer = PeriodicTask(_slow_tick, 0.01)
        timer.start()
        await asyncio.sleep(0.08)
        assert started == 1
        assert timer.skipped_count >= 1
        assert timer.inflight is not None
        timer.cancel()
        release.set()
        await asyncio.sleep(0)

    @pytest.mark.asyncio
    async def test_cancel_leaves_inflight_tick_running(self) -> None:
        release = asyncio.Event()
        finished = asyncio.Event()

        async def _slow_tick() -> None:
            await release.wait()
            finished.set()

        timer = PeriodicTask(_slow_tick, 0.01)
        timer.start()
        await asyncio.sleep(0.03)
        inflight = timer.inflight
        assert inflight is not None
        timer.cancel()
        release.set()
        await asyncio.wait_for(finished.wait(), timeout=1)
        assert not inflight.cancelled()

    @pytest.mark.asyncio
    async def test_failing_tick_does_not_stop_timer(self) -> None:
        calls = 0

        async def _boom() -> None:
            nonlocal calls
            calls += 1
            raise RuntimeError("tick failed")

        timer = PeriodicTask(_boom, 0.01)
        timer.start()
        await asyncio.sleep(0.06)
        timer.cancel()
        assert calls >= 2


# ─── log_task_exception ─────────────────────────────────────────────────


class TestLogTaskException:
    @pytest.mark.asyncio
    async def test_returns_none_on_success(self) -> None:
        async def _ok() -> str:
            return "done"

        task = asyncio.create_task(_ok())
        await task
        logger = MagicMock()
        assert log_task_exception(task, logger, "test.ok") is None
        logger.error.assert_not_called()

    @pytest.mark.asyncio
    async def test_logs_and_returns_exception(self) -> None:
        async def _fail() -> None:
            raise ValueError("boom")

        task = asyncio.create_task(_fail(), name="failing")
        with pytest.raises(ValueError):
            await task

        logger = MagicMock()
        result = log_task_exception(task, logger, "test.fail", job_id="42")
        assert isinstance(result, ValueError)
        logger.error.assert_called_once_with(
            "test.fail",
            error="boom",
            error_type="ValueError",
            task_name="failing",
            job_id="42",
        )

    @pytest.mark.asyncio
    async def test_cancelled_task_returns_none(self) -> None:
        async def _hang() -> None:
            await asyncio.sleep(100)

        task = asyncio.create_task(_hang())
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert log_task_exception(task, MagicMock(), "test.cancel") is None
