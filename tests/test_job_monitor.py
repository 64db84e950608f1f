"""Tests for lexwatch.monitor.monitor.JobMonitor."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from lexwatch.client import EXTRACT_ARTICLES_DOMAIN, SEND_LEGAL_BASIS_DOMAIN, JobDomain
from lexwatch.client.models import JobStatusPayload
from lexwatch.core.errors import ErrorKind
from lexwatch.core.exceptions import JobRequestError, JobTransportError
from lexwatch.core.status import JobStatus
from lexwatch.monitor import (
    EMPTY_STATE,
    JobHandle,
    JobMonitor,
    MonitorAction,
    MonitorPhase,
    MonitorState,
    describe_state,
)

INTERVAL = 0.01


def _payload(message: str, progress: float | None = None, error: str | None = None) -> JobStatusPayload:
    body: dict[str, Any] = {"message": message, "jobProgress": progress}
    if error is not None:
        body["error"] = error
    return JobStatusPayload.model_validate(body)


ACTIVE_40 = _payload("Job is still processing", 40)
COMPLETED_100 = _payload("Job completed successfully", 100)


class FakeStatusClient:
    """Serves scripted responses; the last one repeats."""

    def __init__(self, *responses: JobStatusPayload | BaseException) -> None:
        self._responses = list(responses)
        self.calls = 0
        self.gate: asyncio.Event | None = None
        self.entered = asyncio.Event()

    async def fetch_status(self, domain: JobDomain, job_id: str) -> JobStatusPayload:
        self.calls += 1
        self.entered.set()
        if self.gate is not None:
            await self.gate.wait()
        item = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(item, BaseException):
            raise item
        return item


class Recorder:
    def __init__(self) -> None:
        self.states: list[MonitorState] = []

    def __call__(self, state: MonitorState) -> None:
        self.states.append(state)


async def _finish(monitor: JobMonitor) -> MonitorState:
    return await asyncio.wait_for(monitor.wait_finished(), timeout=2)


# ─── JobHandle ──────────────────────────────────────────────────────────


class TestJobHandle:
    def test_defaults(self) -> None:
        assert JobHandle("42").poll_interval_seconds == 5.0

    def test_rejects_empty_id(self) -> None:
        with pytest.raises(ValueError, match="job_id"):
            JobHandle("")

    def test_rejects_non_positive_interval(self) -> None:
        with pytest.raises(ValueError, match="poll_interval_seconds"):
            JobHandle("42", poll_interval_seconds=0)


# ─── Lifecycle ──────────────────────────────────────────────────────────


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_progress_then_completion(self) -> None:
        client = FakeStatusClient(ACTIVE_40, COMPLETED_100)
        updates = Recorder()
        completions = Recorder()
        monitor = JobMonitor(
            client, EXTRACT_ARTICLES_DOMAIN, on_update=updates, on_complete=completions
        )

        assert monitor.start(JobHandle("42", INTERVAL)) is True
        assert monitor.is_polling
        state = await _finish(monitor)

        assert updates.states[0].progress == 40
        assert updates.states[0].status is JobStatus.ACTIVE
        assert updates.states[0].message == (
            "El proceso de extracción de artículos está en curso..."
        )
        assert state.status is JobStatus.COMPLETED
        assert state.progress == 100
        assert state.error is None
        assert monitor.phase is MonitorPhase.COMPLETED
        assert monitor.timer is None
        assert completions.states == [state]

        calls = client.calls
        await asyncio.sleep(INTERVAL * 5)
        assert client.calls == calls
        assert len(completions.states) == 1

    @pytest.mark.asyncio
    async def test_second_start_is_noop(self) -> None:
        monitor = JobMonitor(FakeStatusClient(ACTIVE_40), EXTRACT_ARTICLES_DOMAIN)
        assert monitor.start(JobHandle("1", 1.0)) is True
        timer = monitor.timer
        assert monitor.start(JobHandle("2", 1.0)) is False
        assert monitor.timer is timer
        assert monitor.handle == JobHandle("1", 1.0)
        monitor.cancel()

    @pytest.mark.asyncio
    async def test_cancel_returns_to_idle(self) -> None:
        updates = Recorder()
        monitor = JobMonitor(FakeStatusClient(ACTIVE_40), EXTRACT_ARTICLES_DOMAIN, on_update=updates)
        monitor.start(JobHandle("1", INTERVAL))
        await asyncio.sleep(INTERVAL * 4)
        monitor.cancel()
        monitor.cancel()

        assert monitor.phase is MonitorPhase.IDLE
        assert monitor.state == EMPTY_STATE
        assert monitor.handle is None
        assert monitor.timer is None
        count = len(updates.states)
        await asyncio.sleep(INTERVAL * 4)
        assert len(updates.states) == count

    @pytest.mark.asyncio
    async def test_can_start_again_after_cancel(self) -> None:
        monitor = JobMonitor(FakeStatusClient(COMPLETED_100), EXTRACT_ARTICLES_DOMAIN)
        monitor.start(JobHandle("1", 1.0))
        monitor.cancel()
        assert monitor.start(JobHandle("2", INTERVAL)) is True
        state = await _finish(monitor)
        assert state.status is JobStatus.COMPLETED


# ─── Errors ─────────────────────────────────────────────────────────────


class TestErrors:
    @pytest.mark.asyncio
    async def test_job_not_found_phrase_is_close_only(self) -> None:
        client = FakeStatusClient(_payload("Job failed", error="Job not found"))
        monitor = JobMonitor(client, EXTRACT_ARTICLES_DOMAIN)
        monitor.start(JobHandle("7", INTERVAL))
        state = await _finish(monitor)

        assert monitor.phase is MonitorPhase.ERRORED
        assert state.error is not None
        assert state.error.kind is ErrorKind.JOB_NOT_FOUND
        assert state.progress is None
        assert state.message is None
        assert state.status is JobStatus.FAILED
        assert describe_state(state).actions == (MonitorAction.CLOSE,)

    @pytest.mark.asyncio
    async def test_http_404_on_send_job(self) -> None:
        client = FakeStatusClient(
            JobRequestError("Request failed with status code 404", http_status_code=404)
        )
        monitor = JobMonitor(client, SEND_LEGAL_BASIS_DOMAIN)
        monitor.start(JobHandle("7", INTERVAL))
        state = await _finish(monitor)
        assert state.error is not None
        assert state.error.kind is ErrorKind.JOB_NOT_FOUND

    @pytest.mark.asyncio
    async def test_error_stops_polling(self) -> None:
        client = FakeStatusClient(JobTransportError("Network Error"))
        monitor = JobMonitor(client, EXTRACT_ARTICLES_DOMAIN)
        monitor.start(JobHandle("7", INTERVAL))
        await _finish(monitor)
        calls = client.calls
        await asyncio.sleep(INTERVAL * 5)
        assert client.calls == calls
        assert monitor.timer is None

    @pytest.mark.asyncio
    async def test_network_error_then_retry_resumes(self) -> None:
        client = FakeStatusClient(JobTransportError("Network Error"), ACTIVE_40, COMPLETED_100)
        updates = Recorder()
        monitor = JobMonitor(client, EXTRACT_ARTICLES_DOMAIN, on_update=updates)
        monitor.start(JobHandle("7", INTERVAL))

        errored = await _finish(monitor)
        assert errored.error is not None
        assert errored.error.kind is ErrorKind.NETWORK
        assert describe_state(errored).actions == (MonitorAction.RETRY,)

        assert monitor.retry() is True
        assert monitor.state == EMPTY_STATE
        assert updates.states[-1] == EMPTY_STATE
        final = await _finish(monitor)
        assert final.status is JobStatus.COMPLETED
        assert client.calls == 3

    @pytest.mark.asyncio
    async def test_retry_requires_errored_phase(self) -> None:
        monitor = JobMonitor(FakeStatusClient(ACTIVE_40), EXTRACT_ARTICLES_DOMAIN)
        assert monitor.retry() is False
        monitor.start(JobHandle("1", 1.0))
        assert monitor.retry() is False
        monitor.cancel()

    @pytest.mark.asyncio
    async def test_blank_error_field_is_ignored(self) -> None:
        client = FakeStatusClient(_payload("Job is still processing", 40, error=""), COMPLETED_100)
        updates = Recorder()
        monitor = JobMonitor(client, EXTRACT_ARTICLES_DOMAIN, on_update=updates)
        monitor.start(JobHandle("1", INTERVAL))
        state = await _finish(monitor)

        assert updates.states[0].error is None
        assert updates.states[0].progress == 40
        assert state.status is JobStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_failed_status_without_error_phrase(self) -> None:
        monitor = JobMonitor(FakeStatusClient(_payload("Job failed")), EXTRACT_ARTICLES_DOMAIN)
        monitor.start(JobHandle("1", INTERVAL))
        state = await _finish(monitor)
        assert state.status is JobStatus.FAILED
        assert state.error is not None
        assert state.error.kind is ErrorKind.UNEXPECTED

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_contained(self) -> None:
        monitor = JobMonitor(FakeStatusClient(RuntimeError("bug")), EXTRACT_ARTICLES_DOMAIN)
        monitor.start(JobHandle("1", INTERVAL))
        state = await _finish(monitor)
        assert state.error is not None
        assert state.error.kind is ErrorKind.UNEXPECTED
        assert monitor.phase is MonitorPhase.ERRORED


# ─── Late responses and callbacks ───────────────────────────────────────


class TestStaleResponses:
    @pytest.mark.asyncio
    async def test_response_after_cancel_is_dropped(self) -> None:
        client = FakeStatusClient(COMPLETED_100)
        client.gate = asyncio.Event()
        updates = Recorder()
        completions = Recorder()
        monitor = JobMonitor(
            client, EXTRACT_ARTICLES_DOMAIN, on_update=updates, on_complete=completions
        )
        monitor.start(JobHandle("1", INTERVAL))
        await asyncio.wait_for(client.entered.wait(), timeout=2)

        monitor.cancel()
        client.gate.set()
        await asyncio.sleep(INTERVAL * 3)

        assert updates.states == []
        assert completions.states == []
        assert monitor.state == EMPTY_STATE
        assert monitor.phase is MonitorPhase.IDLE

    @pytest.mark.asyncio
    async def test_callback_failure_does_not_break_monitor(self) -> None:
        def _broken(state: MonitorState) -> None:
            raise RuntimeError("ui crashed")

        monitor = JobMonitor(
            FakeStatusClient(ACTIVE_40, COMPLETED_100),
            EXTRACT_ARTICLES_DOMAIN,
            on_update=_broken,
        )
        monitor.start(JobHandle("1", INTERVAL))
        state = await _finish(monitor)
        assert state.status is JobStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_response_from_before_restart_is_dropped(self) -> None:
        client = FakeStatusClient(COMPLETED_100)
        client.gate = asyncio.Event()
        updates = Recorder()
        monitor = JobMonitor(client, EXTRACT_ARTICLES_DOMAIN, on_update=updates)
        monitor.start(JobHandle("1", INTERVAL))
        await asyncio.wait_for(client.entered.wait(), timeout=2)

        monitor.cancel()
        assert monitor.start(JobHandle("2", 60.0)) is True
        client.gate.set()
        await asyncio.sleep(INTERVAL * 3)

        assert updates.states == []
        assert monitor.phase is MonitorPhase.POLLING
        assert monitor.handle == JobHandle("2", 60.0)
        monitor.cancel()


# ─── Callbacks that drive the monitor ───────────────────────────────────


class TestReentrantCallbacks:
    @pytest.mark.asyncio
    async def test_cancel_on_completion_update_skips_on_complete(self) -> None:
        completions = Recorder()

        def _detach(state: MonitorState) -> None:
            if state.status is JobStatus.COMPLETED:
                monitor.cancel()

        monitor = JobMonitor(
            FakeStatusClient(COMPLETED_100),
            EXTRACT_ARTICLES_DOMAIN,
            on_update=_detach,
            on_complete=completions,
        )
        monitor.start(JobHandle("1", INTERVAL))
        state = await _finish(monitor)

        assert state == EMPTY_STATE
        assert monitor.phase is MonitorPhase.IDLE
        assert completions.states == []

    @pytest.mark.asyncio
    async def test_retry_on_error_update_keeps_waiting(self) -> None:
        client = FakeStatusClient(JobTransportError("Network Error"), COMPLETED_100)
        retried: list[ErrorKind] = []

        def _auto_retry(state: MonitorState) -> None:
            if state.error is not None and not retried:
                retried.append(state.error.kind)
                monitor.retry()

        monitor = JobMonitor(client, EXTRACT_ARTICLES_DOMAIN, on_update=_auto_retry)
        monitor.start(JobHandle("1", INTERVAL))
        state = await _finish(monitor)

        assert retried == [ErrorKind.NETWORK]
        assert monitor.phase is MonitorPhase.COMPLETED
        assert state.status is JobStatus.COMPLETED
        assert client.calls == 2

    @pytest.mark.asyncio
    async def test_cancel_on_error_update_returns_to_idle(self) -> None:
        def _detach(state: MonitorState) -> None:
            monitor.cancel()

        monitor = JobMonitor(
            FakeStatusClient(JobTransportError("Network Error")),
            EXTRACT_ARTICLES_DOMAIN,
            on_update=_detach,
        )
        monitor.start(JobHandle("1", INTERVAL))
        state = await _finish(monitor)

        assert state == EMPTY_STATE
        assert monitor.phase is MonitorPhase.IDLE
