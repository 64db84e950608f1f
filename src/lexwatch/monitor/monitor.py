"""Job-progress monitor.

JobMonitor polls one job's status on a fixed interval and publishes a
normalized MonitorState. State machine:

    IDLE --start()--> POLLING --COMPLETED--> COMPLETED
                         |
                         +--error--> ERRORED --retry()--> POLLING

cancel() returns any phase to IDLE. Errors are never retried automatically;
retry() is the caller's decision, normally offered only for network errors.

Every start/retry/cancel bumps a generation counter. A tick remembers the
generation it was issued under and drops its response if the counter has
moved on, so a monitor that was cancelled or restarted while a request was
outstanding never applies the late result.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from lexwatch.client.domains import JobDomain
from lexwatch.client.models import JobStatusPayload
from lexwatch.core.constants import DEFAULT_POLL_INTERVAL_SECONDS
from lexwatch.core.errors import ErrorClassifier, ErrorDescriptor, ErrorKind
from lexwatch.core.exceptions import JobRequestError
from lexwatch.core.logging import MonitorContext, get_logger, with_context
from lexwatch.core.status import JobStatus
from lexwatch.monitor.periodic import PeriodicTask

_logger = get_logger("monitor")


# =============================================================================
# Models
# =============================================================================


class MonitorPhase(str, Enum):
    """Lifecycle phase of a JobMonitor."""

    IDLE = "idle"
    POLLING = "polling"
    COMPLETED = "completed"
    ERRORED = "errored"


@dataclass(frozen=True)
class JobHandle:
    """A job accepted by the backend and the cadence to poll it at."""

    job_id: str
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS

    def __post_init__(self) -> None:
        if not self.job_id:
            raise ValueError("job_id must not be empty")
        if self.poll_interval_seconds <= 0:
            raise ValueError(
                f"poll_interval_seconds must be positive, got {self.poll_interval_seconds}"
            )


@dataclass(frozen=True)
class MonitorState:
    """What the presentation layer renders.

    An error supersedes progress and message: when ``error`` is set both
    are None and polling has stopped.
    """

    progress: int | None = None
    status: JobStatus | None = None
    message: str | None = None
    error: ErrorDescriptor | None = None


EMPTY_STATE = MonitorState()


class StatusFetcher(Protocol):
    """The one client call the monitor needs."""

    async def fetch_status(self, domain: JobDomain, job_id: str) -> JobStatusPayload: ...


StateCallback = Callable[[MonitorState], None]


# =============================================================================
# Monitor
# =============================================================================


class JobMonitor:
    """Polls a job until it completes, fails, or is cancelled.

    Must be used from within a running event loop. The monitor exclusively
    owns its timer and state; tracking several jobs takes several monitors.
    """

    def __init__(
        self,
        client: StatusFetcher,
        domain: JobDomain,
        *,
        on_update: StateCallback | None = None,
        on_complete: StateCallback | None = None,
    ) -> None:
        """Initialize the monitor.

        Args:
            client: Performs the status round-trip.
            domain: Job type; selects status messages and the error catalog.
            on_update: Called with every published state.
            on_complete: Called once when the job reports COMPLETED.
        """
        self._client = client
        self._domain = domain
        self._classifier = ErrorClassifier(domain.error_catalog)
        self._log = _logger.bind(domain=domain.name)
        self._on_update = on_update
        self._on_complete = on_complete
        self._handle: JobHandle | None = None
        self._timer: PeriodicTask | None = None
        self._state = EMPTY_STATE
        self._phase = MonitorPhase.IDLE
        self._generation = 0
        self._finished = asyncio.Event()
        self._finished.set()

    # ─── Properties ─────────────────────────────────────────────────────

    @property
    def state(self) -> MonitorState:
        return self._state

    @property
    def phase(self) -> MonitorPhase:
        return self._phase

    @property
    def handle(self) -> JobHandle | None:
        return self._handle

    @property
    def domain(self) -> JobDomain:
        return self._domain

    @property
    def timer(self) -> PeriodicTask | None:
        """The active timer, or None when not polling."""
        return self._timer

    @property
    def is_polling(self) -> bool:
        return self._phase is MonitorPhase.POLLING

    # ─── Control ────────────────────────────────────────────────────────

    def start(self, handle: JobHandle) -> bool:
        """Begin polling a job. No-op (returns False) unless the monitor is IDLE."""
        if self._phase is not MonitorPhase.IDLE:
            self._log.debug(
                "monitor.start_ignored",
                phase=self._phase.value,
                job_id=handle.job_id,
            )
            return False
        self._handle = handle
        self._generation += 1
        self._state = EMPTY_STATE
        self._phase = MonitorPhase.POLLING
        self._finished.clear()
        self._start_timer()
        self._log.info(
            "monitor.started",
            job_id=handle.job_id,
            interval=handle.poll_interval_seconds,
        )
        return True

    def retry(self) -> bool:
        """Resume polling after an error, from an empty state.

        The failed tick is not replayed; the next request goes out after one
        full interval. Returns False unless the monitor is ERRORED.
        """
        if self._phase is not MonitorPhase.ERRORED or self._handle is None:
            return False
        self._generation += 1
        self._phase = MonitorPhase.POLLING
        self._finished.clear()
        self._publish(EMPTY_STATE)
        self._start_timer()
        self._log.info("monitor.retried", job_id=self._handle.job_id)
        return True

    def cancel(self) -> None:
        """Stop polling and discard state. Idempotent.

        A request still in flight is left to finish and its response dropped.
        Callbacks are not invoked: the owner is detaching.
        """
        self._generation += 1
        self._stop_timer()
        previous = self._phase
        job_id = self._handle.job_id if self._handle is not None else None
        self._handle = None
        self._state = EMPTY_STATE
        self._phase = MonitorPhase.IDLE
        self._finished.set()
        if previous is not MonitorPhase.IDLE:
            self._log.info(
                "monitor.cancelled",
                job_id=job_id,
                phase=previous.value,
            )

    async def wait_finished(self) -> MonitorState:
        """Wait until the monitor leaves POLLING and return the final state."""
        await self._finished.wait()
        return self._state

    # ─── Timer ──────────────────────────────────────────────────────────

    def _start_timer(self) -> None:
        assert self._handle is not None
        self._stop_timer()
        # Ticks inherit the context of the loop task created here
        with with_context(MonitorContext(job_id=self._handle.job_id, domain=self._domain.name)):
            self._timer = PeriodicTask(
                self._tick,
                self._handle.poll_interval_seconds,
                name=f"monitor.{self._domain.name}.{self._handle.job_id}",
            )
            self._timer.start()

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # ─── Tick ───────────────────────────────────────────────────────────

    async def _tick(self) -> None:
        handle = self._handle
        if handle is None or self._phase is not MonitorPhase.POLLING:
            return
        generation = self._generation

        try:
            payload = await self._client.fetch_status(self._domain, handle.job_id)
        except JobRequestError as exc:
            if self._is_stale(generation):
                return
            self._fail(self._classifier.classify_exception(exc))
            return
        except Exception:
            self._log.exception("monitor.tick_failed", job_id=handle.job_id)
            if self._is_stale(generation):
                return
            self._fail(self._classifier.describe(ErrorKind.UNEXPECTED))
            return

        if self._is_stale(generation):
            return
        self._apply(payload)

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            self._log.debug(
                "monitor.stale_response_dropped",
                issued_generation=generation,
                current_generation=self._generation,
            )
            return True
        return False

    def _apply(self, payload: JobStatusPayload) -> None:
        classification = self._domain.status_catalog.classify_status(payload.message)

        if payload.error is not None:
            error = self._classifier.classify_phrase(payload.error)
            self._fail(error, status=classification.status)
            return

        if classification.status is JobStatus.FAILED:
            # A failure without an error phrase still goes through the error catalog
            error = self._classifier.classify_phrase(payload.message)
            self._fail(error, status=JobStatus.FAILED)
            return

        state = MonitorState(
            progress=payload.job_progress,
            status=classification.status,
            message=classification.message,
        )
        if classification.status is JobStatus.COMPLETED:
            self._stop_timer()
            self._phase = MonitorPhase.COMPLETED
            self._log.info("monitor.completed", progress=payload.job_progress)
            if self._settle(state):
                self._invoke(self._on_complete, state, "on_complete")
            return

        self._log.debug(
            "monitor.progress",
            status=classification.status.value,
            progress=payload.job_progress,
        )
        self._publish(state)

    def _fail(self, error: ErrorDescriptor, *, status: JobStatus | None = None) -> None:
        self._stop_timer()
        self._phase = MonitorPhase.ERRORED
        self._log.warning(
            "monitor.errored",
            kind=error.kind.value,
            retryable=error.retryable,
        )
        self._settle(MonitorState(status=status, error=error))

    def _settle(self, state: MonitorState) -> bool:
        """Publish a terminal state, then release wait_finished().

        Returns False when the update callback cancelled or retried the
        monitor; the terminal state is then already superseded.
        """
        generation = self._generation
        self._publish(state)
        if generation != self._generation:
            return False
        self._finished.set()
        return True

    # ─── Callbacks ──────────────────────────────────────────────────────

    def _publish(self, state: MonitorState) -> None:
        self._state = state
        self._invoke(self._on_update, state, "on_update")

    def _invoke(self, callback: StateCallback | None, state: MonitorState, name: str) -> None:
        if callback is None:
            return
        try:
            callback(state)
        except Exception:
            self._log.exception("monitor.callback_failed", callback=name)


__all__ = [
    "EMPTY_STATE",
    "JobHandle",
    "JobMonitor",
    "MonitorPhase",
    "MonitorState",
    "StateCallback",
    "StatusFetcher",
]
