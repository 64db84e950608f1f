"""Job commands for the lexwatch CLI.

- `lexwatch watch <domain> <job-id>` - Poll a job until it completes or fails
- `lexwatch send <id>...` - Queue legal bases for sending, optionally watching the job
- `lexwatch cancel <job-id>` - Cancel an article extraction
- `lexwatch pending <legal-basis-id>` - Show whether an extraction is in progress
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from types import TracebackType

import typer
from rich.progress import Progress, TaskID

from lexwatch.client import (
    EXTRACT_ARTICLES_DOMAIN,
    SEND_LEGAL_BASIS_DOMAIN,
    JobDomain,
    JobStatusClient,
    PendingJob,
    get_domain,
)
from lexwatch.core.constants import PROCESSING_PLACEHOLDER
from lexwatch.core.errors import ErrorClassifier
from lexwatch.core.exceptions import CatalogError, JobRequestError
from lexwatch.core.logging import get_logger
from lexwatch.core.status import JobStatus
from lexwatch.monitor import JobHandle, JobMonitor, MonitorPhase, MonitorState, describe_state

from ..helpers import create_client, is_quiet, is_verbose, load_cli_config
from ..output import (
    console,
    create_descriptor_panel,
    create_view_panel,
    create_watch_progress,
    output_error,
    print_json,
)

_logger = get_logger("cli.jobs")


# =============================================================================
# Watch machinery
# =============================================================================


class _ProgressTracker:
    """Mirrors published monitor states onto a transient rich progress bar.

    Re-entered once per polling attempt; updates outside an attempt are ignored.
    """

    def __init__(self, label: str) -> None:
        self._label = label
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def __enter__(self) -> _ProgressTracker:
        if not is_quiet():
            self._progress = create_watch_progress()
            self._progress.start()
            self._task_id = self._progress.add_task(
                f"{self._label}: {PROCESSING_PLACEHOLDER}", total=100
            )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None

    def update(self, state: MonitorState) -> None:
        if self._progress is None or self._task_id is None:
            return
        view = describe_state(state)
        self._progress.update(
            self._task_id,
            description=f"{self._label}: {view.body}",
            completed=view.progress or 0,
        )


async def _watch_job(
    client: JobStatusClient,
    domain: JobDomain,
    handle: JobHandle,
    *,
    allow_retry: bool,
) -> MonitorState:
    """Run a monitor to a terminal state, prompting to retry network errors."""
    tracker = _ProgressTracker(domain.name)
    monitor = JobMonitor(client, domain, on_update=tracker.update)
    monitor.start(handle)
    try:
        while True:
            with tracker:
                state = await monitor.wait_finished()
            if monitor.phase is not MonitorPhase.ERRORED or state.error is None:
                return state

            console.print(create_descriptor_panel(state.error, verbose=is_verbose()))
            if not (allow_retry and state.error.retryable):
                return state
            if not await asyncio.to_thread(typer.confirm, "¿Reintentar?", default=True):
                return state
            monitor.retry()
    finally:
        monitor.cancel()


def _report_completion(state: MonitorState, job_id: str) -> int:
    """Print the final view of a completed job and return the exit code."""
    if state.status is not JobStatus.COMPLETED:
        return 1
    if not is_quiet():
        console.print(create_view_panel(describe_state(state)))
        if is_verbose():
            console.print(f"[dim]job {job_id}: {state.status.value}[/dim]")
    return 0


def _resolve_domain(name: str) -> JobDomain:
    try:
        return get_domain(name)
    except CatalogError as e:
        output_error(str(e))
        raise typer.Exit(1) from None


# =============================================================================
# CLI Commands
# =============================================================================


def watch(
    domain: str = typer.Argument(
        ...,
        help="Job type: send-legal-basis, extract-articles or req-identify",
    ),
    job_id: str = typer.Argument(..., help="Job ID returned when the job was queued"),
    interval: float | None = typer.Option(
        None,
        "--interval",
        "-i",
        min=0.001,
        help="Seconds between status requests (default: from config, 5.0)",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a lexwatch YAML config file",
        envvar="LEXWATCH_CONFIG",
    ),
    no_retry: bool = typer.Option(
        False,
        "--no-retry",
        help="Exit on network errors instead of offering to retry",
    ),
) -> None:
    """Poll a background job until it completes or fails.

    Shows the job's progress and status message. Network errors can be
    retried in place; any other error ends the command with exit code 1.

    Examples:
        lexwatch watch extract-articles 42
        lexwatch watch send-legal-basis 17 --interval 2
    """
    job_domain = _resolve_domain(domain)
    config = load_cli_config(config_file, console)
    poll_interval = interval if interval is not None else config.monitor.poll_interval_seconds
    client = create_client(config, console)

    async def _run() -> MonitorState:
        async with client:
            return await _watch_job(
                client,
                job_domain,
                JobHandle(job_id=job_id, poll_interval_seconds=poll_interval),
                allow_retry=not no_retry,
            )

    try:
        state = asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("[yellow]Stopped watching.[/yellow]")
        raise typer.Exit(130) from None

    code = _report_completion(state, job_id)
    if code:
        raise typer.Exit(code)


def send(
    legal_basis_ids: list[int] = typer.Argument(..., help="Legal basis IDs to send"),
    watch_job: bool = typer.Option(
        False,
        "--watch",
        "-W",
        help="Watch the created job until it finishes",
    ),
    interval: float | None = typer.Option(
        None,
        "--interval",
        "-i",
        min=0.001,
        help="Seconds between status requests when watching",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a lexwatch YAML config file",
        envvar="LEXWATCH_CONFIG",
    ),
) -> None:
    """Queue legal bases for sending.

    Prints the created job ID; with --watch, follows the job to completion.

    Examples:
        lexwatch send 1 2 3
        lexwatch send 7 --watch
    """
    config = load_cli_config(config_file, console)
    client = create_client(config, console)
    classifier = ErrorClassifier(SEND_LEGAL_BASIS_DOMAIN.error_catalog)
    poll_interval = interval if interval is not None else config.monitor.poll_interval_seconds

    async def _run() -> tuple[str, MonitorState | None]:
        async with client:
            job_id = await client.send_legal_basis(legal_basis_ids)
            if not is_quiet():
                console.print(f"[green]Job created:[/green] {job_id}")
            if not watch_job:
                return job_id, None
            state = await _watch_job(
                client,
                SEND_LEGAL_BASIS_DOMAIN,
                JobHandle(job_id=job_id, poll_interval_seconds=poll_interval),
                allow_retry=True,
            )
            return job_id, state

    try:
        job_id, state = asyncio.run(_run())
    except JobRequestError as e:
        console.print(create_descriptor_panel(classifier.classify_exception(e), verbose=is_verbose()))
        raise typer.Exit(1) from None

    if is_quiet() and not watch_job:
        console.print(job_id)
    if state is not None:
        code = _report_completion(state, job_id)
        if code:
            raise typer.Exit(code)


def cancel(
    job_id: str = typer.Argument(..., help="Article extraction job ID"),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a lexwatch YAML config file",
        envvar="LEXWATCH_CONFIG",
    ),
) -> None:
    """Cancel an article extraction job."""
    config = load_cli_config(config_file, console)
    client = create_client(config, console)
    classifier = ErrorClassifier(EXTRACT_ARTICLES_DOMAIN.error_catalog)

    async def _run() -> None:
        async with client:
            await client.cancel_extraction(job_id)

    try:
        asyncio.run(_run())
    except JobRequestError as e:
        console.print(create_descriptor_panel(classifier.classify_exception(e), verbose=is_verbose()))
        raise typer.Exit(1) from None

    _logger.debug("cli.extraction_cancelled", job_id=job_id)
    if not is_quiet():
        console.print(f"[green]Extraction job {job_id} cancelled.[/green]")


def pending(
    legal_basis_id: int = typer.Argument(..., help="Legal basis ID"),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON for machine parsing",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a lexwatch YAML config file",
        envvar="LEXWATCH_CONFIG",
    ),
) -> None:
    """Show whether a legal basis has an article extraction in progress."""
    config = load_cli_config(config_file, console)
    client = create_client(config, console)
    classifier = ErrorClassifier(EXTRACT_ARTICLES_DOMAIN.error_catalog)

    async def _run() -> PendingJob:
        async with client:
            return await client.get_extraction_status(legal_basis_id)

    try:
        result = asyncio.run(_run())
    except JobRequestError as e:
        console.print(create_descriptor_panel(classifier.classify_exception(e), verbose=is_verbose()))
        raise typer.Exit(1) from None

    if json_output:
        print_json({
            "legal_basis_id": legal_basis_id,
            "has_pending_jobs": result.has_pending_jobs,
            "job_id": result.job_id,
        })
        return

    if result.has_pending_jobs:
        console.print(
            f"Legal basis {legal_basis_id} has an extraction in progress "
            f"(job [bold]{result.job_id}[/bold])."
        )
    else:
        console.print(f"Legal basis {legal_basis_id} has no extraction in progress.")


__all__ = ["cancel", "pending", "send", "watch"]
