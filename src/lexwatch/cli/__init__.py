"""lexwatch CLI.

Built with Typer. Global options (--verbose, --quiet, --log-*) are handled
by the app callback before any command runs; commands live in
``lexwatch.cli.commands``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from lexwatch import __version__

from . import helpers as helpers
from .commands import cancel, catalogs, explain, pending, send, watch
from .helpers import (
    OutputLevel,
    configure_global_logging,
    set_log_file,
    set_log_format,
    set_log_level,
    set_output_level,
)
from .output import console

# =============================================================================
# Typer app definition
# =============================================================================

app = typer.Typer(
    name="lexwatch",
    help="Monitor background jobs of the legal-basis administration API",
    add_completion=False,
)


# =============================================================================
# Global option callbacks
# =============================================================================


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"lexwatch v{__version__}")
        raise typer.Exit()


def verbose_callback(value: bool) -> None:
    if value:
        set_output_level(OutputLevel.VERBOSE)


def quiet_callback(value: bool) -> None:
    if value:
        set_output_level(OutputLevel.QUIET)


def log_level_callback(value: str | None) -> str | None:
    if value:
        set_log_level(value)
    return value


def log_file_callback(value: Path | None) -> Path | None:
    if value:
        set_log_file(value)
    return value


def log_format_callback(value: str | None) -> str | None:
    if value:
        set_log_format(value)
    return value


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        callback=verbose_callback,
        is_eager=True,
        help="Show error kinds and job ids in output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        callback=quiet_callback,
        is_eager=True,
        help="Show minimal output (errors only)",
    ),
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            "-L",
            callback=log_level_callback,
            help="Logging level (DEBUG, INFO, WARNING, ERROR)",
            envvar="LEXWATCH_LOG_LEVEL",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            callback=log_file_callback,
            help="Path for log file output",
            envvar="LEXWATCH_LOG_FILE",
        ),
    ] = None,
    log_format: Annotated[
        str | None,
        typer.Option(
            "--log-format",
            callback=log_format_callback,
            help="Log format: json, console, or both",
            envvar="LEXWATCH_LOG_FORMAT",
        ),
    ] = None,
) -> None:
    """lexwatch - job progress and error presentation for the legal-basis API."""
    configure_global_logging(console)


# =============================================================================
# Command registration
# =============================================================================

# Job commands
app.command()(watch)
app.command()(send)
app.command()(cancel)
app.command()(pending)

# Offline catalog commands
app.command()(explain)
app.command()(catalogs)


__all__ = [
    "OutputLevel",
    "app",
    "console",
    "main",
]
