"""Shared utilities for lexwatch CLI commands.

This module contains helpers used across command modules:
- Output verbosity
- Logging configuration from global options and config files
- Config loading and client construction
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal

import typer
from rich.console import Console

from lexwatch.client import JobStatusClient
from lexwatch.core.config import LexwatchConfig, LoggingConfig, load_config
from lexwatch.core.exceptions import ConfigurationError
from lexwatch.core.logging import configure_logging, get_logger

_logger = get_logger("cli")


# =============================================================================
# Output level management
# =============================================================================


class OutputLevel(str, Enum):
    """Output verbosity level."""

    QUIET = "quiet"  # Errors only
    NORMAL = "normal"
    VERBOSE = "verbose"  # Adds kinds, ids and timings


_output_level: OutputLevel = OutputLevel.NORMAL


def get_output_level() -> OutputLevel:
    return _output_level


def set_output_level(level: OutputLevel) -> None:
    global _output_level
    _output_level = level


def is_verbose() -> bool:
    return _output_level == OutputLevel.VERBOSE


def is_quiet() -> bool:
    return _output_level == OutputLevel.QUIET


# =============================================================================
# Logging configuration
# =============================================================================


@dataclass
class CliLoggingConfig:
    """CLI logging state assembled from global options.

    ``overridden`` records that a flag or environment variable set a value,
    in which case the config file's logging section is ignored.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: Path | None = None
    format: Literal["json", "console", "both"] = "console"
    configured: bool = False
    overridden: bool = False


_log_config = CliLoggingConfig()


def set_log_level(level: str) -> None:
    _log_config.level = level.upper()  # type: ignore[assignment]
    _log_config.overridden = True


def set_log_file(path: Path | None) -> None:
    """Set the log file path.

    Logs go to the file in console format unless --log-format says
    otherwise; rich CLI output still goes to the terminal.
    """
    _log_config.file = path
    if path:
        _log_config.format = "console"
        _log_config.overridden = True


def set_log_format(fmt: str) -> None:
    _log_config.format = fmt.lower()  # type: ignore[assignment]
    _log_config.overridden = True


def _apply_logging(console: Console) -> None:
    try:
        configure_logging(
            level=_log_config.level,
            format=_log_config.format,
            file_path=_log_config.file,
        )
    except ValueError as e:
        # e.g. format="both" without a file
        console.print(f"[red]Logging configuration error:[/red] {e}")
        raise typer.Exit(1) from None
    _log_config.configured = True


def configure_global_logging(console: Console) -> None:
    """Configure logging from global CLI options, once per session.

    Raises:
        typer.Exit: If the logging options are inconsistent.
    """
    if _log_config.configured:
        return
    _apply_logging(console)


def apply_config_logging(settings: LoggingConfig, console: Console) -> None:
    """Reconfigure logging from a config file unless flags already chose."""
    if _log_config.overridden:
        return
    _log_config.level = settings.level
    _log_config.format = settings.format
    _log_config.file = settings.file
    _apply_logging(console)


def reset_logging_state() -> None:
    """Reset logging state (for tests)."""
    global _log_config
    _log_config = CliLoggingConfig()


# =============================================================================
# Config and client helpers
# =============================================================================


def load_cli_config(config_file: Path | None, console: Console) -> LexwatchConfig:
    """Load configuration for a command, exiting with code 1 on failure."""
    try:
        config = load_config(config_file)
    except ConfigurationError as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        raise typer.Exit(1) from None
    apply_config_logging(config.logging, console)
    return config


def create_client(config: LexwatchConfig, console: Console) -> JobStatusClient:
    """Build the API client, exiting with code 1 when no token is available."""
    try:
        return JobStatusClient.from_config(config.api)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None


__all__ = [
    "CliLoggingConfig",
    "OutputLevel",
    "apply_config_logging",
    "configure_global_logging",
    "create_client",
    "get_output_level",
    "is_quiet",
    "is_verbose",
    "load_cli_config",
    "reset_logging_state",
    "set_log_file",
    "set_log_format",
    "set_log_level",
    "set_output_level",
]
