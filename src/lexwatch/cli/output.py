"""Rich output formatting for the lexwatch CLI.

Centralizes the console, tone colors, the progress bar used by ``watch``,
and the panels that render error descriptors and monitor views.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from lexwatch.core.errors import ErrorDescriptor
from lexwatch.monitor.view import MonitorView, Tone

# =============================================================================
# Shared console instance
# =============================================================================

console = Console()


# =============================================================================
# Colors
# =============================================================================

TONE_COLORS: dict[Tone, str] = {
    Tone.INFO: "blue",
    Tone.SUCCESS: "green",
    Tone.DANGER: "red",
}


def tone_color(tone: Tone) -> str:
    return TONE_COLORS.get(tone, "white")


# =============================================================================
# Progress
# =============================================================================


def create_watch_progress(console_instance: Console | None = None) -> Progress:
    """Progress bar for a watched job: spinner, message, bar, percentage, elapsed."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(bar_width=30),
        TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        TextColumn("•"),
        TimeElapsedColumn(),
        console=console_instance or console,
        transient=True,
    )


# =============================================================================
# Panels and tables
# =============================================================================


def create_descriptor_panel(descriptor: ErrorDescriptor, *, verbose: bool = False) -> Panel:
    """Panel for a classified error; retryable errors get a yellow border."""
    lines = [descriptor.message or "[dim](sin mensaje)[/dim]"]
    if verbose:
        lines.append("")
        lines.append(f"[dim]kind: {descriptor.kind.value}[/dim]")
        lines.append(f"[dim]retryable: {descriptor.retryable}[/dim]")
    border = "yellow" if descriptor.retryable else "red"
    return Panel("\n".join(lines), title=descriptor.title, border_style=border)


def create_view_panel(view: MonitorView) -> Panel:
    """Panel for a terminal monitor view."""
    body = view.body
    if view.progress is not None:
        body = f"{body}\n\n[dim]{view.progress}%[/dim]"
    if view.actions:
        actions = ", ".join(action.value for action in view.actions)
        body = f"{body}\n[dim]actions: {actions}[/dim]"
    return Panel(body, title=view.title, border_style=tone_color(view.tone))


def create_simple_table(*columns: str) -> Table:
    table = Table(show_header=bool(columns), box=None, pad_edge=False)
    for column in columns:
        table.add_column(column)
    return table


# =============================================================================
# Plain output
# =============================================================================


def print_json(data: Any, console_instance: Console | None = None) -> None:
    """Print JSON without markup processing or line wrapping."""
    out = console_instance or console
    out.print(
        json.dumps(data, indent=2, ensure_ascii=False),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def output_error(
    message: str,
    *,
    hints: list[str] | None = None,
    console_instance: Console | None = None,
) -> None:
    """Print a red error line followed by optional dim hints."""
    out = console_instance or console
    out.print(f"[red]Error:[/red] {message}")
    if hints:
        out.print()
        out.print("[dim]Hints:[/dim]")
        for hint in hints:
            out.print(f"  - {hint}")


__all__ = [
    "TONE_COLORS",
    "console",
    "create_descriptor_panel",
    "create_simple_table",
    "create_view_panel",
    "create_watch_progress",
    "output_error",
    "print_json",
    "tone_color",
]
