"""Offline catalog commands for the lexwatch CLI.

- `lexwatch explain <catalog>` - Classify a status code or phrase without calling the API
- `lexwatch catalogs` - List the registered error catalogs
"""

from __future__ import annotations

import typer

from lexwatch.catalogs import CATALOGS, catalog_names, get_catalog
from lexwatch.core.errors import TransportOutcome, classify
from lexwatch.core.exceptions import CatalogError

from ..helpers import is_verbose
from ..output import console, create_descriptor_panel, create_simple_table, output_error, print_json


def explain(
    catalog: str = typer.Argument(..., help="Catalog name, e.g. legal_basis or extract-articles"),
    status_code: int | None = typer.Option(
        None,
        "--status",
        "-s",
        help="HTTP status code of the failed request",
    ),
    message: str | None = typer.Option(
        None,
        "--message",
        "-m",
        help="Raw error phrase reported by the server",
    ),
    items: list[str] = typer.Option(
        [],
        "--item",
        help="Name of an entity involved in the failure (repeatable)",
    ),
    resend: bool = typer.Option(
        False,
        "--resend",
        help="Render messages that distinguish a resent request",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output the descriptor as JSON",
    ),
) -> None:
    """Show how an error would be presented to the user.

    Examples:
        lexwatch explain legal_basis --status 404 --item "Ley A" --item "Ley B"
        lexwatch explain extract-articles --message "Job was canceled"
        lexwatch explain auth --message "Network Error" --resend --json
    """
    try:
        error_catalog = get_catalog(catalog)
    except CatalogError as e:
        output_error(str(e), hints=["Run 'lexwatch catalogs' to list catalog names."])
        raise typer.Exit(1) from None

    outcome = TransportOutcome(
        http_status_code=status_code,
        server_message=message,
        related_items=tuple(items),
    )
    descriptor = classify(outcome, error_catalog, is_resend=resend)

    if json_output:
        print_json(descriptor.to_dict())
        return
    console.print(create_descriptor_panel(descriptor, verbose=is_verbose()))
    if not is_verbose():
        console.print(f"[dim]{descriptor.kind.value}[/dim]")


def catalogs() -> None:
    """List the registered error catalogs."""
    table = create_simple_table("Catalog", "Phrases", "Kinds")
    for name in catalog_names():
        entry = CATALOGS[name]
        table.add_row(name, str(len(entry.message_to_kind)), str(len(entry.descriptors)))
    console.print(table)


__all__ = ["catalogs", "explain"]
