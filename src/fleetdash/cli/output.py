"""Rendering of backend payloads on the terminal."""

from typing import Any, Optional, Sequence

from rich.console import Console
from rich.table import Table

console = Console()


def print_payload(payload: Any, title: Optional[str] = None) -> None:
    """Print a JSON payload; lists of flat records render as a table."""
    if payload is None:
        console.print("[dim]No content[/dim]")
        return

    if isinstance(payload, list) and payload and all(isinstance(row, dict) for row in payload):
        console.print(records_table(payload, title))
        return

    if title:
        console.print(f"[bold]{title}[/bold]")
    console.print_json(data=payload)


def records_table(rows: Sequence[dict], title: Optional[str] = None) -> Table:
    columns = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)

    table = Table(title=title)
    for column in columns:
        table.add_column(str(column))
    for row in rows:
        table.add_row(*["" if row.get(c) is None else str(row.get(c)) for c in columns])
    return table
