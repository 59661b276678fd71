"""Styled status output for interactive commands.

Data (summaries, JSON, CSV) goes to stdout through ``click.echo``; status
lines and tables go to stderr through a shared Rich console.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from sagit.core.logging import get_logger

_console = Console(stderr=True)

_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}

_STATE_STYLES = {
    "OK": "green",
    "MISSING": "yellow",
    "FOREIGN": "red",
}


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info") -> None:
    """Print a styled status message to stderr."""
    _console.print(f"{_STYLES.get(style, '')}{message}", highlight=False)
    get_logger("cli").debug("status", message=message, style=style)


def state_table(title: str, rows: list[tuple[str, str, str]]) -> Table:
    """Check table: item, detail and a state label such as OK or MISSING."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Check")
    table.add_column("Detail", overflow="fold")
    table.add_column("State")
    for item, detail, state in rows:
        style = _STATE_STYLES.get(state, "dim")
        table.add_row(item, detail, f"[{style}]{state}[/{style}]")
    return table
