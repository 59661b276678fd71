"""sagit meta commands - inspect and export per-commit metadata."""

from __future__ import annotations

import io
import json
from pathlib import Path

import click

from sagit.cli.output import status
from sagit.cli.utils import find_repo_root
from sagit.core.errors import MetaStoreError
from sagit.hooks.stages import meta_store_for

LAST = "last"


@click.group(name="meta")
def meta_group() -> None:
    """Show or export recorded commit metadata."""


@meta_group.command("show")
@click.argument("commit", default=LAST)
def show_command(commit: str) -> None:
    """Pretty-print the record for COMMIT (full or abbreviated id, or 'last')."""
    store = meta_store_for(find_repo_root())
    if not store.exists():
        click.echo("No metadata yet.")
        return

    try:
        record = store.read_last() if commit == LAST else store.find(commit)
    except MetaStoreError as e:
        raise click.ClickException(str(e)) from e

    if record is None:
        click.echo("No metadata." if commit == LAST else "Not found.")
        return
    click.echo(json.dumps(record.model_dump(by_alias=True), indent=2))


@meta_group.command("export")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write CSV to this file instead of stdout",
)
def export_command(output: Path | None) -> None:
    """Export all records as CSV."""
    store = meta_store_for(find_repo_root())
    try:
        if output is None:
            buffer = io.StringIO()
            store.write_csv(buffer)
            click.echo(buffer.getvalue(), nl=False)
            return
        with output.open("w", encoding="utf-8", newline="") as f:
            count = store.write_csv(f)
    except (MetaStoreError, OSError) as e:
        raise click.ClickException(str(e)) from e
    status(f"Exported {count} record(s) to {output}", style="success")
