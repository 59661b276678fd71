"""sagit diff command - file counts and structural delta for staged changes."""

from __future__ import annotations

import click

from sagit.changes.aggregator import aggregate
from sagit.cli.utils import open_repo
from sagit.git.errors import GitError
from sagit.semantic.analyzer import StructuralAnalyzer
from sagit.semantic.parser import build_parsers


@click.command()
@click.option("--since", default=None, help="Compare this ref's tree to the index instead of HEAD")
@click.option(
    "--semantic/--no-semantic",
    default=True,
    show_default=True,
    help="Include the Java structural delta",
)
def diff_command(since: str | None, semantic: bool) -> None:
    """Show file counts and Java structural deltas for staged changes."""
    ctx = open_repo()
    analyzer = (
        StructuralAnalyzer(ctx.git.load_content, build_parsers(ctx.config)) if semantic else None
    )
    try:
        if since:
            records = ctx.git.diff_to_index(ctx.git.resolve_tree_or_empty(since))
        else:
            records = ctx.git.diff_staged()
        summary = aggregate(records, analyzer)
    except GitError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Files: +{summary.files_added} ~{summary.files_modified} -{summary.files_deleted}")
    if semantic:
        d = summary.structural_delta
        click.echo(
            f"Java: Δclasses={d.types}, Δinterfaces={d.interfaces}, Δenums={d.enums}, "
            f"Δmethods={d.methods}, Δfields={d.fields}"
        )
