"""sagit describe command - summarize changes since a ref."""

from __future__ import annotations

import json

import click

from sagit.changes.aggregator import aggregate
from sagit.changes.models import AggregatedSummary
from sagit.cli.utils import open_repo
from sagit.git.errors import GitError
from sagit.semantic.analyzer import StructuralAnalyzer
from sagit.semantic.parser import build_parsers


def render_markdown(summary: AggregatedSummary, since: str) -> str:
    lines = [
        "# Change Summary",
        f"- Range: `{since}` → `HEAD`",
        f"- Files: +{summary.files_added} ~{summary.files_modified} -{summary.files_deleted}",
        f"- Java Δ: types={summary.structural_delta.type_total}, "
        f"methods={summary.structural_delta.methods}",
    ]
    if summary.language_buckets:
        lines += ["", "## Files by language"]
        lines += [f"- {label}: {count}" for label, count in summary.language_buckets.items()]
    if summary.directory_buckets:
        lines += ["", "## Top-level directories touched"]
        lines += [f"- {label}: {count}" for label, count in summary.directory_buckets.items()]
    return "\n".join(lines)


@click.command()
@click.option(
    "--since", default="HEAD~1", show_default=True, help="Compare this ref's tree to HEAD"
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["md", "json"], case_sensitive=False),
    default="md",
    show_default=True,
    help="Output format",
)
def describe_command(since: str, output_format: str) -> None:
    """Summarize what changed between SINCE and HEAD.

    A ref that does not resolve (e.g. HEAD~1 on the first commit) is compared
    as an empty tree, so every file counts as added.
    """
    ctx = open_repo()
    try:
        head_tree = ctx.git.require_head_tree("describe")
        base = ctx.git.resolve_tree_or_empty(since)
        analyzer = StructuralAnalyzer(ctx.git.load_content, build_parsers(ctx.config))
        summary = aggregate(ctx.git.diff(base, head_tree), analyzer)
    except GitError as e:
        raise click.ClickException(str(e)) from e

    if output_format.lower() == "json":
        click.echo(json.dumps(summary.to_dict(since), indent=2))
    else:
        click.echo(render_markdown(summary, since))
