"""sagit impacted command - list tests likely affected by recent changes."""

from __future__ import annotations

import click

from sagit.cli.utils import open_repo
from sagit.core.logging import get_logger
from sagit.git.errors import GitError
from sagit.impact.resolver import resolve_impacted
from sagit.impact.rules import load_rules

log = get_logger(__name__)

NO_TESTS_MESSAGE = "(no obvious tests)"


@click.command()
@click.option(
    "--since", default="HEAD~1", show_default=True, help="Compare this ref's tree to HEAD"
)
@click.option(
    "--only-existing",
    "--only-changed-tests",
    "only_existing",
    is_flag=True,
    help="Only list tests that exist in the work tree",
)
def impacted_command(since: str, only_existing: bool) -> None:
    """List likely impacted tests for changes between SINCE and HEAD.

    Rules from the configured rule file (default .sagit/tests.map) are tried
    first; otherwise src/main/java/X.java maps to src/test/java/XTest.java.
    """
    ctx = open_repo()
    try:
        head_tree = ctx.git.require_head_tree("impacted")
        records = ctx.git.diff(ctx.git.resolve_tree_or_empty(since), head_tree)
    except GitError as e:
        raise click.ClickException(str(e)) from e

    rules = load_rules(ctx.config.rules_path(ctx.root))
    tests = resolve_impacted(
        (r.path for r in records),
        rules,
        repo_root=ctx.root,
        only_existing=only_existing,
    )
    log.debug("impacted_resolved", changed=len(records), tests=len(tests), rules=len(rules))

    if not tests:
        click.echo(NO_TESTS_MESSAGE)
        return
    for test in tests:
        click.echo(test)
