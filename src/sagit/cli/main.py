"""sagit CLI - semantic change intelligence for git."""

import click

from sagit import __version__
from sagit.cli.describe import describe_command
from sagit.cli.diff import diff_command
from sagit.cli.hook import hook_group
from sagit.cli.impacted import impacted_command
from sagit.cli.meta import meta_group
from sagit.cli.setup import setup_command, verify_command
from sagit.core.logging import configure_logging, set_invocation_id


@click.group()
@click.version_option(version=__version__, prog_name="sagit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Sagit - semantic change summaries, commit drafts and test impact for git."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    set_invocation_id()
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(describe_command, name="describe")
cli.add_command(diff_command, name="diff")
cli.add_command(impacted_command, name="impacted")
cli.add_command(meta_group, name="meta")
cli.add_command(setup_command, name="setup")
cli.add_command(verify_command, name="verify")
cli.add_command(hook_group, name="hook")


if __name__ == "__main__":
    cli()
