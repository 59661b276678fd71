"""sagit setup / verify commands - install and check git hooks."""

from __future__ import annotations

import click

from sagit.cli.output import get_console, state_table, status
from sagit.cli.utils import open_repo
from sagit.config.constants import SAGIT_DIR
from sagit.hooks.install import (
    HookState,
    ensure_gitignore,
    hook_status,
    install_hooks,
    optional_files,
)


@click.command()
def setup_command() -> None:
    """Install sagit git hooks and prepare .sagit/."""
    ctx = open_repo()
    hooks_dir = ctx.git.git_dir / "hooks"
    try:
        (ctx.root / SAGIT_DIR).mkdir(exist_ok=True)
        written = install_hooks(hooks_dir)
        gitignore_changed = ensure_gitignore(ctx.root)
    except OSError as e:
        raise click.ClickException(f"setup failed: {e}") from e

    status(f"Installed {len(written)} hook scripts in {hooks_dir}", style="success")
    if gitignore_changed:
        status(f"Added {SAGIT_DIR}/ to .gitignore", style="success")


@click.command()
def verify_command() -> None:
    """Check hook installation and optional config files."""
    ctx = open_repo()
    hooks_dir = ctx.git.git_dir / "hooks"

    rows: list[tuple[str, str, str]] = [
        ("repo root", str(ctx.root), "OK"),
        ("hooks dir", str(hooks_dir), "OK" if hooks_dir.is_dir() else "MISSING"),
    ]
    statuses = hook_status(hooks_dir)
    rows += [(f"hook {h.name}", str(h.path), h.state.value) for h in statuses]
    for name, present in optional_files(ctx.root, ctx.config.impacted_rules).items():
        detail = "present" if present else "optional (not found)"
        rows.append((name, detail, "OK" if present else "-"))

    get_console().print(state_table("Sagit verify", rows))
    if any(h.state is not HookState.INSTALLED for h in statuses):
        status("Run: sagit setup (to install hooks)", style="warning")
