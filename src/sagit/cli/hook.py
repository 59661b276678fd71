"""sagit hook commands - entry points invoked by the installed git hooks.

These commands always exit 0. Stage failures are logged to .sagit/hook.log
and discarded so the commit is never blocked.
"""

from __future__ import annotations

from pathlib import Path

import click

from sagit.cli.utils import find_repo_root
from sagit.config.constants import HOOK_LOG_FILE, SAGIT_DIR
from sagit.config.loader import load_config
from sagit.config.models import LoggingConfig, LogOutputConfig, SagitConfig
from sagit.core.errors import ConfigError
from sagit.core.logging import configure_logging, get_logger
from sagit.core.result import Err, Result
from sagit.hooks.stages import draft_commit_message, record_commit

log = get_logger(__name__)


def _hook_config(repo_root: Path) -> SagitConfig:
    try:
        return load_config(repo_root)
    except ConfigError as e:
        log.warning("hook_config_ignored", **e.to_dict())
    except Exception as e:  # noqa: BLE001
        log.warning("hook_config_ignored", error=str(e), error_type=type(e).__name__)
    return SagitConfig()


def _configure_hook_logging(repo_root: Path, config: SagitConfig, verbose: bool) -> None:
    """Console warnings plus JSON lines in .sagit/hook.log."""
    log_file = (repo_root / SAGIT_DIR / HOOK_LOG_FILE).resolve()
    file_level = "DEBUG" if verbose else "INFO"
    configure_logging(
        config=LoggingConfig(
            level="DEBUG" if verbose else config.logging.level,
            outputs=[
                LogOutputConfig(format="console", destination="stderr", level="WARNING"),
                LogOutputConfig(format="json", destination=str(log_file), level=file_level),
            ],
        )
    )


def _prepare(ctx: click.Context) -> tuple[Path, SagitConfig] | None:
    """Repository root and config for a hook run, or None outside a repository."""
    try:
        repo_root = find_repo_root()
    except click.ClickException as e:
        log.warning("hook_outside_repository", error=e.message)
        return None
    config = _hook_config(repo_root)
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    try:
        _configure_hook_logging(repo_root, config, verbose)
    except Exception as e:  # noqa: BLE001
        log.warning("hook_log_unavailable", error=str(e))
    return repo_root, config


def _report(stage: str, result: Result[object, Exception]) -> None:
    if isinstance(result, Err):
        log.error(
            "hook_stage_failed",
            stage=stage,
            error=str(result.error),
            error_type=type(result.error).__name__,
        )
    else:
        log.debug("hook_stage_done", stage=stage, value=repr(result.value))


@click.group(name="hook")
def hook_group() -> None:
    """Internal git hook entry points."""


@hook_group.command("prepare-commit-msg")
@click.argument("msg_file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("source", required=False)
@click.argument("sha", required=False)
@click.pass_context
def prepare_commit_msg_command(
    ctx: click.Context, msg_file: Path, source: str | None, sha: str | None
) -> None:
    """Draft a commit message before the editor opens."""
    prepared = _prepare(ctx)
    if prepared is None:
        return
    repo_root, config = prepared
    log.debug("hook_invoked", hook="prepare-commit-msg", source=source, sha=sha)
    _report("draft_commit_message", draft_commit_message(repo_root, msg_file, config))


@hook_group.command("commit-msg")
@click.argument("msg_file", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def commit_msg_command(ctx: click.Context, msg_file: Path) -> None:
    """Draft a commit message if the submitted one is empty."""
    prepared = _prepare(ctx)
    if prepared is None:
        return
    repo_root, config = prepared
    log.debug("hook_invoked", hook="commit-msg")
    _report("draft_commit_message", draft_commit_message(repo_root, msg_file, config))


@hook_group.command("post-commit")
@click.pass_context
def post_commit_command(ctx: click.Context) -> None:
    """Append metadata for the commit just made."""
    prepared = _prepare(ctx)
    if prepared is None:
        return
    repo_root, config = prepared
    log.debug("hook_invoked", hook="post-commit")
    _report("record_commit", record_commit(repo_root, config))
