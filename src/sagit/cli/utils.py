"""CLI utilities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click

from sagit.config.loader import load_config
from sagit.config.models import SagitConfig
from sagit.core.errors import SagitError
from sagit.git.errors import GitError
from sagit.git.ops import GitOps


def find_repo_root(start_path: Path | None = None) -> Path:
    """Find the git repository root from the given path.

    Walks up the directory tree looking for a .git entry (a directory, or a
    file for linked worktrees).

    Raises:
        click.ClickException: If not inside a git repository
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate

    raise click.ClickException(f"Not inside a git repository: {start_path}")


@dataclass(frozen=True)
class RepoContext:
    """Per-invocation repository handle and resolved configuration."""

    root: Path
    git: GitOps
    config: SagitConfig


def open_repo(start_path: Path | None = None) -> RepoContext:
    """Locate the repository and load its configuration once.

    Config and git failures become one-line click errors.
    """
    root = find_repo_root(start_path)
    try:
        config = load_config(root)
        git = GitOps(root)
    except (SagitError, GitError) as e:
        raise click.ClickException(str(e)) from e
    return RepoContext(root=git.path, git=git, config=config)
