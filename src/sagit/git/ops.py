"""Git operations via pygit2 - returns serializable data models."""

from __future__ import annotations

from pathlib import Path

import pygit2

from sagit.git._internal import DiffPlanner, RepoAccess
from sagit.git.errors import NoHeadCommitError
from sagit.git.models import EMPTY_TREE, ChangeRecord, HeadCommit, TreeRef


class GitOps:
    """Thin wrapper around pygit2.Repository for the change pipeline."""

    def __init__(self, repo_path: Path | str) -> None:
        self._access = RepoAccess(repo_path)
        self._diff_planner = DiffPlanner(self._access)

    @property
    def path(self) -> Path:
        """Repository root path."""
        return self._access.path

    @property
    def git_dir(self) -> Path:
        """The .git directory (hooks live under it)."""
        return Path(self._access.repo.path)

    # =========================================================================
    # Ref Resolution
    # =========================================================================

    def resolve_tree(self, ref: str) -> TreeRef | None:
        """Resolve a refish to its tree id, or None if it does not exist."""
        tree = self._access.resolve_tree(ref)
        return str(tree.id) if tree is not None else None

    def resolve_tree_or_empty(self, ref: str) -> TreeRef:
        """Resolve a comparison ref; an unresolvable ref compares as the empty tree."""
        resolved = self.resolve_tree(ref)
        return resolved if resolved is not None else EMPTY_TREE

    def require_head_tree(self, operation: str) -> TreeRef:
        """HEAD's tree id. Raises NoHeadCommitError on an unborn branch."""
        tree = self._access.head_tree()
        if tree is None:
            raise NoHeadCommitError(operation)
        return str(tree.id)

    def head_commit(self) -> HeadCommit | None:
        """Get HEAD commit, or None if unborn."""
        commit = self._access.head_commit()
        return HeadCommit.from_pygit2(commit) if commit else None

    # =========================================================================
    # Diffs
    # =========================================================================

    def diff(self, base: TreeRef, target: TreeRef) -> list[ChangeRecord]:
        """Path-level changes from base to target.

        With base=EMPTY_TREE every path in target is reported as added.
        """
        plan = self._diff_planner.plan_trees(base, target)
        return _records(self._diff_planner.execute(plan))

    def diff_to_index(self, base: TreeRef) -> list[ChangeRecord]:
        """Path-level changes from base to the current index."""
        plan = self._diff_planner.plan_index(base)
        return _records(self._diff_planner.execute(plan))

    def diff_staged(self) -> list[ChangeRecord]:
        """Staged changes: index against HEAD, or against the empty tree if unborn."""
        plan = self._diff_planner.plan_staged()
        return _records(self._diff_planner.execute(plan))

    # =========================================================================
    # Content
    # =========================================================================

    def load_content(self, ref: str) -> bytes:
        """Raw blob bytes for an object id."""
        return self._access.blob_data(ref)


def _records(diff: pygit2.Diff) -> list[ChangeRecord]:
    return [ChangeRecord.from_pygit2(delta) for delta in diff.deltas]
