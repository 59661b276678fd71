"""Repository access layer - owns pygit2.Repository and exposes computed facts."""

from __future__ import annotations

import os
from pathlib import Path

import pygit2

from sagit.git._internal.constants import FIND_SIMILAR_FLAGS
from sagit.git.errors import NotARepositoryError, RefNotFoundError


class RepoAccess:
    """Owns pygit2.Repository and provides normalized access to repo state."""

    def __init__(self, repo_path: Path | str) -> None:
        self._path = Path(repo_path)
        discovered = pygit2.discover_repository(str(self._path))
        if discovered is None:
            raise NotARepositoryError(str(self._path))
        try:
            self._repo = pygit2.Repository(discovered)
        except pygit2.GitError as e:
            raise NotARepositoryError(str(self._path)) from e

    @property
    def repo(self) -> pygit2.Repository:
        return self._repo

    @property
    def path(self) -> Path:
        return Path(self._repo.workdir) if self._repo.workdir else self._path

    @property
    def index(self) -> pygit2.Index:
        """The index git is committing from.

        During `git commit -a` or `git commit <paths>` git points hooks at a
        temporary index through GIT_INDEX_FILE.
        """
        override = os.environ.get("GIT_INDEX_FILE")
        if override:
            index_path = Path(override)
            if not index_path.is_absolute():
                index_path = self.path / index_path
            if index_path.is_file():
                return pygit2.Index(str(index_path))
        return self._repo.index  # type: ignore[no-any-return]

    # =========================================================================
    # Repository State Facts
    # =========================================================================

    @property
    def is_unborn(self) -> bool:
        return self._repo.head_is_unborn

    def head_commit(self) -> pygit2.Commit | None:
        if self.is_unborn:
            return None
        return self._repo.head.peel(pygit2.Commit)

    def head_tree(self) -> pygit2.Tree | None:
        if self.is_unborn:
            return None
        return self._repo.head.peel(pygit2.Tree)

    # =========================================================================
    # Resolution Helpers
    # =========================================================================

    def resolve_tree(self, ref: str) -> pygit2.Tree | None:
        """Rev-parse any refish (HEAD~1, branch, sha) and peel it to a tree."""
        try:
            obj = self._repo.revparse_single(ref)
            return obj.peel(pygit2.Tree)
        except (pygit2.GitError, KeyError, ValueError):
            return None

    def must_tree(self, sha: str) -> pygit2.Tree:
        try:
            obj = self._repo.get(sha)
        except ValueError as e:
            raise RefNotFoundError(sha) from e
        if obj is None:
            raise RefNotFoundError(sha)
        try:
            return obj.peel(pygit2.Tree)
        except (pygit2.GitError, ValueError) as e:
            raise RefNotFoundError(f"{sha} is not a tree") from e

    def get_empty_tree(self) -> pygit2.Tree:
        """Get an empty tree for diff operations (first commit, unborn index)."""
        builder = self._repo.TreeBuilder()
        empty_tree_oid = builder.write()
        return self._repo.get(empty_tree_oid)  # type: ignore[return-value]

    # =========================================================================
    # Low-level pygit2 Operations (all pygit2 quirks live here)
    # =========================================================================

    def diff_trees(self, old: pygit2.Tree, new: pygit2.Tree) -> pygit2.Diff:
        diff = old.diff_to_tree(new)
        diff.find_similar(flags=FIND_SIMILAR_FLAGS)
        return diff

    def diff_tree_to_index(self, old: pygit2.Tree) -> pygit2.Diff:
        diff = old.diff_to_index(self.index)
        diff.find_similar(flags=FIND_SIMILAR_FLAGS)
        return diff

    def blob_data(self, sha: str) -> bytes:
        try:
            obj = self._repo.get(sha)
        except ValueError as e:
            raise RefNotFoundError(sha) from e
        if not isinstance(obj, pygit2.Blob):
            raise RefNotFoundError(f"{sha} is not a blob")
        return obj.data
