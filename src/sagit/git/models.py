"""Serializable data models for tree diffs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

import pygit2


class ChangeKind(Enum):
    """Path-level change kind reported by a tree diff."""

    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    COPIED = "copied"

    @property
    def counted_as(self) -> ChangeKind:
        """Renames and copies are counted as modifications."""
        if self in (ChangeKind.RENAMED, ChangeKind.COPIED):
            return ChangeKind.MODIFIED
        return self


_DELTA_KIND_MAP: dict[int, ChangeKind] = {
    pygit2.GIT_DELTA_ADDED: ChangeKind.ADDED,
    pygit2.GIT_DELTA_DELETED: ChangeKind.DELETED,
    pygit2.GIT_DELTA_MODIFIED: ChangeKind.MODIFIED,
    pygit2.GIT_DELTA_RENAMED: ChangeKind.RENAMED,
    pygit2.GIT_DELTA_COPIED: ChangeKind.COPIED,
}


class _EmptyTree:
    """Sentinel for "the side of the diff that contains no files"."""

    _instance: _EmptyTree | None = None

    def __new__(cls) -> _EmptyTree:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY_TREE"


EMPTY_TREE: Final = _EmptyTree()

# A resolved tree object id (hex) or EMPTY_TREE.
TreeRef = str | _EmptyTree


def _ref_or_none(oid: pygit2.Oid | None) -> str | None:
    if oid is None:
        return None
    sha = str(oid)
    # All-zero ids mark the absent side of an add/delete.
    return sha if sha.strip("0") else None


@dataclass(frozen=True, slots=True)
class ChangeRecord:
    """One touched path in a diff between two tree snapshots."""

    kind: ChangeKind
    old_path: str | None = None
    new_path: str | None = None
    old_ref: str | None = None
    new_ref: str | None = None

    def __post_init__(self) -> None:
        if self.old_path is None and self.new_path is None:
            raise ValueError("ChangeRecord needs at least one path")
        if self.kind is ChangeKind.DELETED and self.new_path is not None:
            raise ValueError("Deleted record cannot carry a new path")
        if self.kind is ChangeKind.ADDED and self.old_path is not None:
            raise ValueError("Added record cannot carry an old path")

    @property
    def path(self) -> str:
        """Representative path: the old path for deletions, otherwise the new one."""
        if self.kind is ChangeKind.DELETED:
            return self.old_path  # type: ignore[return-value]
        return self.new_path or self.old_path  # type: ignore[return-value]

    @classmethod
    def from_pygit2(cls, delta: pygit2.DiffDelta) -> ChangeRecord:
        kind = _DELTA_KIND_MAP.get(delta.status, ChangeKind.MODIFIED)
        old_path = delta.old_file.path if kind is not ChangeKind.ADDED else None
        new_path = delta.new_file.path if kind is not ChangeKind.DELETED else None
        return cls(
            kind=kind,
            old_path=old_path,
            new_path=new_path,
            old_ref=_ref_or_none(delta.old_file.id) if kind is not ChangeKind.ADDED else None,
            new_ref=_ref_or_none(delta.new_file.id) if kind is not ChangeKind.DELETED else None,
        )


@dataclass(frozen=True, slots=True)
class HeadCommit:
    """HEAD commit facts needed by the post-commit pipeline."""

    sha: str
    parent_shas: tuple[str, ...]
    tree_sha: str
    commit_time: int

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @classmethod
    def from_pygit2(cls, commit: pygit2.Commit) -> HeadCommit:
        return cls(
            sha=str(commit.id),
            parent_shas=tuple(str(p) for p in commit.parent_ids),
            tree_sha=str(commit.tree_id),
            commit_time=commit.commit_time,
        )
