"""Git operations module."""

from sagit.git.errors import (
    GitError,
    NoHeadCommitError,
    NotARepositoryError,
    RefNotFoundError,
)
from sagit.git.models import (
    EMPTY_TREE,
    ChangeKind,
    ChangeRecord,
    HeadCommit,
    TreeRef,
)
from sagit.git.ops import GitOps

__all__ = [
    # Main class
    "GitOps",
    # Models
    "EMPTY_TREE",
    "TreeRef",
    "ChangeKind",
    "ChangeRecord",
    "HeadCommit",
    # Errors
    "GitError",
    "NotARepositoryError",
    "RefNotFoundError",
    "NoHeadCommitError",
]
