"""Internal components for git operations - not part of public API."""

from sagit.git._internal.access import RepoAccess
from sagit.git._internal.planners import DiffPlan, DiffPlanner, DiffType

__all__ = [
    "DiffPlan",
    "DiffPlanner",
    "DiffType",
    "RepoAccess",
]
