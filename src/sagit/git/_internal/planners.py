"""Decision planners that separate "what to diff" from "how to diff it"."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import pygit2

from sagit.git._internal.access import RepoAccess
from sagit.git.models import EMPTY_TREE, TreeRef


class DiffType(Enum):
    """Types of diff operations."""

    EMPTY_TO_TREE = auto()
    TREE_TO_TREE = auto()
    EMPTY_TO_INDEX = auto()
    TREE_TO_INDEX = auto()


@dataclass(frozen=True, slots=True)
class DiffPlan:
    """Plan for executing a diff operation."""

    diff_type: DiffType
    base_sha: str | None = None
    target_sha: str | None = None


class DiffPlanner:
    """Plans and executes diff operations."""

    def __init__(self, access: RepoAccess) -> None:
        self._access = access

    def plan_trees(self, base: TreeRef, target: TreeRef) -> DiffPlan:
        """Plan a tree-to-tree diff. An EMPTY_TREE target has nothing to report."""
        if base is EMPTY_TREE:
            if target is EMPTY_TREE:
                return DiffPlan(DiffType.EMPTY_TO_TREE)
            return DiffPlan(DiffType.EMPTY_TO_TREE, target_sha=str(target))
        if target is EMPTY_TREE:
            return DiffPlan(DiffType.TREE_TO_TREE, base_sha=str(base))
        return DiffPlan(DiffType.TREE_TO_TREE, base_sha=str(base), target_sha=str(target))

    def plan_index(self, base: TreeRef) -> DiffPlan:
        """Plan a tree-to-index diff."""
        if base is EMPTY_TREE:
            return DiffPlan(DiffType.EMPTY_TO_INDEX)
        return DiffPlan(DiffType.TREE_TO_INDEX, base_sha=str(base))

    def plan_staged(self) -> DiffPlan:
        """Plan the staged-changes diff: index against HEAD, or against nothing."""
        head_tree = self._access.head_tree()
        if head_tree is None:
            return DiffPlan(DiffType.EMPTY_TO_INDEX)
        return DiffPlan(DiffType.TREE_TO_INDEX, base_sha=str(head_tree.id))

    def execute(self, plan: DiffPlan) -> pygit2.Diff:
        """Execute a diff plan. All ref resolution is done at plan time."""
        base = (
            self._access.must_tree(plan.base_sha)
            if plan.base_sha is not None
            else self._access.get_empty_tree()
        )

        if plan.diff_type in (DiffType.EMPTY_TO_INDEX, DiffType.TREE_TO_INDEX):
            return self._access.diff_tree_to_index(base)

        target = (
            self._access.must_tree(plan.target_sha)
            if plan.target_sha is not None
            else self._access.get_empty_tree()
        )
        return self._access.diff_trees(base, target)
