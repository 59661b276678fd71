"""Commit classification: scope labels, type inference and message rendering.

Everything here is a pure function of its inputs.
"""

from __future__ import annotations

from sagit.changes.models import AggregatedSummary, Classification
from sagit.config.constants import (
    DEFAULT_SCOPE,
    DOCS_EXTENSION,
    DOCS_ROOT,
    EMPTY_SCOPE,
    SOURCE_ROOT,
    TEST_ROOT,
)

DOCS_SCOPE = "docs"
TEST_SCOPE = "test"

HEADLINES: dict[str, str] = {
    "fix": "fix issue in {scope}",
    "docs": "update docs",
    "test": "update tests",
    "refactor": "refactor {scope}",
    "feat": "add/update {scope}",
    "chore": "add/update {scope}",
}

TRAILER = (
    "[sagit] files: +{added} ~{modified} -{deleted}; "
    "java delta: types={types}, methods={methods}"
)


def scope_from_path(path: str) -> str:
    """Short label for the area of the codebase a path belongs to."""
    if path.startswith(TEST_ROOT):
        return TEST_SCOPE
    if path.startswith(DOCS_ROOT) or path.endswith(DOCS_EXTENSION):
        return DOCS_SCOPE
    if path.startswith(SOURCE_ROOT):
        segment, sep, _ = path[len(SOURCE_ROOT) :].partition("/")
        if sep and segment:
            return segment.replace(".", "-")
        return DEFAULT_SCOPE
    return path.split("/", 1)[0]


def infer_type(summary: AggregatedSummary) -> str:
    """docs > test > refactor > feat > chore, first match wins."""
    scopes = summary.scopes
    if scopes and all(s == DOCS_SCOPE for s in scopes):
        return "docs"
    if scopes and all(s == TEST_SCOPE for s in scopes):
        return "test"
    if summary.files_deleted > 0 and summary.files_added == 0:
        return "refactor"
    if summary.files_added > 0:
        return "feat"
    return "chore"


def scope_label(summary: AggregatedSummary) -> str:
    return ",".join(summary.scopes) if summary.scopes else EMPTY_SCOPE


def classify(summary: AggregatedSummary) -> Classification:
    commit_type = infer_type(summary)
    scope = scope_label(summary)
    return Classification(
        type=commit_type,
        scope=scope,
        headline=HEADLINES[commit_type].format(scope=scope),
    )


def render_message(summary: AggregatedSummary, template: str | None = None) -> str:
    """Draft commit message: header, blank line, machine-readable trailer.

    Args:
        summary: Aggregated staged changes.
        template: Optional header format using ``{type}``, ``{scope}`` and
            ``{headline}``. Replaces the default ``type(scope): headline``.
    """
    c = classify(summary)
    if template:
        header = template.format(type=c.type, scope=c.scope, headline=c.headline)
    else:
        header = c.header
    trailer = TRAILER.format(
        added=summary.files_added,
        modified=summary.files_modified,
        deleted=summary.files_deleted,
        types=summary.structural_delta.type_total,
        methods=summary.structural_delta.methods,
    )
    return f"{header}\n\n{trailer}\n"
