"""Single-pass aggregation of change records into an AggregatedSummary."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePosixPath

from sagit.changes.classifier import scope_from_path
from sagit.changes.models import AggregatedSummary
from sagit.core.logging import get_logger
from sagit.git.models import ChangeKind, ChangeRecord
from sagit.semantic.analyzer import StructuralAnalyzer

log = get_logger(__name__)

# Extension (lowercase, no dot) -> language label
LANGUAGE_LABELS: dict[str, str] = {
    "java": "java",
    "md": "markdown",
    "kt": "kotlin",
    "js": "javascript",
    "ts": "typescript",
    "xml": "xml",
}

OTHER_LANGUAGE = "other"
ROOT_DIR = "."


def language_of(path: str) -> str:
    """Language label for a path; unknown extensions pass through lowercased.

    The extension is the text after the file name's last dot, so dotfiles such
    as ``.gitignore`` are labelled by their name.
    """
    _, dot, ext = PurePosixPath(path).name.rpartition(".")
    ext = ext.lower()
    if not dot or not ext:
        return OTHER_LANGUAGE
    return LANGUAGE_LABELS.get(ext, ext)


def top_dir(path: str) -> str:
    head, sep, _ = path.partition("/")
    return head if sep and head else ROOT_DIR


def aggregate(
    records: Iterable[ChangeRecord],
    analyzer: StructuralAnalyzer | None = None,
) -> AggregatedSummary:
    """Fold change records into one summary.

    Args:
        records: Diff output, in diff order.
        analyzer: When given, structural deltas are summed for every path it
            recognizes. Without it the structural delta stays zero.
    """
    summary = AggregatedSummary()

    for record in records:
        kind = record.kind.counted_as
        if kind is ChangeKind.ADDED:
            summary.files_added += 1
        elif kind is ChangeKind.DELETED:
            summary.files_deleted += 1
        else:
            summary.files_modified += 1
        summary.records_counted += 1

        path = record.path
        lang = language_of(path)
        summary.language_buckets[lang] = summary.language_buckets.get(lang, 0) + 1
        directory = top_dir(path)
        summary.directory_buckets[directory] = summary.directory_buckets.get(directory, 0) + 1
        summary.add_scope(scope_from_path(path))

        if analyzer is not None and analyzer.recognizes(path):
            summary.structural_delta += analyzer.analyze_delta(record)

    log.debug(
        "changes_aggregated",
        records=summary.records_counted,
        added=summary.files_added,
        modified=summary.files_modified,
        deleted=summary.files_deleted,
    )
    return summary
