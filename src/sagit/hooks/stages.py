"""Hook pipeline stages.

Each stage returns a ``Result`` instead of raising. Whatever goes wrong
inside a stage, the commit that triggered the hook must still go through.
"""

from __future__ import annotations

from pathlib import Path

from sagit.changes.aggregator import aggregate
from sagit.changes.classifier import render_message
from sagit.config.constants import META_FILE, SAGIT_DIR
from sagit.config.models import SagitConfig
from sagit.core.logging import get_logger
from sagit.core.result import Result, capture
from sagit.git.models import EMPTY_TREE
from sagit.git.ops import GitOps
from sagit.meta.models import MetaRecord
from sagit.meta.store import MetaStore
from sagit.semantic.analyzer import StructuralAnalyzer
from sagit.semantic.parser import build_parsers

log = get_logger(__name__)


def has_meaningful_content(text: str) -> bool:
    """True if any line is neither blank nor a ``#`` comment."""
    for line in text.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            return True
    return False


def meta_store_for(repo_root: Path) -> MetaStore:
    return MetaStore(repo_root / SAGIT_DIR / META_FILE)


def draft_commit_message(
    repo_path: Path,
    msg_file: Path,
    config: SagitConfig,
) -> Result[bool, Exception]:
    """Write a drafted message into ``msg_file`` unless it already has content.

    Returns:
        Ok(True) when a draft was written, Ok(False) when the existing message
        was kept, Err on any failure.
    """
    return capture(lambda: _draft(repo_path, msg_file, config))


def _draft(repo_path: Path, msg_file: Path, config: SagitConfig) -> bool:
    current = msg_file.read_text(encoding="utf-8") if msg_file.exists() else ""
    if has_meaningful_content(current):
        log.debug("draft_skipped", reason="message has content", file=str(msg_file))
        return False

    git = GitOps(repo_path)
    analyzer = StructuralAnalyzer(git.load_content, build_parsers(config))
    summary = aggregate(git.diff_staged(), analyzer)
    msg_file.write_text(render_message(summary, config.commit_template), encoding="utf-8")
    log.info("draft_written", file=str(msg_file), files=summary.records_counted)
    return True


def record_commit(repo_path: Path, config: SagitConfig) -> Result[MetaRecord | None, Exception]:
    """Append a MetaRecord for HEAD.

    HEAD is diffed against its first parent, or against the empty tree for a
    root commit. Returns Ok(None) when there is no HEAD to record.
    """
    return capture(lambda: _record(repo_path, config))


def _record(repo_path: Path, config: SagitConfig) -> MetaRecord | None:
    git = GitOps(repo_path)
    head = git.head_commit()
    if head is None:
        log.debug("record_skipped", reason="no HEAD")
        return None

    base = git.resolve_tree_or_empty(head.parent_shas[0]) if head.parent_shas else EMPTY_TREE
    analyzer = StructuralAnalyzer(git.load_content, build_parsers(config))
    summary = aggregate(git.diff(base, head.tree_sha), analyzer)

    record = MetaRecord.for_commit(head.sha, head.commit_time, summary.meta_counters())
    meta_store_for(git.path).append(record)
    log.info("commit_recorded", commit=head.short_sha, files=summary.records_counted)
    return record
