"""Aggregated change summary and classification result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sagit.semantic.models import StructuralDelta


@dataclass(slots=True)
class AggregatedSummary:
    """Counters accumulated over one whole diff.

    Buckets and scopes keep first-seen order.
    """

    files_added: int = 0
    files_modified: int = 0
    files_deleted: int = 0
    structural_delta: StructuralDelta = StructuralDelta.ZERO
    language_buckets: dict[str, int] = field(default_factory=dict)
    directory_buckets: dict[str, int] = field(default_factory=dict)
    scopes: tuple[str, ...] = ()
    records_counted: int = 0

    @property
    def files_total(self) -> int:
        return self.files_added + self.files_modified + self.files_deleted

    def add_scope(self, scope: str) -> None:
        if scope not in self.scopes:
            self.scopes = (*self.scopes, scope)

    def meta_counters(self) -> dict[str, int]:
        """The five counters persisted per commit."""
        return {
            "files_added": self.files_added,
            "files_modified": self.files_modified,
            "files_deleted": self.files_deleted,
            "structural_types_delta": self.structural_delta.type_total,
            "structural_methods_delta": self.structural_delta.methods,
        }

    def to_dict(self, since: str) -> dict[str, Any]:
        """Minimal JSON shape used by ``sagit describe --format json``."""
        return {
            "range": {"since": since, "to": "HEAD"},
            "files": {
                "added": self.files_added,
                "modified": self.files_modified,
                "deleted": self.files_deleted,
            },
            "java_delta": {
                "types": self.structural_delta.type_total,
                "methods": self.structural_delta.methods,
            },
            "by_language": dict(self.language_buckets),
            "by_dir": dict(self.directory_buckets),
        }


@dataclass(frozen=True, slots=True)
class Classification:
    """Conventional-commit style type, scope and headline."""

    type: str
    scope: str
    headline: str

    @property
    def header(self) -> str:
        return f"{self.type}({self.scope}): {self.headline}"
