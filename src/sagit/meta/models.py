"""Typed metadata records persisted once per commit."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

CSV_COLUMNS: tuple[str, ...] = (
    "commitId",
    "timestamp",
    "files_added",
    "files_modified",
    "files_deleted",
    "structural_types_delta",
    "structural_methods_delta",
)


class MetaSummary(BaseModel):
    """The five per-commit counters. Absent keys decode as 0."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    files_added: int = 0
    files_modified: int = 0
    files_deleted: int = 0
    # Older logs used java_* names for the structural counters.
    structural_types_delta: int = Field(
        default=0,
        validation_alias=AliasChoices("structural_types_delta", "java_types_delta"),
    )
    structural_methods_delta: int = Field(
        default=0,
        validation_alias=AliasChoices("structural_methods_delta", "java_methods_delta"),
    )


class MetaRecord(BaseModel):
    """One line of ``.sagit/meta.jsonl``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    commit_id: str = Field(alias="commitId", min_length=1)
    timestamp: str
    summary: MetaSummary = Field(default_factory=MetaSummary)

    @classmethod
    def for_commit(cls, commit_id: str, commit_time: int, counters: dict[str, int]) -> MetaRecord:
        """Build a record stamped with the commit time in UTC ISO-8601."""
        stamp = datetime.fromtimestamp(commit_time, tz=UTC).isoformat().replace("+00:00", "Z")
        return cls(commit_id=commit_id, timestamp=stamp, summary=MetaSummary(**counters))

    def to_json_line(self) -> str:
        return self.model_dump_json(by_alias=True)

    def to_row(self) -> list[str]:
        s = self.summary
        return [
            self.commit_id,
            self.timestamp,
            str(s.files_added),
            str(s.files_modified),
            str(s.files_deleted),
            str(s.structural_types_delta),
            str(s.structural_methods_delta),
        ]
