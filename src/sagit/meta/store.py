"""Append-only JSON-lines log of per-commit metadata.

Single writer assumed: no cross-process locking is done.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from sagit.core.errors import MetaStoreError
from sagit.core.logging import get_logger
from sagit.meta.models import CSV_COLUMNS, MetaRecord

log = get_logger(__name__)


class _Records(Iterable[MetaRecord]):
    """Lazy view over the log. Each iteration re-reads the file from the start."""

    def __init__(self, store: MetaStore) -> None:
        self._store = store

    def __iter__(self) -> Iterator[MetaRecord]:
        return self._store._iter_records()


class MetaStore:
    """Owns ``meta.jsonl`` durability. Records are appended, never rewritten."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def append(self, record: MetaRecord) -> None:
        """Append one newline-terminated record, creating the directory if needed."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8", newline="\n") as f:
                f.write(record.to_json_line() + "\n")
        except OSError as e:
            raise MetaStoreError.io_failure(str(self._path), "append", str(e)) from e
        log.debug("meta_appended", commit=record.commit_id, path=str(self._path))

    def read_all(self) -> Iterable[MetaRecord]:
        """All well-formed records, oldest first. Malformed lines are skipped.

        The returned iterable is lazy and restartable.
        """
        return _Records(self)

    def read_last(self) -> MetaRecord | None:
        last: MetaRecord | None = None
        for record in self.read_all():
            last = record
        return last

    def find(self, commit_id: str) -> MetaRecord | None:
        """Most recent record whose commit id starts with ``commit_id``."""
        if not commit_id:
            return None
        found: MetaRecord | None = None
        for record in self.read_all():
            if record.commit_id.startswith(commit_id):
                found = record
        return found

    def export_rows(self) -> Iterator[list[str]]:
        """CSV header followed by one row per record."""
        yield list(CSV_COLUMNS)
        for record in self.read_all():
            yield record.to_row()

    def write_csv(self, stream: TextIO) -> int:
        """Write the CSV export to ``stream``. Returns the number of records written."""
        writer = csv.writer(stream, lineterminator="\n")
        count = -1
        for row in self.export_rows():
            writer.writerow(row)
            count += 1
        return count

    def _iter_records(self) -> Iterator[MetaRecord]:
        if not self._path.exists():
            return
        try:
            with self._path.open(encoding="utf-8", errors="replace") as f:
                for line_no, line in enumerate(f, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        yield MetaRecord.model_validate_json(line)
                    except ValidationError:
                        log.debug("meta_line_skipped", line=line_no, path=str(self._path))
        except OSError as e:
            raise MetaStoreError.io_failure(str(self._path), "read", str(e)) from e
