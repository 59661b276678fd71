"""Per-commit metadata records and their append-only store."""

from sagit.meta.models import CSV_COLUMNS, MetaRecord, MetaSummary
from sagit.meta.store import MetaStore

__all__ = ["CSV_COLUMNS", "MetaRecord", "MetaStore", "MetaSummary"]
