"""Per-record structural delta."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import PurePosixPath

from sagit.core.logging import get_logger
from sagit.git.models import ChangeKind, ChangeRecord
from sagit.semantic.models import StructuralDelta
from sagit.semantic.parser import StructuralParser

log = get_logger(__name__)

ContentLoader = Callable[[str], bytes]


class StructuralAnalyzer:
    """Computes after-minus-before declaration counts for one changed path.

    Args:
        content_loader: Returns the raw bytes of a blob given its object id.
        parsers: Source suffix (e.g. ".java") to parser.
    """

    def __init__(
        self, content_loader: ContentLoader, parsers: Mapping[str, StructuralParser]
    ) -> None:
        self._load = content_loader
        self._parsers = dict(parsers)

    def parser_for(self, path: str) -> StructuralParser | None:
        return self._parsers.get(PurePosixPath(path).suffix.lower())

    def recognizes(self, path: str) -> bool:
        return self.parser_for(path) is not None

    def analyze_delta(self, record: ChangeRecord) -> StructuralDelta:
        parser = self.parser_for(record.path)
        if parser is None:
            return StructuralDelta.ZERO

        before = "" if record.kind is ChangeKind.ADDED else self._text(record.old_ref)
        after = "" if record.kind is ChangeKind.DELETED else self._text(record.new_ref)
        return parser.parse(after) - parser.parse(before)

    def _text(self, ref: str | None) -> str:
        if ref is None:
            return ""
        return self._load(ref).decode("utf-8", errors="replace")
