"""Structural parsers built on tree-sitter.

A parser turns source text into StructuralStats. Parsers never raise:
anything that stops a clean parse is logged and counted as zero.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from sagit.core.errors import ParseFailure
from sagit.core.logging import get_logger
from sagit.semantic.models import StructuralStats

if TYPE_CHECKING:
    from tree_sitter import Node

    from sagit.config.models import SagitConfig

log = get_logger(__name__)


@runtime_checkable
class StructuralParser(Protocol):
    """Extracts declaration counts from one language's source text."""

    language: str

    def parse(self, source: str) -> StructuralStats: ...


# Node type -> StructuralStats field
JAVA_NODE_FIELDS: dict[str, str] = {
    "class_declaration": "types",
    "interface_declaration": "interfaces",
    "enum_declaration": "enums",
    "method_declaration": "methods",
    "field_declaration": "fields",
    "constant_declaration": "fields",
}


@dataclass
class JavaStructureParser:
    """Counts Java classes, interfaces, enums, methods and fields.

    The grammar is loaded on first use. A tree containing syntax errors is
    treated as a parse failure and yields StructuralStats.ZERO.
    """

    language: str = "java"
    _parser: Any = field(default=None, repr=False)

    def _get_parser(self) -> Any:
        if self._parser is None:
            import tree_sitter
            import tree_sitter_java

            parser = tree_sitter.Parser()
            parser.language = tree_sitter.Language(tree_sitter_java.language())
            self._parser = parser
        return self._parser

    def parse(self, source: str) -> StructuralStats:
        if not source.strip():
            return StructuralStats.ZERO
        try:
            return self._count(source)
        except ParseFailure as e:
            log.debug("parse_failed", language=self.language, error_count=e.details["error_count"])
        except Exception as e:
            log.debug("parser_error", language=self.language, error=str(e))
        return StructuralStats.ZERO

    def _count(self, source: str) -> StructuralStats:
        tree = self._get_parser().parse(source.encode("utf-8"))
        root = tree.root_node
        if root.has_error:
            raise ParseFailure.syntax(self.language, _error_count(root))

        counts = dict.fromkeys(("types", "interfaces", "enums", "methods", "fields"), 0)
        for node in _walk(root):
            name = JAVA_NODE_FIELDS.get(node.type)
            if name is not None:
                counts[name] += 1
        return StructuralStats(**counts)


def _walk(root: Node) -> Iterator[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _error_count(root: Node) -> int:
    return sum(1 for node in _walk(root) if node.type == "ERROR" or node.is_missing)


# =============================================================================
# Registry
# =============================================================================

# Source suffix -> parser factory
PARSER_FACTORIES: dict[str, Callable[[], StructuralParser]] = {
    ".java": JavaStructureParser,
}


def build_parsers(
    config: SagitConfig | None = None,
    factories: Mapping[str, Callable[[], StructuralParser]] | None = None,
) -> dict[str, StructuralParser]:
    """Instantiate one parser per registered suffix the config allows."""
    factories = PARSER_FACTORIES if factories is None else factories
    parsers: dict[str, StructuralParser] = {}
    for suffix, factory in factories.items():
        parser = factory()
        if config is not None and not config.allows_language(parser.language):
            log.debug("parser_disabled", language=parser.language, suffix=suffix)
            continue
        parsers[suffix] = parser
    return parsers
