"""Structural (declaration-level) analysis of changed source files."""

from sagit.semantic.analyzer import ContentLoader, StructuralAnalyzer
from sagit.semantic.models import StructuralDelta, StructuralStats
from sagit.semantic.parser import (
    PARSER_FACTORIES,
    JavaStructureParser,
    StructuralParser,
    build_parsers,
)

__all__ = [
    "StructuralAnalyzer",
    "ContentLoader",
    "StructuralStats",
    "StructuralDelta",
    "StructuralParser",
    "JavaStructureParser",
    "PARSER_FACTORIES",
    "build_parsers",
]
