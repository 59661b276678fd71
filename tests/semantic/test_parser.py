"""Tests for the tree-sitter Java structure parser and parser registry."""

from __future__ import annotations

import pytest

from sagit.config.models import SagitConfig
from sagit.semantic.models import StructuralStats
from sagit.semantic.parser import (
    JavaStructureParser,
    StructuralParser,
    build_parsers,
)
from tests.support import BROKEN, FOO_V1, FOO_V2, SHAPE


@pytest.fixture(scope="module")
def parser() -> JavaStructureParser:
    return JavaStructureParser()


class TestJavaStructureParser:
    def test_satisfies_protocol(self, parser: JavaStructureParser) -> None:
        assert isinstance(parser, StructuralParser)

    def test_empty_source(self, parser: JavaStructureParser) -> None:
        assert parser.parse("") == StructuralStats.ZERO
        assert parser.parse("   \n") == StructuralStats.ZERO

    def test_class_with_field_and_method(self, parser: JavaStructureParser) -> None:
        assert parser.parse(FOO_V1) == StructuralStats(types=1, methods=1, fields=1)

    def test_nested_enum_counts(self, parser: JavaStructureParser) -> None:
        assert parser.parse(FOO_V2) == StructuralStats(types=1, enums=1, methods=2, fields=2)

    def test_interface_constants_count_as_fields(self, parser: JavaStructureParser) -> None:
        assert parser.parse(SHAPE) == StructuralStats(interfaces=1, methods=1, fields=1)

    def test_constructors_are_not_methods(self, parser: JavaStructureParser) -> None:
        source = "class A {\n  A() {}\n  void run() {}\n}\n"
        assert parser.parse(source) == StructuralStats(types=1, methods=1)

    def test_syntax_error_yields_zero(self, parser: JavaStructureParser) -> None:
        assert parser.parse(BROKEN) == StructuralStats.ZERO

    def test_parser_failure_yields_zero(self) -> None:
        class Exploding:
            def parse(self, _source: bytes) -> object:
                raise RuntimeError("grammar mismatch")

        parser = JavaStructureParser(_parser=Exploding())
        assert parser.parse(FOO_V1) == StructuralStats.ZERO

    def test_non_ascii_source(self, parser: JavaStructureParser) -> None:
        source = 'class Greeting {\n  String s = "grüße, héllo";\n}\n'
        assert parser.parse(source) == StructuralStats(types=1, fields=1)


class TestBuildParsers:
    def test_default_registry(self) -> None:
        parsers = build_parsers()
        assert set(parsers) == {".java"}
        assert parsers[".java"].language == "java"

    def test_empty_language_filter_allows_all(self) -> None:
        assert ".java" in build_parsers(SagitConfig())

    def test_language_filter_excludes_java(self) -> None:
        assert build_parsers(SagitConfig(languages=frozenset({"kotlin"}))) == {}

    def test_custom_factories(self) -> None:
        parsers = build_parsers(factories={".jav": JavaStructureParser})
        assert list(parsers) == [".jav"]
