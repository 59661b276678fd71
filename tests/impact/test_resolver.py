"""Tests for test impact resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from sagit.impact.resolver import default_test_path, resolve, resolve_impacted
from sagit.impact.rules import parse_rules


class TestDefaultTestPath:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("src/main/java/pkg/Foo.java", "src/test/java/pkg/FooTest.java"),
            ("src/main/java/Foo.java", "src/test/java/FooTest.java"),
            ("src/main/kotlin/Foo.kt", None),
            ("src/main/java/pkg/notes.md", None),
            ("lib/src/main/java/Foo.java", None),
        ],
    )
    def test_default(self, path: str, expected: str | None) -> None:
        assert default_test_path(path) == expected


class TestResolve:
    def test_rule_beats_default(self) -> None:
        rules = parse_rules(r"^src/main/java/(.*)\.java$ => src/it/java/$1IT.java")
        assert resolve("src/main/java/pkg/Foo.java", rules) == "src/it/java/pkg/FooIT.java"

    def test_falls_back_to_default(self) -> None:
        rules = parse_rules(r"^src/main/(.*)\.x$ => test/$1_test.x")
        assert resolve("src/main/java/pkg/Foo.java", rules) == "src/test/java/pkg/FooTest.java"

    def test_no_mapping(self) -> None:
        assert resolve("README.md", []) is None


class TestResolveImpacted:
    def test_dedup_in_first_seen_order(self) -> None:
        rules = parse_rules(r"^web/(\w+)/.*$ => web/$1/spec.ts")

        tests = resolve_impacted(
            [
                "web/cart/a.ts",
                "src/main/java/Foo.java",
                "web/cart/b.ts",
                "README.md",
                "src/main/java/Foo.java",
            ],
            rules,
        )

        assert tests == ["web/cart/spec.ts", "src/test/java/FooTest.java"]

    def test_only_existing(self, tmp_path: Path) -> None:
        existing = tmp_path / "src/test/java/FooTest.java"
        existing.parent.mkdir(parents=True)
        existing.write_text("class FooTest {}")

        tests = resolve_impacted(
            ["src/main/java/Foo.java", "src/main/java/Bar.java"],
            [],
            repo_root=tmp_path,
            only_existing=True,
        )

        assert tests == ["src/test/java/FooTest.java"]

    def test_only_existing_needs_root(self) -> None:
        with pytest.raises(ValueError):
            resolve_impacted(["src/main/java/Foo.java"], [], only_existing=True)
