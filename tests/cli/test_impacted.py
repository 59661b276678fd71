"""Tests for sagit impacted command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from sagit.cli.impacted import NO_TESTS_MESSAGE
from sagit.cli.main import cli
from tests.support import RepoBuilder

runner = CliRunner()


class TestImpactedCommand:
    def test_default_mapping(self, in_repo: RepoBuilder) -> None:
        result = runner.invoke(cli, ["impacted"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "src/test/java/com/acme/FooTest.java",
            "src/test/java/com/acme/ShapeTest.java",
        ]

    def test_rule_file(self, in_repo: RepoBuilder) -> None:
        in_repo.write(
            ".sagit/tests.map",
            "# integration tests\n"
            r"^src/main/java/(.*)/Shape\.java$ => src/it/java/$1/ShapeIT.java" "\n",
            stage=False,
        )

        result = runner.invoke(cli, ["impacted"])

        assert result.output.splitlines() == [
            "src/test/java/com/acme/FooTest.java",
            "src/it/java/com/acme/ShapeIT.java",
        ]

    def test_only_existing(self, in_repo: RepoBuilder) -> None:
        in_repo.write("src/test/java/com/acme/FooTest.java", "class FooTest {}\n", stage=False)

        result = runner.invoke(cli, ["impacted", "--only-existing"])

        assert result.output.splitlines() == ["src/test/java/com/acme/FooTest.java"]

    def test_only_changed_tests_alias(self, in_repo: RepoBuilder) -> None:
        result = runner.invoke(cli, ["impacted", "--only-changed-tests"])

        assert result.exit_code == 0
        assert result.output.strip() == NO_TESTS_MESSAGE

    def test_nothing_mappable(self, in_repo: RepoBuilder) -> None:
        in_repo.write("docs/guide.md", "# Guide\n")
        in_repo.commit("docs")

        result = runner.invoke(cli, ["impacted"])

        assert result.output.strip() == NO_TESTS_MESSAGE

    def test_undecodable_env_config_is_reported(
        self, in_repo: RepoBuilder, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SAGIT__LANGUAGES", "java")

        result = runner.invoke(cli, ["impacted"])

        assert result.exit_code != 0
        assert isinstance(result.exception, SystemExit)
        assert "Invalid value for 'languages'" in result.output
