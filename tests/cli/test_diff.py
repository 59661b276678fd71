"""Tests for sagit diff command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from sagit.cli.main import cli
from tests.support import FOO_V1, RepoBuilder

runner = CliRunner()


class TestDiffCommand:
    def test_staged_changes(self, in_repo: RepoBuilder) -> None:
        in_repo.write("src/main/java/com/acme/Foo.java", FOO_V1)

        result = runner.invoke(cli, ["diff"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "Files: +0 ~1 -0",
            "Java: Δclasses=0, Δinterfaces=0, Δenums=-1, Δmethods=-1, Δfields=-1",
        ]

    def test_unstaged_edits_are_ignored(self, in_repo: RepoBuilder) -> None:
        in_repo.write("src/main/java/com/acme/Foo.java", FOO_V1, stage=False)

        result = runner.invoke(cli, ["diff"])

        assert result.output.splitlines()[0] == "Files: +0 ~0 -0"

    def test_no_semantic(self, in_repo: RepoBuilder) -> None:
        in_repo.write("src/main/java/com/acme/Foo.java", FOO_V1)

        result = runner.invoke(cli, ["diff", "--no-semantic"])

        assert result.output.splitlines() == ["Files: +0 ~1 -0"]

    def test_since_compares_ref_to_index(self, in_repo: RepoBuilder) -> None:
        result = runner.invoke(cli, ["diff", "--since", "HEAD~1"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "Files: +1 ~1 -1",
            "Java: Δclasses=0, Δinterfaces=1, Δenums=1, Δmethods=2, Δfields=2",
        ]

    def test_unborn_repository_compares_with_empty_tree(
        self, repo_builder: RepoBuilder, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        repo_builder.write("src/main/java/com/acme/Foo.java", FOO_V1)
        monkeypatch.chdir(repo_builder.path)

        result = runner.invoke(cli, ["diff"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[0] == "Files: +1 ~0 -0"
