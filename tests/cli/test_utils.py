"""Tests for CLI utilities.

Covers:
- find_repo_root() function
- open_repo() error mapping
"""

from __future__ import annotations

from pathlib import Path

import click
import pygit2
import pytest

from sagit.cli.utils import find_repo_root, open_repo
from tests.support import RepoBuilder


class TestFindRepoRoot:
    """Tests for find_repo_root function."""

    def test_finds_root_from_root(self, tmp_path: Path) -> None:
        pygit2.init_repository(str(tmp_path))

        assert find_repo_root(tmp_path) == tmp_path

    def test_finds_root_from_subdirectory(self, tmp_path: Path) -> None:
        pygit2.init_repository(str(tmp_path))
        nested = tmp_path / "a" / "b" / "c"
        nested.mkdir(parents=True)

        assert find_repo_root(nested) == tmp_path

    def test_raises_when_not_in_repo(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException) as exc_info:
            find_repo_root(tmp_path)

        assert "Not inside a git repository" in exc_info.value.message
        assert str(tmp_path) in exc_info.value.message

    def test_uses_cwd_when_none(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        pygit2.init_repository(str(tmp_path))
        subdir = tmp_path / "sub"
        subdir.mkdir()
        monkeypatch.chdir(subdir)

        assert find_repo_root(None) == tmp_path

    def test_handles_relative_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        pygit2.init_repository(str(tmp_path))
        (tmp_path / "sub").mkdir()
        monkeypatch.chdir(tmp_path)

        assert find_repo_root(Path("sub")) == tmp_path


class TestOpenRepo:
    def test_loads_config(self, repo_builder: RepoBuilder) -> None:
        (repo_builder.path / ".sagit").mkdir()
        (repo_builder.path / ".sagit" / "config.json").write_text('{"impactedRules": "ci/t.map"}')

        ctx = open_repo(repo_builder.path)

        assert ctx.root == repo_builder.path
        assert ctx.config.impacted_rules == "ci/t.map"

    def test_bad_config_is_click_error(self, repo_builder: RepoBuilder) -> None:
        (repo_builder.path / ".sagit").mkdir()
        (repo_builder.path / ".sagit" / "config.json").write_text("{not json")

        with pytest.raises(click.ClickException) as exc_info:
            open_repo(repo_builder.path)

        assert "config.json" in exc_info.value.message
