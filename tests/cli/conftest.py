"""Fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from sagit.cli import output
from tests.support import RepoBuilder


@pytest.fixture
def in_repo(java_repo: RepoBuilder, monkeypatch: pytest.MonkeyPatch) -> RepoBuilder:
    """java_repo with the working directory set to its root."""
    monkeypatch.chdir(java_repo.path)
    return java_repo


@pytest.fixture
def outside_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    plain = tmp_path / "not-a-repo"
    plain.mkdir()
    monkeypatch.chdir(plain)
    return plain


@pytest.fixture
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Status console wide enough that table cells never wrap."""
    monkeypatch.setattr(output, "_console", Console(stderr=True, width=400))
