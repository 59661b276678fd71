"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

from __future__ import annotations

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from tests.support import FOO_V1, FOO_V2, SHAPE, RepoBuilder  # noqa: E402


@pytest.fixture
def repo_builder(tmp_path: Path) -> Generator[RepoBuilder, None, None]:
    """Empty repository (unborn HEAD) at tmp_path/repo."""
    yield RepoBuilder(tmp_path / "repo")


@pytest.fixture
def java_repo(repo_builder: RepoBuilder) -> RepoBuilder:
    """Two commits: Foo v1 + README, then Foo v2 + Shape with README deleted."""
    repo_builder.write("README.md", "# Demo\n")
    repo_builder.write("src/main/java/com/acme/Foo.java", FOO_V1)
    repo_builder.commit("initial")

    repo_builder.write("src/main/java/com/acme/Foo.java", FOO_V2)
    repo_builder.write("src/main/java/com/acme/Shape.java", SHAPE)
    repo_builder.delete("README.md")
    repo_builder.commit("second")
    return repo_builder
