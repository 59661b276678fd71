"""Shared test helpers: repository builder and sample Java sources."""

from __future__ import annotations

from pathlib import Path

import pygit2

# Fixed commit time: 2024-01-02T03:04:05Z
COMMIT_TIME = 1704164645

FOO_V1 = """\
package com.acme;

public class Foo {
    private int count;

    public int count() { return count; }
}
"""

FOO_V2 = """\
package com.acme;

public class Foo {
    private int count;
    private String name;

    public int count() { return count; }
    public void reset() { count = 0; }

    enum Mode { ON, OFF }
}
"""

SHAPE = """\
package com.acme;

interface Shape {
    double UNIT = 1.0;

    double area();
}
"""

BROKEN = """\
public class {
    void (
"""


class RepoBuilder:
    """Writes, stages and commits files in a fresh repository."""

    def __init__(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)
        self.path = path
        self.repo = pygit2.init_repository(str(path), initial_head="main")
        self.repo.config["user.name"] = "Test User"
        self.repo.config["user.email"] = "test@example.com"
        self._tick = 0

    def write(self, rel: str, content: str, *, stage: bool = True) -> Path:
        target = self.path / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
        if stage:
            self.repo.index.add(rel)
            self.repo.index.write()
        return target

    def delete(self, rel: str) -> None:
        (self.path / rel).unlink()
        self.repo.index.remove(rel)
        self.repo.index.write()

    def commit(self, message: str = "commit") -> str:
        tree = self.repo.index.write_tree()
        sig = pygit2.Signature("Test User", "test@example.com", COMMIT_TIME + self._tick, 0)
        self._tick += 1
        parents = [] if self.repo.head_is_unborn else [self.repo.head.target]
        oid = self.repo.create_commit("HEAD", sig, sig, message, tree, parents)
        return str(oid)
