"""Map changed source paths to the test files they probably affect."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from sagit.config.constants import SOURCE_ROOT, TEST_NAME_SUFFIX, TEST_SOURCE_ROOT
from sagit.impact.rules import ImpactRule, Matched, apply_rules

SOURCE_SUFFIX = ".java"


def default_test_path(path: str) -> str | None:
    """``src/main/java/<x>.java`` -> ``src/test/java/<x>Test.java``."""
    if not path.startswith(SOURCE_ROOT) or not path.endswith(SOURCE_SUFFIX):
        return None
    stem = path[len(SOURCE_ROOT) : -len(SOURCE_SUFFIX)]
    return f"{TEST_SOURCE_ROOT}{stem}{TEST_NAME_SUFFIX}{SOURCE_SUFFIX}"


def resolve(path: str, rules: Sequence[ImpactRule]) -> str | None:
    """Rules first, then the default layout convention."""
    result = apply_rules(path, rules)
    if isinstance(result, Matched):
        return result.path
    return default_test_path(path)


def resolve_impacted(
    paths: Iterable[str],
    rules: Sequence[ImpactRule],
    repo_root: Path | None = None,
    only_existing: bool = False,
) -> list[str]:
    """Deduplicated, first-seen ordered test paths for ``paths``.

    Args:
        paths: Changed paths, repository-relative.
        rules: Loaded impact rules.
        repo_root: Work tree root, required when ``only_existing`` is set.
        only_existing: Keep only tests present on disk.
    """
    if only_existing and repo_root is None:
        raise ValueError("repo_root is required when only_existing is set")

    tests: dict[str, None] = {}
    for path in paths:
        mapped = resolve(path, rules)
        if mapped is None or mapped in tests:
            continue
        if only_existing and not (repo_root / mapped).exists():  # type: ignore[operator]
            continue
        tests[mapped] = None
    return list(tests)
