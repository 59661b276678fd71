"""Git hook installation and installation checks for ``sagit setup`` / ``sagit verify``."""

from __future__ import annotations

import stat
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from sagit.config.constants import CONFIG_FILE, DEFAULT_RULES_PATH, HOOK_NAMES, SAGIT_DIR
from sagit.core.logging import get_logger

log = get_logger(__name__)

HOOK_MARKER = "# installed by sagit"
GITIGNORE_ENTRY = f"{SAGIT_DIR}/"

_POSIX_TEMPLATE = """#!/bin/sh
{marker}
exec "{python}" -m sagit hook {hook} "$@"
"""

_BATCH_TEMPLATE = """@echo off
REM {marker}
"{python}" -m sagit hook {hook} %*
"""


class HookState(Enum):
    INSTALLED = "OK"
    MISSING = "MISSING"
    FOREIGN = "FOREIGN"


@dataclass(frozen=True, slots=True)
class HookStatus:
    name: str
    path: Path
    state: HookState


def posix_script(hook: str, python: str | None = None) -> str:
    return _POSIX_TEMPLATE.format(marker=HOOK_MARKER, python=python or sys.executable, hook=hook)


def batch_script(hook: str, python: str | None = None) -> str:
    return _BATCH_TEMPLATE.format(marker=HOOK_MARKER, python=python or sys.executable, hook=hook)


def _write_executable(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="\n")
    mode = path.stat().st_mode
    path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def install_hooks(hooks_dir: Path, python: str | None = None) -> list[Path]:
    """Write POSIX and ``.bat`` entry scripts for every hook. Existing files are replaced."""
    written: list[Path] = []
    for hook in HOOK_NAMES:
        posix = hooks_dir / hook
        batch = hooks_dir / f"{hook}.bat"
        _write_executable(posix, posix_script(hook, python))
        _write_executable(batch, batch_script(hook, python))
        written.extend((posix, batch))
        log.debug("hook_installed", hook=hook, path=str(posix))
    return written


def ensure_gitignore(repo_root: Path) -> bool:
    """Add ``.sagit/`` to ``.gitignore``. Returns True if the file changed."""
    gitignore = repo_root / ".gitignore"
    current = gitignore.read_text(encoding="utf-8") if gitignore.exists() else ""
    if any(line.strip() == GITIGNORE_ENTRY for line in current.splitlines()):
        return False
    prefix = "" if not current or current.endswith("\n") else "\n"
    gitignore.write_text(f"{current}{prefix}{GITIGNORE_ENTRY}\n", encoding="utf-8")
    return True


def hook_status(hooks_dir: Path) -> list[HookStatus]:
    statuses: list[HookStatus] = []
    for hook in HOOK_NAMES:
        state = HookState.MISSING
        path = hooks_dir / hook
        for candidate in (path, hooks_dir / f"{hook}.bat"):
            if not candidate.is_file():
                continue
            try:
                text = candidate.read_text(encoding="utf-8", errors="replace")
            except OSError:
                continue
            if HOOK_MARKER in text:
                state, path = HookState.INSTALLED, candidate
                break
            state, path = HookState.FOREIGN, candidate
        statuses.append(HookStatus(hook, path, state))
    return statuses


def optional_files(repo_root: Path, rules_path: str = DEFAULT_RULES_PATH) -> dict[str, bool]:
    """Presence of the optional per-repository files."""
    return {
        f"{SAGIT_DIR}/{CONFIG_FILE}": (repo_root / SAGIT_DIR / CONFIG_FILE).is_file(),
        rules_path: (repo_root / rules_path).is_file(),
    }
