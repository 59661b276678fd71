"""Configuration constants.

Repository layout conventions that drive scope inference and the default
test-impact mapping. These are not user-configurable; custom layouts are
expressed through impact rules instead.
"""

# =============================================================================
# Repository-local state
# =============================================================================

SAGIT_DIR = ".sagit"
"""Per-repository state directory, relative to the work tree root."""

CONFIG_FILE = "config.json"
META_FILE = "meta.jsonl"
HOOK_LOG_FILE = "hook.log"

DEFAULT_RULES_PATH = f"{SAGIT_DIR}/tests.map"
"""Default impact rule file, relative to the work tree root."""

# =============================================================================
# Source layout conventions
# =============================================================================

SOURCE_ROOT = "src/main/java/"
"""Production source root; the next segment becomes the commit scope."""

TEST_ROOT = "src/test"
"""Paths under this prefix are classified as scope ``test``."""

TEST_SOURCE_ROOT = "src/test/java/"
"""Mirror of SOURCE_ROOT used by the default test mapping."""

TEST_NAME_SUFFIX = "Test"
"""Appended to the file stem by the default test mapping."""

DOCS_ROOT = "docs/"
DOCS_EXTENSION = ".md"

DEFAULT_SCOPE = "java"
"""Scope used for files directly under SOURCE_ROOT."""

EMPTY_SCOPE = "core"
"""Scope rendered when no path produced one."""

# =============================================================================
# Hooks
# =============================================================================

HOOK_NAMES = ("prepare-commit-msg", "commit-msg", "post-commit")
