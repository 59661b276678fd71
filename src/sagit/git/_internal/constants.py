"""Internal pygit2 constants - keeps trivia out of public modules."""

from __future__ import annotations

from pygit2.enums import DiffFind

# Rename/copy detection requested on every tree diff
FIND_SIMILAR_FLAGS = DiffFind.FIND_RENAMES | DiffFind.FIND_COPIES
