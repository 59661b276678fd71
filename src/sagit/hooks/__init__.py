"""Git hook stages and hook installation."""

from sagit.hooks.install import HookState, HookStatus, ensure_gitignore, hook_status, install_hooks
from sagit.hooks.stages import draft_commit_message, has_meaningful_content, record_commit

__all__ = [
    "HookState",
    "HookStatus",
    "draft_commit_message",
    "ensure_gitignore",
    "has_meaningful_content",
    "hook_status",
    "install_hooks",
    "record_commit",
]
