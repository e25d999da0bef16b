"""Git-related services for git-desk."""

from .base import GitBackend
from .repository import GitRepository
from .worktrees import WorktreeService, parse_worktree_porcelain

__all__ = [
    "GitBackend",
    "GitRepository",
    "WorktreeService",
    "parse_worktree_porcelain",
]
