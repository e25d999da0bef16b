"""Data models for git-desk."""

from .worktree import WorktreeInfo
from .desk import DeskName
from .context import InvocationContext
from .results import ExclusivityResult, NewBranchResult, SubmitResult

__all__ = [
    "WorktreeInfo",
    "DeskName",
    "InvocationContext",
    "ExclusivityResult",
    "NewBranchResult",
    "SubmitResult",
]
