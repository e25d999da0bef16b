"""Check that a branch is not already checked out in another worktree.

git refuses to check out a branch in two worktrees at once. Checking up front
gives the operator the other worktree's path instead of git's generic error.
"""

import os
from typing import Iterable

from git_desk.exceptions import BranchConflictError
from git_desk.logging_config import get_logger
from git_desk.models.results import ExclusivityResult
from git_desk.models.worktree import WorktreeInfo

logger = get_logger(__name__)


def _normalize(path: str) -> str:
    return os.path.normpath(path)


def check_exclusive(
    target_branch: str, current_root: str, worktrees: Iterable[WorktreeInfo]
) -> ExclusivityResult:
    """
    Check whether target_branch is checked out anywhere other than current_root.

    Args:
        target_branch: Branch about to be checked out
        current_root: Root of the worktree doing the checkout
        worktrees: Snapshot of the repository's worktrees

    Returns:
        ExclusivityResult with ok=False and other_path set on a conflict
    """
    root = _normalize(current_root)
    for wt in worktrees:
        if wt.branch_name and wt.branch_name == target_branch and _normalize(wt.path) != root:
            logger.debug(f"{target_branch} is checked out at {wt.path}")
            return ExclusivityResult(ok=False, other_path=wt.path)
    return ExclusivityResult(ok=True)


def ensure_exclusive(
    target_branch: str, current_root: str, worktrees: Iterable[WorktreeInfo]
) -> None:
    """Raise BranchConflictError if target_branch is checked out elsewhere."""
    result = check_exclusive(target_branch, current_root, worktrees)
    if not result.ok:
        raise BranchConflictError(target_branch, result.other_path)
