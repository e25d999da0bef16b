"""Worktree listing for git-desk."""

import os
from typing import Any, Dict

import git

from git_desk.models.worktree import WorktreeInfo
from git_desk.logging_config import get_logger

logger = get_logger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


def _to_worktree_info(entry: Dict[str, Any]) -> WorktreeInfo:
    path = entry["path"]
    return WorktreeInfo(
        path=path,
        branch_name=entry.get("branch", ""),
        commit_sha=entry.get("HEAD", ""),
        is_main=entry.get("is_main", False),
        is_orphaned=not os.path.exists(path),
    )


def parse_worktree_porcelain(output: str) -> list[WorktreeInfo]:
    """Parse the output of ``git worktree list --porcelain``.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name   (or "detached" / "bare")
        (blank line between worktrees)

    Args:
        output: Raw porcelain output

    Returns:
        List of WorktreeInfo in git's order; the first entry is the main worktree
    """
    worktrees: list[WorktreeInfo] = []
    current: Dict[str, Any] = {}

    for line in output.split("\n"):
        line = line.rstrip("\r")

        if not line.strip():
            # Empty line marks end of worktree entry
            if current.get("path"):
                worktrees.append(_to_worktree_info(current))
            current = {}
            continue

        if line.startswith("worktree "):
            current["path"] = line.split(" ", 1)[1]
            current["is_main"] = not worktrees
        elif line.startswith("HEAD "):
            current["HEAD"] = line.split(" ", 1)[1]
        elif line.startswith("branch "):
            branch_ref = line.split(" ", 1)[1]
            if branch_ref.startswith(BRANCH_REF_PREFIX):
                current["branch"] = branch_ref[len(BRANCH_REF_PREFIX):]
            else:
                current["branch"] = ""
        elif line == "detached" or line == "bare":
            current["branch"] = ""

    # Handle last entry if no trailing blank line
    if current.get("path"):
        worktrees.append(_to_worktree_info(current))

    return worktrees


class WorktreeService:
    """Service for reading git worktrees."""

    def __init__(self, repo_path: str):
        """Initialize the worktree service.

        Args:
            repo_path: Path inside the git repository
        """
        self.repo_path = repo_path

    def _get_repo(self):
        """Open the repository containing repo_path."""
        return git.Repo(self.repo_path, search_parent_directories=True)

    def get_worktree_info(self) -> list[WorktreeInfo]:
        """Get detailed information about all worktrees.

        Returns:
            List of WorktreeInfo objects for all worktrees

        Raises:
            git.exc.GitCommandError: If git cannot list worktrees
        """
        repo = self._get_repo()
        output = repo.git.worktree("list", "--porcelain")
        worktrees = parse_worktree_porcelain(output)

        logger.debug(f"Found {len(worktrees)} worktrees")
        for wt in worktrees:
            logger.debug(f"  {wt}")
        return worktrees

