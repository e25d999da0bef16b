"""GitPython-backed implementation of the git operations git-desk needs."""

import os
from typing import Optional

import git

from git_desk.exceptions import (
    BranchCreateFailedError,
    DetachedHeadError,
    GitOperationError,
    NoCommitsError,
    NotARepositoryError,
    SwitchFailedError,
)
from git_desk.logging_config import get_logger
from git_desk.models.worktree import WorktreeInfo
from git_desk.services.git.base import GitBackend
from git_desk.services.git.worktrees import WorktreeService

logger = get_logger(__name__)


def describe_git_error(e: git.exc.GitCommandError) -> str:
    """Turn a GitCommandError into a one-line message with git's stderr and exit code."""
    stderr = (e.stderr if hasattr(e, "stderr") and e.stderr else "").strip()
    # GitPython wraps stderr as "stderr: '...'" on some versions
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()
    status = e.status if hasattr(e, "status") else "unknown"

    if stderr:
        return f"{stderr} (exit {status})"
    return f"git exited with code {status}"


class GitRepository(GitBackend):
    """Git operations for the worktree containing ``repo_path``."""

    def __init__(self, repo_path: Optional[str] = None):
        """Initialize the repository service.

        Args:
            repo_path: Any path inside the worktree (defaults to the working directory)
        """
        self.repo_path = repo_path or os.getcwd()
        self.worktree_service = WorktreeService(self.repo_path)

    def _get_repo(self) -> git.Repo:
        """Open the repository containing repo_path.

        Raises:
            NotARepositoryError: If repo_path is not inside a git repository
        """
        try:
            return git.Repo(self.repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            logger.debug(f"No repository at {self.repo_path}: {e!r}")
            raise NotARepositoryError(self.repo_path) from e

    def current_root(self) -> str:
        repo = self._get_repo()
        try:
            root = repo.git.rev_parse("--show-toplevel")
        except git.exc.GitCommandError as e:
            # Bare repositories and the inside of .git have no worktree root
            logger.debug(f"rev-parse --show-toplevel failed: {describe_git_error(e)}")
            raise NotARepositoryError(self.repo_path) from e
        logger.debug(f"Worktree root: {root}")
        return root

    def current_branch(self) -> str:
        repo = self._get_repo()
        try:
            return repo.active_branch.name
        except TypeError as e:
            raise DetachedHeadError() from e

    def list_worktrees(self) -> list[WorktreeInfo]:
        # Fail early with the right error kind if we are outside a repository
        self._get_repo()
        try:
            return self.worktree_service.get_worktree_info()
        except git.exc.GitCommandError as e:
            raise GitOperationError("list_worktrees", message=describe_git_error(e)) from e

    def has_staged_changes(self) -> bool:
        repo = self._get_repo()
        try:
            repo.git.diff("--cached", "--quiet")
        except git.exc.GitCommandError as e:
            # --quiet exits 1 when there are differences
            if e.status == 1:
                return True
            raise GitOperationError("check_staged", message=describe_git_error(e)) from e
        return False

    def last_commit_subject(self) -> str:
        repo = self._get_repo()
        branch = None
        try:
            branch = repo.active_branch.name
        except TypeError:
            pass  # Detached HEAD still has a latest commit

        if not repo.head.is_valid():
            raise NoCommitsError(branch)

        try:
            return repo.git.log("-1", "--pretty=%s")
        except git.exc.GitCommandError as e:
            raise GitOperationError("read_last_commit", branch, describe_git_error(e)) from e

    def branch_exists(self, name: str) -> bool:
        repo = self._get_repo()
        try:
            repo.git.rev_parse("--verify", "--quiet", name)
            return True
        except git.exc.GitCommandError:
            return False

    def switch(self, branch: str) -> None:
        repo = self._get_repo()
        logger.info(f"Switching to {branch}")
        try:
            repo.git.switch(branch)
        except git.exc.GitCommandError as e:
            error_msg = describe_git_error(e)
            logger.debug(f"Failed to switch to {branch}: {error_msg}")
            raise SwitchFailedError(branch, error_msg) from e

    def create_branch(self, branch: str) -> None:
        repo = self._get_repo()
        logger.info(f"Creating branch {branch} from HEAD")
        try:
            repo.git.switch("-c", branch)
        except git.exc.GitCommandError as e:
            error_msg = describe_git_error(e)
            logger.debug(f"Failed to create {branch}: {error_msg}")
            raise BranchCreateFailedError(branch, error_msg) from e

    def short_status(self) -> str:
        repo = self._get_repo()
        try:
            return repo.git.status("-sb")
        except git.exc.GitCommandError as e:
            raise GitOperationError("status", message=describe_git_error(e)) from e
