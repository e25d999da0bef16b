"""git-spice (``gs``) implementation of the stacking tool interface."""

import subprocess
from typing import Optional, Sequence

from git_desk.exceptions import StackingCommandError
from git_desk.logging_config import get_logger
from git_desk.services.stacking.base import StackingTool

logger = get_logger(__name__)


class GitSpice(StackingTool):
    """Runs git-spice commands in the current worktree.

    Commands inherit the terminal so that git-spice can open the commit
    editor and print its own progress.
    """

    def __init__(self, repo_path: str, executable: str = "gs"):
        """Initialize the service.

        Args:
            repo_path: Worktree to run commands in
            executable: Name or path of the git-spice binary
        """
        self.repo_path = repo_path
        self.executable = executable

    def _run(self, *args: str) -> None:
        command = [self.executable, *args]
        logger.debug(f"Running: {' '.join(command)}")
        try:
            result = subprocess.run(command, cwd=self.repo_path, check=False)
        except FileNotFoundError as e:
            raise StackingCommandError(command, message=f"'{self.executable}' not found on PATH") from e

        if result.returncode != 0:
            logger.debug(f"{' '.join(command)} exited with {result.returncode}")
            raise StackingCommandError(command, result.returncode)

    def track_branch(self) -> None:
        self._run("branch", "track")

    def commit_staged(self, message: Optional[str] = None) -> None:
        if message:
            self._run("commit", "create", "-m", message)
        else:
            self._run("commit", "create")

    def restack_onto(self, branch: str) -> None:
        self._run("upstack", "onto", branch)

    def submit_branch(
        self, branch: str, title: str, body: str, extra_flags: Sequence[str] = ()
    ) -> None:
        self._run(
            "--no-prompt",
            "branch",
            "submit",
            "--branch",
            branch,
            "--title",
            title,
            "--body",
            body,
            *extra_flags,
        )
