"""Interface for the version-control operations git-desk relies on."""

from abc import ABC, abstractmethod
from typing import Optional

from git_desk.exceptions import DetachedHeadError
from git_desk.models.context import InvocationContext
from git_desk.models.worktree import WorktreeInfo


class GitBackend(ABC):
    """Version-control operations used by the desk workflows.

    Queries never change repository state. The mutating operations (switch,
    create_branch) raise a GitOperationError subclass on failure and are
    never retried.
    """

    @abstractmethod
    def current_root(self) -> str:
        """Return the root of the current worktree.

        Raises:
            NotARepositoryError: If not inside a repository
        """

    @abstractmethod
    def current_branch(self) -> str:
        """Return the branch checked out in the current worktree.

        Raises:
            DetachedHeadError: If HEAD does not point at a branch
        """

    @abstractmethod
    def list_worktrees(self) -> list[WorktreeInfo]:
        """Return all worktrees of the repository, main worktree first."""

    @abstractmethod
    def has_staged_changes(self) -> bool:
        """Return True if the index differs from HEAD."""

    @abstractmethod
    def last_commit_subject(self) -> str:
        """Return the subject line of the latest commit on HEAD.

        Raises:
            NoCommitsError: If the current branch has no commits
        """

    @abstractmethod
    def branch_exists(self, name: str) -> bool:
        """Return True if ``name`` already resolves to a ref or commit."""

    @abstractmethod
    def switch(self, branch: str) -> None:
        """Check out an existing branch in the current worktree.

        Raises:
            SwitchFailedError: If git refuses the switch
        """

    @abstractmethod
    def create_branch(self, branch: str) -> None:
        """Create ``branch`` from HEAD and check it out.

        Raises:
            BranchCreateFailedError: If git refuses to create the branch
        """

    @abstractmethod
    def short_status(self) -> str:
        """Return the short branch status (``git status -sb``)."""

    def build_context(self) -> InvocationContext:
        """Snapshot root, current branch and worktrees for one invocation."""
        root = self.current_root()
        current: Optional[str]
        try:
            current = self.current_branch()
        except DetachedHeadError:
            current = None
        return InvocationContext(
            root=root,
            current_branch=current,
            worktrees=tuple(self.list_worktrees()),
        )
