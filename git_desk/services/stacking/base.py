"""Interface for the external branch-stacking tool."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence


class StackingTool(ABC):
    """Operations delegated to the stacking CLI.

    Every method raises StackingCommandError when the tool fails.
    """

    @abstractmethod
    def track_branch(self) -> None:
        """Start tracking the current branch in the stack."""

    @abstractmethod
    def commit_staged(self, message: Optional[str] = None) -> None:
        """Commit the staged changes on the current branch.

        Without a message the tool prompts for one in the operator's editor.
        """

    @abstractmethod
    def restack_onto(self, branch: str) -> None:
        """Move the current branch and its upstack onto ``branch``."""

    @abstractmethod
    def submit_branch(
        self, branch: str, title: str, body: str, extra_flags: Sequence[str] = ()
    ) -> None:
        """Create or update the PR for ``branch``."""
