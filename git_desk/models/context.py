"""Invocation context model."""

from dataclasses import dataclass
from typing import Optional

from git_desk.models.worktree import WorktreeInfo


@dataclass(frozen=True)
class InvocationContext:
    """Snapshot of repository state taken once at the start of a command.

    Workflows receive this instead of re-reading the working directory or
    querying git ad hoc, which keeps them testable against a fake backend.
    """

    root: str
    current_branch: Optional[str]  # None when HEAD is detached
    worktrees: tuple[WorktreeInfo, ...] = ()
