"""Custom exceptions for git-desk"""

from typing import Optional


class GitDeskError(Exception):
    """Base exception for all git-desk errors."""
    pass


class ConfigError(GitDeskError):
    """Exception raised when the configuration file cannot be used."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Invalid config file '{path}': {message}")


class MissingArgumentError(GitDeskError):
    """Exception raised when a required argument is missing or empty."""

    def __init__(self, argument: str, usage: Optional[str] = None):
        self.argument = argument
        self.usage = usage
        error_msg = f"Missing required argument '{argument}'"
        if usage:
            error_msg += f" (usage: {usage})"
        super().__init__(error_msg)


class GitOperationError(GitDeskError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class NotARepositoryError(GitOperationError):
    """Exception raised when the working directory is not inside a git repository."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        message = "Not inside a git repository"
        if path:
            message += f" ({path})"
        super().__init__("find_repository", message=message)


class DetachedHeadError(GitOperationError):
    """Exception raised when repository is in detached HEAD state."""

    def __init__(self):
        super().__init__("check_state", message="Repository is in detached HEAD state")


class NoCommitsError(GitOperationError):
    """Exception raised when the current branch has no commits yet."""

    def __init__(self, branch: Optional[str] = None):
        super().__init__("read_last_commit", branch, "No commits on branch")


class NothingStagedError(GitOperationError):
    """Exception raised when a workflow needs staged changes and there are none."""

    def __init__(self, branch: Optional[str] = None):
        super().__init__(
            "check_staged",
            branch,
            "No staged changes to commit. Stage what you want (git add ...) and run again",
        )


class BranchExistsError(GitOperationError):
    """Exception raised when a branch that should be new already exists."""

    def __init__(self, branch: str):
        super().__init__("create_branch", branch, "Branch already exists")


class BranchConflictError(GitOperationError):
    """Exception raised when a branch is already checked out in another worktree."""

    def __init__(self, branch: str, other_path: str):
        self.other_path = other_path
        super().__init__("switch_branch", branch, f"Already checked out at: {other_path}")


class SwitchFailedError(GitOperationError):
    """Exception raised when switching the worktree to a branch fails."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("switch_branch", branch, message)


class BranchCreateFailedError(GitOperationError):
    """Exception raised when creating and switching to a new branch fails."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("create_branch", branch, message)


class StackingCommandError(GitDeskError):
    """Exception raised when the stacking tool exits unsuccessfully."""

    def __init__(self, command: list[str], returncode: Optional[int] = None, message: Optional[str] = None):
        self.command = command
        self.returncode = returncode
        self.message = message

        error_msg = f"'{' '.join(command)}' failed"
        if returncode is not None:
            error_msg += f" (exit {returncode})"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class WorkflowStepError(GitDeskError):
    """Exception raised when a workflow step delegated to the stacking tool fails."""

    step = "step"

    def __init__(self, branch: str, cause: Optional[Exception] = None):
        self.branch = branch
        self.cause = cause

        error_msg = f"Step '{self.step}' failed for branch '{branch}'"
        if cause:
            error_msg += f": {cause}"

        super().__init__(error_msg)


class TrackingFailedError(WorkflowStepError):
    """Registering the branch with the stacking tool failed."""

    step = "track"


class CommitFailedError(WorkflowStepError):
    """Committing the staged changes through the stacking tool failed."""

    step = "commit"


class RestackFailedError(WorkflowStepError):
    """Moving the branch onto the main line failed."""

    step = "restack"


class SubmissionFailedError(WorkflowStepError):
    """Submitting the branch through the stacking tool failed."""

    step = "submit"


class EmptyOrMissingSubjectError(GitDeskError):
    """Exception raised when there is no usable commit subject for a PR title."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"No commit subject on '{branch}', nothing to submit")
