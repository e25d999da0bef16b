"""Create a new stacked branch from the staged changes.

Every new branch starts with exactly one commit made from what is staged.
Steps after the branch switch are not rolled back on failure; the error
names the step so the operator can finish by hand.
"""

from typing import Optional

from git_desk.config import Config
from git_desk.exceptions import (
    BranchExistsError,
    CommitFailedError,
    MissingArgumentError,
    NothingStagedError,
    RestackFailedError,
    StackingCommandError,
    TrackingFailedError,
)
from git_desk.logging_config import get_logger
from git_desk.models.context import InvocationContext
from git_desk.models.results import NewBranchResult
from git_desk.services.desk_resolver import is_main_variant
from git_desk.services.git.base import GitBackend
from git_desk.services.stacking.base import StackingTool

logger = get_logger(__name__)

USAGE = "newbranch <new-branch-name>"

# What `git rev-parse --abbrev-ref HEAD` reports for a detached HEAD
DETACHED_HEAD_NAME = "HEAD"


def validate_branch_name(name: Optional[str]) -> str:
    """Return the stripped branch name, or raise MissingArgumentError if there is none."""
    if name is None or not name.strip():
        raise MissingArgumentError("new-branch-name", USAGE)
    return name.strip()


def create_new_branch(
    git_backend: GitBackend,
    stacking_tool: StackingTool,
    context: InvocationContext,
    name: str,
    config: Config,
    message: Optional[str] = None,
) -> NewBranchResult:
    """
    Create ``name`` from HEAD, track it and commit the staged changes onto it.

    The branch is moved onto the main line only when it was started from the
    main line or from a desk main branch.

    Raises:
        MissingArgumentError: If name is empty
        NothingStagedError: If nothing is staged
        BranchExistsError: If name already resolves to a ref
        BranchCreateFailedError, TrackingFailedError, CommitFailedError,
        RestackFailedError: If the corresponding step fails
    """
    name = validate_branch_name(name)
    start_branch = context.current_branch or DETACHED_HEAD_NAME

    if not git_backend.has_staged_changes():
        raise NothingStagedError(start_branch)

    if git_backend.branch_exists(name):
        raise BranchExistsError(name)

    git_backend.create_branch(name)
    logger.info(f"Created {name} from {start_branch}")

    try:
        stacking_tool.track_branch()
    except StackingCommandError as e:
        raise TrackingFailedError(name, e) from e

    # Commit the staged changes before touching the stack
    try:
        stacking_tool.commit_staged(message)
    except StackingCommandError as e:
        raise CommitFailedError(name, e) from e

    stacked_onto = None
    if is_main_variant(start_branch, config.main_branch, config.desk_prefix):
        try:
            stacking_tool.restack_onto(config.main_branch)
        except StackingCommandError as e:
            raise RestackFailedError(name, e) from e
        stacked_onto = config.main_branch
        logger.info(f"Moved {name} onto {config.main_branch}")
    else:
        logger.info(f"{start_branch} is not a main branch, leaving {name} where it is")

    return NewBranchResult(branch=name, start_branch=start_branch, stacked_onto=stacked_onto)
