"""Switch a worktree to its desk main branch."""

from git_desk.config import Config
from git_desk.logging_config import get_logger
from git_desk.models.context import InvocationContext
from git_desk.services.desk_resolver import resolve_target_branch
from git_desk.services.exclusivity import ensure_exclusive
from git_desk.services.git.base import GitBackend

logger = get_logger(__name__)


def switch_to(git_backend: GitBackend, branch: str, context: InvocationContext) -> None:
    """
    Check out ``branch`` in the current worktree.

    Raises:
        BranchConflictError: If the branch is checked out in another worktree;
            no switch is attempted in that case
        SwitchFailedError: If git refuses the switch
    """
    ensure_exclusive(branch, context.root, context.worktrees)
    git_backend.switch(branch)
    logger.info(f"Switched {context.root} to {branch}")


def goto_main(git_backend: GitBackend, context: InvocationContext, config: Config) -> str:
    """Switch the current worktree to its desk main branch and return that branch."""
    target = resolve_target_branch(context.root, config.main_branch, config.desk_prefix)
    logger.debug(f"Resolved {context.root} -> {target}")
    switch_to(git_backend, target, context)
    return target
