"""Entry point tying the git backend, the stacking tool and the workflows together."""

import os
from typing import Optional, Sequence, Union

from git_desk.config import Config
from git_desk.exceptions import SwitchFailedError
from git_desk.logging_config import get_logger
from git_desk.models.results import NewBranchResult, SubmitResult
from git_desk.services.display_service import DisplayService
from git_desk.services.git.base import GitBackend
from git_desk.services.git.repository import GitRepository
from git_desk.services.stacking.base import StackingTool
from git_desk.services.stacking.git_spice import GitSpice
from git_desk.core.new_branch import create_new_branch, validate_branch_name
from git_desk.core.submit import perform_submission, prepare_submission
from git_desk.core.switcher import goto_main

logger = get_logger(__name__)


class DeskKeeper:
    """Runs the desk workflows for one repository."""

    def __init__(
        self,
        repo_path: Optional[str] = None,
        config: Union[Config, dict, None] = None,
        git_backend: Optional[GitBackend] = None,
        stacking_tool: Optional[StackingTool] = None,
        display: Optional[DisplayService] = None,
    ):
        """Initialize DeskKeeper.

        Args:
            repo_path: Path inside the repository (defaults to the working directory)
            config: Configuration dict or Config object
            git_backend: Git operations, GitPython-backed by default
            stacking_tool: Stacking tool operations, git-spice by default
            display: Output service
        """
        self.repo_path = repo_path or os.getcwd()
        if config is None:
            self.config = Config()
        elif isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.git = git_backend or GitRepository(self.repo_path)
        self.stacking_tool = stacking_tool or GitSpice(self.repo_path, self.config.stack_command)
        self.display = display or DisplayService()

    def goto_main(self) -> str:
        """Switch this worktree to its desk main branch and show the short status."""
        context = self.git.build_context()
        logger.debug(f"Context: {context}")
        try:
            target = goto_main(self.git, context, self.config)
        except SwitchFailedError as e:
            self.display.print_switch_tip(e.branch, self.config.remote, self.config.main_branch)
            raise
        self.display.print_status(self.git.short_status())
        return target

    def new_branch(self, name: Optional[str], message: Optional[str] = None) -> NewBranchResult:
        """Create a new stacked branch holding one commit of the staged changes."""
        name = validate_branch_name(name)
        context = self.git.build_context()
        logger.debug(f"Context: {context}")
        result = create_new_branch(
            self.git, self.stacking_tool, context, name, self.config, message=message
        )
        self.display.print_new_branch(result)
        return result

    def submit(self, extra_flags: Sequence[str] = ()) -> SubmitResult:
        """Submit the current branch titled after its latest commit."""
        context = self.git.build_context()
        logger.debug(f"Context: {context}")
        request = prepare_submission(self.git, context, self.config, extra_flags)
        self.display.print_submitting(request)
        perform_submission(self.stacking_tool, request)
        return request
