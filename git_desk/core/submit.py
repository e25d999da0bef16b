"""Submit the current branch as a PR titled after its latest commit."""

from typing import Sequence

from git_desk.config import Config
from git_desk.constants import DEFAULT_SUBMIT_BODY
from git_desk.exceptions import (
    DetachedHeadError,
    EmptyOrMissingSubjectError,
    NoCommitsError,
    StackingCommandError,
    SubmissionFailedError,
)
from git_desk.logging_config import get_logger
from git_desk.models.context import InvocationContext
from git_desk.models.results import SubmitResult
from git_desk.services.git.base import GitBackend
from git_desk.services.stacking.base import StackingTool

logger = get_logger(__name__)


def prepare_submission(
    git_backend: GitBackend,
    context: InvocationContext,
    config: Config,
    extra_flags: Sequence[str] = (),
) -> SubmitResult:
    """
    Work out what to submit without calling the stacking tool.

    Raises:
        DetachedHeadError: If HEAD is not on a branch
        EmptyOrMissingSubjectError: If the latest commit subject is empty or
            there are no commits
    """
    branch = context.current_branch
    if branch is None:
        raise DetachedHeadError()

    try:
        title = git_backend.last_commit_subject()
    except NoCommitsError as e:
        raise EmptyOrMissingSubjectError(branch) from e

    if not title.strip():
        raise EmptyOrMissingSubjectError(branch)

    body = config.submit_body or DEFAULT_SUBMIT_BODY
    return SubmitResult(branch=branch, title=title, body=body, extra_flags=tuple(extra_flags))


def perform_submission(stacking_tool: StackingTool, request: SubmitResult) -> None:
    """Hand a prepared submission to the stacking tool."""
    logger.info(f"Submitting {request.branch} titled {request.title!r}")
    try:
        stacking_tool.submit_branch(
            request.branch, request.title, request.body, request.extra_flags
        )
    except StackingCommandError as e:
        raise SubmissionFailedError(request.branch, e) from e
