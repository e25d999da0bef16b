"""Core workflows for git-desk."""

from .switcher import goto_main, switch_to
from .new_branch import create_new_branch, validate_branch_name
from .submit import perform_submission, prepare_submission
from .desk_keeper import DeskKeeper

__all__ = [
    "DeskKeeper",
    "goto_main",
    "switch_to",
    "create_new_branch",
    "validate_branch_name",
    "prepare_submission",
    "perform_submission",
]
