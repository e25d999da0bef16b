"""Desk naming convention.

A worktree directory named ``desk-<id>`` is a desk, bound to the long-lived
branch ``main-desk-<id>``. Any other worktree belongs to ``main``. These
functions are pure: they only look at strings, never at the filesystem.
"""

import re
from functools import lru_cache
from pathlib import PurePath

from git_desk.constants import DEFAULT_DESK_PREFIX, DEFAULT_MAIN_BRANCH, DESK_ID_PATTERN
from git_desk.models.desk import DeskName


@lru_cache(maxsize=None)
def _desk_pattern(desk_prefix: str) -> re.Pattern:
    return re.compile(rf"^{re.escape(desk_prefix)}({DESK_ID_PATTERN})$")


@lru_cache(maxsize=None)
def _desk_main_pattern(main_branch: str, desk_prefix: str) -> re.Pattern:
    return re.compile(rf"^{re.escape(main_branch)}-{re.escape(desk_prefix)}{DESK_ID_PATTERN}$")


def worktree_name(worktree_path: str) -> str:
    """Final path segment of a worktree path, ignoring trailing separators."""
    return PurePath(worktree_path).name


def parse_desk_name(name: str, desk_prefix: str = DEFAULT_DESK_PREFIX) -> DeskName:
    """
    Parse a worktree directory name against the desk convention.

    Args:
        name: Directory name, e.g. "desk-1"
        desk_prefix: Prefix that marks a desk directory

    Returns:
        DeskName with is_desk set and desk_id filled in on a match

    Example:
        parse_desk_name("desk-1")  -> DeskName("desk-1", is_desk=True, desk_id="1")
        parse_desk_name("desk-")   -> DeskName("desk-", is_desk=False)
    """
    match = _desk_pattern(desk_prefix).match(name)
    if match:
        return DeskName(worktree_name=name, is_desk=True, desk_id=match.group(1))
    return DeskName(worktree_name=name, is_desk=False)


def resolve_target_branch(
    worktree_path: str,
    main_branch: str = DEFAULT_MAIN_BRANCH,
    desk_prefix: str = DEFAULT_DESK_PREFIX,
) -> str:
    """
    Map a worktree path to the main branch it should sit on.

    Args:
        worktree_path: Root path of the worktree
        main_branch: Name of the main line
        desk_prefix: Prefix that marks a desk directory

    Returns:
        "main-desk-<id>" for a desk worktree, otherwise the main line
    """
    desk = parse_desk_name(worktree_name(worktree_path), desk_prefix)
    if desk.is_desk:
        return f"{main_branch}-{desk.worktree_name}"
    return main_branch


def is_main_variant(
    branch: str,
    main_branch: str = DEFAULT_MAIN_BRANCH,
    desk_prefix: str = DEFAULT_DESK_PREFIX,
) -> bool:
    """True for the main line itself and for any desk main branch."""
    if branch == main_branch:
        return True
    return _desk_main_pattern(main_branch, desk_prefix).match(branch) is not None
