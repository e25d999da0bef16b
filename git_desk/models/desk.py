"""Desk name model."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DeskName:
    """Result of parsing a worktree directory name against the desk convention."""

    worktree_name: str
    is_desk: bool
    desk_id: Optional[str] = None
