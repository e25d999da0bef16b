"""Stacking tool services for git-desk."""

from .base import StackingTool
from .git_spice import GitSpice

__all__ = ["StackingTool", "GitSpice"]
