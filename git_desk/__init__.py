"""
git-desk - Git worktree desks and stacked branches on top of git-spice
"""

from .__version__ import __version__
from .core import DeskKeeper
from .cli.main import main

__all__ = ["DeskKeeper", "main", "__version__"]
