"""Result models returned by the guard and the workflows."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExclusivityResult:
    """Outcome of checking whether a branch is free to check out here."""

    ok: bool
    other_path: Optional[str] = None


@dataclass(frozen=True)
class NewBranchResult:
    """Outcome of the new-branch workflow."""

    branch: str
    start_branch: str
    stacked_onto: Optional[str] = None

    @property
    def stacked(self) -> bool:
        return self.stacked_onto is not None


@dataclass(frozen=True)
class SubmitResult:
    """What was handed to the stacking tool for submission."""

    branch: str
    title: str
    body: str
    extra_flags: tuple[str, ...] = ()
