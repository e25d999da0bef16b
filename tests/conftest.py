"""Pytest fixtures for git-desk tests"""
import tempfile
from pathlib import Path
from typing import Iterable, Optional

import git
import pytest

from git_desk.config import Config
from git_desk.exceptions import (
    BranchCreateFailedError,
    DetachedHeadError,
    NoCommitsError,
    NotARepositoryError,
    StackingCommandError,
    SwitchFailedError,
)
from git_desk.models.worktree import WorktreeInfo
from git_desk.services.git.base import GitBackend
from git_desk.services.stacking.base import StackingTool


class FakeGitBackend(GitBackend):
    """In-memory git backend.

    Records every mutating call in ``calls`` so tests can assert that nothing
    was changed when a precondition failed.
    """

    def __init__(
        self,
        root: str = "/work/repo",
        current_branch: Optional[str] = "main",
        worktrees: Iterable[WorktreeInfo] = (),
        staged: bool = False,
        branches: Iterable[str] = ("main",),
        last_subject: Optional[str] = "Initial commit",
        in_repo: bool = True,
    ):
        self.root = root
        self.branch = current_branch
        self.worktrees = list(worktrees)
        self.staged = staged
        self.branches = set(branches)
        self.last_subject = last_subject
        self.in_repo = in_repo
        self.calls: list[tuple] = []

    def current_root(self) -> str:
        if not self.in_repo:
            raise NotARepositoryError(self.root)
        return self.root

    def current_branch(self) -> str:
        if self.branch is None:
            raise DetachedHeadError()
        return self.branch

    def list_worktrees(self) -> list[WorktreeInfo]:
        return list(self.worktrees)

    def has_staged_changes(self) -> bool:
        return self.staged

    def last_commit_subject(self) -> str:
        if self.last_subject is None:
            raise NoCommitsError(self.branch)
        return self.last_subject

    def branch_exists(self, name: str) -> bool:
        return name in self.branches

    def switch(self, branch: str) -> None:
        self.calls.append(("switch", branch))
        if branch not in self.branches:
            raise SwitchFailedError(branch, f"invalid reference: {branch}")
        self.branch = branch

    def create_branch(self, branch: str) -> None:
        self.calls.append(("create_branch", branch))
        if branch in self.branches:
            raise BranchCreateFailedError(branch, "already exists")
        self.branches.add(branch)
        self.branch = branch

    def short_status(self) -> str:
        return f"## {self.branch}"


class FakeStackingTool(StackingTool):
    """In-memory stacking tool that records calls and can be told to fail."""

    def __init__(self, git_backend: Optional[FakeGitBackend] = None, fail_on: Iterable[str] = ()):
        self.git_backend = git_backend
        self.fail_on = set(fail_on)
        self.calls: list[tuple] = []

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.fail_on:
            raise StackingCommandError(["gs", operation], 1)

    def track_branch(self) -> None:
        self.calls.append(("track",))
        self._maybe_fail("track")

    def commit_staged(self, message: Optional[str] = None) -> None:
        self.calls.append(("commit", message))
        self._maybe_fail("commit")
        if self.git_backend is not None:
            self.git_backend.staged = False
            self.git_backend.last_subject = message or "Edited in editor"

    def restack_onto(self, branch: str) -> None:
        self.calls.append(("restack", branch))
        self._maybe_fail("restack")

    def submit_branch(self, branch, title, body, extra_flags=()) -> None:
        self.calls.append(("submit", branch, title, body, tuple(extra_flags)))
        self._maybe_fail("submit")


def make_worktree(path: str, branch: str = "", is_main: bool = False) -> WorktreeInfo:
    return WorktreeInfo(
        path=path, branch_name=branch, commit_sha="abc123", is_main=is_main, is_orphaned=False
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # Resolve so paths match what git reports (e.g. /private/var on macOS)
        yield Path(tmpdir).resolve()


@pytest.fixture
def config():
    """Default configuration."""
    return Config()


@pytest.fixture
def fake_git():
    """Fake git backend on branch main with nothing staged."""
    return FakeGitBackend()


@pytest.fixture
def fake_stack(fake_git):
    """Fake stacking tool wired to fake_git."""
    return FakeStackingTool(fake_git)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository on branch main with one commit."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch("-M", "main")

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_desks(git_repo, temp_dir):
    """Repository with desk main branches and a linked worktree per desk.

    Layout:
        test_repo/  -> main
        desk-1/     -> scratch-1 (main-desk-1 exists but is not checked out)
        desk-2/     -> main-desk-2
    """
    repo = git_repo
    repo.git.branch("main-desk-1")
    repo.git.branch("main-desk-2")
    repo.git.branch("scratch-1")

    repo.git.worktree("add", str(temp_dir / "desk-1"), "scratch-1")
    repo.git.worktree("add", str(temp_dir / "desk-2"), "main-desk-2")

    yield repo
