"""Tests for the GitPython-backed repository service"""
import logging
from pathlib import Path

import git
import pytest

from git_desk.exceptions import (
    BranchCreateFailedError,
    DetachedHeadError,
    NoCommitsError,
    NotARepositoryError,
    SwitchFailedError,
)
from git_desk.services.git.repository import GitRepository, describe_git_error


class TestRepositoryQueries:
    """Test read-only queries."""

    def test_current_root(self, git_repo):
        service = GitRepository(git_repo.working_dir)
        assert service.current_root() == git_repo.working_dir

    def test_current_root_from_subdirectory(self, git_repo):
        subdir = Path(git_repo.working_dir) / "sub" / "dir"
        subdir.mkdir(parents=True)
        service = GitRepository(str(subdir))
        assert service.current_root() == git_repo.working_dir

    def test_current_root_of_linked_worktree(self, git_repo_with_desks, temp_dir):
        service = GitRepository(str(temp_dir / "desk-1"))
        assert service.current_root() == str(temp_dir / "desk-1")

    def test_not_a_repository(self, temp_dir):
        service = GitRepository(str(temp_dir))
        with pytest.raises(NotARepositoryError):
            service.current_root()

    def test_nonexistent_path(self, temp_dir):
        service = GitRepository(str(temp_dir / "nonexistent"))
        with pytest.raises(NotARepositoryError):
            service.current_root()

    def test_current_branch(self, git_repo):
        assert GitRepository(git_repo.working_dir).current_branch() == "main"

    def test_current_branch_detached(self, git_repo):
        git_repo.git.checkout(git_repo.head.commit.hexsha)
        with pytest.raises(DetachedHeadError):
            GitRepository(git_repo.working_dir).current_branch()

    def test_has_staged_changes(self, git_repo):
        service = GitRepository(git_repo.working_dir)
        assert service.has_staged_changes() is False

        (Path(git_repo.working_dir) / "new.txt").write_text("new\n")
        assert service.has_staged_changes() is False  # untracked only

        git_repo.index.add(["new.txt"])
        assert service.has_staged_changes() is True

    def test_last_commit_subject(self, git_repo):
        assert GitRepository(git_repo.working_dir).last_commit_subject() == "Initial commit"

    def test_last_commit_subject_uses_first_line(self, git_repo):
        git_repo.git.commit("--allow-empty", "-m", "Add widgets\n\nLonger body text")
        assert GitRepository(git_repo.working_dir).last_commit_subject() == "Add widgets"

    def test_last_commit_subject_without_commits(self, temp_dir):
        repo = git.Repo.init(temp_dir / "empty")
        with pytest.raises(NoCommitsError):
            GitRepository(repo.working_dir).last_commit_subject()

    def test_branch_exists(self, git_repo):
        git_repo.git.branch("feature/x")
        service = GitRepository(git_repo.working_dir)
        assert service.branch_exists("main") is True
        assert service.branch_exists("feature/x") is True
        assert service.branch_exists("feature/y") is False

    def test_short_status(self, git_repo):
        assert GitRepository(git_repo.working_dir).short_status().startswith("## main")


class TestRepositoryMutations:
    """Test switch and branch creation."""

    def test_switch(self, git_repo):
        git_repo.git.branch("other")
        service = GitRepository(git_repo.working_dir)
        service.switch("other")
        assert git_repo.active_branch.name == "other"

    def test_switch_to_missing_branch(self, git_repo):
        service = GitRepository(git_repo.working_dir)
        with pytest.raises(SwitchFailedError) as exc_info:
            service.switch("main-desk-9")
        assert exc_info.value.branch == "main-desk-9"
        assert exc_info.value.message

    def test_switch_failure_logged_at_debug_only(self, git_repo, caplog):
        caplog.set_level(logging.DEBUG)
        service = GitRepository(git_repo.working_dir)
        with pytest.raises(SwitchFailedError):
            service.switch("main-desk-9")

        failures = [r for r in caplog.records if "Failed to switch" in r.getMessage()]
        assert [(r.name, r.levelno) for r in failures] == [("services.git.repository", logging.DEBUG)]
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_switch_to_branch_held_by_other_worktree(self, git_repo_with_desks, temp_dir):
        service = GitRepository(str(temp_dir / "desk-1"))
        with pytest.raises(SwitchFailedError):
            service.switch("main-desk-2")

    def test_create_branch(self, git_repo):
        service = GitRepository(git_repo.working_dir)
        service.create_branch("feature/new")
        assert git_repo.active_branch.name == "feature/new"

    def test_create_existing_branch(self, git_repo):
        git_repo.git.branch("feature/new")
        service = GitRepository(git_repo.working_dir)
        with pytest.raises(BranchCreateFailedError):
            service.create_branch("feature/new")
        assert git_repo.active_branch.name == "main"


class TestBuildContext:
    """Test snapshotting the invocation context."""

    def test_context_from_desk_worktree(self, git_repo_with_desks, temp_dir):
        context = GitRepository(str(temp_dir / "desk-2")).build_context()
        assert context.root == str(temp_dir / "desk-2")
        assert context.current_branch == "main-desk-2"
        assert len(context.worktrees) == 3

    def test_context_with_detached_head(self, git_repo):
        git_repo.git.checkout(git_repo.head.commit.hexsha)
        context = GitRepository(git_repo.working_dir).build_context()
        assert context.current_branch is None

    def test_context_outside_repository(self, temp_dir):
        with pytest.raises(NotARepositoryError):
            GitRepository(str(temp_dir)).build_context()


class TestDescribeGitError:
    """Test formatting GitCommandError."""

    def test_includes_stderr_and_status(self):
        error = git.exc.GitCommandError(["git", "switch", "x"], 128, stderr="fatal: invalid reference: x")
        message = describe_git_error(error)
        assert "invalid reference: x" in message
        assert "128" in message

    def test_without_stderr(self):
        error = git.exc.GitCommandError(["git", "switch", "x"], 1)
        assert describe_git_error(error) == "git exited with code 1"
