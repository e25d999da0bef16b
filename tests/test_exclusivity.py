"""Tests for the worktree exclusivity guard"""
import pytest

from git_desk.exceptions import BranchConflictError
from git_desk.services.exclusivity import check_exclusive, ensure_exclusive

from conftest import make_worktree


@pytest.fixture
def worktrees():
    return [
        make_worktree("/src/repo", "main", is_main=True),
        make_worktree("/src/desk-1", "feature/a"),
        make_worktree("/other/path", "main-desk-2"),
        make_worktree("/src/detached", ""),
    ]


class TestCheckExclusive:
    """Test conflict detection."""

    def test_no_entry_holds_branch(self, worktrees):
        result = check_exclusive("main-desk-7", "/src/desk-7", worktrees)
        assert result.ok is True
        assert result.other_path is None

    def test_only_current_root_holds_branch(self, worktrees):
        result = check_exclusive("feature/a", "/src/desk-1", worktrees)
        assert result.ok is True

    def test_current_root_with_trailing_separator(self, worktrees):
        assert check_exclusive("feature/a", "/src/desk-1/", worktrees).ok is True

    def test_branch_checked_out_elsewhere(self, worktrees):
        result = check_exclusive("main-desk-2", "/src/desk-2", worktrees)
        assert result.ok is False
        assert result.other_path == "/other/path"

    def test_detached_worktrees_never_conflict(self, worktrees):
        assert check_exclusive("", "/src/desk-2", worktrees).ok is True

    def test_empty_worktree_list(self):
        assert check_exclusive("main", "/src/repo", []).ok is True


class TestEnsureExclusive:
    """Test the raising variant."""

    def test_raises_with_other_path(self, worktrees):
        with pytest.raises(BranchConflictError) as exc_info:
            ensure_exclusive("main", "/src/desk-1", worktrees)
        assert exc_info.value.other_path == "/src/repo"
        assert exc_info.value.branch == "main"
        assert "/src/repo" in str(exc_info.value)

    def test_passes_when_free(self, worktrees):
        ensure_exclusive("main-desk-3", "/src/desk-3", worktrees)
