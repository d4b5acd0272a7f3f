"""Unit tests for GitRepository worktree operations.

These tests use real GitPython repos in temp directories.
"""

import os

import pytest
from git import Repo

from specify_feature.errors import WorktreeCreationFailure
from specify_feature.repo.git_repository import GitRepository


@pytest.mark.unit
class TestAddWorktree:

    def test_creates_branch_and_checks_it_out(self, tmp_path, git_project):
        git_repo = GitRepository.open(str(git_project))
        target = tmp_path / "worktrees" / "001-add-login"

        path = git_repo.add_worktree("001-add-login", str(target))

        assert path == str(target)
        assert "001-add-login" in [b.name for b in Repo(str(git_project)).branches]
        assert Repo(path).active_branch.name == "001-add-login"
        assert os.path.isfile(os.path.join(path, "README.md"))

    def test_existing_branch_raises(self, tmp_path, git_project):
        Repo(str(git_project)).create_head("001-add-login")
        git_repo = GitRepository.open(str(git_project))

        with pytest.raises(WorktreeCreationFailure) as excinfo:
            git_repo.add_worktree("001-add-login", str(tmp_path / "wt"))

        assert excinfo.value.branch_name == "001-add-login"
        assert "001-add-login" in str(excinfo.value)

    def test_non_empty_target_raises(self, tmp_path, git_project):
        target = tmp_path / "wt"
        target.mkdir()
        (target / "existing.txt").write_text("x")
        git_repo = GitRepository.open(str(git_project))

        with pytest.raises(WorktreeCreationFailure):
            git_repo.add_worktree("002-other", str(target))


@pytest.mark.unit
class TestAddWorktreePaths:

    def test_relative_target_is_returned_absolute(self, tmp_path, git_project, monkeypatch):
        monkeypatch.chdir(tmp_path)
        git_repo = GitRepository.open(str(git_project))

        path = git_repo.add_worktree("003-relative", os.path.join("wt", "003-relative"))

        assert path == str(tmp_path / "wt" / "003-relative")
        assert os.path.isdir(path)
