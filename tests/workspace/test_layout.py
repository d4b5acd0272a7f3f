"""Unit tests for workspace layout classification."""

import os

import pytest

from specify_feature.workspace.layout import (
    WorkspaceLayout,
    WorkspacePaths,
    classify_root,
    workspace_paths_for,
)


@pytest.mark.unit
class TestClassifyRoot:

    def test_source_directory_under_workspace(self):
        assert classify_root("/r/workspace/source") is WorkspaceLayout.SOURCE

    def test_branch_directory_under_workspace_worktree(self):
        assert classify_root("/r/workspace/worktree/001-add-login") is WorkspaceLayout.WORKTREE

    def test_plain_repository_is_unstructured(self):
        assert classify_root("/r/proj") is WorkspaceLayout.UNSTRUCTURED

    def test_source_outside_workspace_is_unstructured(self):
        assert classify_root("/r/other/source") is WorkspaceLayout.UNSTRUCTURED

    def test_worktree_outside_workspace_is_unstructured(self):
        assert classify_root("/r/other/worktree/001-x") is WorkspaceLayout.UNSTRUCTURED

    def test_trailing_separator_is_ignored(self):
        assert classify_root("/r/workspace/source/") is WorkspaceLayout.SOURCE

    def test_does_not_touch_the_filesystem(self, tmp_path):
        missing = tmp_path / "nowhere" / "workspace" / "source"

        assert not missing.exists()
        assert classify_root(str(missing)) is WorkspaceLayout.SOURCE

    @pytest.mark.parametrize("path", [
        "/r/proj",
        "/r/workspace/source",
        "/r/workspace/worktree/002-x",
    ])
    def test_classification_is_stable(self, path):
        assert classify_root(path) is classify_root(path)


@pytest.mark.unit
class TestWorkspacePathsFor:

    def test_paths_for_source_root(self):
        paths = workspace_paths_for("/r/workspace/source", WorkspaceLayout.SOURCE)

        assert paths == WorkspacePaths(
            workspace_dir=os.path.normpath("/r/workspace"),
            source_dir=os.path.join(os.path.normpath("/r/workspace"), "source"),
            worktree_dir=os.path.join(os.path.normpath("/r/workspace"), "worktree"),
        )

    def test_worktree_root_points_back_to_source(self):
        paths = workspace_paths_for("/r/workspace/worktree/003-y", WorkspaceLayout.WORKTREE)

        assert paths.source_dir == os.path.join(os.path.normpath("/r/workspace"), "source")
        assert paths.worktree_dir == os.path.join(os.path.normpath("/r/workspace"), "worktree")

    def test_unstructured_root_raises(self):
        with pytest.raises(ValueError, match="not in a workspace layout"):
            workspace_paths_for("/r/proj", WorkspaceLayout.UNSTRUCTURED)
