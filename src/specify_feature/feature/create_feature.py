"""Create a new feature: resolve the workspace, allocate a branch, provision it."""

import os
from dataclasses import dataclass
from typing import Callable

from specify_feature.errors import GitRequired
from specify_feature.feature.branch_name import branch_name_for
from specify_feature.feature.numbering import next_feature_number
from specify_feature.feature.spec_materializer import SPECS_DIR_NAME, materialize_spec
from specify_feature.feature.worktree_provisioner import provision_worktree
from specify_feature.feature_config import read_feature_config
from specify_feature.repo.git_repository import GitRepository
from specify_feature.repo.root_locator import locate_repo_root
from specify_feature.workspace.layout import (
    WorkspaceLayout,
    classify_root,
    workspace_paths_for,
)
from specify_feature.workspace.migrator import migrate_to_workspace


@dataclass(frozen=True)
class FeatureResult:
    """Everything reported about a newly created feature."""

    branch_name: str
    spec_file: str
    feature_num: str
    worktree_path: str
    has_git: bool

    def as_record(self):
        return {
            "BRANCH_NAME": self.branch_name,
            "SPEC_FILE": self.spec_file,
            "FEATURE_NUM": self.feature_num,
            "WORKTREE_PATH": self.worktree_path,
            "HAS_GIT": self.has_git,
        }


@dataclass
class FeatureDeps:
    """Injectable collaborators for create_feature."""

    locate_root: Callable = locate_repo_root
    migrate: Callable = migrate_to_workspace
    open_git_repo: Callable = GitRepository.open
    chdir: Callable = os.chdir


def resolve_workspace(repo_root, deps):
    """Return WorkspacePaths for the root, migrating it first when needed.

    Raises:
        GitRequired: If the root must be migrated but git is not available.
        MigrationFailure: If the migration itself fails.
    """
    layout = classify_root(repo_root.path)
    if layout is not WorkspaceLayout.UNSTRUCTURED:
        return workspace_paths_for(repo_root.path, layout)
    if not repo_root.has_git:
        raise GitRequired(repo_root.path)
    return deps.migrate(repo_root.path)


def create_feature(description, start_dir=None, deps=None):
    """Create the branch, worktree and spec file for a feature description.

    Runs in order: locate the repository root, classify (and if necessary
    migrate) the workspace, number the feature, name its branch, provision
    the worktree and copy the spec template into it. The process working
    directory ends up inside the new worktree.

    Args:
        description: Free-text feature description.
        start_dir: Directory to start the root search from. Defaults to the
            current working directory.
        deps: FeatureDeps; defaults use git and the real filesystem.

    Returns:
        FeatureResult describing the new feature.

    Raises:
        FeatureSetupError: Any of its subclasses, on failure.
    """
    deps = deps or FeatureDeps()
    repo_root = deps.locate_root(start_dir or os.getcwd())
    paths = resolve_workspace(repo_root, deps)

    deps.chdir(paths.source_dir)
    config = read_feature_config(paths.source_dir)

    specs_dir = os.path.join(paths.source_dir, SPECS_DIR_NAME)
    os.makedirs(specs_dir, exist_ok=True)
    feature_num = next_feature_number(specs_dir, paths.worktree_dir)
    branch_name = branch_name_for(feature_num, description, config.branch_words)

    git_repo = deps.open_git_repo(paths.source_dir) if repo_root.has_git else None
    worktree = provision_worktree(git_repo, paths.worktree_dir, branch_name)
    deps.chdir(worktree.path)

    spec_file = materialize_spec(
        worktree.path, branch_name, config.template_path(paths.source_dir)
    )

    return FeatureResult(
        branch_name=branch_name,
        spec_file=spec_file,
        feature_num=feature_num,
        worktree_path=worktree.path,
        has_git=repo_root.has_git,
    )
