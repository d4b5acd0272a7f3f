"""Worktree provisioning: create the isolated working copy for a feature."""

import os
from dataclasses import dataclass

import click


@dataclass(frozen=True)
class ProvisionedWorktree:
    path: str
    is_git_worktree: bool


def worktree_path_for(worktree_dir, branch_name):
    return os.path.join(worktree_dir, branch_name)


def provision_worktree(git_repo, worktree_dir, branch_name):
    """Create ``worktree_dir/<branch_name>`` for a new feature.

    With a git repository, a new branch is created and checked out there as a
    git worktree. Without one, a plain directory is created and a warning is
    written to stderr.

    Args:
        git_repo: A GitRepository for the source repository, or None when git
            is not available.
        worktree_dir: The workspace's worktree directory.
        branch_name: Name of the new branch and of its directory.

    Raises:
        WorktreeCreationFailure: If git cannot create the branch or worktree.
    """
    target = worktree_path_for(worktree_dir, branch_name)

    if git_repo is not None:
        path = git_repo.add_worktree(branch_name, target)
        return ProvisionedWorktree(path=path, is_git_worktree=True)

    click.echo(
        f"[specify] Warning: Git repository not detected; skipped worktree creation for {branch_name}",
        err=True,
    )
    os.makedirs(target, exist_ok=True)
    return ProvisionedWorktree(path=os.path.abspath(target), is_git_worktree=False)
