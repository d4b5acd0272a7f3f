"""One-time migration of a plain repository into the workspace layout."""

import os

import click

from specify_feature.errors import MigrationFailure
from specify_feature.workspace.layout import WORKSPACE_DIR_NAME, WorkspacePaths


def migrate_to_workspace(repo_root):
    """Move repo_root to ``<parent>/workspace/source``.

    Creates ``<parent>/workspace`` and ``<parent>/workspace/worktree`` first.
    The rename is destructive: repo_root no longer exists afterwards.
    Nothing is rolled back on failure.

    Returns:
        WorkspacePaths for the new layout.

    Raises:
        MigrationFailure: On any filesystem error.
    """
    repo_root = os.path.abspath(repo_root)
    paths = WorkspacePaths.under(os.path.join(os.path.dirname(repo_root), WORKSPACE_DIR_NAME))

    click.echo("Migrating to worktree structure...", err=True)
    try:
        os.makedirs(paths.workspace_dir, exist_ok=True)
        os.makedirs(paths.worktree_dir, exist_ok=True)
        os.rename(repo_root, paths.source_dir)
    except OSError as exc:
        raise MigrationFailure(repo_root, exc.strerror or str(exc)) from exc

    click.echo(f"Migration complete. Repository moved to {paths.source_dir}", err=True)
    return paths
