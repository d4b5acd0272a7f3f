"""Locate the repository root for the current invocation."""

import os
from dataclasses import dataclass

from specify_feature.errors import RootNotFound
from specify_feature.repo.git_support import (
    GitCommandError,
    GitCommandNotFound,
    InvalidGitRepositoryError,
    NoSuchPathError,
    Repo,
)
from specify_feature.workspace.layout import WorkspaceLayout, classify_root, workspace_paths_for

ROOT_MARKERS = (".git", ".specify")


@dataclass(frozen=True)
class RepoRoot:
    path: str
    has_git: bool


def git_toplevel(start_dir):
    """Ask git for the top-level directory containing start_dir.

    Returns None when start_dir is not inside a git working tree or no git
    executable is installed.
    """
    try:
        repo = Repo(start_dir, search_parent_directories=True)
        return repo.git.rev_parse("--show-toplevel").strip()
    except (InvalidGitRepositoryError, NoSuchPathError, GitCommandError, GitCommandNotFound):
        return None


def _has_marker(directory):
    return any(os.path.isdir(os.path.join(directory, marker)) for marker in ROOT_MARKERS)


def _is_marked_feature_folder(directory):
    """True for ``workspace/worktree/<name>`` when ``workspace/source`` is marked."""
    if classify_root(directory) is not WorkspaceLayout.WORKTREE:
        return False
    return _has_marker(workspace_paths_for(directory, WorkspaceLayout.WORKTREE).source_dir)


def find_marked_root(start_dir):
    """Walk upward from start_dir to the first directory holding a root marker.

    A marker is a ``.git`` or ``.specify`` directory. A feature folder under
    ``workspace/worktree/`` counts as a root when its workspace's source
    directory is marked. The filesystem root itself is never considered.
    """
    directory = os.path.abspath(start_dir)
    while os.path.dirname(directory) != directory:
        if _has_marker(directory) or _is_marked_feature_folder(directory):
            return directory
        directory = os.path.dirname(directory)
    return None


def locate_repo_root(start_dir):
    """Return the repository root for start_dir and whether git manages it.

    Raises:
        RootNotFound: If neither git nor the marker search finds a root.
    """
    toplevel = git_toplevel(start_dir)
    if toplevel:
        return RepoRoot(path=os.path.abspath(toplevel), has_git=True)

    marked = find_marked_root(start_dir)
    if marked is None:
        raise RootNotFound(start_dir)
    return RepoRoot(path=marked, has_git=False)
