"""Workspace layout: classify a repository root by its path segments.

A structured workspace looks like::

    workspace/
        source/              <- the main repository
        worktree/<branch>/   <- one git worktree per feature
"""

import os
from dataclasses import dataclass
from enum import Enum

WORKSPACE_DIR_NAME = "workspace"
SOURCE_DIR_NAME = "source"
WORKTREE_DIR_NAME = "worktree"


class WorkspaceLayout(Enum):
    UNSTRUCTURED = "unstructured"
    SOURCE = "source"
    WORKTREE = "worktree"


@dataclass(frozen=True)
class WorkspacePaths:
    workspace_dir: str
    source_dir: str
    worktree_dir: str

    @classmethod
    def under(cls, workspace_dir):
        return cls(
            workspace_dir=workspace_dir,
            source_dir=os.path.join(workspace_dir, SOURCE_DIR_NAME),
            worktree_dir=os.path.join(workspace_dir, WORKTREE_DIR_NAME),
        )


def classify_root(root):
    """Classify root from the names of its parent and grandparent directories.

    Only the path string is inspected; nothing is read from disk.
    """
    root = os.path.normpath(root)
    parent = os.path.dirname(root)
    grandparent = os.path.dirname(parent)

    if os.path.basename(parent) == WORKSPACE_DIR_NAME and os.path.basename(root) == SOURCE_DIR_NAME:
        return WorkspaceLayout.SOURCE
    if os.path.basename(grandparent) == WORKSPACE_DIR_NAME and os.path.basename(parent) == WORKTREE_DIR_NAME:
        return WorkspaceLayout.WORKTREE
    return WorkspaceLayout.UNSTRUCTURED


def workspace_paths_for(root, layout):
    """Return the workspace directories for a root in a structured layout.

    Raises:
        ValueError: If layout is UNSTRUCTURED.
    """
    root = os.path.normpath(root)
    if layout is WorkspaceLayout.SOURCE:
        return WorkspacePaths.under(os.path.dirname(root))
    if layout is WorkspaceLayout.WORKTREE:
        return WorkspacePaths.under(os.path.dirname(os.path.dirname(root)))
    msg = f"Repository at {root} is not in a workspace layout"
    raise ValueError(msg)
