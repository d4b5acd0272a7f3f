"""GitRepository: wraps GitPython Repo for worktree operations.

Provides an injectable interface for Git operations, enabling
FakeGitRepository in tests without unittest.mock.patch.
"""

import os

from specify_feature.errors import WorktreeCreationFailure
from specify_feature.repo.git_support import GitCommandError, Repo


class GitRepository:
    """Wraps a GitPython Repo with the worktree operations feature setup needs.

    Args:
        repo: A GitPython Repo instance.
    """

    def __init__(self, repo):
        self._repo = repo

    @classmethod
    def open(cls, path):
        """Open the repository whose working tree is at path."""
        return cls(Repo(path))

    def add_worktree(self, branch_name, worktree_path):
        """Create branch_name from HEAD and check it out at worktree_path.

        Equivalent to ``git worktree add -b <branch> <path>`` run from this
        repository.

        Returns:
            Absolute path to the new worktree.

        Raises:
            WorktreeCreationFailure: If git refuses, e.g. because the branch
                already exists or the target directory is not empty.
        """
        worktree_path = os.path.abspath(worktree_path)
        try:
            self._repo.git.worktree("add", "-b", branch_name, worktree_path)
        except GitCommandError as exc:
            reason = (exc.stderr or str(exc)).strip()
            raise WorktreeCreationFailure(branch_name, worktree_path, reason) from exc
        return worktree_path
