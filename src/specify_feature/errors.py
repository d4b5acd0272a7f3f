"""Errors raised while setting up a feature workspace.

Every error is terminal for the current invocation. The CLI prints the
message to stderr and exits with status 1.
"""


class FeatureSetupError(RuntimeError):
    """Base class for all feature setup failures."""


class UsageError(FeatureSetupError):
    """The command line did not include a feature description."""


class RootNotFound(FeatureSetupError):
    """No repository root could be found above the invocation directory."""

    def __init__(self, start_dir):
        self.start_dir = start_dir
        super().__init__(
            "Error: Could not determine repository root. "
            "Please run this command from within the repository."
        )


class GitRequired(FeatureSetupError):
    """The repository must be migrated but git is not available."""

    def __init__(self, repo_root):
        self.repo_root = repo_root
        super().__init__(
            "Error: Git worktrees require a git repository. Please initialize git first."
        )


class MigrationFailure(FeatureSetupError):
    """Moving the repository into the workspace layout failed."""

    def __init__(self, repo_root, reason):
        self.repo_root = repo_root
        super().__init__(f"Error: Failed to migrate {repo_root} to worktree structure: {reason}")


class WorktreeCreationFailure(FeatureSetupError):
    """git could not create the branch or worktree for the new feature."""

    def __init__(self, branch_name, worktree_path, reason):
        self.branch_name = branch_name
        self.worktree_path = worktree_path
        super().__init__(
            f"Error: Failed to create worktree for {branch_name} at {worktree_path}: {reason}"
        )
