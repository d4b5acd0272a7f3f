"""GitPython import that tolerates a missing git executable.

GitPython looks for ``git`` when it is first imported and raises
ImportError if none is found. Quiet refresh mode defers that failure to
the first git command, so callers see GitCommandNotFound instead and can
fall back to working without git.
"""

import os

os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from git import Repo  # noqa: E402
from git.exc import (  # noqa: E402
    GitCommandError,
    GitCommandNotFound,
    InvalidGitRepositoryError,
    NoSuchPathError,
)

__all__ = [
    "GitCommandError",
    "GitCommandNotFound",
    "InvalidGitRepositoryError",
    "NoSuchPathError",
    "Repo",
]
