"""Report a created feature as JSON or as human-readable lines."""

import json
import os

ACTIVE_FEATURE_VAR = "SPECIFY_FEATURE"
ENV_FILE_VAR = "SPECIFY_FEATURE_ENV_FILE"


def format_json(result) -> str:
    """Return the feature record as a single JSON line."""
    return json.dumps(result.as_record())


def format_lines(result) -> list[str]:
    """Return the feature record as human-readable ``KEY: value`` lines."""
    return [
        f"BRANCH_NAME: {result.branch_name}",
        f"WORKTREE_PATH: {result.worktree_path}",
        f"SPEC_FILE: {result.spec_file}",
        f"FEATURE_NUM: {result.feature_num}",
        f"HAS_GIT: {str(result.has_git).lower()}",
        f"{ACTIVE_FEATURE_VAR} environment variable set to: {result.branch_name}",
    ]


def publish_active_feature(branch_name, environ=None):
    """Record branch_name as the active feature.

    Sets SPECIFY_FEATURE in environ (the process environment by default).
    A child process cannot change its parent shell's environment, so when
    SPECIFY_FEATURE_ENV_FILE names a file, a ``SPECIFY_FEATURE=<branch>``
    line is appended to it for the caller to source.

    Returns:
        The env file path written to, or None.
    """
    if environ is None:
        environ = os.environ
    environ[ACTIVE_FEATURE_VAR] = branch_name

    env_file = environ.get(ENV_FILE_VAR)
    if not env_file:
        return None
    with open(env_file, "a") as f:
        f.write(f"{ACTIVE_FEATURE_VAR}={branch_name}\n")
    return env_file
