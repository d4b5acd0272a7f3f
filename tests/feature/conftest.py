"""Shared fixtures for feature tests."""

import os
import sys

# Ensure tests/feature/ is on sys.path so test files can import
# fake_git_repository unambiguously.
sys.path.insert(0, os.path.dirname(__file__))

from fake_git_repository import FakeGitRepository  # noqa: E402, F401
