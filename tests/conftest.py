"""Shared fixtures for specify-feature tests."""

import os

import pytest
from git import Repo


def init_git_repo(path):
    """Initialize a git repo at path with one commit and return the Repo."""
    os.makedirs(path, exist_ok=True)
    repo = Repo.init(path)
    repo.config_writer().set_value("user", "email", "test@test.com").release()
    repo.config_writer().set_value("user", "name", "Test").release()

    readme = os.path.join(path, "README.md")
    with open(readme, "w") as f:
        f.write("# Test")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")
    return repo


@pytest.fixture
def git_project(tmp_path):
    """An unstructured git repository at tmp_path/r/proj."""
    project = tmp_path / "r" / "proj"
    init_git_repo(str(project))
    return project


@pytest.fixture
def isolated_env(monkeypatch):
    """Keep SPECIFY_FEATURE changes from leaking between tests."""
    monkeypatch.delenv("SPECIFY_FEATURE", raising=False)
    monkeypatch.delenv("SPECIFY_FEATURE_ENV_FILE", raising=False)
    return monkeypatch


@pytest.fixture
def make_git_project(tmp_path):
    """Factory creating unstructured git repositories under tmp_path."""

    def _make(*parts):
        project = tmp_path.joinpath(*parts)
        init_git_repo(str(project))
        return project

    return _make
