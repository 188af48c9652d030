"""Shared fixtures: throwaway git repositories."""

import pytest
from git import Repo


@pytest.fixture(autouse=True)
def git_identity(monkeypatch):
    """Commit identity for git subprocesses, whatever the global config says."""
    for role in ("AUTHOR", "COMMITTER"):
        monkeypatch.setenv(f"GIT_{role}_NAME", "Test User")
        monkeypatch.setenv(f"GIT_{role}_EMAIL", "test@example.com")


@pytest.fixture
def empty_repo(tmp_path):
    """Create a git repo with one commit on its main branch."""
    repo = Repo.init(tmp_path)
    (tmp_path / ".gitkeep").write_text("")
    repo.index.add([".gitkeep"])
    repo.index.commit("Initial commit")
    return tmp_path
