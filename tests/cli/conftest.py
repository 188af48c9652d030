"""Shared fixtures for CLI tests."""

import pytest

from scrumdo.models import Weight
from scrumdo.session import Session


def _session(repo):
    """Fresh session on the board stored in repo."""
    return Session.open(repo)


@pytest.fixture
def initialized_repo(empty_repo):
    """Create a repo with a board holding three backlog tasks."""
    session = Session.open(empty_repo)
    session.add_task("First task", "Description one.", Weight.THREE)
    session.add_task("Second task", "Description two.", Weight.FIVE)
    session.add_task("Third task", "", Weight.EIGHT)
    return empty_repo


@pytest.fixture
def sprint_repo(initialized_repo):
    """Repo with a running sprint holding the first two tasks."""
    session = Session.open(initialized_repo)
    for task in session.backlog[:2]:
        session.stage_task(task.id)
    session.start_sprint()
    return initialized_repo
