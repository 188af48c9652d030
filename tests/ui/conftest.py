"""Fixtures for UI tests."""

import pytest

from scrumdo.models import Weight
from scrumdo.session import Session
from scrumdo.store import MemoryStore


@pytest.fixture
def session():
    """In-memory session with backlog A (3pt), B (5pt), C (8pt)."""
    session = Session(MemoryStore())
    session.add_task("A", "first", Weight.THREE)
    session.add_task("B", "second", Weight.FIVE)
    session.add_task("C", "third", Weight.EIGHT)
    return session
