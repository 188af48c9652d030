"""Shared test helpers for model tests."""

from datetime import datetime, timedelta, timezone

import pytest

from scrumdo.model.board import new_board
from scrumdo.models import Task

T0 = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


def _make_task(title, weight=3, completed=False, task_id=None, **kwargs):
    """Helper to build a Task with a stable id."""
    return Task(
        title=title,
        weight=weight,
        is_completed=completed,
        created_at=T0,
        updated_at=T0,
        id=task_id or title.lower().replace(" ", "-"),
        **kwargs,
    )


def _make_board(backlog=(), sprint_tasks=(), draft=(), history=(), sprint_start=None):
    """Helper to build a board Node from task titles or Tasks."""

    def tasks(items):
        return [t if isinstance(t, Task) else _make_task(t) for t in items]

    return new_board(
        backlog=tasks(backlog),
        sprint_tasks=tasks(sprint_tasks),
        draft=tasks(draft),
        history=history,
        sprint_start=sprint_start,
    )


def _ids(tasks):
    return [t.id for t in tasks]


def _days(n):
    return T0 + timedelta(days=n)


@pytest.fixture
def board():
    """Backlog a, b, c (3pt each), nothing staged, no sprint."""
    return _make_board(backlog=["a", "b", "c"])
