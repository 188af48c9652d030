"""Demo content for a fresh board."""

from datetime import datetime, timedelta

from scrumdo.model.backlog import add_task
from scrumdo.model.node import Node
from scrumdo.models import Sprint, Task, Weight, utcnow

SAMPLE_BACKLOG = [
    ("User authentication", "Login and sign-up flows", Weight.EIGHT),
    ("Database design", "Tables for users and tasks", Weight.FIVE),
    ("API design", "Design and implement the REST API", Weight.THIRTEEN),
    ("UI/UX design", "Screen layouts for the application", Weight.FIVE),
    ("Test suite", "Unit and integration tests", Weight.THREE),
]

# (days ago started, days ago ended, completed, incomplete)
SAMPLE_SPRINTS = [
    (
        42,
        28,
        [("Login screen", Weight.FIVE), ("Auth backend", Weight.EIGHT)],
        [("Error handling", Weight.THREE)],
    ),
    (
        28,
        14,
        [("User management", Weight.THIRTEEN), ("Profile screen", Weight.FIVE)],
        [("Settings screen", Weight.TWO)],
    ),
    (
        14,
        0,
        [("Data sync", Weight.EIGHT), ("Notifications", Weight.FIVE), ("UI polish", Weight.THREE)],
        [],
    ),
]


def seed_sample(board: Node, now: datetime | None = None) -> None:
    """Append demo backlog tasks and three finished sprints to board."""
    now = now or utcnow()
    for title, description, weight in SAMPLE_BACKLOG:
        add_task(board, title, description, weight, now=now)

    history = list(board.history)
    for started, ended, completed, incomplete in SAMPLE_SPRINTS:
        start = now - timedelta(days=started)
        end = now - timedelta(days=ended)
        history.append(
            Sprint(
                start_date=start,
                end_date=end,
                completed_tasks=tuple(
                    Task(title=t, weight=w, is_completed=True, created_at=start, updated_at=end)
                    for t, w in completed
                ),
                incomplete_tasks=tuple(
                    Task(title=t, weight=w, created_at=start, updated_at=end) for t, w in incomplete
                ),
            )
        )
    board.history = tuple(history)
