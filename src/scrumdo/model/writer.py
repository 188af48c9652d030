"""Serialize a board (Node) into blobs for a store."""

import json
from collections.abc import Iterable

from scrumdo.constants import SPRINT_KEY, TASKS_KEY
from scrumdo.model.node import Node
from scrumdo.models import Sprint, Task

# --- Helpers for converting values to plain JSON-ready dicts ---


def task_to_dict(task: Task) -> dict:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "status": task.status.value,
        "weight": int(task.weight),
        "is_completed": task.is_completed,
        "created_at": task.created_at.isoformat(),
        "updated_at": task.updated_at.isoformat(),
    }


def sprint_to_dict(sprint: Sprint) -> dict:
    """Stored fields only; totals and velocity are recomputed on load."""
    return {
        "id": sprint.id,
        "start_date": sprint.start_date.isoformat(),
        "end_date": sprint.end_date.isoformat(),
        "completed_tasks": [task_to_dict(t) for t in sprint.completed_tasks],
        "incomplete_tasks": [task_to_dict(t) for t in sprint.incomplete_tasks],
    }


def _dump(data) -> bytes:
    return (json.dumps(data, indent=2, ensure_ascii=False) + "\n").encode("utf-8")


def encode_tasks(tasks: Iterable[Task]) -> bytes:
    return _dump([task_to_dict(t) for t in tasks])


def encode_sprint_state(board: Node) -> bytes:
    """Everything but the backlog: running sprint, draft and history."""
    start = board.sprint_start
    return _dump(
        {
            "sprint_start": start.isoformat() if start else None,
            "sprint_tasks": [task_to_dict(t) for t in board.sprint_tasks],
            "draft": [t.id for t in board.draft],
            "history": [sprint_to_dict(s) for s in board.history],
        }
    )


# --- Public API ---


def save_tasks(store, tasks: Iterable[Task], message: str = "Update tasks") -> None:
    """Write the backlog list under the fixed tasks key."""
    store.write({TASKS_KEY: encode_tasks(tasks)}, message)


def save_board(store, board: Node, message: str = "Update board", persist_sprint: bool = True) -> None:
    """Write the board to store.

    With persist_sprint off only the backlog is written.
    """
    blobs = {TASKS_KEY: encode_tasks(board.backlog)}
    if persist_sprint:
        blobs[SPRINT_KEY] = encode_sprint_state(board)
    store.write(blobs, message)
