"""Load a board from a blob store into a Node."""

import json
import logging
from datetime import datetime

from scrumdo.constants import SPRINT_KEY, TASKS_KEY
from scrumdo.model.board import new_board
from scrumdo.model.node import Node
from scrumdo.models import Sprint, Task

logger = logging.getLogger(__name__)


def _parse_time(raw: str) -> datetime:
    return datetime.fromisoformat(raw)


def task_from_dict(data: dict) -> Task:
    return Task(
        id=data["id"],
        title=data["title"],
        description=data.get("description", ""),
        status=data.get("status", "backlog"),
        weight=data.get("weight", 3),
        is_completed=bool(data.get("is_completed", False)),
        created_at=_parse_time(data["created_at"]),
        updated_at=_parse_time(data["updated_at"]),
    )


def sprint_from_dict(data: dict) -> Sprint:
    return Sprint(
        id=data["id"],
        start_date=_parse_time(data["start_date"]),
        end_date=_parse_time(data["end_date"]),
        completed_tasks=tuple(task_from_dict(t) for t in data.get("completed_tasks", [])),
        incomplete_tasks=tuple(task_from_dict(t) for t in data.get("incomplete_tasks", [])),
    )


def decode_tasks(data: bytes) -> list[Task]:
    return [task_from_dict(d) for d in json.loads(data)]


def load_tasks(store) -> list[Task]:
    """Read the backlog list. Missing or unreadable data gives []."""
    data = store.read(TASKS_KEY)
    if data is None:
        return []
    try:
        return decode_tasks(data)
    except (ValueError, KeyError, TypeError) as exc:
        logger.warning("could not decode %s: %s", TASKS_KEY, exc)
        return []


def _load_sprint_state(store, backlog: list[Task]) -> dict:
    data = store.read(SPRINT_KEY)
    if data is None:
        return {}
    try:
        raw = json.loads(data)
        start = raw.get("sprint_start")
        by_id = {t.id: t for t in backlog}
        return {
            "sprint_start": _parse_time(start) if start else None,
            "sprint_tasks": [task_from_dict(t) for t in raw.get("sprint_tasks", [])],
            "draft": [by_id[i] for i in raw.get("draft", []) if i in by_id],
            "history": [sprint_from_dict(s) for s in raw.get("history", [])],
        }
    except (ValueError, KeyError, TypeError, AttributeError) as exc:
        logger.warning("could not decode %s: %s", SPRINT_KEY, exc)
        return {}


def load_board(store, persist_sprint: bool = True) -> Node:
    """Build a board Node from whatever the store holds.

    An empty store gives an empty board.
    """
    backlog = load_tasks(store)
    state = _load_sprint_state(store, backlog) if persist_sprint else {}
    return new_board(backlog=backlog, **state)
