"""Product backlog operations."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime

from scrumdo.model.board import index_of, move_down, move_up, relocate
from scrumdo.model.node import Node
from scrumdo.models import Task, TaskStatus, Weight, utcnow


def add_task(
    board: Node,
    title: str,
    description: str = "",
    weight: Weight | int = Weight.THREE,
    now: datetime | None = None,
) -> Task:
    """Create a task at the end of the backlog and return it."""
    now = now or utcnow()
    task = Task(
        title=title,
        description=description,
        weight=weight,
        created_at=now,
        updated_at=now,
    )
    board.backlog = (*board.backlog, task)
    return task


def _sync_draft(board: Node) -> None:
    """Point the draft at the current backlog tasks, dropping ids that left it."""
    by_id = {t.id: t for t in board.backlog}
    board.draft = tuple(by_id[t.id] for t in board.draft if t.id in by_id)


def _replace_task(board: Node, task_id: str, now: datetime | None, **changes) -> Task | None:
    tasks = list(board.backlog)
    i = index_of(tasks, task_id)
    if i is None:
        return None
    tasks[i] = replace(tasks[i], updated_at=now or utcnow(), **changes)
    board.backlog = tuple(tasks)
    _sync_draft(board)
    return tasks[i]


def update_task(
    board: Node,
    task_id: str,
    title: str,
    description: str,
    weight: Weight | int,
    now: datetime | None = None,
) -> Task | None:
    """Edit a backlog task in place. Returns None if it isn't in the backlog."""
    return _replace_task(board, task_id, now, title=title, description=description, weight=Weight(weight))


def update_task_status(
    board: Node,
    task_id: str,
    status: TaskStatus | str,
    now: datetime | None = None,
) -> Task | None:
    """Set a backlog task's status. Completion is left alone."""
    return _replace_task(board, task_id, now, status=TaskStatus(status))


def delete_task(board: Node, task_id: str) -> bool:
    """Remove a task from the backlog (and the draft) by id."""
    i = index_of(board.backlog, task_id)
    if i is None:
        return False
    tasks = list(board.backlog)
    del tasks[i]
    board.backlog = tuple(tasks)
    _sync_draft(board)
    return True


def delete_tasks_at(board: Node, positions: Iterable[int]) -> int:
    """Remove the backlog tasks at positions (indexes into the current order).

    Returns the number of tasks removed.
    """
    doomed = set(positions)
    kept = tuple(t for i, t in enumerate(board.backlog) if i not in doomed)
    removed = len(board.backlog) - len(kept)
    if removed:
        board.backlog = kept
        _sync_draft(board)
    return removed


def move_tasks(board: Node, positions: Iterable[int], destination: int) -> None:
    """Move a block of backlog tasks before destination, keeping their order.

    Drag-and-drop reorder: destination is an index into the list as it
    was before the move.
    """
    board.backlog = relocate(board.backlog, positions, destination)


def move_task_up(board: Node, task_id: str) -> bool:
    return move_up(board, "backlog", task_id)


def move_task_down(board: Node, task_id: str) -> bool:
    return move_down(board, "backlog", task_id)
