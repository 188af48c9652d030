"""Board state and ordered-list helpers shared by the board operations."""

from collections.abc import Iterable, Sequence
from datetime import datetime

from scrumdo.model.node import Node
from scrumdo.models import Sprint, Task

TASK_LISTS = ("backlog", "sprint_tasks", "draft")


def new_board(
    backlog: Iterable[Task] = (),
    sprint_tasks: Iterable[Task] = (),
    draft: Iterable[Task] = (),
    history: Iterable[Sprint] = (),
    sprint_start: datetime | None = None,
) -> Node:
    """Build a board Node.

    A board with a recorded start date is an active sprint.
    """
    return Node(
        backlog=tuple(backlog),
        sprint_tasks=tuple(sprint_tasks),
        draft=tuple(draft),
        history=tuple(history),
        sprint_active=sprint_start is not None,
        sprint_start=sprint_start,
    )


def index_of(tasks: Sequence[Task], task_id: str) -> int | None:
    """Position of the first task with task_id, or None."""
    for i, task in enumerate(tasks):
        if task.id == task_id:
            return i
    return None


def find_task(tasks: Sequence[Task], task_id: str) -> Task | None:
    i = index_of(tasks, task_id)
    return tasks[i] if i is not None else None


def swap(items: Sequence, i: int, j: int) -> tuple:
    """Return a copy of items with positions i and j exchanged."""
    result = list(items)
    result[i], result[j] = result[j], result[i]
    return tuple(result)


def relocate(items: Sequence, positions: Iterable[int], destination: int) -> tuple:
    """Move the entries at positions so they sit before destination.

    destination is an index into the original sequence (0..len), the
    moved block keeps its relative order, and out-of-range positions
    are ignored.
    """
    n = len(items)
    picked = sorted({p for p in positions if 0 <= p < n})
    destination = max(0, min(destination, n))
    moved = [items[p] for p in picked]
    before = [items[i] for i in range(destination) if i not in picked]
    after = [items[i] for i in range(destination, n) if i not in picked]
    return tuple(before + moved + after)


def move_up(board: Node, key: str, task_id: str) -> bool:
    """Swap a task with its predecessor in board[key]. False at the top or if missing."""
    tasks = getattr(board, key)
    i = index_of(tasks, task_id)
    if i is None or i == 0:
        return False
    setattr(board, key, swap(tasks, i, i - 1))
    return True


def move_down(board: Node, key: str, task_id: str) -> bool:
    """Swap a task with its successor in board[key]. False at the bottom or if missing."""
    tasks = getattr(board, key)
    i = index_of(tasks, task_id)
    if i is None or i == len(tasks) - 1:
        return False
    setattr(board, key, swap(tasks, i, i + 1))
    return True
