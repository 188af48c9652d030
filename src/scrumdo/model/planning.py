"""Sprint planning draft: staging backlog tasks for the next sprint."""

from scrumdo.model.board import find_task, index_of
from scrumdo.model.node import Node
from scrumdo.models import Task, points


def stage_task(board: Node, task_id: str) -> bool:
    """Add a backlog task to the draft. No-op if unknown or already staged."""
    task = find_task(board.backlog, task_id)
    if task is None or index_of(board.draft, task_id) is not None:
        return False
    board.draft = (*board.draft, task)
    return True


def unstage_task(board: Node, task_id: str) -> bool:
    """Drop a task from the draft. The backlog is untouched."""
    if index_of(board.draft, task_id) is None:
        return False
    board.draft = tuple(t for t in board.draft if t.id != task_id)
    return True


def clear_draft(board: Node) -> None:
    board.draft = ()


def draft_points(board: Node) -> int:
    return points(board.draft)


def available_tasks(board: Node) -> list[Task]:
    """Backlog tasks not yet staged, in backlog order."""
    staged = {t.id for t in board.draft}
    return [t for t in board.backlog if t.id not in staged]
