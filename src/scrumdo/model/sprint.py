"""Sprint lifecycle: start, work the sprint backlog, end."""

from dataclasses import replace
from datetime import datetime

from scrumdo.model.board import index_of, move_down, move_up
from scrumdo.model.node import Node
from scrumdo.models import Sprint, Task, utcnow


def start_sprint(board: Node, now: datetime | None = None) -> bool:
    """Commit the draft: move drafted tasks from the backlog into the sprint.

    Sprint order follows draft order. Drafted tasks no longer in the
    backlog are skipped. An empty draft starts an empty sprint. Returns
    False (and changes nothing) if a sprint is already running.
    """
    if board.sprint_active:
        return False
    backlog = list(board.backlog)
    sprint_tasks = list(board.sprint_tasks)
    for drafted in board.draft:
        i = index_of(backlog, drafted.id)
        if i is not None:
            sprint_tasks.append(backlog.pop(i))

    board.backlog = tuple(backlog)
    board.sprint_tasks = tuple(sprint_tasks)
    board.draft = ()
    board.sprint_active = True
    board.sprint_start = now or utcnow()
    return True


def end_sprint(board: Node, now: datetime | None = None) -> Sprint | None:
    """Close the active sprint and record it in history.

    Incomplete tasks go back to the front of the backlog in their sprint
    order. Returns the new Sprint, or None if no sprint was running.
    """
    start = board.sprint_start
    if not board.sprint_active or start is None:
        return None

    completed = [t for t in board.sprint_tasks if t.is_completed]
    incomplete = [t for t in board.sprint_tasks if not t.is_completed]
    sprint = Sprint(
        start_date=start,
        end_date=now or utcnow(),
        completed_tasks=tuple(completed),
        incomplete_tasks=tuple(incomplete),
    )

    returned = tuple(replace(t, is_completed=False) for t in incomplete)
    board.history = (*board.history, sprint)
    board.backlog = returned + board.backlog
    board.sprint_tasks = ()
    board.sprint_active = False
    board.sprint_start = None
    return sprint


def toggle_completion(board: Node, task_id: str, now: datetime | None = None) -> Task | None:
    """Flip a sprint task's completion.

    Newly completed tasks sink to the bottom; reopened ones rise to the
    top, so open work stays grouped first.
    """
    tasks = list(board.sprint_tasks)
    i = index_of(tasks, task_id)
    if i is None:
        return None
    task = tasks.pop(i)
    task = replace(task, is_completed=not task.is_completed, updated_at=now or utcnow())
    if task.is_completed:
        tasks.append(task)
    else:
        tasks.insert(0, task)
    board.sprint_tasks = tuple(tasks)
    return task


def move_sprint_task_up(board: Node, task_id: str) -> bool:
    return move_up(board, "sprint_tasks", task_id)


def move_sprint_task_down(board: Node, task_id: str) -> bool:
    return move_down(board, "sprint_tasks", task_id)


def completed_sprint_tasks(board: Node) -> list[Task]:
    return [t for t in board.sprint_tasks if t.is_completed]


def incomplete_sprint_tasks(board: Node) -> list[Task]:
    return [t for t in board.sprint_tasks if not t.is_completed]
