"""Reactive board state and the operations on it."""

from scrumdo.model.backlog import (
    add_task,
    delete_task,
    delete_tasks_at,
    move_task_down,
    move_task_up,
    move_tasks,
    update_task,
    update_task_status,
)
from scrumdo.model.board import new_board
from scrumdo.model.loader import load_board, load_tasks
from scrumdo.model.node import Node
from scrumdo.model.planning import available_tasks, clear_draft, draft_points, stage_task, unstage_task
from scrumdo.model.report import average_velocity, history_summary, recent_velocities, sprint_progress
from scrumdo.model.sprint import (
    end_sprint,
    move_sprint_task_down,
    move_sprint_task_up,
    start_sprint,
    toggle_completion,
)
from scrumdo.model.writer import save_board, save_tasks

__all__ = [
    "Node",
    "add_task",
    "available_tasks",
    "average_velocity",
    "clear_draft",
    "delete_task",
    "delete_tasks_at",
    "draft_points",
    "end_sprint",
    "history_summary",
    "load_board",
    "load_tasks",
    "move_sprint_task_down",
    "move_sprint_task_up",
    "move_task_down",
    "move_task_up",
    "move_tasks",
    "new_board",
    "recent_velocities",
    "save_board",
    "save_tasks",
    "sprint_progress",
    "stage_task",
    "start_sprint",
    "toggle_completion",
    "unstage_task",
    "update_task",
    "update_task_status",
]
