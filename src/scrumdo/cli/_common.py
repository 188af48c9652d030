"""Shared helpers for CLI command handlers."""

import json
import sys
from collections.abc import Sequence
from pathlib import Path

from scrumdo.git import is_git_repo
from scrumdo.ids import resolve_id, short_id
from scrumdo.models import Sprint, Task
from scrumdo.session import Session
from scrumdo.store import GitStore


def open_session_or_die(repo: str, json_mode: bool) -> Session:
    """Open the board in repo. Exit 1 with message if there isn't one."""
    repo_path = Path(repo).resolve()
    if not is_git_repo(repo_path) or not GitStore(repo_path).exists():
        error(f"No board in {repo_path}. Run 'scrumdo init' first.", json_mode)
    return Session.open(repo_path)


def find_task(tasks: Sequence[Task], prefix: str, where: str, json_mode: bool) -> Task:
    """Lookup a task by ID prefix. Exit 1 if missing or ambiguous."""
    task_id = resolve_id(prefix, [t.id for t in tasks])
    if task_id is None:
        error(f"No single task matching '{prefix}' in {where}.", json_mode)
    return next(t for t in tasks if t.id == task_id)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def task_summary(task: Task) -> dict:
    """JSON-ready view of a task."""
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "status": task.status.value,
        "weight": int(task.weight),
        "completed": task.is_completed,
        "updated_at": task.updated_at.isoformat(),
    }


def sprint_summary(sprint: Sprint) -> dict:
    return {
        "id": sprint.id,
        "start_date": sprint.start_date.isoformat(),
        "end_date": sprint.end_date.isoformat(),
        "total_points": sprint.total_points,
        "completed_points": sprint.completed_points,
        "daily_velocity": sprint.daily_velocity,
        "completion_rate": sprint.completion_rate,
        "completed_tasks": [t.title for t in sprint.completed_tasks],
        "incomplete_tasks": [t.title for t in sprint.incomplete_tasks],
    }


def format_task_line(task: Task, indent: str = "  ", show_done: bool = False) -> str:
    """Format a task as a text line: id, weight, title."""
    mark = ""
    if show_done:
        mark = "[x] " if task.is_completed else "[ ] "
    return f"{indent}{short_id(task.id)}  {int(task.weight):>2}pt  {mark}{task.title}"
