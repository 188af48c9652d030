"""Handlers for 'scrumdo sprint' commands (the running sprint)."""

from scrumdo.cli._common import (
    error,
    find_task,
    format_task_line,
    open_session_or_die,
    output_json,
    output_result,
    sprint_summary,
    task_summary,
)
from scrumdo.ids import short_id


def _require_sprint(session, json_mode: bool) -> None:
    if not session.sprint_active:
        error("No sprint is running. Use 'scrumdo plan start'.", json_mode)


def sprint_show(args) -> int:
    """Show the running sprint: progress and tasks."""
    session = open_session_or_die(args.repo, args.json)
    completed, total = session.sprint_progress

    if args.json:
        start = session.sprint_start
        output_json(
            {
                "active": session.sprint_active,
                "started": start.isoformat() if start else None,
                "completed_points": completed,
                "total_points": total,
                "tasks": [task_summary(t) for t in session.sprint_tasks],
            }
        )
        return 0

    if not session.sprint_active:
        print("no sprint running")
        return 0

    started = session.sprint_start.astimezone().strftime("%Y-%m-%d")
    remaining = len(session.incomplete_sprint_tasks)
    print(f"Sprint since {started}: {completed}/{total}pt done, {remaining} tasks left")
    for task in session.sprint_tasks:
        print(format_task_line(task, show_done=True))
    return 0


def sprint_toggle(args) -> int:
    """Mark a sprint task done, or reopen it."""
    session = open_session_or_die(args.repo, args.json)
    _require_sprint(session, args.json)
    task = find_task(session.sprint_tasks, args.id, "sprint", args.json)
    task = session.toggle_completion(task.id)
    state = "done" if task.is_completed else "reopened"
    output_result(task_summary(task), f"Task {short_id(task.id)} {state}: {task.title}", args.json)
    return 0


def _reordered(session, task, args) -> int:
    position = next(i for i, t in enumerate(session.sprint_tasks) if t.id == task.id) + 1
    output_result(
        {"id": task.id, "position": position},
        f"Task {short_id(task.id)} at position {position}",
        args.json,
    )
    return 0


def sprint_up(args) -> int:
    """Raise an open sprint task one place."""
    session = open_session_or_die(args.repo, args.json)
    _require_sprint(session, args.json)
    task = find_task(session.incomplete_sprint_tasks, args.id, "open sprint tasks", args.json)
    session.move_sprint_task_up(task.id)
    return _reordered(session, task, args)


def sprint_down(args) -> int:
    """Lower an open sprint task one place."""
    session = open_session_or_die(args.repo, args.json)
    _require_sprint(session, args.json)
    task = find_task(session.incomplete_sprint_tasks, args.id, "open sprint tasks", args.json)
    session.move_sprint_task_down(task.id)
    return _reordered(session, task, args)


def sprint_end(args) -> int:
    """End the sprint, record it, and return open tasks to the backlog."""
    session = open_session_or_die(args.repo, args.json)
    _require_sprint(session, args.json)
    sprint = session.end_sprint()
    returned = len(sprint.incomplete_tasks)
    output_result(
        sprint_summary(sprint),
        f"Sprint ended: {sprint.completed_points}/{sprint.total_points}pt, "
        f"{sprint.daily_velocity:.1f} pt/day, {returned} tasks back to backlog",
        args.json,
    )
    return 0
