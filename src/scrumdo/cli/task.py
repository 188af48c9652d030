"""Handlers for 'scrumdo task' commands (product backlog)."""

from scrumdo.cli._common import (
    find_task,
    format_task_line,
    open_session_or_die,
    output_json,
    output_result,
    task_summary,
)
from scrumdo.ids import short_id


def task_list(args) -> int:
    """List the product backlog in priority order."""
    session = open_session_or_die(args.repo, args.json)
    staged = {t.id for t in session.draft}

    if args.json:
        output_json([{**task_summary(t), "staged": t.id in staged} for t in session.backlog])
        return 0

    if not session.backlog:
        print("backlog is empty")
    for task in session.backlog:
        line = format_task_line(task, indent="")
        print(f"{line}  (staged)" if task.id in staged else line)
    return 0


def task_add(args) -> int:
    """Append a task to the backlog."""
    session = open_session_or_die(args.repo, args.json)
    task = session.add_task(args.title, args.description, args.weight)
    output_result(
        task_summary(task),
        f"Added task {short_id(task.id)}: {task.title} ({int(task.weight)}pt)",
        args.json,
    )
    return 0


def task_edit(args) -> int:
    """Change title, description or weight of a backlog task."""
    session = open_session_or_die(args.repo, args.json)
    task = find_task(session.backlog, args.id, "backlog", args.json)

    title = args.title if args.title is not None else task.title
    description = args.description if args.description is not None else task.description
    weight = args.weight if args.weight is not None else task.weight
    task = session.update_task(task.id, title, description, weight)

    output_result(task_summary(task), f"Updated task {short_id(task.id)}: {task.title}", args.json)
    return 0


def task_delete(args) -> int:
    """Delete a backlog task."""
    session = open_session_or_die(args.repo, args.json)
    task = find_task(session.backlog, args.id, "backlog", args.json)
    session.delete_task(task.id)
    output_result({"id": task.id, "deleted": True}, f"Deleted task {short_id(task.id)}: {task.title}", args.json)
    return 0


def task_status(args) -> int:
    """Set a backlog task's workflow status."""
    session = open_session_or_die(args.repo, args.json)
    task = find_task(session.backlog, args.id, "backlog", args.json)
    task = session.update_task_status(task.id, args.status)
    output_result(
        task_summary(task),
        f"Task {short_id(task.id)} is now {task.status.label}",
        args.json,
    )
    return 0


def _moved(session, task, args) -> int:
    position = next(i for i, t in enumerate(session.backlog) if t.id == task.id) + 1
    output_result(
        {"id": task.id, "position": position},
        f"Task {short_id(task.id)} at position {position}",
        args.json,
    )
    return 0


def task_up(args) -> int:
    """Raise a task one place in the backlog."""
    session = open_session_or_die(args.repo, args.json)
    task = find_task(session.backlog, args.id, "backlog", args.json)
    session.move_task_up(task.id)
    return _moved(session, task, args)


def task_down(args) -> int:
    """Lower a task one place in the backlog."""
    session = open_session_or_die(args.repo, args.json)
    task = find_task(session.backlog, args.id, "backlog", args.json)
    session.move_task_down(task.id)
    return _moved(session, task, args)


def task_move(args) -> int:
    """Move a task to a 1-indexed position in the backlog."""
    session = open_session_or_die(args.repo, args.json)
    task = find_task(session.backlog, args.id, "backlog", args.json)
    current = next(i for i, t in enumerate(session.backlog) if t.id == task.id)
    target = max(0, min(args.position - 1, len(session.backlog) - 1))
    # Destination counts positions in the list before the move.
    destination = target + 1 if target > current else target
    session.move_tasks({current}, destination)
    return _moved(session, task, args)
