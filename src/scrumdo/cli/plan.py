"""Handlers for 'scrumdo plan' commands (sprint planning draft)."""

from scrumdo.cli._common import (
    error,
    find_task,
    format_task_line,
    open_session_or_die,
    output_json,
    output_result,
    task_summary,
)
from scrumdo.ids import short_id


def plan_list(args) -> int:
    """Show the draft next to the remaining backlog and past velocity."""
    session = open_session_or_die(args.repo, args.json)

    if args.json:
        output_json(
            {
                "draft": [task_summary(t) for t in session.draft],
                "available": [task_summary(t) for t in session.available_tasks],
                "draft_points": session.draft_points,
                "recent_velocities": session.recent_velocities,
                "average_velocity": session.average_velocity,
            }
        )
        return 0

    print(f"Draft ({session.draft_points}pt)")
    for task in session.draft:
        print(format_task_line(task))
    print("Backlog")
    for task in session.available_tasks:
        print(format_task_line(task))
    velocities = ", ".join(f"{v:.1f}" for v in session.recent_velocities) or "--"
    print(f"Velocity: {velocities} (average {session.average_velocity:.1f} pt/day)")
    return 0


def plan_stage(args) -> int:
    """Stage a backlog task for the next sprint."""
    session = open_session_or_die(args.repo, args.json)
    task = find_task(session.backlog, args.id, "backlog", args.json)
    session.stage_task(task.id)
    output_result(
        {"id": task.id, "draft_points": session.draft_points},
        f"Staged {short_id(task.id)}: {task.title} (draft {session.draft_points}pt)",
        args.json,
    )
    return 0


def plan_unstage(args) -> int:
    """Take a task back out of the draft."""
    session = open_session_or_die(args.repo, args.json)
    task = find_task(session.draft, args.id, "draft", args.json)
    session.unstage_task(task.id)
    output_result(
        {"id": task.id, "draft_points": session.draft_points},
        f"Unstaged {short_id(task.id)}: {task.title} (draft {session.draft_points}pt)",
        args.json,
    )
    return 0


def plan_clear(args) -> int:
    """Cancel planning: empty the draft."""
    session = open_session_or_die(args.repo, args.json)
    session.clear_draft()
    output_result({"draft": []}, "Draft cleared", args.json)
    return 0


def plan_start(args) -> int:
    """Start a sprint with the drafted tasks."""
    session = open_session_or_die(args.repo, args.json)
    if session.sprint_active:
        error("A sprint is already running. End it first.", args.json)
    if not session.draft:
        error("The draft is empty. Stage some tasks first.", args.json)

    session.start_sprint()
    total = sum(int(t.weight) for t in session.sprint_tasks)
    output_result(
        {
            "started": session.sprint_start.isoformat(),
            "tasks": [t.id for t in session.sprint_tasks],
            "total_points": total,
        },
        f"Sprint started with {len(session.sprint_tasks)} tasks ({total}pt)",
        args.json,
    )
    return 0
