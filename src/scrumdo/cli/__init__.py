"""CLI argument parser and dispatch for scrumdo."""

import argparse

from scrumdo.cli.init import init_board
from scrumdo.cli.plan import plan_clear, plan_list, plan_stage, plan_start, plan_unstage
from scrumdo.cli.report import report
from scrumdo.cli.sprint import sprint_down, sprint_end, sprint_show, sprint_toggle, sprint_up
from scrumdo.cli.task import (
    task_add,
    task_delete,
    task_down,
    task_edit,
    task_list,
    task_move,
    task_status,
    task_up,
)
from scrumdo.cli.web import web
from scrumdo.models import TaskStatus, Weight

WEIGHTS = [int(w) for w in Weight]
STATUSES = [s.value for s in TaskStatus]


def _id_verb(verbs, name: str, help: str, common, func):
    p = verbs.add_parser(name, help=help, parents=[common])
    p.add_argument("id", help="Task ID (any unique prefix)")
    p.set_defaults(func=func)
    return p


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--repo", default=".", help="Path to git repository (default: .)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")

    parser = argparse.ArgumentParser(
        prog="scrumdo",
        description="Git-backed Scrum backlog and sprint tracker",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- init ---
    init_p = nouns.add_parser("init", help="Initialize a scrumdo board", parents=[common])
    init_p.add_argument("--sample", action="store_true", help="Seed demo tasks and past sprints")
    init_p.set_defaults(func=init_board)

    # --- task ---
    task_p = nouns.add_parser("task", help="Product backlog operations", parents=[common])
    task_verbs = task_p.add_subparsers(dest="verb")

    task_list_p = task_verbs.add_parser("list", help="List backlog tasks", parents=[common])
    task_list_p.set_defaults(func=task_list)

    task_add_p = task_verbs.add_parser("add", help="Add a task", parents=[common])
    task_add_p.add_argument("title", help="Task title")
    task_add_p.add_argument("--description", default="", help="Task description")
    task_add_p.add_argument("--weight", type=int, choices=WEIGHTS, default=3, help="Story points")
    task_add_p.set_defaults(func=task_add)

    task_edit_p = _id_verb(task_verbs, "edit", "Edit a task", common, task_edit)
    task_edit_p.add_argument("--title", help="New title")
    task_edit_p.add_argument("--description", help="New description")
    task_edit_p.add_argument("--weight", type=int, choices=WEIGHTS, help="New story points")

    _id_verb(task_verbs, "delete", "Delete a task", common, task_delete)

    task_status_p = _id_verb(task_verbs, "status", "Set a task's status", common, task_status)
    task_status_p.add_argument("status", choices=STATUSES, help="New status")

    _id_verb(task_verbs, "up", "Move a task up one place", common, task_up)
    _id_verb(task_verbs, "down", "Move a task down one place", common, task_down)

    task_move_p = _id_verb(task_verbs, "move", "Move a task to a position", common, task_move)
    task_move_p.add_argument("--position", type=int, required=True, help="New position (1-indexed)")

    # task with no verb = list
    task_p.set_defaults(func=task_list)

    # --- plan ---
    plan_p = nouns.add_parser("plan", help="Sprint planning", parents=[common])
    plan_verbs = plan_p.add_subparsers(dest="verb")

    plan_list_p = plan_verbs.add_parser("list", help="Show the draft and backlog", parents=[common])
    plan_list_p.set_defaults(func=plan_list)

    _id_verb(plan_verbs, "stage", "Stage a task for the next sprint", common, plan_stage)
    _id_verb(plan_verbs, "unstage", "Remove a task from the draft", common, plan_unstage)

    plan_clear_p = plan_verbs.add_parser("clear", help="Empty the draft", parents=[common])
    plan_clear_p.set_defaults(func=plan_clear)

    plan_start_p = plan_verbs.add_parser("start", help="Start the sprint", parents=[common])
    plan_start_p.set_defaults(func=plan_start)

    # plan with no verb = list
    plan_p.set_defaults(func=plan_list)

    # --- sprint ---
    sprint_p = nouns.add_parser("sprint", help="Running sprint operations", parents=[common])
    sprint_verbs = sprint_p.add_subparsers(dest="verb")

    sprint_show_p = sprint_verbs.add_parser("show", help="Show the sprint", parents=[common])
    sprint_show_p.set_defaults(func=sprint_show)

    _id_verb(sprint_verbs, "toggle", "Mark a task done or reopen it", common, sprint_toggle)
    _id_verb(sprint_verbs, "up", "Move an open task up one place", common, sprint_up)
    _id_verb(sprint_verbs, "down", "Move an open task down one place", common, sprint_down)

    sprint_end_p = sprint_verbs.add_parser("end", help="End the sprint", parents=[common])
    sprint_end_p.set_defaults(func=sprint_end)

    # sprint with no verb = show
    sprint_p.set_defaults(func=sprint_show)

    # --- report ---
    report_p = nouns.add_parser("report", help="Sprint history and velocity", parents=[common])
    report_p.set_defaults(func=report)

    # --- web ---
    web_p = nouns.add_parser("web", help="Serve the TUI in a browser", parents=[common])
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8618, help="Port (default: 8618)")
    web_p.set_defaults(func=web)

    return parser
