"""Shared constants."""

BRANCH_NAME = "scrumdo"

TASKS_KEY = "tasks.json"
SPRINT_KEY = "sprint.json"

RECENT_SPRINT_COUNT = 3
