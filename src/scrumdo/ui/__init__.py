"""Textual UI for scrumdo."""

from scrumdo.ui.app import ScrumdoApp
from scrumdo.ui.board import BoardScreen
from scrumdo.ui.confirm import ConfirmScreen
from scrumdo.ui.task_form import TaskFormScreen

__all__ = [
    "BoardScreen",
    "ConfirmScreen",
    "ScrumdoApp",
    "TaskFormScreen",
]
