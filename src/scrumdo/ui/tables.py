"""Task tables and status lines that follow board keys."""

from __future__ import annotations

from typing import Callable, Iterable

from rich.text import Text
from textual.widgets import DataTable, Static

from scrumdo.ids import short_id
from scrumdo.models import Task
from scrumdo.session import Session
from scrumdo.ui.watcher import NodeWatcherMixin

TaskSource = Callable[[Session], Iterable[Task]]


class TaskTable(NodeWatcherMixin, DataTable):
    """Row-per-task table. Rebuilds when any watched board key changes.

    The cursor follows the selected task across rebuilds, so a task
    moved up or down stays selected.
    """

    def __init__(
        self,
        session: Session,
        source: TaskSource,
        watch_keys: Iterable[str],
        show_done: bool = False,
        show_status: bool = False,
        **kwargs,
    ):
        self._init_watcher()
        super().__init__(cursor_type="row", zebra_stripes=True, **kwargs)
        self.session = session
        self.source = source
        self.watch_keys = tuple(watch_keys)
        self.show_done = show_done
        self.show_status = show_status
        self.task_ids: list[str] = []

    def on_mount(self) -> None:
        columns = ["ID", "Pt", "Title"]
        if self.show_status:
            columns.append("Status")
        if self.show_done:
            columns.insert(0, "Done")
        self.add_columns(*columns)
        for key in self.watch_keys:
            self.node_watch(self.session.board, key, self._on_board_changed)
        self.refresh_rows()

    def _on_board_changed(self, node, key, old, new) -> None:
        self.refresh_rows()

    @property
    def selected_id(self) -> str | None:
        row = self.cursor_row
        if 0 <= row < len(self.task_ids):
            return self.task_ids[row]
        return None

    def refresh_rows(self) -> None:
        selected = self.selected_id
        self.clear()
        tasks = list(self.source(self.session))
        self.task_ids = [t.id for t in tasks]
        for task in tasks:
            title = Text(task.title, style="dim strike" if task.is_completed else "")
            cells = [short_id(task.id), str(int(task.weight)), title]
            if self.show_status:
                cells.append(task.status.label)
            if self.show_done:
                cells.insert(0, "✔" if task.is_completed else " ")
            self.add_row(*cells, key=task.id)
        if selected in self.task_ids:
            self.move_cursor(row=self.task_ids.index(selected))


class PlanningHeader(NodeWatcherMixin, Static):
    """Draft point total next to recent velocity."""

    def __init__(self, session: Session, **kwargs):
        self._init_watcher()
        super().__init__(**kwargs)
        self.session = session

    def on_mount(self) -> None:
        self.node_watch(self.session.board, "draft", self._on_board_changed)
        self.node_watch(self.session.board, "history", self._on_board_changed)
        self.update(self.status_text())

    def _on_board_changed(self, node, key, old, new) -> None:
        self.update(self.status_text())

    def status_text(self) -> str:
        session = self.session
        velocities = ", ".join(f"{v:.1f}" for v in session.recent_velocities) or "--"
        return (
            f"Draft: {session.draft_points} pt   "
            f"Velocity: {velocities}   Average: {session.average_velocity:.1f} pt/day"
        )


class SprintHeader(NodeWatcherMixin, Static):
    """Progress line for the running sprint."""

    def __init__(self, session: Session, **kwargs):
        self._init_watcher()
        super().__init__(**kwargs)
        self.session = session

    def on_mount(self) -> None:
        self.node_watch(self.session.board, "sprint_tasks", self._on_board_changed)
        self.node_watch(self.session.board, "sprint_active", self._on_board_changed)
        self.update(self.status_text())

    def _on_board_changed(self, node, key, old, new) -> None:
        self.update(self.status_text())

    def status_text(self) -> str:
        session = self.session
        if not session.sprint_active:
            return "No sprint running. Plan one on the Planning tab."
        completed, total = session.sprint_progress
        started = session.sprint_start.astimezone().strftime("%Y-%m-%d")
        remaining = len(session.incomplete_sprint_tasks)
        return f"Sprint since {started}   {completed} / {total} pt   {remaining} tasks left"
