"""Board screen: backlog, planning, sprint and report tabs."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, TabbedContent, TabPane

from scrumdo.model.board import find_task
from scrumdo.models import TaskStatus
from scrumdo.session import Session
from scrumdo.ui.confirm import ConfirmScreen
from scrumdo.ui.report import VelocityReport
from scrumdo.ui.tables import PlanningHeader, SprintHeader, TaskTable
from scrumdo.ui.task_form import TaskFormScreen
from scrumdo.ui.watcher import NodeWatcherMixin


class BoardScreen(NodeWatcherMixin, Screen):
    """Main screen. Every key binding turns into one Session call."""

    CSS = """
    #planning-columns TaskTable {
        width: 1fr;
    }
    PlanningHeader, SprintHeader {
        padding: 0 1;
        height: 1;
    }
    """

    BINDINGS = [
        ("a", "add_task", "Add"),
        ("e", "edit_task", "Edit"),
        ("d", "delete_task", "Delete"),
        ("t", "cycle_status", "Status"),
        Binding("shift+up", "move_up", "Up"),
        Binding("shift+down", "move_down", "Down"),
        ("s", "start_sprint", "Start sprint"),
        ("c", "clear_draft", "Clear draft"),
        ("space", "toggle_task", "Done"),
        ("x", "end_sprint", "End sprint"),
    ]

    def __init__(self, session: Session):
        self._init_watcher()
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        session = self.session
        yield Header()
        with TabbedContent(initial="backlog", id="tabs"):
            with TabPane("Backlog", id="backlog"):
                yield TaskTable(session, lambda s: s.backlog, ["backlog"], show_status=True, id="backlog-table")
            with TabPane("Planning", id="planning"):
                yield PlanningHeader(session, id="planning-header")
                with Horizontal(id="planning-columns"):
                    yield TaskTable(session, lambda s: s.available_tasks, ["backlog", "draft"], id="available-table")
                    yield TaskTable(session, lambda s: s.draft, ["draft"], id="draft-table")
            with TabPane("Sprint", id="sprint"):
                yield SprintHeader(session, id="sprint-header")
                yield TaskTable(session, lambda s: s.sprint_tasks, ["sprint_tasks"], show_done=True, id="sprint-table")
            with TabPane("Reports", id="reports"):
                yield VelocityReport(session, id="report")
        yield Footer()

    def on_mount(self) -> None:
        self._watches.append(self.session.subscribe(self._on_session_changed))
        self.call_after_refresh(self.query_one("#backlog-table", TaskTable).focus)

    def _on_session_changed(self, session: Session, operation: str) -> None:
        self.app.sub_title = operation

    @property
    def active_tab(self) -> str:
        return self.query_one("#tabs", TabbedContent).active

    def _table(self, table_id: str) -> TaskTable:
        return self.query_one(f"#{table_id}", TaskTable)

    def _warn(self, message: str) -> None:
        self.app.notify(message, severity="warning")

    def on_tabbed_content_tab_activated(self, event: TabbedContent.TabActivated) -> None:
        tables = list(event.pane.query(TaskTable))
        if tables:
            tables[0].focus()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Enter on a row: stage, unstage, toggle or edit depending on the table."""
        task_id = event.row_key.value
        table_id = event.data_table.id
        if table_id == "available-table":
            self.session.stage_task(task_id)
        elif table_id == "draft-table":
            self.session.unstage_task(task_id)
        elif table_id == "sprint-table":
            self.session.toggle_completion(task_id)
        elif table_id == "backlog-table":
            self._edit(task_id)

    # -- backlog --

    def action_add_task(self) -> None:
        def on_result(result: dict | None) -> None:
            if result:
                self.session.add_task(result["title"], result["description"], result["weight"])

        self.app.push_screen(TaskFormScreen(), on_result)

    def action_edit_task(self) -> None:
        if self.active_tab == "backlog":
            self._edit(self._table("backlog-table").selected_id)

    def _edit(self, task_id: str | None) -> None:
        task = find_task(self.session.backlog, task_id) if task_id else None
        if task is None:
            return

        def on_result(result: dict | None) -> None:
            if result:
                self.session.update_task(task.id, result["title"], result["description"], result["weight"])

        self.app.push_screen(TaskFormScreen(task), on_result)

    def action_delete_task(self) -> None:
        if self.active_tab != "backlog":
            return
        task = find_task(self.session.backlog, self._table("backlog-table").selected_id or "")
        if task is None:
            return

        def on_confirm(confirmed: bool) -> None:
            if confirmed:
                self.session.delete_task(task.id)

        self.app.push_screen(ConfirmScreen(f"Delete '{task.title}'?"), on_confirm)

    def action_cycle_status(self) -> None:
        if self.active_tab != "backlog":
            return
        task = find_task(self.session.backlog, self._table("backlog-table").selected_id or "")
        if task is None:
            return
        statuses = list(TaskStatus)
        following = statuses[(statuses.index(task.status) + 1) % len(statuses)]
        self.session.update_task_status(task.id, following)

    def action_move_up(self) -> None:
        self._move(up=True)

    def action_move_down(self) -> None:
        self._move(up=False)

    def _move(self, up: bool) -> None:
        tab = self.active_tab
        if tab == "backlog":
            task_id = self._table("backlog-table").selected_id
            if task_id:
                if up:
                    self.session.move_task_up(task_id)
                else:
                    self.session.move_task_down(task_id)
        elif tab == "sprint":
            task = find_task(self.session.sprint_tasks, self._table("sprint-table").selected_id or "")
            # Completed tasks keep their place at the bottom.
            if task is None or task.is_completed:
                return
            if up:
                self.session.move_sprint_task_up(task.id)
            else:
                self.session.move_sprint_task_down(task.id)

    # -- planning --

    def action_clear_draft(self) -> None:
        if self.active_tab == "planning":
            self.session.clear_draft()

    def action_start_sprint(self) -> None:
        if self.active_tab != "planning":
            return
        if self.session.sprint_active:
            self._warn("A sprint is already running.")
            return
        if not self.session.draft:
            self._warn("Stage some tasks first.")
            return
        self.session.start_sprint()
        self.query_one("#tabs", TabbedContent).active = "sprint"

    # -- sprint --

    def action_toggle_task(self) -> None:
        if self.active_tab != "sprint":
            return
        task_id = self._table("sprint-table").selected_id
        if task_id:
            self.session.toggle_completion(task_id)

    def action_end_sprint(self) -> None:
        if self.active_tab != "sprint" or not self.session.sprint_active:
            return

        def on_confirm(confirmed: bool) -> None:
            if not confirmed:
                return
            sprint = self.session.end_sprint()
            if sprint is not None:
                self.app.notify(
                    f"Sprint ended: {sprint.completed_points}/{sprint.total_points} pt, "
                    f"{sprint.daily_velocity:.1f} pt/day"
                )
                self.query_one("#tabs", TabbedContent).active = "reports"

        self.app.push_screen(
            ConfirmScreen("End the sprint? Open tasks go back to the top of the backlog."),
            on_confirm,
        )
