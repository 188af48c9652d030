"""Sprint history report."""

from rich.table import Table
from textual.widgets import Static

from scrumdo.session import Session
from scrumdo.ui.watcher import NodeWatcherMixin


class VelocityReport(NodeWatcherMixin, Static):
    """Finished sprints, newest first, with velocity figures."""

    def __init__(self, session: Session, **kwargs):
        self._init_watcher()
        super().__init__(**kwargs)
        self.session = session

    def on_mount(self) -> None:
        self.node_watch(self.session.board, "history", self._on_history_changed)
        self.update(self.build_table())

    def _on_history_changed(self, node, key, old, new) -> None:
        self.update(self.build_table())

    def build_table(self) -> Table | str:
        session = self.session
        if not session.history:
            return "No finished sprints yet."

        summary = session.history_summary
        table = Table(
            title=f"{summary['sprints']} sprints, {summary['completed_points']} pt completed",
            caption=f"Average velocity: {session.average_velocity:.1f} pt/day",
            expand=True,
        )
        table.add_column("Sprint")
        table.add_column("Points", justify="right")
        table.add_column("Rate", justify="right")
        table.add_column("Velocity", justify="right")
        table.add_column("Open tasks", justify="right")
        for sprint in reversed(session.history):
            table.add_row(
                sprint.date_range,
                f"{sprint.completed_points} / {sprint.total_points}",
                f"{sprint.completion_rate:.0%}",
                f"{sprint.daily_velocity:.1f} pt/day",
                str(len(sprint.incomplete_tasks)),
            )
        return table
