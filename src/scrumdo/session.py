"""Session: the handle presentation code uses to drive a board.

A Session owns one board Node and the store it is saved to. Every
operation runs under the session lock; if it changed the board, the
board is saved and subscribers are told once, in that order. Save
failures are logged and otherwise ignored: the in-memory board stays
authoritative for the rest of the session.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Callable

from scrumdo.constants import RECENT_SPRINT_COUNT
from scrumdo.git import read_config
from scrumdo.model import backlog, planning, report, sprint
from scrumdo.model.board import new_board
from scrumdo.model.loader import load_board
from scrumdo.model.node import Callback, Node
from scrumdo.model.writer import save_board
from scrumdo.models import Sprint, Task, TaskStatus, Weight, utcnow
from scrumdo.store import GitStore

logger = logging.getLogger(__name__)

Listener = Callable[["Session", str], None]


class Session:
    def __init__(
        self,
        store,
        board: Node | None = None,
        persist_sprint: bool = True,
        velocity_window: int = RECENT_SPRINT_COUNT,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.store = store
        self.board = board if board is not None else new_board()
        self.persist_sprint = persist_sprint
        self.velocity_window = velocity_window
        self.clock = clock
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    @classmethod
    def load(cls, store, **kwargs) -> Session:
        """Open a session on whatever store already holds."""
        board = load_board(store, persist_sprint=kwargs.get("persist_sprint", True))
        return cls(store, board=board, **kwargs)

    @classmethod
    def open(cls, repo_path: str | Path, **kwargs) -> Session:
        """Open the board kept in a git repository, honouring its [scrumdo] config."""
        config = read_config(repo_path)
        kwargs.setdefault("persist_sprint", config["persist_sprint"])
        kwargs.setdefault("velocity_window", config["velocity_window"])
        return cls.load(GitStore(repo_path), **kwargs)

    # -- observation --

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener(session, operation) after each change. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def watch(self, key: str, callback: Callback) -> Callable[[], None]:
        """Watch one board key ("backlog", "draft", ...) for changes."""
        return self.board.watch(key, callback)

    @contextmanager
    def _mutation(self, operation: str):
        with self._lock:
            version = self.board._version
            yield
            if self.board._version == version:
                return
            self.save(operation)
            for listener in list(self._listeners):
                listener(self, operation)

    def save(self, operation: str = "save") -> None:
        """Write the board to the store. Failures are logged, never raised."""
        try:
            save_board(self.store, self.board, message=operation, persist_sprint=self.persist_sprint)
        except Exception as exc:
            logger.warning("save after %s failed: %s", operation, exc)
        else:
            logger.info("saved: %s", operation)

    # -- read state --

    @property
    def backlog(self) -> tuple[Task, ...]:
        return self.board.backlog

    @property
    def sprint_tasks(self) -> tuple[Task, ...]:
        return self.board.sprint_tasks

    @property
    def draft(self) -> tuple[Task, ...]:
        return self.board.draft

    @property
    def history(self) -> tuple[Sprint, ...]:
        return self.board.history

    @property
    def sprint_active(self) -> bool:
        return bool(self.board.sprint_active)

    @property
    def sprint_start(self) -> datetime | None:
        return self.board.sprint_start

    @property
    def draft_points(self) -> int:
        return planning.draft_points(self.board)

    @property
    def available_tasks(self) -> list[Task]:
        return planning.available_tasks(self.board)

    @property
    def completed_sprint_tasks(self) -> list[Task]:
        return sprint.completed_sprint_tasks(self.board)

    @property
    def incomplete_sprint_tasks(self) -> list[Task]:
        return sprint.incomplete_sprint_tasks(self.board)

    @property
    def recent_velocities(self) -> list[float]:
        return report.recent_velocities(self.board, self.velocity_window)

    @property
    def average_velocity(self) -> float:
        return report.average_velocity(self.board, self.velocity_window)

    @property
    def sprint_progress(self) -> tuple[int, int]:
        return report.sprint_progress(self.board)

    @property
    def history_summary(self) -> dict:
        return report.history_summary(self.board)

    # -- backlog --

    def add_task(self, title: str, description: str = "", weight: Weight | int = Weight.THREE) -> Task:
        with self._mutation(f"Add task: {title}"):
            return backlog.add_task(self.board, title, description, weight, now=self.clock())

    def update_task(self, task_id: str, title: str, description: str, weight: Weight | int) -> Task | None:
        with self._mutation(f"Update task: {title}"):
            return backlog.update_task(self.board, task_id, title, description, weight, now=self.clock())

    def update_task_status(self, task_id: str, status: TaskStatus | str) -> Task | None:
        with self._mutation("Update task status"):
            return backlog.update_task_status(self.board, task_id, status, now=self.clock())

    def delete_task(self, task_id: str) -> bool:
        with self._mutation("Delete task"):
            return backlog.delete_task(self.board, task_id)

    def delete_tasks_at(self, positions: Iterable[int]) -> int:
        with self._mutation("Delete tasks"):
            return backlog.delete_tasks_at(self.board, positions)

    def move_tasks(self, positions: Iterable[int], destination: int) -> None:
        with self._mutation("Reorder backlog"):
            backlog.move_tasks(self.board, positions, destination)

    def move_task_up(self, task_id: str) -> bool:
        with self._mutation("Move task up"):
            return backlog.move_task_up(self.board, task_id)

    def move_task_down(self, task_id: str) -> bool:
        with self._mutation("Move task down"):
            return backlog.move_task_down(self.board, task_id)

    # -- planning --

    def stage_task(self, task_id: str) -> bool:
        with self._mutation("Stage task"):
            return planning.stage_task(self.board, task_id)

    def unstage_task(self, task_id: str) -> bool:
        with self._mutation("Unstage task"):
            return planning.unstage_task(self.board, task_id)

    def clear_draft(self) -> None:
        with self._mutation("Clear draft"):
            planning.clear_draft(self.board)

    # -- sprint lifecycle --

    def start_sprint(self) -> bool:
        with self._mutation("Start sprint"):
            return sprint.start_sprint(self.board, now=self.clock())

    def end_sprint(self) -> Sprint | None:
        with self._mutation("End sprint"):
            return sprint.end_sprint(self.board, now=self.clock())

    def toggle_completion(self, task_id: str) -> Task | None:
        with self._mutation("Toggle task completion"):
            return sprint.toggle_completion(self.board, task_id, now=self.clock())

    def move_sprint_task_up(self, task_id: str) -> bool:
        with self._mutation("Move sprint task up"):
            return sprint.move_sprint_task_up(self.board, task_id)

    def move_sprint_task_down(self, task_id: str) -> bool:
        with self._mutation("Move sprint task down"):
            return sprint.move_sprint_task_down(self.board, task_id)
