"""Value types for scrumdo boards."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, IntEnum

from scrumdo.ids import new_id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskStatus(str, Enum):
    """Informational workflow status. Completion is tracked separately."""

    BACKLOG = "backlog"
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    TaskStatus.BACKLOG: "Backlog",
    TaskStatus.TODO: "To do",
    TaskStatus.IN_PROGRESS: "In progress",
    TaskStatus.DONE: "Done",
}


class Weight(IntEnum):
    """Story point estimate on the Fibonacci-like scale."""

    ONE = 1
    TWO = 2
    THREE = 3
    FIVE = 5
    EIGHT = 8
    THIRTEEN = 13
    TWENTY_ONE = 21


@dataclass(frozen=True)
class Task:
    """A backlog item.

    Immutable: edits produce a new Task via dataclasses.replace, so lists
    holding a Task never see it change underneath them.
    """

    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.BACKLOG
    weight: Weight = Weight.THREE
    is_completed: bool = False
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", Weight(self.weight))
        object.__setattr__(self, "status", TaskStatus(self.status))


def points(tasks) -> int:
    """Sum of weights over tasks."""
    return sum(int(t.weight) for t in tasks)


def days_between(start: datetime, end: datetime) -> int:
    """Whole days elapsed from start to end, never less than 1."""
    return max(1, (end - start).days)


@dataclass(frozen=True)
class Sprint:
    """A finished sprint. Point totals and velocity are fixed at creation."""

    start_date: datetime
    end_date: datetime
    completed_tasks: tuple[Task, ...] = ()
    incomplete_tasks: tuple[Task, ...] = ()
    id: str = field(default_factory=new_id)
    total_points: int = field(init=False)
    completed_points: int = field(init=False)
    daily_velocity: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "completed_tasks", tuple(self.completed_tasks))
        object.__setattr__(self, "incomplete_tasks", tuple(self.incomplete_tasks))
        completed = points(self.completed_tasks)
        object.__setattr__(self, "completed_points", completed)
        object.__setattr__(self, "total_points", completed + points(self.incomplete_tasks))
        days = days_between(self.start_date, self.end_date)
        object.__setattr__(self, "daily_velocity", completed / days)

    @property
    def completion_rate(self) -> float:
        if self.total_points == 0:
            return 0.0
        return self.completed_points / self.total_points

    @property
    def date_range(self) -> str:
        """Local "MM/DD - MM/DD" span."""
        start = self.start_date.astimezone().strftime("%m/%d")
        end = self.end_date.astimezone().strftime("%m/%d")
        return f"{start} - {end}"
