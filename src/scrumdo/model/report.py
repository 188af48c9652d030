"""Velocity and progress queries. Nothing here mutates the board."""

from scrumdo.constants import RECENT_SPRINT_COUNT
from scrumdo.model.node import Node
from scrumdo.models import points


def recent_velocities(board: Node, count: int = RECENT_SPRINT_COUNT) -> list[float]:
    """Daily velocity of the last count sprints, oldest first."""
    if count <= 0:
        return []
    return [s.daily_velocity for s in board.history[-count:]]


def average_velocity(board: Node, count: int = RECENT_SPRINT_COUNT) -> float:
    """Mean of recent_velocities, 0.0 with no history."""
    velocities = recent_velocities(board, count)
    if not velocities:
        return 0.0
    return sum(velocities) / len(velocities)


def sprint_progress(board: Node) -> tuple[int, int]:
    """(completed points, total points) of the running sprint."""
    tasks = board.sprint_tasks
    return points(t for t in tasks if t.is_completed), points(tasks)


def history_summary(board: Node) -> dict:
    """Totals across all finished sprints."""
    history = board.history
    return {
        "sprints": len(history),
        "completed_points": sum(s.completed_points for s in history),
        "total_points": sum(s.total_points for s in history),
    }
