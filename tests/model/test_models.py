"""Tests for Task and Sprint values."""

from dataclasses import FrozenInstanceError, replace
from datetime import timedelta

import pytest

from scrumdo.models import Sprint, Task, TaskStatus, Weight, days_between, points

from .conftest import T0, _days, _make_task


def test_task_defaults():
    task = Task(title="Write docs")
    assert task.description == ""
    assert task.status is TaskStatus.BACKLOG
    assert task.weight is Weight.THREE
    assert task.is_completed is False
    assert len(task.id) == 32


def test_task_ids_are_unique():
    assert Task(title="x").id != Task(title="x").id


def test_task_coerces_weight_and_status():
    task = Task(title="x", weight=8, status="in_progress")
    assert task.weight is Weight.EIGHT
    assert task.status is TaskStatus.IN_PROGRESS


def test_task_rejects_off_scale_weight():
    with pytest.raises(ValueError):
        Task(title="x", weight=4)


def test_task_is_immutable():
    task = Task(title="x")
    with pytest.raises(FrozenInstanceError):
        task.title = "y"


def test_task_replace_keeps_original():
    task = Task(title="x")
    edited = replace(task, title="y")
    assert task.title == "x"
    assert edited.title == "y"
    assert edited.id == task.id


def test_status_labels():
    assert TaskStatus.BACKLOG.label == "Backlog"
    assert TaskStatus.IN_PROGRESS.label == "In progress"


def test_weight_scale():
    assert [int(w) for w in Weight] == [1, 2, 3, 5, 8, 13, 21]


def test_points():
    assert points([_make_task("a", 5), _make_task("b", 8)]) == 13
    assert points([]) == 0


def test_days_between_floors_at_one():
    assert days_between(T0, T0) == 1
    assert days_between(T0, T0 + timedelta(hours=20)) == 1
    assert days_between(T0, _days(14)) == 14


def test_sprint_totals_and_velocity():
    sprint = Sprint(
        start_date=T0,
        end_date=_days(14),
        completed_tasks=(_make_task("a", 5, True), _make_task("b", 8, True)),
        incomplete_tasks=(_make_task("c", 3),),
    )
    assert sprint.completed_points == 13
    assert sprint.total_points == 16
    assert sprint.daily_velocity == pytest.approx(13 / 14)
    assert sprint.completion_rate == pytest.approx(13 / 16)


def test_sprint_same_day_counts_as_one_day():
    sprint = Sprint(
        start_date=T0,
        end_date=T0 + timedelta(hours=3),
        completed_tasks=(_make_task("a", 3, True), _make_task("b", 3, True)),
    )
    assert sprint.daily_velocity == 6.0


def test_sprint_empty():
    sprint = Sprint(start_date=T0, end_date=_days(7))
    assert sprint.total_points == 0
    assert sprint.daily_velocity == 0.0
    assert sprint.completion_rate == 0.0


def test_sprint_totals_are_fixed():
    task = _make_task("a", 5, True)
    sprint = Sprint(start_date=T0, end_date=_days(5), completed_tasks=[task])
    assert isinstance(sprint.completed_tasks, tuple)
    with pytest.raises(FrozenInstanceError):
        sprint.total_points = 99


def test_sprint_date_range():
    sprint = Sprint(start_date=T0, end_date=_days(14))
    start = T0.astimezone().strftime("%m/%d")
    end = _days(14).astimezone().strftime("%m/%d")
    assert sprint.date_range == f"{start} - {end}"
