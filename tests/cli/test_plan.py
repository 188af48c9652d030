"""Tests for 'scrumdo plan' commands."""

import json
from argparse import Namespace

import pytest

from scrumdo.cli.plan import plan_clear, plan_list, plan_stage, plan_start, plan_unstage

from .conftest import _session


def _args(repo, json_mode=False, **kwargs):
    return Namespace(repo=str(repo), json=json_mode, **kwargs)


def _stage(repo, *indexes):
    session = _session(repo)
    for i in indexes:
        session.stage_task(session.backlog[i].id)


def test_plan_list(initialized_repo, capsys):
    _stage(initialized_repo, 1)
    assert plan_list(_args(initialized_repo)) == 0

    out = capsys.readouterr().out
    draft, backlog = out.split("Backlog\n")
    assert "Draft (5pt)" in draft
    assert "Second task" in draft
    assert "Second task" not in backlog
    assert "First task" in backlog
    assert "Velocity: --" in out


def test_plan_list_json(initialized_repo, capsys):
    _stage(initialized_repo, 0, 2)
    plan_list(_args(initialized_repo, True))

    data = json.loads(capsys.readouterr().out)
    assert [t["title"] for t in data["draft"]] == ["First task", "Third task"]
    assert [t["title"] for t in data["available"]] == ["Second task"]
    assert data["draft_points"] == 11
    assert data["recent_velocities"] == []
    assert data["average_velocity"] == 0.0


def test_plan_stage(initialized_repo, capsys):
    task = _session(initialized_repo).backlog[2]
    assert plan_stage(_args(initialized_repo, id=task.id[:5])) == 0

    assert "draft 8pt" in capsys.readouterr().out
    assert [t.id for t in _session(initialized_repo).draft] == [task.id]


def test_plan_stage_twice(initialized_repo, capsys):
    task_id = _session(initialized_repo).backlog[0].id
    plan_stage(_args(initialized_repo, id=task_id))
    plan_stage(_args(initialized_repo, id=task_id))
    assert len(_session(initialized_repo).draft) == 1


def test_plan_unstage(initialized_repo, capsys):
    _stage(initialized_repo, 0, 1)
    task_id = _session(initialized_repo).draft[0].id
    assert plan_unstage(_args(initialized_repo, id=task_id[:6])) == 0
    assert [t.title for t in _session(initialized_repo).draft] == ["Second task"]


def test_plan_unstage_not_staged(initialized_repo, capsys):
    task_id = _session(initialized_repo).backlog[0].id
    with pytest.raises(SystemExit, match="1"):
        plan_unstage(_args(initialized_repo, id=task_id))


def test_plan_clear(initialized_repo, capsys):
    _stage(initialized_repo, 0, 1)
    assert plan_clear(_args(initialized_repo)) == 0
    assert "Draft cleared" in capsys.readouterr().out
    assert _session(initialized_repo).draft == ()


def test_plan_start(initialized_repo, capsys):
    _stage(initialized_repo, 1, 0)
    assert plan_start(_args(initialized_repo)) == 0

    assert "Sprint started with 2 tasks (8pt)" in capsys.readouterr().out
    session = _session(initialized_repo)
    assert session.sprint_active
    assert [t.title for t in session.sprint_tasks] == ["Second task", "First task"]
    assert [t.title for t in session.backlog] == ["Third task"]


def test_plan_start_empty_draft(initialized_repo, capsys):
    with pytest.raises(SystemExit, match="1"):
        plan_start(_args(initialized_repo))
    assert "draft is empty" in capsys.readouterr().err


def test_plan_start_while_running(sprint_repo, capsys):
    _stage(sprint_repo, 0)
    with pytest.raises(SystemExit, match="1"):
        plan_start(_args(sprint_repo, True))
    assert "already running" in json.loads(capsys.readouterr().err)["error"]


def test_plan_start_after_staged_task_deleted(initialized_repo, capsys):
    _stage(initialized_repo, 0)
    session = _session(initialized_repo)
    session.delete_task(session.draft[0].id)
    with pytest.raises(SystemExit, match="1"):
        plan_start(_args(initialized_repo))
    assert "draft is empty" in capsys.readouterr().err
    assert not _session(initialized_repo).sprint_active
