"""Tests for 'scrumdo task' commands."""

import json
from argparse import Namespace

import pytest

from scrumdo.cli.task import task_add, task_delete, task_down, task_edit, task_list, task_move, task_status, task_up

from .conftest import _session


def _args(repo, json_mode=False, **kwargs):
    return Namespace(repo=str(repo), json=json_mode, **kwargs)


def _titles(repo):
    return [t.title for t in _session(repo).backlog]


def _id(repo, index):
    return _session(repo).backlog[index].id[:6]


def test_task_list(initialized_repo, capsys):
    assert task_list(_args(initialized_repo)) == 0

    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert "First task" in out[0]
    assert " 5pt" in out[1]


def test_task_list_marks_staged(initialized_repo, capsys):
    session = _session(initialized_repo)
    session.stage_task(session.backlog[1].id)
    task_list(_args(initialized_repo))

    out = capsys.readouterr().out.splitlines()
    assert out[1].endswith("(staged)")
    assert not out[0].endswith("(staged)")


def test_task_list_json(initialized_repo, capsys):
    assert task_list(_args(initialized_repo, json_mode=True)) == 0

    data = json.loads(capsys.readouterr().out)
    assert [t["title"] for t in data] == ["First task", "Second task", "Third task"]
    assert data[0]["weight"] == 3
    assert data[0]["staged"] is False
    assert data[0]["status"] == "backlog"


def test_task_list_empty(empty_repo, capsys):
    _session(empty_repo).save()
    task_list(_args(empty_repo))
    assert "backlog is empty" in capsys.readouterr().out


def test_task_list_without_board(empty_repo, capsys):
    with pytest.raises(SystemExit, match="1"):
        task_list(_args(empty_repo))
    assert "scrumdo init" in capsys.readouterr().err


def test_task_add(initialized_repo, capsys):
    args = _args(initialized_repo, title="Fourth task", description="More", weight=13)
    assert task_add(args) == 0

    assert "Added task" in capsys.readouterr().out
    task = _session(initialized_repo).backlog[-1]
    assert task.title == "Fourth task"
    assert task.description == "More"
    assert task.weight == 13


def test_task_add_json(initialized_repo, capsys):
    args = _args(initialized_repo, json_mode=True, title="Fourth task", description="", weight=3)
    task_add(args)

    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "Fourth task"
    assert data["id"] == _session(initialized_repo).backlog[-1].id


def test_task_edit(initialized_repo, capsys):
    args = _args(initialized_repo, id=_id(initialized_repo, 0), title="Renamed", description=None, weight=None)
    assert task_edit(args) == 0

    task = _session(initialized_repo).backlog[0]
    assert task.title == "Renamed"
    assert task.description == "Description one."
    assert task.weight == 3


def test_task_edit_weight_only(initialized_repo, capsys):
    args = _args(initialized_repo, id=_id(initialized_repo, 2), title=None, description=None, weight=21)
    task_edit(args)
    assert _session(initialized_repo).backlog[2].weight == 21


def test_task_edit_not_found(initialized_repo, capsys):
    args = _args(initialized_repo, id="zzz", title="x", description=None, weight=None)
    with pytest.raises(SystemExit, match="1"):
        task_edit(args)
    assert "No single task" in capsys.readouterr().err


def test_task_delete(initialized_repo, capsys):
    assert task_delete(_args(initialized_repo, id=_id(initialized_repo, 1))) == 0
    assert "Deleted task" in capsys.readouterr().out
    assert _titles(initialized_repo) == ["First task", "Third task"]


def test_task_status(initialized_repo, capsys):
    assert task_status(_args(initialized_repo, id=_id(initialized_repo, 0), status="in_progress")) == 0
    assert "is now In progress" in capsys.readouterr().out
    assert _session(initialized_repo).backlog[0].status.value == "in_progress"


def test_task_up(initialized_repo, capsys):
    assert task_up(_args(initialized_repo, id=_id(initialized_repo, 2))) == 0
    assert "at position 2" in capsys.readouterr().out
    assert _titles(initialized_repo) == ["First task", "Third task", "Second task"]


def test_task_down(initialized_repo, capsys):
    task_down(_args(initialized_repo, id=_id(initialized_repo, 0)))
    assert _titles(initialized_repo) == ["Second task", "First task", "Third task"]


def test_task_down_at_bottom(initialized_repo, capsys):
    task_down(_args(initialized_repo, json_mode=True, id=_id(initialized_repo, 2)))
    assert json.loads(capsys.readouterr().out)["position"] == 3
    assert _titles(initialized_repo) == ["First task", "Second task", "Third task"]


def test_task_move_down(initialized_repo, capsys):
    task_move(_args(initialized_repo, id=_id(initialized_repo, 0), position=3))
    assert "at position 3" in capsys.readouterr().out
    assert _titles(initialized_repo) == ["Second task", "Third task", "First task"]


def test_task_move_up(initialized_repo, capsys):
    task_move(_args(initialized_repo, id=_id(initialized_repo, 2), position=1))
    assert _titles(initialized_repo) == ["Third task", "First task", "Second task"]


def test_task_move_clamps(initialized_repo, capsys):
    task_move(_args(initialized_repo, id=_id(initialized_repo, 0), position=99))
    assert _titles(initialized_repo) == ["Second task", "Third task", "First task"]


def test_task_list_with_bad_config(initialized_repo, capsys):
    from git import Repo

    with Repo(initialized_repo).config_writer() as writer:
        writer.set_value("scrumdo", "velocity-window", "three")
    assert task_list(_args(initialized_repo)) == 0
    assert "First task" in capsys.readouterr().out
