"""Tests for the confirm dialog and the task form."""

import pytest
from textual.app import App
from textual.widgets import Button, Input

from scrumdo.models import Task, Weight
from scrumdo.ui.confirm import ConfirmScreen
from scrumdo.ui.task_form import TaskFormScreen

UNSET = object()


class DialogApp(App):
    """Minimal app that pushes one modal and records its result."""

    def __init__(self, screen):
        super().__init__()
        self.dialog = screen
        self.result = UNSET

    def on_mount(self) -> None:
        self.push_screen(self.dialog, self._done)

    def _done(self, result) -> None:
        self.result = result


# --- ConfirmScreen ---


@pytest.mark.asyncio
async def test_confirm_yes():
    app = DialogApp(ConfirmScreen("Really?"))
    async with app.run_test() as pilot:
        await pilot.click("#yes")
        await pilot.pause()
    assert app.result is True


@pytest.mark.asyncio
async def test_confirm_no():
    app = DialogApp(ConfirmScreen("Really?"))
    async with app.run_test() as pilot:
        await pilot.click("#no")
        await pilot.pause()
    assert app.result is False


@pytest.mark.asyncio
async def test_confirm_escape():
    app = DialogApp(ConfirmScreen("Really?"))
    async with app.run_test() as pilot:
        await pilot.press("escape")
        await pilot.pause()
    assert app.result is False


# --- TaskFormScreen ---


@pytest.mark.asyncio
async def test_new_task_form_starts_disabled():
    app = DialogApp(TaskFormScreen())
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.screen.query_one("#save", Button).disabled
        await pilot.press("enter")
        await pilot.pause()
        assert app.result is UNSET


@pytest.mark.asyncio
async def test_new_task_form_submit():
    app = DialogApp(TaskFormScreen())
    async with app.run_test() as pilot:
        app.screen.query_one("#title", Input).focus()
        await pilot.press("D", "o", "c", "s")
        await pilot.pause()
        assert not app.screen.query_one("#save", Button).disabled
        await pilot.press("enter")
        await pilot.pause()
    assert app.result == {"title": "Docs", "description": "", "weight": 3}


@pytest.mark.asyncio
async def test_edit_form_prefilled():
    task = Task(title="Old", description="desc", weight=Weight.THIRTEEN)
    app = DialogApp(TaskFormScreen(task))
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.screen.query_one("#title", Input).value == "Old"
        app.screen.query_one("#save", Button).press()
        await pilot.pause()
    assert app.result == {"title": "Old", "description": "desc", "weight": 13}


@pytest.mark.asyncio
async def test_form_cancel():
    app = DialogApp(TaskFormScreen(Task(title="Old")))
    async with app.run_test() as pilot:
        await pilot.press("escape")
        await pilot.pause()
    assert app.result is None
