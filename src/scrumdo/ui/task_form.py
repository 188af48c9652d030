"""Modal form for creating and editing tasks."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select

from scrumdo.models import Task, Weight


class TaskFormScreen(ModalScreen[dict | None]):
    """Collects title, description and weight.

    Dismisses with {"title", "description", "weight"} or None on cancel.
    Save stays disabled while the title is blank.
    """

    CSS = """
    TaskFormScreen {
        align: center middle;
    }
    #form {
        width: 70;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    #form Label {
        margin-top: 1;
    }
    #buttons {
        width: 100%;
        height: 3;
        margin-top: 1;
        align: center middle;
    }
    Button {
        margin: 0 2;
    }
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, task: Task | None = None):
        super().__init__()
        self.editing = task

    def compose(self) -> ComposeResult:
        task = self.editing
        title = task.title if task else ""
        with Vertical(id="form"):
            yield Label("Edit task" if task else "New task", id="heading")
            yield Input(value=title, placeholder="Title", id="title")
            yield Input(value=task.description if task else "", placeholder="Description", id="description")
            yield Label("Story points")
            yield Select(
                [(str(int(w)), int(w)) for w in Weight],
                value=int(task.weight if task else Weight.THREE),
                allow_blank=False,
                id="weight",
            )
            with Horizontal(id="buttons"):
                yield Button("Save", id="save", variant="primary", disabled=not title.strip())
                yield Button("Cancel", id="cancel")

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "title":
            self.query_one("#save", Button).disabled = not event.value.strip()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.query_one("#save", Button).disabled:
            self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self._submit()
        else:
            self.dismiss(None)

    def _submit(self) -> None:
        self.dismiss(
            {
                "title": self.query_one("#title", Input).value.strip(),
                "description": self.query_one("#description", Input).value,
                "weight": self.query_one("#weight", Select).value,
            }
        )

    def action_cancel(self) -> None:
        self.dismiss(None)
