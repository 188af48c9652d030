"""Main Textual application for scrumdo."""

from pathlib import Path

from textual.app import App

from scrumdo.git import init_repo, is_git_repo
from scrumdo.session import Session
from scrumdo.store import GitStore
from scrumdo.ui.board import BoardScreen
from scrumdo.ui.confirm import ConfirmScreen


class ScrumdoApp(App):
    """Scrum backlog and sprint TUI.

    Give it a repository path to work on the board kept there, or a
    ready-made Session.
    """

    TITLE = "scrumdo"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, repo_path: Path | None = None, session: Session | None = None):
        super().__init__()
        self.repo_path = repo_path
        self.session = session

    def on_mount(self) -> None:
        if self.session is not None:
            self.push_screen(BoardScreen(self.session))
        elif not is_git_repo(self.repo_path):
            message = f"{self.repo_path} is not a git repository. Create one?"
            self.push_screen(ConfirmScreen(message), self._on_init_response)
        else:
            self._open_board()

    def _on_init_response(self, result: bool) -> None:
        if result:
            init_repo(self.repo_path)
            self._open_board()
        else:
            self.exit()

    def _open_board(self) -> None:
        """Open the board, creating an empty one on first run."""
        self.session = Session.open(self.repo_path)
        if not GitStore(self.repo_path).exists():
            self.session.save("Initialize scrumdo board")
        self.push_screen(BoardScreen(self.session))
