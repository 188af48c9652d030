"""Handler for 'scrumdo init'."""

import subprocess
from pathlib import Path

from scrumdo.cli._common import error, output_json
from scrumdo.git import init_repo, is_git_repo
from scrumdo.model.sample import seed_sample
from scrumdo.model.writer import save_board
from scrumdo.session import Session
from scrumdo.store import GitStore


def init_board(args) -> int:
    """Initialize a scrumdo board in the repository."""
    repo_path = Path(args.repo).resolve()

    if not is_git_repo(repo_path):
        init_repo(repo_path)

    store = GitStore(repo_path)
    if store.exists():
        if args.json:
            output_json({"repo_path": str(repo_path), "created": False})
        else:
            print(f"Board already initialized at {repo_path}")
        return 0

    session = Session.open(repo_path)
    if args.sample:
        seed_sample(session.board, now=session.clock())
    try:
        save_board(store, session.board, "Initialize scrumdo board", persist_sprint=session.persist_sprint)
    except subprocess.CalledProcessError as e:
        error(e.stderr.decode("utf-8", "replace").strip() or str(e), args.json)

    # History is only kept when sprint state is persisted.
    sprints = len(session.history) if session.persist_sprint else 0
    if args.json:
        output_json(
            {
                "repo_path": str(repo_path),
                "created": True,
                "tasks": len(session.backlog),
                "sprints": sprints,
            }
        )
    else:
        print(f"Initialized scrumdo board at {repo_path}")
        if args.sample:
            print(f"Sample data: {len(session.backlog)} tasks, {sprints} past sprints")

    return 0
