"""Handler for 'scrumdo web' command."""

import shlex
import shutil
import sys
from pathlib import Path

from textual_serve.server import Server


def serve_command(scrumdo: str, repo_path: str) -> str:
    """Shell command textual-serve runs for each browser session."""
    return f"{shlex.quote(scrumdo)} {shlex.quote(repo_path)}"


def web(args) -> int:
    repo_path = str(Path(args.repo).resolve())

    scrumdo = shutil.which("scrumdo")
    if scrumdo is None:
        print("error: scrumdo not found on PATH", file=sys.stderr)
        return 1

    server = Server(
        serve_command(scrumdo, repo_path),
        host=args.host,
        port=args.port,
        title="scrumdo",
    )

    print(f"serving {repo_path} at http://{args.host}:{args.port}")
    server.serve()
    return 0
