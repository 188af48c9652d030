"""Git repository helpers and git-config backed settings."""

import logging
from pathlib import Path
from typing import Any

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

logger = logging.getLogger(__name__)

SCRUMDO_DEFAULTS = {
    "persist-sprint": True,
    "velocity-window": 3,
}


def _python_key(git_key: str) -> str:
    """Convert git-style key (hyphenated) to Python-style (underscored)."""
    return git_key.replace("-", "_")


def _coerce_value(git_key: str, raw: str):
    """Type-coerce scrumdo section values using defaults."""
    default = SCRUMDO_DEFAULTS.get(git_key)
    if default is None:
        return raw
    if isinstance(default, bool):
        return raw.lower() in ("true", "yes", "on", "1")
    if isinstance(default, int):
        return int(raw)
    return raw


def read_config(repo_path: str | Path) -> dict[str, Any]:
    """Read the [scrumdo] git config section, filling in defaults.

    Keys come back underscored: persist-sprint → persist_sprint. Values
    that do not parse are logged and the default is kept.
    """
    reader = Repo(repo_path).config_reader()
    config = {_python_key(k): v for k, v in SCRUMDO_DEFAULTS.items()}
    if reader.has_section("scrumdo"):
        for git_k, raw in reader.items("scrumdo"):
            try:
                config[_python_key(git_k)] = _coerce_value(git_k, raw)
            except ValueError:
                logger.warning("ignoring scrumdo.%s = %r: not a valid value", git_k, raw)
    return config


def is_git_repo(path: str | Path) -> bool:
    """Check if path is inside a git repository."""
    try:
        Repo(path)
        return True
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False


def init_repo(path: str | Path) -> Repo:
    """Initialize a new git repository at path."""
    return Repo.init(path)
