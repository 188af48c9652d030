"""Key-value blob stores that boards are saved to."""

import logging
import subprocess
from pathlib import Path

from git import Repo

from scrumdo.constants import BRANCH_NAME

logger = logging.getLogger(__name__)


class MemoryStore:
    """Blob store held in a dict. Nothing survives the process."""

    def __init__(self, blobs: dict[str, bytes] | None = None):
        self.blobs: dict[str, bytes] = dict(blobs or {})
        self.writes = 0

    def read(self, key: str) -> bytes | None:
        return self.blobs.get(key)

    def write(self, blobs: dict[str, bytes], message: str = "") -> None:
        self.blobs.update(blobs)
        self.writes += 1

    def exists(self) -> bool:
        return bool(self.blobs)


# --- Git plumbing ---


def _git(repo_path: Path, args: list[str]) -> str:
    """Run a git command and return stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_path,
        capture_output=True,
        check=True,
    )
    return result.stdout.decode("utf-8").strip()


def _hash_object(repo_path: Path, content: bytes) -> str:
    """Write content to git object store and return the blob hash."""
    result = subprocess.run(
        ["git", "hash-object", "-w", "--stdin"],
        cwd=repo_path,
        input=content,
        capture_output=True,
        check=True,
    )
    return result.stdout.decode("utf-8").strip()


def _mktree(repo_path: Path, entries: list[tuple[str, str, str, str]]) -> str:
    """Create a tree object from (mode, type, sha, name) entries and return its hash."""
    lines = [f"{mode} {typ} {sha}\t{name}" for mode, typ, sha, name in entries]
    content = "\n".join(lines) + "\n" if lines else ""

    result = subprocess.run(
        ["git", "mktree"],
        cwd=repo_path,
        input=content.encode("utf-8"),
        capture_output=True,
        check=True,
    )
    return result.stdout.decode("utf-8").strip()


def _get_branch_tip(repo_path: Path, branch: str) -> str | None:
    """Get the current commit hash of a branch, or None if it doesn't exist."""
    result = subprocess.run(
        ["git", "rev-parse", "--verify", "--quiet", f"refs/heads/{branch}"],
        cwd=repo_path,
        capture_output=True,
    )
    if result.returncode != 0:
        return None
    return result.stdout.decode("utf-8").strip()


def _tree_entries(repo_path: Path, commit: str) -> dict[str, tuple[str, str, str, str]]:
    """Top-level entries of a commit's tree, keyed by name."""
    entries = {}
    for line in _git(repo_path, ["ls-tree", commit]).splitlines():
        meta, name = line.split("\t", 1)
        mode, typ, sha = meta.split()
        entries[name] = (mode, typ, sha, name)
    return entries


class GitStore:
    """Blob store kept as files on an orphan branch of a git repository.

    The working tree and index are never touched. Each write is one
    commit; writes that leave the tree unchanged make no commit.
    """

    def __init__(self, repo_path: str | Path, branch: str = BRANCH_NAME):
        self.repo_path = Path(repo_path)
        self.branch = branch

    def exists(self) -> bool:
        """True once the branch has been created."""
        return _get_branch_tip(self.repo_path, self.branch) is not None

    def read(self, key: str) -> bytes | None:
        """Blob content for key, or None if the branch or key is absent."""
        tip = _get_branch_tip(self.repo_path, self.branch)
        if tip is None:
            return None
        tree = Repo(self.repo_path).commit(tip).tree
        try:
            blob = tree[key]
        except KeyError:
            return None
        return blob.data_stream.read()

    def write(self, blobs: dict[str, bytes], message: str = "Update board") -> str:
        """Commit blobs onto the branch, keeping other keys. Returns the tip commit."""
        repo_path = self.repo_path
        tip = _get_branch_tip(repo_path, self.branch)
        entries = _tree_entries(repo_path, tip) if tip else {}
        for key, content in blobs.items():
            if not key or "/" in key:
                raise ValueError(f"invalid store key: {key!r}")
            entries[key] = ("100644", "blob", _hash_object(repo_path, content), key)

        tree = _mktree(repo_path, [entries[name] for name in sorted(entries)])

        # Skip commit if tree is unchanged from parent
        if tip and _git(repo_path, ["rev-parse", f"{tip}^{{tree}}"]) == tree:
            logger.debug("%s unchanged, no commit", self.branch)
            return tip

        parent_args = ["-p", tip] if tip else []
        new_commit = _git(repo_path, ["commit-tree", tree, *parent_args, "-m", message])
        _git(repo_path, ["update-ref", f"refs/heads/{self.branch}", new_commit])
        logger.debug("committed %s to %s", new_commit[:8], self.branch)
        return new_commit
