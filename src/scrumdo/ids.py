"""Task and sprint ID generation and lookup."""

import uuid

SHORT_ID_LENGTH = 8


def new_id() -> str:
    """Return a fresh opaque ID (32 hex chars)."""
    return uuid.uuid4().hex


def short_id(s: str) -> str:
    """Shorten an ID for display.

    "3f2a9c1e0b..." → "3f2a9c1e"
    """
    return s[:SHORT_ID_LENGTH]


def resolve_id(prefix: str, ids: list[str]) -> str | None:
    """Find the single ID starting with prefix.

    Returns None if nothing matches or the prefix is ambiguous.
    An exact match wins over longer IDs sharing the prefix.
    """
    prefix = prefix.strip().lower()
    if not prefix:
        return None
    if prefix in ids:
        return prefix
    matches = {i for i in ids if i.startswith(prefix)}
    if len(matches) != 1:
        return None
    return matches.pop()
