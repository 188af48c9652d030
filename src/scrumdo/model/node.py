"""Reactive attribute store with change notification."""

from __future__ import annotations

from typing import Any, Callable

Callback = Callable[["Node", str, Any, Any], None]

ANY_KEY = "*"


def _emit(node: Node, key: str, old: Any, new: Any) -> None:
    """Fire watchers for key, then wildcard watchers."""
    for cb in list(node._watchers.get(key, ())):
        cb(node, key, old, new)
    for cb in list(node._watchers.get(ANY_KEY, ())):
        cb(node, key, old, new)


class Node:
    """Reactive dict-like state holder.

    Stores data in an internal dict, accessed via attribute syntax.
    Setting a value to None deletes the key. Assigning a value equal to
    the current one is silent; any real change bumps ``_version`` and
    fires watchers for that key and for ``"*"``.
    """

    def __init__(self, **data: Any) -> None:
        object.__setattr__(self, "_children", {})
        object.__setattr__(self, "_watchers", {})
        object.__setattr__(self, "_version", 0)
        for k, v in data.items():
            setattr(self, k, v)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._children.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        old = self._children.get(name)
        if value is None:
            self._children.pop(name, None)
        else:
            self._children[name] = value
        if old != value:
            self._version += 1
            _emit(self, name, old, value)

    def __contains__(self, key: str) -> bool:
        return key in self._children

    def watch(self, key: str, callback: Callback) -> Callable[[], None]:
        """Watch a key (or "*" for every key). Returns an unwatch callable."""
        self._watchers.setdefault(key, []).append(callback)

        def unwatch() -> None:
            callbacks = self._watchers.get(key, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unwatch

    def keys(self):
        """Return children keys."""
        return self._children.keys()

    def items(self):
        """Return children items."""
        return self._children.items()

    def update(self, other: Node) -> None:
        """Update this node in-place to match other, preserving watchers."""
        for key in set(self.keys()) - set(other.keys()):
            setattr(self, key, None)
        for key, value in other.items():
            setattr(self, key, value)

    def __repr__(self) -> str:
        keys = ", ".join(self._children.keys())
        return f"<Node [{keys}]>"
