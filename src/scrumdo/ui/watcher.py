"""Mixin that manages board watches with auto-cleanup."""

from __future__ import annotations

from typing import Callable

from scrumdo.model.node import Callback, Node


class NodeWatcherMixin:
    """Mixin for widgets that watch board keys.

    Subclasses should:
    - Call ``_init_watcher()`` in ``__init__``
    - Use ``self.node_watch(node, key, callback)`` instead of ``node.watch(...)``
    - Skip writing ``on_unmount`` -- the mixin handles cleanup
    """

    def _init_watcher(self) -> None:
        self._watches: list[Callable[[], None]] = []

    def node_watch(self, node: Node, key: str, callback: Callback) -> None:
        """Register a watch that is removed when the widget unmounts."""
        self._watches.append(node.watch(key, callback))

    def on_unmount(self) -> None:
        for unwatch in self._watches:
            unwatch()
        self._watches.clear()
