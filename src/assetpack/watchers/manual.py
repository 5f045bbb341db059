"""In-process watcher driven by explicit notifications."""

import threading
from collections.abc import Sequence

from assetpack.watchers.base import OnChange


class ManualSubscription:
    """Subscription held by a ManualFileWatcher."""

    __slots__ = ("_on_change", "_watcher", "paths")

    def __init__(
        self, watcher: "ManualFileWatcher", paths: frozenset[str], on_change: OnChange
    ) -> None:
        self._watcher = watcher
        self._on_change = on_change
        self.paths = paths

    def cancel(self) -> None:
        """Stop receiving change notifications."""
        self._watcher._remove(self)


class ManualFileWatcher:
    """Watcher that fires only when ``notify`` is called.

    Useful when the host application already receives change events
    (editor hooks, deploy scripts) and for tests.
    """

    def __init__(self) -> None:
        self._subscriptions: list[ManualSubscription] = []
        self._lock = threading.Lock()

    @property
    def active_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def subscribe(self, paths: Sequence[str], on_change: OnChange) -> ManualSubscription:
        """Register ``on_change`` for ``paths``."""
        subscription = ManualSubscription(self, frozenset(paths), on_change)
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription

    def notify(self, path: str) -> int:
        """Report a change to ``path``. Returns how many subscribers fired."""
        with self._lock:
            matching = [s for s in self._subscriptions if path in s.paths]
        for subscription in matching:
            subscription._on_change(path)
        return len(matching)

    def _remove(self, subscription: ManualSubscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)
