"""Poll-based file watcher.

Stats every watched path on a fixed interval and compares it against the
signature recorded at subscribe time (or at the last reported change).
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Sequence

from assetpack.interval import Interval, parse_interval
from assetpack.watchers.base import OnChange

logger = logging.getLogger(__name__)

# (state, mtime_ns, size)
Signature = tuple[str, int, int]


def file_signature(path: str) -> Signature:
    """Return a stat tuple describing ``path`` existence and metadata."""
    try:
        st = os.stat(path)
    except FileNotFoundError:
        return ("missing", 0, 0)
    except OSError:
        return ("error", 0, 0)
    return ("ok", st.st_mtime_ns, st.st_size)


class PollingSubscription:
    """Subscription held by a PollingFileWatcher."""

    def __init__(
        self,
        watcher: PollingFileWatcher,
        baseline: dict[str, Signature],
        on_change: OnChange,
    ) -> None:
        self._watcher = watcher
        self._on_change = on_change
        self.baseline = baseline
        self.cancelled = False

    def cancel(self) -> None:
        """Stop receiving change notifications."""
        self.cancelled = True
        self._watcher._remove(self)


class PollingFileWatcher:
    """File watcher backed by a daemon polling thread."""

    def __init__(self, interval: Interval = "1s", *, autostart: bool = True) -> None:
        self._interval = parse_interval(interval)
        self._autostart = autostart
        self._subscriptions: list[PollingSubscription] = []
        self._lock = threading.Lock()
        # Serializes scans so the thread and manual poll() never race
        self._scan_lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def subscribe(self, paths: Sequence[str], on_change: OnChange) -> PollingSubscription:
        """Record current signatures of ``paths`` and watch them for changes."""
        baseline = {path: file_signature(path) for path in paths}
        subscription = PollingSubscription(self, baseline, on_change)
        with self._lock:
            self._subscriptions.append(subscription)
        if self._autostart:
            self.start()
        return subscription

    def start(self) -> None:
        """Start the polling thread if it is not running."""
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                return
            self._stop.clear()
            self._thread = threading.Thread(
                target=self._run, name="assetpack-watcher", daemon=True
            )
            self._thread.start()
        logger.debug("Polling watcher started (interval=%ss)", self._interval)

    def close(self) -> None:
        """Stop the polling thread and drop all subscriptions."""
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        with self._lock:
            self._thread = None
            self._subscriptions.clear()

    def poll(self) -> int:
        """Scan all watched files once. Returns the number of callbacks fired."""
        with self._scan_lock:
            return self._scan()

    def _scan(self) -> int:
        with self._lock:
            subscriptions = list(self._subscriptions)

        # Stat each path once even when subscriptions overlap
        current: dict[str, Signature] = {}
        for subscription in subscriptions:
            for path in subscription.baseline:
                if path not in current:
                    current[path] = file_signature(path)

        fired = 0
        for subscription in subscriptions:
            if subscription.cancelled:
                continue
            changed = [
                path
                for path, signature in subscription.baseline.items()
                if current[path] != signature
            ]
            if not changed:
                continue
            for path in changed:
                subscription.baseline[path] = current[path]
            fired += 1
            try:
                subscription._on_change(changed[0])
            except Exception:
                logger.exception("Change callback failed for %s", changed[0])
        return fired

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            self.poll()

    def _remove(self, subscription: PollingSubscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)
