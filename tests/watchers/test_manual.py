"""Tests for the manual watcher."""

from assetpack import FileWatcher, ManualFileWatcher, Subscription


class TestManualFileWatcher:
    """Tests for ManualFileWatcher."""

    def test_satisfies_protocols(self, watcher: ManualFileWatcher) -> None:
        """Test that the watcher and its subscriptions match the protocols."""
        assert isinstance(watcher, FileWatcher)
        assert isinstance(watcher.subscribe(["/a"], lambda path: None), Subscription)

    def test_notify_fires_matching(self, watcher: ManualFileWatcher) -> None:
        """Test that only subscriptions containing the path fire."""
        seen: list[tuple[str, str]] = []
        watcher.subscribe(["/a", "/b"], lambda path: seen.append(("first", path)))
        watcher.subscribe(["/b", "/c"], lambda path: seen.append(("second", path)))

        assert watcher.notify("/a") == 1
        assert watcher.notify("/b") == 2
        assert watcher.notify("/z") == 0
        assert seen == [("first", "/a"), ("first", "/b"), ("second", "/b")]

    def test_cancel(self, watcher: ManualFileWatcher) -> None:
        """Test that cancelled subscriptions stop firing."""
        seen: list[str] = []
        subscription = watcher.subscribe(["/a"], seen.append)
        assert watcher.active_count == 1

        subscription.cancel()
        subscription.cancel()
        assert watcher.active_count == 0
        assert watcher.notify("/a") == 0
        assert seen == []

    def test_cancel_from_callback(self, watcher: ManualFileWatcher) -> None:
        """Test that a callback may cancel its own subscription."""
        subscriptions = []

        def on_change(path: str) -> None:
            subscriptions[0].cancel()

        subscriptions.append(watcher.subscribe(["/a"], on_change))
        assert watcher.notify("/a") == 1
        assert watcher.notify("/a") == 0
