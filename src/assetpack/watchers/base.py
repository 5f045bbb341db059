"""Watch protocols for file-change notification."""

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

# Called with the absolute path that changed
OnChange = Callable[[str], None]


@runtime_checkable
class Subscription(Protocol):
    """Handle for an active watch."""

    def cancel(self) -> None:
        """Stop receiving change notifications. Safe to call twice."""
        ...


@runtime_checkable
class FileWatcher(Protocol):
    """File watcher interface."""

    def subscribe(self, paths: Sequence[str], on_change: OnChange) -> Subscription:
        """Call ``on_change`` whenever one of ``paths`` changes."""
        ...
