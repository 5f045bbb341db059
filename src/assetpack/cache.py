"""Package cache with build coalescing and file-change invalidation."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, cast

from assetpack.builder import ContentBuilder
from assetpack.settings import get_settings
from assetpack.types import BuildOptions, ContentArtifact, Minifier
from assetpack.watchers import FileWatcher, PollingFileWatcher, Subscription

logger = logging.getLogger(__name__)


class Builder(Protocol):
    """Anything that can turn a list of files into an artifact."""

    def build(
        self,
        paths: Sequence[str],
        *,
        minify: bool = False,
        minifier: Minifier | None = None,
    ) -> ContentArtifact: ...


@dataclass(slots=True)
class _Entry:
    artifact: ContentArtifact | None = None
    subscription: Subscription | None = None
    invalidated: bool = False


class PackageCache:
    """In-memory artifact store keyed by package path.

    Hits are served without locking. Misses are built under one lock shared
    by all packages, so concurrent requests for the same cold package run
    the build once. Entries built with ``auto_refresh`` are evicted as soon
    as the watcher reports a change to any of their files.
    """

    def __init__(
        self,
        *,
        builder: Builder | None = None,
        watcher: FileWatcher | None = None,
    ) -> None:
        self._builder = builder if builder is not None else ContentBuilder()
        self._watcher = (
            watcher
            if watcher is not None
            else PollingFileWatcher(get_settings().poll_interval)
        )
        self._entries: dict[str, _Entry] = {}
        self._build_lock = threading.Lock()
        # Guards install/evict only; never held while building
        self._store_lock = threading.Lock()

    @property
    def watcher(self) -> FileWatcher:
        return self._watcher

    def get_or_build(
        self,
        key: str,
        paths: Sequence[str],
        options: BuildOptions,
        *,
        minifier: Minifier | None = None,
    ) -> ContentArtifact:
        """Return the cached artifact for ``key``, building it on a miss.

        The options of the request that triggers a build apply to the
        cached artifact until it is evicted, whatever later callers pass.
        """
        entry = self._entries.get(key)
        if entry is not None:
            return cast(ContentArtifact, entry.artifact)

        with self._build_lock:
            entry = self._entries.get(key)
            if entry is not None:
                return cast(ContentArtifact, entry.artifact)

            # Watch before reading so edits made during the build still evict
            entry = _Entry()
            if options.auto_refresh:
                entry.subscription = self._watch(key, entry, paths)

            logger.debug("Building %s from %d files", key, len(paths))
            try:
                artifact = self._builder.build(
                    paths, minify=options.minify, minifier=minifier
                )
            except BaseException:
                if entry.subscription is not None:
                    entry.subscription.cancel()
                raise
            entry.artifact = artifact

            with self._store_lock:
                if not entry.invalidated:
                    self._entries[key] = entry
                    return artifact

            # Files changed during the build; serve once, don't cache
            if entry.subscription is not None:
                entry.subscription.cancel()
            return artifact

    def _watch(
        self, key: str, entry: _Entry, paths: Sequence[str]
    ) -> Subscription | None:
        def on_change(path: str) -> None:
            logger.debug("%s changed, evicting %s", path, key)
            self._invalidate(key, entry)

        try:
            return self._watcher.subscribe(list(paths), on_change)
        except OSError:
            logger.warning(
                "Could not watch files of %s; serving without auto-refresh",
                key,
                exc_info=True,
            )
            return None

    def _invalidate(self, key: str, entry: _Entry) -> None:
        with self._store_lock:
            entry.invalidated = True
            # An older entry's watch must not evict a newer build
            if self._entries.get(key) is entry:
                del self._entries[key]
        if entry.subscription is not None:
            entry.subscription.cancel()
