"""Shared pytest fixtures."""

import os
from collections import Counter
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

from assetpack import ManualFileWatcher, PackageCache

WriteAsset = Callable[..., Path]


@pytest.fixture
def watcher() -> ManualFileWatcher:
    """Create a fresh ManualFileWatcher for each test."""
    return ManualFileWatcher()


@pytest.fixture
def cache(watcher: ManualFileWatcher) -> PackageCache:
    """Create a PackageCache driven by the manual watcher."""
    return PackageCache(watcher=watcher)


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    """Application root directory for test assets."""
    root = tmp_path / "app"
    root.mkdir()
    return root


@pytest.fixture
def write_asset(asset_root: Path) -> WriteAsset:
    """Write a file under the asset root, optionally pinning its mtime."""

    def write(logical_path: str, content: str, mtime: datetime | None = None) -> Path:
        path = asset_root / logical_path.lstrip("/")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        if mtime is not None:
            stamp = mtime.timestamp()
            os.utime(path, (stamp, stamp))
        return path

    return write


class InMemorySource:
    """FileSource over a dict that counts reads."""

    def __init__(self) -> None:
        self.files: dict[str, tuple[str, datetime]] = {}
        self.reads: Counter[str] = Counter()

    def put(self, path: str, content: str, modified: datetime) -> None:
        self.files[path] = (content, modified)

    def read_content(self, path: str) -> str:
        self.reads[path] += 1
        try:
            return self.files[path][0]
        except KeyError:
            raise FileNotFoundError(path) from None

    def read_last_modified(self, path: str) -> datetime:
        try:
            return self.files[path][1]
        except KeyError:
            raise FileNotFoundError(path) from None


@pytest.fixture
def source() -> InMemorySource:
    """Create an empty in-memory file source."""
    return InMemorySource()
