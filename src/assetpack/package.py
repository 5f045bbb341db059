"""Asset packages - ordered file sets served as one bundle."""

from __future__ import annotations

import html
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime

from assetpack.cache import PackageCache
from assetpack.minify import minify_css, minify_js
from assetpack.paths import ROOT_MARKER, is_rooted, is_within, resolve_path
from assetpack.settings import application_root
from assetpack.types import BuildOptions, ContentArtifact


class PackageLockedError(RuntimeError):
    """Raised when files are added to a package that has served content."""


class AssetPackage(ABC):
    """A named, ordered set of asset files cached and served as one unit.

    Files are declared with root-relative paths (``/css/site.css``) and are
    concatenated in declaration order. The first content request locks the
    file list, since the cache entry and its watch cover a fixed file set.

    Example:
        cache = PackageCache()
        site = StylesheetPackage("/bundles/site.css", cache)
        site.add_paths(["/css/reset.css", "/css/site.css"])
        site.get_content(BuildOptions(minify=True))
    """

    def __init__(
        self,
        path: str,
        cache: PackageCache,
        *,
        root: str | None = None,
    ) -> None:
        self._path = path
        self._cache = cache
        self._root = root if root is not None else application_root()
        self._paths: list[str] = []
        self._file_system_paths: list[str] = []
        self._locked = False

    @property
    def path(self) -> str:
        """Logical path of the package; also its cache key."""
        return self._path

    @property
    def is_locked(self) -> bool:
        return self._locked

    @property
    def file_system_paths(self) -> tuple[str, ...]:
        return tuple(self._file_system_paths)

    @property
    @abstractmethod
    def content_type(self) -> str:
        """MIME type the bundle is served with."""

    @abstractmethod
    def html_element(self, url: str) -> str:
        """Markup that embeds the bundle served at ``url``."""

    def minify(self, content: str) -> str:
        """Minify one file's content. Packages without a minifier keep it."""
        return content

    def add_path(self, path: str) -> None:
        """Append a root-relative file path to the package."""
        if self._locked:
            raise PackageLockedError(
                f"Package {self._path!r} is locked for further additions"
            )
        if not path:
            raise ValueError("Path must not be empty")
        if not is_rooted(path):
            raise ValueError(f"Path must start with {ROOT_MARKER!r}: {path!r}")
        if path in self._paths:
            raise ValueError(f"Path {path!r} can't be added more than once")

        file_system_path = resolve_path(self._root, path)
        if not is_within(self._root, file_system_path):
            raise ValueError(f"Path {path!r} resolves outside the application root")
        self._paths.append(path)
        self._file_system_paths.append(file_system_path)

    def add_paths(self, paths: Iterable[str]) -> None:
        """Append several paths, in order."""
        for path in paths:
            self.add_path(path)

    def get_paths(self) -> tuple[str, ...]:
        """Declared logical paths, in concatenation order."""
        return tuple(self._paths)

    def get_content(self, options: BuildOptions | None = None) -> str:
        """Concatenated content of all files in the package."""
        return self._get_artifact(options).content

    def get_last_modified_utc(self, options: BuildOptions | None = None) -> datetime:
        """Latest write time across all files in the package."""
        return self._get_artifact(options).last_modified_utc

    def _get_artifact(self, options: BuildOptions | None) -> ContentArtifact:
        self._locked = True
        return self._cache.get_or_build(
            self._path,
            self.file_system_paths,
            options if options is not None else BuildOptions(),
            minifier=self.minify,
        )


class StylesheetPackage(AssetPackage):
    """Package of CSS files."""

    @property
    def content_type(self) -> str:
        return "text/css"

    def html_element(self, url: str) -> str:
        return f'<link rel="stylesheet" href="{html.escape(url)}" />'

    def minify(self, content: str) -> str:
        return minify_css(content)


class ScriptPackage(AssetPackage):
    """Package of JavaScript files."""

    @property
    def content_type(self) -> str:
        return "text/javascript"

    def html_element(self, url: str) -> str:
        return f'<script src="{html.escape(url)}"></script>'

    def minify(self, content: str) -> str:
        return minify_js(content)
