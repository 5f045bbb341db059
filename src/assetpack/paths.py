"""Mapping of root-relative asset paths onto the filesystem."""

from __future__ import annotations

import os

ROOT_MARKER = "/"


def _to_host_separators(path: str) -> str:
    return path.replace("/", os.sep).replace("\\", os.sep)


def is_rooted(path: str) -> bool:
    """Check if a logical path starts at the application root."""
    return path.startswith(ROOT_MARKER)


def resolve_path(root: str | os.PathLike[str], logical_path: str) -> str:
    """Resolve ``logical_path`` against ``root`` to an absolute path.

    Both arguments may mix ``/`` and ``\\``. Trailing separators on the root
    and leading separators on the logical path are ignored, and ``.``/``..``
    segments are collapsed. No filesystem access takes place.

    Example:
        resolve_path("/srv/app/", "/css//../css/site.css")  # "/srv/app/css/site.css"
    """
    base = _to_host_separators(os.fspath(root)).rstrip(os.sep) or os.sep
    relative = _to_host_separators(logical_path).lstrip(os.sep)
    return os.path.abspath(os.path.join(base, relative))


def is_within(root: str | os.PathLike[str], file_system_path: str) -> bool:
    """Check if an absolute path lies under ``root``.

    ``resolve_path`` collapses ``..`` segments, so a logical path such as
    ``/../secrets.txt`` can point outside the root; this catches that.
    """
    base = resolve_path(root, ROOT_MARKER)
    return os.path.commonpath([base, file_system_path]) == base
