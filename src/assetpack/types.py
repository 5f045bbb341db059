"""Core types for assetpack."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

# Timestamp of a package with no files
NEVER_MODIFIED = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True)
class BuildOptions:
    """Options applied when a package's bundle is (re)built."""

    auto_refresh: bool = True  # Evict on file change
    minify: bool = False


@dataclass(frozen=True, slots=True)
class ContentArtifact:
    """A built bundle with its last-modified time."""

    content: str
    last_modified_utc: datetime


# Minifier type alias
Minifier = Callable[[str], str]
