"""File source protocol used by the content builder."""

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSource(Protocol):
    """Read access to constituent files of a package."""

    def read_content(self, path: str) -> str:
        """Read the full text of a file."""
        ...

    def read_last_modified(self, path: str) -> datetime:
        """Read a file's last write time as an aware UTC datetime."""
        ...
