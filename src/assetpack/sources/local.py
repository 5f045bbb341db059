"""Local filesystem file source."""

import os
from datetime import datetime, timezone


class LocalFileSource:
    """Reads package files from the local disk."""

    def __init__(self, encoding: str = "utf-8-sig") -> None:
        # utf-8-sig drops a leading BOM so it never lands mid-bundle
        self._encoding = encoding

    def read_content(self, path: str) -> str:
        """Read the full text of a file."""
        with open(path, encoding=self._encoding) as f:
            return f.read()

    def read_last_modified(self, path: str) -> datetime:
        """Read a file's last write time as an aware UTC datetime."""
        return datetime.fromtimestamp(os.stat(path).st_mtime, tz=timezone.utc)
