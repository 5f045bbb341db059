"""Content builder - concatenates package files into one artifact."""

from __future__ import annotations

from collections.abc import Sequence

from assetpack.sources import FileSource, LocalFileSource
from assetpack.types import NEVER_MODIFIED, ContentArtifact, Minifier

LINE_SEPARATOR = "\n"


class ContentBuilder:
    """Builds a package artifact from its files, in declaration order."""

    def __init__(self, source: FileSource | None = None) -> None:
        self._source = source if source is not None else LocalFileSource()

    @property
    def source(self) -> FileSource:
        return self._source

    def build(
        self,
        paths: Sequence[str],
        *,
        minify: bool = False,
        minifier: Minifier | None = None,
    ) -> ContentArtifact:
        """Concatenate ``paths`` and track the latest write time.

        Each file's text is followed by a line separator. Read errors
        propagate, so a partial bundle is never produced.
        """
        parts: list[str] = []
        latest = NEVER_MODIFIED

        for path in paths:
            content = self._source.read_content(path)
            if minify and minifier is not None:
                content = minifier(content)
            parts.append(content)
            parts.append(LINE_SEPARATOR)

            modified = self._source.read_last_modified(path)
            if modified > latest:
                latest = modified

        return ContentArtifact(content="".join(parts), last_modified_utc=latest)
