"""File sources for assetpack."""

from assetpack.sources.base import FileSource
from assetpack.sources.local import LocalFileSource

__all__ = [
    "FileSource",
    "LocalFileSource",
]
