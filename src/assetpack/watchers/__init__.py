"""File watchers for assetpack cache invalidation."""

from assetpack.watchers.base import FileWatcher, OnChange, Subscription
from assetpack.watchers.manual import ManualFileWatcher
from assetpack.watchers.polling import PollingFileWatcher, file_signature

__all__ = [
    "FileWatcher",
    "ManualFileWatcher",
    "OnChange",
    "PollingFileWatcher",
    "Subscription",
    "file_signature",
]
