"""assetpack - Cached, self-invalidating asset bundles for Python."""

import logging

# Content building
from assetpack.builder import ContentBuilder

# Cache
from assetpack.cache import PackageCache

# Interval parsing
from assetpack.interval import parse_interval

# Minifiers
from assetpack.minify import minify_css, minify_js

# Packages
from assetpack.package import (
    AssetPackage,
    PackageLockedError,
    ScriptPackage,
    StylesheetPackage,
)
from assetpack.paths import resolve_path
from assetpack.settings import Settings, application_root, get_settings

# File sources and watchers
from assetpack.sources import FileSource, LocalFileSource

# Core types
from assetpack.types import BuildOptions, ContentArtifact
from assetpack.watchers import (
    FileWatcher,
    ManualFileWatcher,
    PollingFileWatcher,
    Subscription,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AssetPackage",
    "BuildOptions",
    "ContentArtifact",
    "ContentBuilder",
    "FileSource",
    "FileWatcher",
    "LocalFileSource",
    "ManualFileWatcher",
    "PackageCache",
    "PackageLockedError",
    "PollingFileWatcher",
    "ScriptPackage",
    "Settings",
    "StylesheetPackage",
    "Subscription",
    "application_root",
    "get_settings",
    "minify_css",
    "minify_js",
    "parse_interval",
    "resolve_path",
]
