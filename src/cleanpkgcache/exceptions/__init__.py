"""Shared exception hierarchy for cleanpkgcache."""

from __future__ import annotations

from .base import CleanPkgCacheError
from .config import ConfigError
from .filesystem import (
    CacheRootError,
    MetadataUnavailableError,
    NotADirectoryPathError,
    PathNotFoundError,
    PathPermissionError,
    ProbeError,
)

__all__ = [
    "CacheRootError",
    "CleanPkgCacheError",
    "ConfigError",
    "MetadataUnavailableError",
    "NotADirectoryPathError",
    "PathNotFoundError",
    "PathPermissionError",
    "ProbeError",
]
