"""Filesystem probing and cache-root exceptions."""

from __future__ import annotations

from pathlib import Path

from cleanpkgcache.exceptions.base import CleanPkgCacheError


class ProbeError(CleanPkgCacheError):
    """Raised when a directory listing or metadata read fails."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path
        self.message = message


class PathNotFoundError(ProbeError):
    """The probed path does not exist."""


class NotADirectoryPathError(ProbeError):
    """The probed path exists but is not a directory."""


class PathPermissionError(ProbeError):
    """The probed path could not be read due to permissions or another access failure."""


class MetadataUnavailableError(ProbeError):
    """The filesystem could not report a modification time."""


class CacheRootError(CleanPkgCacheError):
    """Raised when the cache root is missing or unreadable; aborts the run before any mutation."""
