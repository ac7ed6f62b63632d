"""Root exception type."""

from __future__ import annotations


class CleanPkgCacheError(Exception):
    """Base class for all errors raised by cleanpkgcache."""
