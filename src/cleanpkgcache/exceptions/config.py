"""Configuration-related exceptions."""

from __future__ import annotations

from cleanpkgcache.exceptions.base import CleanPkgCacheError


class ConfigError(CleanPkgCacheError, ValueError):
    """Raised when the configuration file is invalid."""
