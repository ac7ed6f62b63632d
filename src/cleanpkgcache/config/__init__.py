"""Configuration loading and defaults for cleanpkgcache.

This package facade re-exports the public names so callers can use
``from cleanpkgcache.config import ...``.
"""

from __future__ import annotations

from cleanpkgcache.config.loader import load_config
from cleanpkgcache.config.model import CleanConfig, default_checkpoint_roots

__all__ = [
    "CleanConfig",
    "default_checkpoint_roots",
    "load_config",
]
