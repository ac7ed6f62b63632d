"""Config data model for cleanup runs."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

from cleanpkgcache.constants.config import (
    CHECKPOINT_TASKS_DIRNAME,
    DEFAULT_CACHE_ROOT,
    DEFAULT_CHECKPOINT_MAX_AGE_DAYS,
    ROO_EXTENSION_IDS,
    VSCODE_GLOBAL_STORAGE_PARTS,
)


def default_checkpoint_roots(environ: Mapping[str, str] | None = None) -> tuple[Path, ...]:
    """Return the Roo task folders of the current user's VS Code install.

    Uses ``%APPDATA%`` when set (Windows) and ``~/.config`` otherwise.
    """
    env = os.environ if environ is None else environ
    appdata = env.get("APPDATA")
    base = Path(appdata) if appdata else Path.home() / ".config"
    storage = base.joinpath(*VSCODE_GLOBAL_STORAGE_PARTS)
    return tuple(storage / extension / CHECKPOINT_TASKS_DIRNAME for extension in ROO_EXTENSION_IDS)


@dataclass(frozen=True)
class CleanConfig:
    """Resolved cleanup config."""

    cache_root: Path = Path(DEFAULT_CACHE_ROOT)
    checkpoint_roots: tuple[Path, ...] = field(default_factory=default_checkpoint_roots)
    checkpoint_max_age_days: int = DEFAULT_CHECKPOINT_MAX_AGE_DAYS

    @property
    def checkpoint_max_age(self) -> timedelta:
        """Age after which a task's checkpoints are deleted."""
        return timedelta(days=self.checkpoint_max_age_days)
