"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = ".cleanpkgcache.yaml"

DEFAULT_CACHE_ROOT: str = r"C:\PkgCache\VC17LTCG"
DEFAULT_KEEP_COUNT: int = 2
DEFAULT_CHECKPOINT_MAX_AGE_DAYS: int = 60

CHECKPOINTS_DIRNAME: str = "checkpoints"
VSCODE_GLOBAL_STORAGE_PARTS: tuple[str, ...] = ("Code", "User", "globalStorage")
CHECKPOINT_TASKS_DIRNAME: str = "tasks"
ROO_EXTENSION_IDS: tuple[str, ...] = (
    "microsoftai.ms-roo-cline",
    "rooveterinaryinc.roo-cline",
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "cache_root",
        "checkpoint_roots",
        "checkpoint_max_age_days",
    }
)
