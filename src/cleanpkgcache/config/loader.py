"""Config loading and normalization."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from cleanpkgcache.config.model import CleanConfig, default_checkpoint_roots
from cleanpkgcache.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_CACHE_ROOT,
    DEFAULT_CHECKPOINT_MAX_AGE_DAYS,
)
from cleanpkgcache.exceptions import ConfigError


def load_config(config_path: Path | None = None, *, search_dir: Path | None = None) -> CleanConfig:
    """Load config from an explicit path or from ``.cleanpkgcache.yaml`` in ``search_dir``.

    ``search_dir`` defaults to the user's home directory. A missing default
    file yields the built-in defaults; a missing explicit file is an error.
    """
    if config_path is not None:
        path = config_path.expanduser().resolve()
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
    else:
        path = (search_dir if search_dir is not None else Path.home()) / CONFIG_FILENAME
        if not path.exists():
            return CleanConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        details = ", ".join(_describe_unknown_key(key) for key in unknown)
        raise ConfigError(f"Unknown config key(s) in {path}: {details}")

    cache_root = raw.get("cache_root", DEFAULT_CACHE_ROOT)
    if not isinstance(cache_root, str) or not cache_root.strip():
        raise ConfigError("cache_root must be a non-empty string")

    if "checkpoint_roots" in raw:
        checkpoint_roots = tuple(
            Path(value).expanduser() for value in _ensure_string_list(raw["checkpoint_roots"], "checkpoint_roots")
        )
    else:
        checkpoint_roots = default_checkpoint_roots()

    max_age_days = raw.get("checkpoint_max_age_days", DEFAULT_CHECKPOINT_MAX_AGE_DAYS)
    if isinstance(max_age_days, bool) or not isinstance(max_age_days, int) or max_age_days <= 0:
        raise ConfigError("checkpoint_max_age_days must be a positive integer")

    return CleanConfig(
        cache_root=Path(cache_root.strip()).expanduser(),
        checkpoint_roots=checkpoint_roots,
        checkpoint_max_age_days=max_age_days,
    )


def _describe_unknown_key(key: str) -> str:
    suggestion = _suggest_key(key, ALLOWED_CONFIG_KEYS)
    return f"{key!r} (did you mean {suggestion!r}?)" if suggestion else repr(key)


def _suggest_key(key: str, allowed: frozenset[str]) -> str | None:
    """Return the closest allowed key, if any is similar enough."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _ensure_string_list(value: Any, field_name: str) -> list[str]:
    if not isinstance(value, list):
        raise ConfigError(f"{field_name} must be a list of strings")
    result: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"{field_name} must contain only non-empty strings")
        result.append(item.strip())
    return result
