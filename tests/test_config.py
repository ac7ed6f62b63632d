"""Tests for configuration loading and defaults."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pytest

from cleanpkgcache.config import CleanConfig, default_checkpoint_roots, load_config
from cleanpkgcache.constants.config import DEFAULT_CACHE_ROOT, DEFAULT_CHECKPOINT_MAX_AGE_DAYS
from cleanpkgcache.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(search_dir=tmp_path)

    assert loaded.cache_root == Path(DEFAULT_CACHE_ROOT)
    assert loaded.checkpoint_max_age == timedelta(days=DEFAULT_CHECKPOINT_MAX_AGE_DAYS)
    assert len(loaded.checkpoint_roots) == 2


def test_load_config_from_search_dir(tmp_path: Path) -> None:
    (tmp_path / ".cleanpkgcache.yaml").write_text(
        "cache_root: /srv/cache\ncheckpoint_roots:\n  - /srv/tasks\ncheckpoint_max_age_days: 30\n",
        encoding="utf-8",
    )

    loaded = load_config(search_dir=tmp_path)

    assert loaded == CleanConfig(
        cache_root=Path("/srv/cache"),
        checkpoint_roots=(Path("/srv/tasks"),),
        checkpoint_max_age_days=30,
    )


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "cfg.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(config_path).cache_root == Path(DEFAULT_CACHE_ROOT)


def test_explicit_missing_config_is_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "absent.yaml")


def test_unknown_key_suggests_close_match(tmp_path: Path) -> None:
    config_path = tmp_path / "cfg.yaml"
    config_path.write_text("cache_rot: /srv\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="did you mean 'cache_root'"):
        load_config(config_path)


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("- a\n- b\n", "mapping"),
        ("cache_root: ''\n", "cache_root"),
        ("cache_root: 12\n", "cache_root"),
        ("checkpoint_roots: /srv/tasks\n", "checkpoint_roots"),
        ("checkpoint_roots: [1]\n", "checkpoint_roots"),
        ("checkpoint_max_age_days: 0\n", "checkpoint_max_age_days"),
        ("checkpoint_max_age_days: true\n", "checkpoint_max_age_days"),
        ("keep_count: 5\n", "keep_count"),
        ("cache_root: [unclosed\n", "Invalid YAML"),
    ],
    ids=[
        "not_mapping",
        "empty_cache_root",
        "int_cache_root",
        "string_roots",
        "int_root_item",
        "zero_age",
        "bool_age",
        "keep_count_not_configurable",
        "bad_yaml",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "cfg.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(config_path)


def test_default_checkpoint_roots_use_appdata() -> None:
    roots = default_checkpoint_roots({"APPDATA": "/users/me/AppData/Roaming"})

    storage = Path("/users/me/AppData/Roaming") / "Code" / "User" / "globalStorage"
    assert roots == (
        storage / "microsoftai.ms-roo-cline" / "tasks",
        storage / "rooveterinaryinc.roo-cline" / "tasks",
    )


def test_default_checkpoint_roots_fall_back_to_dot_config() -> None:
    roots = default_checkpoint_roots({})

    assert all(Path.home() / ".config" in root.parents for root in roots)
