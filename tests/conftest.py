"""Shared pytest fixtures for building cache trees with controlled timestamps."""

from __future__ import annotations

import os
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest

BASE_TIMESTAMP: float = 1_700_000_000.0


@pytest.fixture()
def base_timestamp() -> float:
    """POSIX timestamp all tree fixtures are offset from."""
    return BASE_TIMESTAMP


@pytest.fixture()
def base_now() -> datetime:
    """A fixed instant matching ``base_timestamp``."""
    return datetime.fromtimestamp(BASE_TIMESTAMP, tz=UTC)


@pytest.fixture()
def cache_root(tmp_path: Path) -> Path:
    """Return an empty cache root directory."""
    root = tmp_path / "cache"
    root.mkdir()
    return root


@pytest.fixture()
def make_version(cache_root: Path) -> Callable[[str, str, float], Path]:
    """Return a factory creating ``<cache_root>/<package>/<version>`` with mtime ``BASE_TIMESTAMP + offset``.

    Each version holds a small file so deletion exercises recursive removal.
    """

    def _make(package: str, version: str, offset: float) -> Path:
        path = cache_root / package / version
        path.mkdir(parents=True)
        (path / "artifact.lib").write_bytes(b"\0" * 16)
        os.utime(path, (BASE_TIMESTAMP + offset, BASE_TIMESTAMP + offset))
        return path

    return _make


@pytest.fixture()
def make_task(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory creating a checkpoint task folder aged ``age_days`` before ``BASE_TIMESTAMP``."""

    def _make(root_name: str, task: str, age_days: float, *, with_checkpoints: bool = True) -> Path:
        path = tmp_path / root_name / task
        path.mkdir(parents=True)
        (path / "history.json").write_text("[]", encoding="utf-8")
        if with_checkpoints:
            checkpoints = path / "checkpoints"
            checkpoints.mkdir()
            (checkpoints / "0001.bin").write_bytes(b"\0" * 16)
        timestamp = BASE_TIMESTAMP - age_days * 86_400
        os.utime(path, (timestamp, timestamp))
        return path

    return _make
