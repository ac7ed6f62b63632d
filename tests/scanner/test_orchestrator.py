"""End-to-end tests for cleanup runs over real temporary trees."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path
from unittest.mock import patch

import pytest

from cleanpkgcache.exceptions import CacheRootError
from cleanpkgcache.scanner import clean_checkpoints, run_cleanup


def test_foo_scenario(cache_root: Path, make_version: Callable[[str, str, float], Path]) -> None:
    paths = {f"T{i}": make_version("Foo", f"T{i}", offset=-i) for i in range(1, 6)}

    summary = run_cleanup(cache_root=cache_root)

    assert summary.packages_processed == 1
    assert summary.versions_kept == 2
    assert summary.versions_deleted == 3
    assert sorted(p.name for p in (cache_root / "Foo").iterdir()) == ["T1", "T2"]
    report = summary.packages[0]
    assert [v.name for v in report.versions] == ["T1", "T2", "T3", "T4", "T5"]
    assert [(o.path, o.action) for o in report.outcomes] == [
        (paths["T1"], "keep"),
        (paths["T2"], "keep"),
        (paths["T3"], "delete"),
        (paths["T4"], "delete"),
        (paths["T5"], "delete"),
    ]


def test_bar_scenario(cache_root: Path, make_version: Callable[[str, str, float], Path]) -> None:
    only = make_version("Bar", "1.0", 0)

    summary = run_cleanup(cache_root=cache_root)

    assert summary.versions_kept == 1
    assert summary.versions_deleted == 0
    assert only.exists()


def test_missing_root_is_fatal_and_skips_checkpoints(tmp_path: Path, make_task: Callable[..., Path]) -> None:
    task = make_task("roo", "task-1", 90)

    with pytest.raises(CacheRootError, match="does not exist"):
        run_cleanup(cache_root=tmp_path / "missing", checkpoint_roots=[tmp_path / "roo"])

    assert (task / "checkpoints").exists()


def test_root_that_is_a_file_is_fatal(tmp_path: Path) -> None:
    root = tmp_path / "cache.txt"
    root.write_text("x", encoding="utf-8")

    with pytest.raises(CacheRootError, match="not a directory"):
        run_cleanup(cache_root=root)


def test_dry_run_never_mutates(cache_root: Path, make_version: Callable[[str, str, float], Path]) -> None:
    for i in range(4):
        make_version("zlib", f"1.{i}", offset=i)
        make_version("curl", f"8.{i}", offset=-i)
    before = set(cache_root.rglob("*"))

    summary = run_cleanup(cache_root=cache_root, dry_run=True)

    assert set(cache_root.rglob("*")) == before
    assert summary.dry_run is True
    assert summary.versions_deleted == 4
    assert {o.action for p in summary.packages for o in p.outcomes} == {"keep", "would_delete"}


def test_second_applied_run_deletes_nothing(cache_root: Path, make_version: Callable[[str, str, float], Path]) -> None:
    for i in range(5):
        make_version("zlib", f"1.{i}", offset=i)

    first = run_cleanup(cache_root=cache_root)
    second = run_cleanup(cache_root=cache_root)

    assert first.versions_deleted == 3
    assert second.versions_deleted == 0
    assert second.versions_kept == 2


def test_empty_package_counts_as_processed(cache_root: Path, make_version: Callable[[str, str, float], Path]) -> None:
    (cache_root / "empty").mkdir()
    make_version("zlib", "1.0", 0)

    summary = run_cleanup(cache_root=cache_root)

    assert summary.packages_processed == 2
    assert summary.packages[0].name == "empty"
    assert summary.packages[0].outcomes == ()


def test_partial_failure_completes_run(cache_root: Path, make_version: Callable[[str, str, float], Path]) -> None:
    for i in range(3):
        make_version("curl", f"8.{i}", offset=i)
        make_version("zlib", f"1.{i}", offset=i)
    locked = cache_root / "curl" / "8.0"
    real_rmtree = shutil.rmtree

    def _rmtree(path: Path, *args: object, **kwargs: object) -> None:
        if Path(path) == locked:
            raise PermissionError(13, "Permission denied")
        real_rmtree(path)

    with patch("cleanpkgcache.scanner.executor.shutil.rmtree", side_effect=_rmtree):
        summary = run_cleanup(cache_root=cache_root)

    assert summary.versions_failed == 1
    assert summary.versions_deleted == 1
    assert summary.has_failures is True
    assert locked.exists()
    assert not (cache_root / "zlib" / "1.0").exists()


def test_checkpoint_pass(
    tmp_path: Path,
    make_task: Callable[..., Path],
    base_now: datetime,
) -> None:
    stale = make_task("roo", "stale", 61)
    fresh = make_task("roo", "fresh", 59)
    bare = make_task("roo", "bare", 120, with_checkpoints=False)

    summary = clean_checkpoints([tmp_path / "roo", tmp_path / "absent"], dry_run=False, now=base_now)

    assert summary.tasks_inspected == 3
    assert summary.checkpoints_deleted == 1
    assert summary.cutoff == base_now - timedelta(days=60)
    actions = {task.task_root: task.outcome.action for task in summary.tasks}
    assert actions == {stale: "delete", fresh: "keep", bare: "skipped"}
    assert not (stale / "checkpoints").exists()
    assert stale.is_dir()
    assert (stale / "history.json").exists()
    assert (fresh / "checkpoints").exists()


def test_checkpoint_dry_run(tmp_path: Path, make_task: Callable[..., Path], base_now: datetime) -> None:
    stale = make_task("roo", "stale", 61)

    summary = clean_checkpoints([tmp_path / "roo"], dry_run=True, now=base_now)

    assert summary.checkpoints_deleted == 1
    assert summary.tasks[0].outcome.action == "would_delete"
    assert summary.tasks[0].outcome.path == stale / "checkpoints"
    assert (stale / "checkpoints").exists()


def test_run_cleanup_checkpoints_only(tmp_path: Path, make_task: Callable[..., Path], base_now: datetime) -> None:
    make_task("roo", "stale", 61)

    summary = run_cleanup(cache_root=None, checkpoint_roots=[tmp_path / "roo"], now=base_now)

    assert summary.cache_root is None
    assert summary.packages == ()
    assert summary.checkpoints is not None
    assert summary.checkpoints.checkpoints_deleted == 1


def test_run_cleanup_custom_max_age(tmp_path: Path, make_task: Callable[..., Path], base_now: datetime) -> None:
    make_task("roo", "week-old", 7)

    summary = run_cleanup(
        cache_root=None,
        checkpoint_roots=[tmp_path / "roo"],
        checkpoint_max_age=timedelta(days=5),
        now=base_now,
    )

    assert summary.checkpoints is not None
    assert summary.checkpoints.checkpoints_deleted == 1
