"""End-to-end cleanup orchestration.

``run_cleanup`` is the entry point used by the CLI. It validates the cache
root before touching anything, runs the count-based pass over the package
cache and, when requested, the age-based pass over checkpoint task folders.
Both passes share :func:`execute_deletions`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from pathlib import Path

from cleanpkgcache.constants.config import DEFAULT_CHECKPOINT_MAX_AGE_DAYS, DEFAULT_KEEP_COUNT
from cleanpkgcache.exceptions import CacheRootError
from cleanpkgcache.model import (
    CheckpointReport,
    CheckpointSummary,
    CheckpointTask,
    EntryOutcome,
    PackageReport,
    RunSummary,
    ScanIssue,
)
from cleanpkgcache.scanner.executor import execute_deletions, keep_outcomes
from cleanpkgcache.scanner.grouping import discover_checkpoint_tasks, discover_packages
from cleanpkgcache.scanner.policy import KeepLatestPolicy, MaxAgePolicy, RetentionPolicy

logger = logging.getLogger(__name__)


def validate_cache_root(root: Path) -> Path:
    """Return ``root`` if it is an existing directory, else raise :class:`CacheRootError`."""
    if not root.exists():
        raise CacheRootError(f"Path does not exist: {root}")
    if not root.is_dir():
        raise CacheRootError(f"Path is not a directory: {root}")
    return root


def clean_package_cache(
    root: Path,
    *,
    dry_run: bool,
    policy: RetentionPolicy | None = None,
) -> tuple[list[PackageReport], list[ScanIssue]]:
    """Apply a retention policy to every package under ``root``.

    Discovery completes before the first deletion, so a fatal root error
    always leaves the tree untouched.
    """
    policy = policy or KeepLatestPolicy(DEFAULT_KEEP_COUNT)
    packages, issues = discover_packages(validate_cache_root(root))
    allowed = frozenset(version.path for package in packages for version in package.versions)

    reports: list[PackageReport] = []
    for package in packages:
        decision = policy.partition(package.versions)
        outcomes = keep_outcomes(version.path for version in decision.keep)
        outcomes.extend(
            execute_deletions(
                (version.path for version in decision.delete),
                apply=not dry_run,
                allowed=allowed,
            )
        )
        reports.append(
            PackageReport(
                name=package.name,
                path=package.path,
                versions=decision.keep + decision.delete,
                outcomes=tuple(outcomes),
            )
        )
    return reports, issues


def clean_checkpoints(
    task_roots: Sequence[Path],
    *,
    dry_run: bool,
    now: datetime,
    max_age: timedelta = timedelta(days=DEFAULT_CHECKPOINT_MAX_AGE_DAYS),
) -> CheckpointSummary:
    """Delete the ``checkpoints`` folder of every task folder older than ``max_age``."""
    policy = MaxAgePolicy(now, max_age)
    tasks, issues = discover_checkpoint_tasks(task_roots)
    decision = policy.partition(tasks)

    outcomes: dict[Path, EntryOutcome] = {}
    for task in decision.keep:
        logger.debug("Keeping checkpoints for %s (newer than cutoff)", task.task_root)
        outcomes[task.task_root] = EntryOutcome(path=task.target or task.task_root, action="keep")

    deletable: list[CheckpointTask] = []
    for task in decision.delete:
        if task.checkpoints_dir is None:
            outcomes[task.task_root] = EntryOutcome(
                path=task.task_root, action="skipped", reason="no checkpoints folder"
            )
        else:
            deletable.append(task)

    allowed = frozenset(task.checkpoints_dir for task in tasks if task.checkpoints_dir is not None)
    results = execute_deletions(
        (task.checkpoints_dir for task in deletable if task.checkpoints_dir is not None),
        apply=not dry_run,
        allowed=allowed,
    )
    for task, outcome in zip(deletable, results, strict=True):
        outcomes[task.task_root] = outcome

    return CheckpointSummary(
        roots=tuple(task_roots),
        cutoff=policy.cutoff,
        tasks=tuple(
            CheckpointReport(
                task_root=task.task_root,
                checkpoints_dir=task.checkpoints_dir,
                modified_at=task.modified_at,
                outcome=outcomes[task.task_root],
            )
            for task in tasks
        ),
        issues=tuple(issues),
    )


def run_cleanup(
    *,
    cache_root: Path | None,
    dry_run: bool = False,
    checkpoint_roots: Sequence[Path] | None = None,
    checkpoint_max_age: timedelta = timedelta(days=DEFAULT_CHECKPOINT_MAX_AGE_DAYS),
    keep_count: int = DEFAULT_KEEP_COUNT,
    now: datetime | None = None,
) -> RunSummary:
    """Run one full cleanup and return its summary.

    ``cache_root=None`` skips the package pass. ``checkpoint_roots=None`` skips
    the checkpoint pass. Raises :class:`CacheRootError` before any work when
    the cache root is missing or not a directory.
    """
    now = now or datetime.now(UTC)
    if cache_root is not None:
        validate_cache_root(cache_root)

    packages: list[PackageReport] = []
    issues: list[ScanIssue] = []
    if cache_root is not None:
        logger.info("Cleaning package cache at %s", cache_root)
        packages, issues = clean_package_cache(cache_root, dry_run=dry_run, policy=KeepLatestPolicy(keep_count))

    checkpoints: CheckpointSummary | None = None
    if checkpoint_roots is not None:
        logger.info("Cleaning checkpoints older than %s", now - checkpoint_max_age)
        checkpoints = clean_checkpoints(checkpoint_roots, dry_run=dry_run, now=now, max_age=checkpoint_max_age)

    return RunSummary(
        dry_run=dry_run,
        cache_root=cache_root,
        packages=tuple(packages),
        issues=tuple(issues),
        checkpoints=checkpoints,
    )
