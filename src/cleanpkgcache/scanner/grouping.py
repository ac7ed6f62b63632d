"""Package/version discovery and checkpoint task discovery."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from cleanpkgcache.constants.config import CHECKPOINTS_DIRNAME
from cleanpkgcache.exceptions import CacheRootError, PathNotFoundError, ProbeError
from cleanpkgcache.model import CheckpointTask, PackageEntry, ScanIssue, VersionEntry
from cleanpkgcache.scanner.probe import is_real_directory, list_subdirectories, modified_time
from cleanpkgcache.types import IssueStage

logger = logging.getLogger(__name__)


def _sorted_subdirectories(path: Path, stage: IssueStage, issues: list[ScanIssue]) -> list[tuple[str, Path]]:
    """List subdirectories in name order so discovery order is reproducible.

    Entries that cannot be typed are recorded in ``issues`` under ``stage``.
    """
    errors: list[ProbeError] = []
    found = list_subdirectories(path, errors=errors)
    issues.extend(_issue(error.path, stage, error) for error in errors)
    return sorted(found, key=lambda item: item[0])


def _issue(path: Path, stage: IssueStage, exc: ProbeError) -> ScanIssue:
    logger.warning("Skipping %s: %s", path, exc.message)
    return ScanIssue(path=path, stage=stage, message=exc.message)


def discover_packages(root: Path) -> tuple[list[PackageEntry], list[ScanIssue]]:
    """Group the version directories under ``root`` by package.

    A failure to read ``root`` itself raises :class:`CacheRootError`. A failure
    to read one package or one version is recorded as a :class:`ScanIssue` and
    only that entry is skipped.
    """
    packages: list[PackageEntry] = []
    issues: list[ScanIssue] = []

    try:
        package_dirs = _sorted_subdirectories(root, "package", issues)
    except ProbeError as exc:
        raise CacheRootError(str(exc)) from exc

    for package_name, package_path in package_dirs:
        try:
            version_dirs = _sorted_subdirectories(package_path, "version", issues)
        except ProbeError as exc:
            issues.append(_issue(package_path, "package", exc))
            continue

        versions: list[VersionEntry] = []
        for version_name, version_path in version_dirs:
            try:
                modified_at = modified_time(version_path)
            except ProbeError as exc:
                issues.append(_issue(version_path, "version", exc))
                continue
            versions.append(VersionEntry(name=version_name, path=version_path, modified_at=modified_at))

        logger.debug("Discovered package %s with %d versions", package_name, len(versions))
        packages.append(PackageEntry(name=package_name, path=package_path, versions=tuple(versions)))

    return packages, issues


def discover_checkpoint_tasks(task_roots: Iterable[Path]) -> tuple[list[CheckpointTask], list[ScanIssue]]:
    """Collect task folders under each configured task root.

    Task roots that do not exist are skipped silently; they are machine
    specific defaults. A task without a ``checkpoints`` folder is still
    returned, with ``checkpoints_dir`` set to ``None``. A task whose age or
    ``checkpoints`` folder cannot be read is recorded as an issue and skipped.
    """
    tasks: list[CheckpointTask] = []
    issues: list[ScanIssue] = []

    for task_root in task_roots:
        try:
            task_dirs = _sorted_subdirectories(task_root, "task", issues)
        except PathNotFoundError:
            logger.debug("Skipping %s (path not found)", task_root)
            continue
        except ProbeError as exc:
            issues.append(_issue(task_root, "checkpoint_root", exc))
            continue

        for _, task_path in task_dirs:
            checkpoints_dir: Path | None = task_path / CHECKPOINTS_DIRNAME
            try:
                modified_at = modified_time(task_path)
                if not is_real_directory(checkpoints_dir):
                    checkpoints_dir = None
            except ProbeError as exc:
                issues.append(_issue(exc.path, "task", exc))
                continue
            tasks.append(CheckpointTask(task_root=task_path, checkpoints_dir=checkpoints_dir, modified_at=modified_at))

    return tasks, issues
