"""Entities produced by discovery, policy evaluation, and execution.

Everything here is rebuilt from the filesystem on each run; nothing is
persisted. Discovery entities are frozen once created, and the summary
objects are frozen once the orchestrator returns them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Protocol

from cleanpkgcache.constants.reporting import SCHEMA_VERSION
from cleanpkgcache.types import (
    CheckpointSummaryPayload,
    EntryAction,
    IssueStage,
    JsonObject,
    PackageReportPayload,
    RunSummaryPayload,
)

_DELETED_ACTIONS: frozenset[str] = frozenset({"delete", "would_delete"})


class RetentionCandidate(Protocol):
    """Anything a retention policy can classify and the executor can delete."""

    @property
    def modified_at(self) -> datetime: ...

    @property
    def target(self) -> Path | None: ...


@dataclass(frozen=True)
class VersionEntry:
    """One cached version directory of a package."""

    name: str
    path: Path
    modified_at: datetime

    @property
    def target(self) -> Path:
        """Directory removed when this version is retired."""
        return self.path

    def to_dict(self) -> JsonObject:
        """Serialize for JSON output."""
        return {
            "name": self.name,
            "path": str(self.path),
            "modified_at": self.modified_at.isoformat(),
        }


@dataclass(frozen=True)
class PackageEntry:
    """A package directory under the cache root with its discovered versions."""

    name: str
    path: Path
    versions: tuple[VersionEntry, ...] = ()


@dataclass(frozen=True)
class CheckpointTask:
    """A task folder whose ``checkpoints`` subfolder is subject to age-based cleanup.

    ``modified_at`` is the task folder's own modification time; the task folder
    itself is never a deletion target.
    """

    task_root: Path
    checkpoints_dir: Path | None
    modified_at: datetime

    @property
    def target(self) -> Path | None:
        """Checkpoints folder removed when the task is stale, if present."""
        return self.checkpoints_dir


@dataclass(frozen=True)
class RetentionDecision[C: RetentionCandidate]:
    """Partition of candidates into kept and deleted entries, each in policy order."""

    keep: tuple[C, ...]
    delete: tuple[C, ...]


@dataclass(frozen=True)
class EntryOutcome:
    """What happened (or would happen) to one candidate path."""

    path: Path
    action: EntryAction
    reason: str = ""

    def to_dict(self) -> JsonObject:
        """Serialize for JSON output."""
        payload: JsonObject = {"path": str(self.path), "action": self.action}
        if self.reason:
            payload["reason"] = self.reason
        return payload


@dataclass(frozen=True)
class ScanIssue:
    """A recoverable read failure; the affected entry was skipped."""

    path: Path
    stage: IssueStage
    message: str

    def to_dict(self) -> JsonObject:
        """Serialize for JSON output."""
        return {"path": str(self.path), "stage": self.stage, "message": self.message}


@dataclass(frozen=True)
class PackageReport:
    """Per-package result: versions newest first and one outcome per version."""

    name: str
    path: Path
    versions: tuple[VersionEntry, ...]
    outcomes: tuple[EntryOutcome, ...]

    def outcome_for(self, version: VersionEntry) -> EntryOutcome | None:
        """Return the outcome recorded for ``version``."""
        for outcome in self.outcomes:
            if outcome.path == version.path:
                return outcome
        return None

    def count(self, *actions: str) -> int:
        """Count outcomes whose action is one of ``actions``."""
        return sum(1 for outcome in self.outcomes if outcome.action in actions)

    def to_dict(self) -> PackageReportPayload:
        """Serialize for JSON output."""
        return {
            "name": self.name,
            "path": str(self.path),
            "versions": [version.to_dict() for version in self.versions],
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
        }


@dataclass(frozen=True)
class CheckpointReport:
    """Result for one inspected task folder."""

    task_root: Path
    checkpoints_dir: Path | None
    modified_at: datetime
    outcome: EntryOutcome

    def to_dict(self) -> JsonObject:
        """Serialize for JSON output."""
        return {
            "task_root": str(self.task_root),
            "checkpoints_dir": str(self.checkpoints_dir) if self.checkpoints_dir else None,
            "modified_at": self.modified_at.isoformat(),
            "outcome": self.outcome.to_dict(),
        }


@dataclass(frozen=True)
class CheckpointSummary:
    """Aggregated checkpoint cleanup results across all configured task roots."""

    roots: tuple[Path, ...]
    cutoff: datetime
    tasks: tuple[CheckpointReport, ...] = ()
    issues: tuple[ScanIssue, ...] = ()

    @property
    def tasks_inspected(self) -> int:
        """Number of task folders inspected."""
        return len(self.tasks)

    @property
    def checkpoints_deleted(self) -> int:
        """Checkpoint folders deleted, or eligible for deletion in a dry run."""
        return sum(1 for task in self.tasks if task.outcome.action in _DELETED_ACTIONS)

    @property
    def checkpoints_failed(self) -> int:
        """Checkpoint folders whose deletion failed."""
        return sum(1 for task in self.tasks if task.outcome.action == "failed")

    def to_dict(self) -> CheckpointSummaryPayload:
        """Serialize for JSON output."""
        return {
            "roots": [str(root) for root in self.roots],
            "cutoff": self.cutoff.isoformat(),
            "tasks_inspected": self.tasks_inspected,
            "checkpoints_deleted": self.checkpoints_deleted,
            "checkpoints_failed": self.checkpoints_failed,
            "tasks": [task.to_dict() for task in self.tasks],
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass(frozen=True)
class RunSummary:
    """Overall result of one cleanup run."""

    dry_run: bool
    cache_root: Path | None = None
    packages: tuple[PackageReport, ...] = ()
    issues: tuple[ScanIssue, ...] = ()
    checkpoints: CheckpointSummary | None = None

    @property
    def packages_processed(self) -> int:
        """Packages enumerated, including those with zero versions."""
        return len(self.packages)

    @property
    def versions_kept(self) -> int:
        """Versions retained across all packages."""
        return sum(package.count("keep") for package in self.packages)

    @property
    def versions_deleted(self) -> int:
        """Versions deleted, or that would be deleted in a dry run."""
        return sum(package.count(*_DELETED_ACTIONS) for package in self.packages)

    @property
    def versions_failed(self) -> int:
        """Versions whose deletion failed."""
        return sum(package.count("failed") for package in self.packages)

    @property
    def versions_skipped(self) -> int:
        """Versions left alone by the deletion safety check."""
        return sum(package.count("skipped") for package in self.packages)

    @property
    def has_failures(self) -> bool:
        """Whether any deletion failed or any entry could not be read."""
        if self.versions_failed or self.issues:
            return True
        if self.checkpoints is not None:
            return bool(self.checkpoints.checkpoints_failed or self.checkpoints.issues)
        return False

    def to_dict(self) -> RunSummaryPayload:
        """Serialize for JSON output."""
        payload: RunSummaryPayload = {
            "schema_version": SCHEMA_VERSION,
            "dry_run": self.dry_run,
            "cache_root": str(self.cache_root) if self.cache_root else None,
            "packages_processed": self.packages_processed,
            "versions_kept": self.versions_kept,
            "versions_deleted": self.versions_deleted,
            "versions_failed": self.versions_failed,
            "versions_skipped": self.versions_skipped,
            "packages": [package.to_dict() for package in self.packages],
            "issues": [issue.to_dict() for issue in self.issues],
        }
        if self.checkpoints is not None:
            payload["checkpoints"] = self.checkpoints.to_dict()
        return payload
