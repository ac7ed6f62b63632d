"""Core data models for cleanpkgcache."""

from .entities import (
    CheckpointReport,
    CheckpointSummary,
    CheckpointTask,
    EntryOutcome,
    PackageEntry,
    PackageReport,
    RetentionCandidate,
    RetentionDecision,
    RunSummary,
    ScanIssue,
    VersionEntry,
)

__all__ = [
    "CheckpointReport",
    "CheckpointSummary",
    "CheckpointTask",
    "EntryOutcome",
    "PackageEntry",
    "PackageReport",
    "RetentionCandidate",
    "RetentionDecision",
    "RunSummary",
    "ScanIssue",
    "VersionEntry",
]
