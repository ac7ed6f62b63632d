"""Typed JSON report payload structures."""

from __future__ import annotations

from typing import NotRequired, TypedDict

from cleanpkgcache.types.common import JsonObject


class PackageReportPayload(TypedDict):
    """Serialized per-package detail."""

    name: str
    path: str
    versions: list[JsonObject]
    outcomes: list[JsonObject]


class CheckpointSummaryPayload(TypedDict):
    """Serialized checkpoint cleanup results."""

    roots: list[str]
    cutoff: str
    tasks_inspected: int
    checkpoints_deleted: int
    checkpoints_failed: int
    tasks: list[JsonObject]
    issues: list[JsonObject]


class RunSummaryPayload(TypedDict):
    """Top-level report written by ``--json-report``."""

    schema_version: str
    dry_run: bool
    cache_root: str | None
    packages_processed: int
    versions_kept: int
    versions_deleted: int
    versions_failed: int
    versions_skipped: int
    packages: list[PackageReportPayload]
    issues: list[JsonObject]
    checkpoints: NotRequired[CheckpointSummaryPayload]
