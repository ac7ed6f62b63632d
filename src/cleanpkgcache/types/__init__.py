"""Shared type aliases for cleanpkgcache."""

from .common import EntryAction, IssueStage, JsonObject, JsonScalar, JsonValue
from .report import CheckpointSummaryPayload, PackageReportPayload, RunSummaryPayload

__all__ = [
    "CheckpointSummaryPayload",
    "EntryAction",
    "IssueStage",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "PackageReportPayload",
    "RunSummaryPayload",
]
