"""JSON summary report writer."""

from __future__ import annotations

from pathlib import Path

from cleanpkgcache.io import write_report_atomic
from cleanpkgcache.model import RunSummary


def write_summary_report(path: Path, summary: RunSummary) -> None:
    """Write ``summary`` to ``path`` as JSON, replacing any previous report atomically."""
    write_report_atomic(path, summary.to_dict())
