"""Atomic persistence for JSON run reports."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from cleanpkgcache.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from cleanpkgcache.types import RunSummaryPayload


def write_report_atomic(path: Path, payload: RunSummaryPayload) -> None:
    """Write ``payload`` next to ``path`` under a temp name, then rename it into place.

    A reader never sees a half-written report, and a failed write leaves any
    previous report untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=REPORT_TEMP_PREFIX, suffix=REPORT_TEMP_SUFFIX)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, sort_keys=True)
            handle.write("\n")
        os.replace(temp_path, path)
    except BaseException:
        with suppress(FileNotFoundError):
            temp_path.unlink()
        raise
