"""Constants for report file names, atomic writing, and stdout formatting."""

from __future__ import annotations

SCHEMA_VERSION: str = "1.0.0"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

ACTION_COLORS: dict[str, str] = {
    "keep": ANSI_GREEN,
    "delete": ANSI_RED,
    "would_delete": ANSI_YELLOW,
    "failed": ANSI_RED,
    "skipped": ANSI_DIM,
}

ACTION_LABELS: dict[str, str] = {
    "keep": "Keeping",
    "delete": "Deleting",
    "would_delete": "Would delete",
    "failed": "Failed to delete",
    "skipped": "Skipped",
}
