"""Process exit codes returned by the CLI."""

from __future__ import annotations

EXIT_OK: int = 0
EXIT_FATAL: int = 1
EXIT_CONFIG_ERROR: int = 2
EXIT_PARTIAL_FAILURE: int = 3
