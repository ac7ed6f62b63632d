"""Branding constants for help text and terminal output."""

from __future__ import annotations

BRAND_NAME: str = "cleanpkgcache"
SUMMARY_TITLE: str = "Summary"
CHECKPOINT_SUMMARY_TITLE: str = "Roo checkpoints summary"
CLI_DESCRIPTION: str = "Clean package cache by keeping only the latest 2 versions of each package"
DRY_RUN_BANNER: str = "DRY RUN MODE - No files will be deleted"
