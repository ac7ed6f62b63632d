"""Shared file I/O helpers."""

from .report_io import write_report_atomic

__all__ = ["write_report_atomic"]
