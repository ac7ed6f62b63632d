"""Reporting: terminal rendering and JSON summary output."""

from .stdout import StdoutReporter
from .writer import write_summary_report

__all__ = ["StdoutReporter", "write_summary_report"]
