"""Human-readable stdout reporter for run summaries."""

from __future__ import annotations

from datetime import datetime

from cleanpkgcache.constants.branding import CHECKPOINT_SUMMARY_TITLE, DRY_RUN_BANNER, SUMMARY_TITLE
from cleanpkgcache.constants.reporting import (
    ACTION_COLORS,
    ACTION_LABELS,
    ANSI_BOLD,
    ANSI_RESET,
    TIMESTAMP_FORMAT,
)
from cleanpkgcache.model import CheckpointSummary, EntryOutcome, PackageReport, RunSummary


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _format_timestamp(value: datetime) -> str:
    return value.astimezone().strftime(TIMESTAMP_FORMAT)


class StdoutReporter:
    """Formats a :class:`RunSummary` for the terminal.

    Without ``verbose`` only deletions, failures, and totals are shown. With
    ``verbose`` every package lists its versions newest first, each annotated
    with the action taken.
    """

    def __init__(self, summary: RunSummary, *, color: bool = True, verbose: bool = False) -> None:
        """Initialise the reporter."""
        self._summary = summary
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full report as a single string."""
        sections: list[str] = []
        if self._summary.dry_run:
            sections.append(self._paint(DRY_RUN_BANNER, ANSI_BOLD))
        if self._summary.cache_root is not None:
            sections.append(self._render_packages())
        if self._summary.checkpoints is not None:
            sections.append(self._render_checkpoints(self._summary.checkpoints))
        return "\n".join(section for section in sections if section)

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color and color else text

    def _label(self, action: str) -> str:
        return self._paint(ACTION_LABELS[action], ACTION_COLORS.get(action, ""))

    def _outcome_line(self, outcome: EntryOutcome, *, indent: str = "  ", noun: str = "") -> str:
        label = self._label(outcome.action)
        if noun:
            label = f"{label} {noun}"
        line = f"{indent}{label}: {outcome.path}"
        if outcome.reason:
            line = f"{line} ({outcome.reason})"
        return line

    def _render_packages(self) -> str:
        s = self._summary
        lines = [f"Cleaning package cache at: {s.cache_root}"]

        for package in s.packages:
            lines.extend(self._render_package(package))

        if s.issues:
            lines.append("")
            lines.append("Skipped (unreadable):")
            for issue in s.issues:
                lines.append(f"  {issue.path}: {issue.message}")

        deleted_label = "Versions that would be deleted" if s.dry_run else "Versions deleted"
        lines.extend(
            [
                "",
                f"{SUMMARY_TITLE}:",
                f"  Packages processed: {s.packages_processed}",
                f"  Versions kept: {s.versions_kept}",
                f"  {deleted_label}: {s.versions_deleted}",
            ]
        )
        if s.versions_failed:
            lines.append(f"  Versions failed: {s.versions_failed}")
        if s.versions_skipped:
            lines.append(f"  Versions skipped: {s.versions_skipped}")
        if s.issues:
            lines.append(f"  Entries unreadable: {len(s.issues)}")
        return "\n".join(lines)

    def _render_package(self, package: PackageReport) -> list[str]:
        lines: list[str] = []
        if self._verbose:
            lines.append("")
            lines.append(f"Package: {package.name}")
            lines.append(f"  Found {len(package.versions)} versions:")
            for index, version in enumerate(package.versions, start=1):
                outcome = package.outcome_for(version)
                annotation = f" [{self._label(outcome.action)}]" if outcome else ""
                lines.append(
                    f"    {index}: {version.name} (modified: {_format_timestamp(version.modified_at)}){annotation}"
                )

        for outcome in package.outcomes:
            if outcome.action == "keep":
                if self._verbose:
                    lines.append(f"  {self._label('keep')}: {outcome.path.name}")
                continue
            lines.append(self._outcome_line(outcome))
        return lines

    def _render_checkpoints(self, checkpoints: CheckpointSummary) -> str:
        lines = ["", f"Cleaning checkpoints not modified since {_format_timestamp(checkpoints.cutoff)}..."]
        if self._verbose:
            for root in checkpoints.roots:
                lines.append(f"  Task root: {root}")

        for task in checkpoints.tasks:
            outcome = task.outcome
            if outcome.action == "keep":
                if self._verbose:
                    lines.append(f"  Keeping checkpoints for {task.task_root} (newer than cutoff)")
                continue
            if outcome.action == "skipped" and not self._verbose:
                continue
            lines.append(self._outcome_line(outcome, noun="checkpoints"))

        for issue in checkpoints.issues:
            lines.append(f"  Skipped {issue.path}: {issue.message}")

        deleted_label = "Checkpoints eligible for deletion" if self._summary.dry_run else "Checkpoints deleted"
        lines.extend(
            [
                f"{CHECKPOINT_SUMMARY_TITLE}:",
                f"  Task folders inspected: {checkpoints.tasks_inspected}",
                f"  {deleted_label}: {checkpoints.checkpoints_deleted}",
            ]
        )
        if checkpoints.checkpoints_failed:
            lines.append(f"  Checkpoints failed: {checkpoints.checkpoints_failed}")
        return "\n".join(lines)
