"""Retention strategies that classify candidates into keep and delete sets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime, timedelta

from cleanpkgcache.constants.config import DEFAULT_CHECKPOINT_MAX_AGE_DAYS, DEFAULT_KEEP_COUNT
from cleanpkgcache.model import RetentionCandidate, RetentionDecision


class RetentionPolicy(ABC):
    """Abstract base class for retention strategies.

    Policies are pure: they never touch the filesystem and return the same
    decision for the same input sequence.
    """

    @abstractmethod
    def partition[C: RetentionCandidate](self, candidates: Sequence[C]) -> RetentionDecision[C]:
        """Split ``candidates`` into entries to keep and entries to delete."""


class KeepLatestPolicy(RetentionPolicy):
    """Keep the ``keep_count`` most recently modified entries and delete the rest.

    Entries with identical timestamps stay in discovery order, since
    filesystem timestamp resolution makes ties likely.
    """

    def __init__(self, keep_count: int = DEFAULT_KEEP_COUNT) -> None:
        if isinstance(keep_count, bool) or not isinstance(keep_count, int) or keep_count < 0:
            raise ValueError(f"keep_count must be a non-negative integer, got {keep_count!r}")
        self.keep_count = keep_count

    def order[C: RetentionCandidate](self, candidates: Sequence[C]) -> list[C]:
        """Return candidates newest first; ``sorted`` is stable so ties keep input order."""
        return sorted(candidates, key=lambda candidate: candidate.modified_at, reverse=True)

    def partition[C: RetentionCandidate](self, candidates: Sequence[C]) -> RetentionDecision[C]:
        ordered = self.order(candidates)
        return RetentionDecision(
            keep=tuple(ordered[: self.keep_count]),
            delete=tuple(ordered[self.keep_count :]),
        )


class MaxAgePolicy(RetentionPolicy):
    """Delete every entry last modified strictly before ``now - max_age``.

    ``now`` is fixed at construction so every entry in a run is compared
    against the same instant.
    """

    def __init__(
        self,
        now: datetime,
        max_age: timedelta = timedelta(days=DEFAULT_CHECKPOINT_MAX_AGE_DAYS),
    ) -> None:
        if max_age < timedelta(0):
            raise ValueError(f"max_age must not be negative, got {max_age!r}")
        self.now = now
        self.max_age = max_age

    @property
    def cutoff(self) -> datetime:
        """Instant before which entries are stale."""
        return self.now - self.max_age

    def is_stale(self, modified_at: datetime) -> bool:
        """Return True when ``modified_at`` is strictly older than the cutoff."""
        return modified_at < self.cutoff

    def partition[C: RetentionCandidate](self, candidates: Sequence[C]) -> RetentionDecision[C]:
        keep: list[C] = []
        delete: list[C] = []
        for candidate in candidates:
            (delete if self.is_stale(candidate.modified_at) else keep).append(candidate)
        return RetentionDecision(keep=tuple(keep), delete=tuple(delete))
