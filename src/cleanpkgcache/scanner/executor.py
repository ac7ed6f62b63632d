"""Apply or simulate deletion of policy-selected directories."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Collection, Iterable
from pathlib import Path

from cleanpkgcache.model import EntryOutcome

logger = logging.getLogger(__name__)


def execute_deletions(
    targets: Iterable[Path],
    *,
    apply: bool,
    allowed: Collection[Path],
) -> list[EntryOutcome]:
    """Delete (or, when ``apply`` is false, record) each target directory.

    Only paths contained in ``allowed`` are ever removed; ``allowed`` must be
    built from the discovery pass. Any other target is recorded as skipped. A
    failed removal is recorded with its reason and never stops the loop.
    """
    outcomes: list[EntryOutcome] = []
    for target in targets:
        if target not in allowed:
            logger.warning("Refusing to delete %s: not a discovered deletion target", target)
            outcomes.append(EntryOutcome(path=target, action="skipped", reason="not a discovered deletion target"))
            continue

        if not apply:
            logger.debug("Would delete %s", target)
            outcomes.append(EntryOutcome(path=target, action="would_delete"))
            continue

        outcomes.append(_remove_tree(target))
    return outcomes


def keep_outcomes(paths: Iterable[Path]) -> list[EntryOutcome]:
    """Record kept entries so reports list every candidate exactly once."""
    return [EntryOutcome(path=path, action="keep") for path in paths]


def _remove_tree(target: Path) -> EntryOutcome:
    logger.info("Deleting %s", target)
    try:
        shutil.rmtree(target)
    except FileNotFoundError:
        logger.warning("Failed to delete %s: path vanished before removal", target)
        return EntryOutcome(path=target, action="failed", reason="path vanished before removal")
    except OSError as exc:
        reason = f"{type(exc).__name__}: {exc.strerror or exc}"
        logger.warning("Failed to delete %s: %s", target, reason)
        return EntryOutcome(path=target, action="failed", reason=reason)

    if target.exists():
        logger.warning("Failed to delete %s: directory still present after removal", target)
        return EntryOutcome(path=target, action="failed", reason="directory still present after removal")
    return EntryOutcome(path=target, action="delete")
