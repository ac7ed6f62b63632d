"""Read-only filesystem probing: immediate subdirectories and modification times."""

from __future__ import annotations

import os
import stat
from datetime import UTC, datetime
from pathlib import Path

from cleanpkgcache.exceptions import (
    MetadataUnavailableError,
    NotADirectoryPathError,
    PathNotFoundError,
    PathPermissionError,
    ProbeError,
)


def list_subdirectories(path: Path, *, errors: list[ProbeError] | None = None) -> list[tuple[str, Path]]:
    """Return ``(name, path)`` for each immediate subdirectory of ``path``.

    Entries come back in the order the filesystem reports them. Regular files
    and symlinks (including symlinks to directories) are ignored, so nothing
    reachable only through a link is ever offered up for deletion.

    An entry whose type cannot be read is appended to ``errors`` and left out
    of the result. Without an ``errors`` list the first such failure raises.
    """
    try:
        with os.scandir(path) as entries:
            found: list[tuple[str, Path]] = []
            for entry in entries:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError as exc:
                    failure = PathPermissionError(
                        Path(entry.path), f"Failed to read entry type ({exc.strerror or exc})"
                    )
                    if errors is None:
                        raise failure from exc
                    errors.append(failure)
                    continue
                if is_dir:
                    found.append((entry.name, Path(entry.path)))
            return found
    except FileNotFoundError as exc:
        raise PathNotFoundError(path, "Path does not exist") from exc
    except NotADirectoryError as exc:
        raise NotADirectoryPathError(path, "Path is not a directory") from exc
    except OSError as exc:
        raise PathPermissionError(path, f"Failed to read directory ({exc.strerror or exc})") from exc


def is_real_directory(path: Path) -> bool:
    """Return True if ``path`` is a directory and not a symlink; False if it is absent."""
    try:
        mode = path.lstat().st_mode
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise PathPermissionError(path, f"Failed to read directory ({exc.strerror or exc})") from exc
    return stat.S_ISDIR(mode)


def modified_time(path: Path) -> datetime:
    """Return the last-modified time of ``path`` as an aware UTC datetime."""
    try:
        stat_result = path.stat()
    except OSError as exc:
        raise MetadataUnavailableError(path, f"Failed to get modification time ({exc.strerror or exc})") from exc
    return datetime.fromtimestamp(stat_result.st_mtime, tz=UTC)
