"""Directory traversal for whatcanidelete.

Walks a tree with an explicit stack rather than recursion so deeply nested
folders cannot exhaust the call stack. Directories that cannot be listed
are skipped; the walk always runs to completion or until cancelled.
"""

import errno
import logging
import os
import threading
from pathlib import Path
from typing import Generator, Optional

logger = logging.getLogger(__name__)


class CancellationToken:
    """Cooperative cancellation flag shared between a caller and a scan."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Ask the scan to stop at its next check."""
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()


def _is_cancelled(cancel_token: Optional[CancellationToken]) -> bool:
    return cancel_token is not None and cancel_token.is_cancelled


def _describe_error(error: Exception) -> str:
    if isinstance(error, PermissionError):
        return "access denied"
    if getattr(error, "errno", None) == errno.ENAMETOOLONG:
        return "path too long"
    return str(error)


def list_directory(directory: str) -> tuple[list[str], list[str]]:
    """
    List the subdirectories and regular files directly inside a directory.

    Symlinks are neither followed nor reported.

    Args:
        directory: Directory to list

    Returns:
        Tuple of (subdirectory paths, file paths)

    Raises:
        OSError: If the directory cannot be enumerated
    """
    subdirs: list[str] = []
    files: list[str] = []

    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_symlink():
                continue
            if entry.is_dir(follow_symlinks=False):
                subdirs.append(entry.path)
            elif entry.is_file(follow_symlinks=False):
                files.append(entry.path)

    return subdirs, files


def walk_files(
    root: Path | str,
    cancel_token: Optional[CancellationToken] = None,
) -> Generator[Path, None, None]:
    """
    Yield every file reachable under root, depth first.

    Args:
        root: Directory to start from
        cancel_token: Optional token polled before each directory and file

    Yields:
        Paths to regular files
    """
    pending: list[str] = [os.fspath(root)]
    seen: set[str] = set()

    while pending:
        if _is_cancelled(cancel_token):
            logger.debug("Walk cancelled with %d directories pending", len(pending))
            return

        current = pending.pop()

        try:
            real = os.path.realpath(current)
            if real in seen:
                continue
            seen.add(real)
            subdirs, files = list_directory(current)
        except (OSError, ValueError) as e:
            # Unreadable, too long, or a name with NUL or unencodable characters
            logger.debug("Skipping directory %s: %s", current, _describe_error(e))
            continue

        pending.extend(subdirs)

        for file_path in files:
            if _is_cancelled(cancel_token):
                logger.debug("Walk cancelled inside %s", current)
                return
            yield Path(file_path)
