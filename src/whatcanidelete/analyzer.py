"""Analysis engine for whatcanidelete.

Walks a folder, reads and classifies every file, then runs the duplicate
pass over everything collected. Nothing on disk is ever modified.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from whatcanidelete.classifier import classify
from whatcanidelete.duplicates import flag_duplicates
from whatcanidelete.metadata import read_metadata
from whatcanidelete.models import (
    DEFAULT_RULES,
    AnalysisSummary,
    ClassificationRules,
    FileCategory,
    FileEntry,
)
from whatcanidelete.walker import CancellationToken, walk_files

__all__ = [
    "CancellationToken",
    "InvalidRootError",
    "analyze",
    "analyze_in_background",
    "entries_in_category",
    "sort_by_size",
    "summarize",
]

logger = logging.getLogger(__name__)


class InvalidRootError(ValueError):
    """Raised when the folder to analyze is missing or blank."""


def validate_root(root_path: Optional[str | Path]) -> str:
    """Return root_path as a string, or raise InvalidRootError if blank."""
    if root_path is None or not str(root_path).strip():
        raise InvalidRootError("Root folder is required")
    return str(root_path)


def analyze(
    root_path: str | Path,
    cancel_token: Optional[CancellationToken] = None,
    rules: ClassificationRules = DEFAULT_RULES,
    now: Optional[datetime] = None,
    progress_callback: Optional[Callable[[int], None]] = None,
) -> list[FileEntry]:
    """
    Classify every file under a folder.

    Args:
        root_path: Folder to analyze
        cancel_token: Optional token to stop the scan early
        rules: Thresholds and temporary extensions
        now: Reference time (defaults to the time the scan starts)
        progress_callback: Optional callback(files_classified)

    Returns:
        List of classified entries. If cancelled, the entries gathered so
        far, with the duplicate pass still applied.

    Raises:
        InvalidRootError: If root_path is empty or whitespace
    """
    root = validate_root(root_path)
    now = now or datetime.now()
    entries: list[FileEntry] = []

    logger.info("Analyzing %s", root)

    for file_path in walk_files(root, cancel_token):
        metadata = read_metadata(file_path)
        if metadata is None:
            continue

        entries.append(FileEntry.from_judgment(metadata, classify(metadata, now, rules)))

        if progress_callback:
            progress_callback(len(entries))

    entries = flag_duplicates(entries)

    if cancel_token is not None and cancel_token.is_cancelled:
        logger.info("Analysis of %s cancelled after %d files", root, len(entries))
    else:
        logger.info("Analyzed %d files under %s", len(entries), root)

    return entries


def analyze_in_background(
    root_path: str | Path,
    cancel_token: Optional[CancellationToken] = None,
    rules: ClassificationRules = DEFAULT_RULES,
    progress_callback: Optional[Callable[[int], None]] = None,
) -> "Future[list[FileEntry]]":
    """
    Run analyze() on a worker thread.

    The root is validated before the worker starts, so a blank path raises
    here rather than from the future.

    Returns:
        Future resolving to the list of entries
    """
    root = validate_root(root_path)
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="whatcanidelete")
    try:
        return executor.submit(
            analyze,
            root,
            cancel_token,
            rules,
            None,
            progress_callback,
        )
    finally:
        executor.shutdown(wait=False)


def sort_by_size(entries: list[FileEntry]) -> list[FileEntry]:
    """Entries sorted by size, largest first."""
    return sorted(entries, key=lambda e: e.size_bytes, reverse=True)


def entries_in_category(entries: list[FileEntry], category: FileCategory) -> list[FileEntry]:
    """Entries with the given category."""
    return [e for e in entries if e.category == category]


def summarize(entries: list[FileEntry]) -> AnalysisSummary:
    """
    Count files and bytes per category.

    Args:
        entries: Entries from analyze()

    Returns:
        AnalysisSummary with every category present
    """
    counts = {category: 0 for category in FileCategory}
    sizes = {category: 0 for category in FileCategory}

    for entry in entries:
        counts[entry.category] += 1
        sizes[entry.category] += entry.size_bytes

    return AnalysisSummary(counts=counts, bytes_by_category=sizes)
