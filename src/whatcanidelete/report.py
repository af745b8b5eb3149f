"""CSV report export for whatcanidelete."""

import logging
from pathlib import Path

from whatcanidelete.models import FileEntry

logger = logging.getLogger(__name__)

REPORT_HEADER = "File,Size,LastAccessed,Category,Reason"
DEFAULT_REPORT_NAME = "WhatCanIDelete_Report.csv"


def quote(value: str) -> str:
    """Wrap a field in double quotes, doubling any quote inside it."""
    return '"' + value.replace('"', '""') + '"'


def format_report_line(entry: FileEntry) -> str:
    """Render one entry as a CSV row."""
    return ",".join(
        [
            quote(entry.name),
            str(entry.size_bytes),
            entry.last_accessed_description,
            entry.category_description,
            quote(entry.reason),
        ]
    )


def format_report_lines(entries: list[FileEntry]) -> list[str]:
    """
    Render the header and one row per entry.

    Args:
        entries: Entries in the order they should appear

    Returns:
        List of lines without trailing newlines
    """
    return [REPORT_HEADER] + [format_report_line(entry) for entry in entries]


def default_report_name() -> str:
    """File name suggested when no output path is given."""
    return DEFAULT_REPORT_NAME


def write_report(entries: list[FileEntry], destination: Path | str) -> Path:
    """
    Write a CSV report to disk.

    Args:
        entries: Entries to export
        destination: Output file path

    Returns:
        Path that was written

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(destination)
    with open(path, "w", encoding="utf-8", newline="") as f:
        for line in format_report_lines(entries):
            f.write(line + "\n")

    logger.info("Wrote report with %d entries to %s", len(entries), path)
    return path
