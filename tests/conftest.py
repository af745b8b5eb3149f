"""Shared fixtures for whatcanidelete tests."""

import os
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from whatcanidelete.models import FileCategory, FileEntry, FileMetadata

NOW = datetime(2026, 6, 1, 12, 0, 0)


def make_metadata(
    name: str = "file.txt",
    folder: str = "/data",
    size: int = 1024,
    modified_days_ago: float = 1,
    accessed_days_ago: float | None = None,
    now: datetime = NOW,
) -> FileMetadata:
    """Helper to create metadata relative to NOW."""
    ext_index = name.rfind(".")
    return FileMetadata(
        name=name,
        full_path=f"{folder}/{name}",
        size_bytes=size,
        last_modified=now - timedelta(days=modified_days_ago),
        last_accessed=(
            now - timedelta(days=accessed_days_ago) if accessed_days_ago is not None else None
        ),
        extension=name[ext_index:] if ext_index != -1 else "",
    )


def make_entry(
    name: str = "file.txt",
    folder: str = "/data",
    size: int = 1024,
    modified_days_ago: float = 1,
    category: FileCategory = FileCategory.DO_NOT_DELETE,
    reason: str = "Recent activity or insufficient data.",
) -> FileEntry:
    """Helper to create an already classified entry."""
    metadata = make_metadata(name, folder, size, modified_days_ago)
    return FileEntry(**metadata.model_dump(), category=category, reason=reason)


@pytest.fixture
def make_file():
    """Factory creating a file with a given size and age (relative to real time)."""

    def _make(
        path: Path,
        size: int = 0,
        modified_days_ago: float = 0,
        accessed_days_ago: float | None = None,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.truncate(size)

        now = datetime.now()
        mtime = (now - timedelta(days=modified_days_ago)).timestamp()
        if accessed_days_ago is None:
            atime = mtime
        else:
            atime = (now - timedelta(days=accessed_days_ago)).timestamp()
        os.utime(path, (atime, mtime))
        return path

    return _make
