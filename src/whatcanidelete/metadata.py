"""Per-file metadata capture."""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from whatcanidelete.models import FileMetadata

logger = logging.getLogger(__name__)


def access_time(value: float) -> Optional[datetime]:
    """
    Convert st_atime to a local datetime, or None for sentinel values.

    Zero or negative times mean the filesystem never recorded an access, and
    times beyond what datetime can represent stand in for "maximum value".
    """
    if value <= 0:
        return None
    try:
        return datetime.fromtimestamp(value)
    except (OverflowError, OSError, ValueError):
        return None


def file_extension(name: str) -> str:
    """Extension including the leading dot, '' if there is none.

    A name made only of an extension (".log") counts as having one.
    """
    index = name.rfind(".")
    if index == -1 or index == len(name) - 1:
        return ""
    return name[index:]


def read_metadata(path: Path | str) -> Optional[FileMetadata]:
    """
    Read size, timestamps and extension for a single file.

    Args:
        path: File to inspect

    Returns:
        FileMetadata, or None if the file could not be read
    """
    file_path = Path(path)

    try:
        stat = os.stat(file_path, follow_symlinks=False)
        last_modified = datetime.fromtimestamp(stat.st_mtime)
    except (OSError, OverflowError, ValueError) as e:
        # Access denied, name too long, vanished since listing, bad mtime
        logger.debug("Skipping file %s: %s", file_path, e)
        return None

    return FileMetadata(
        name=file_path.name,
        full_path=os.path.abspath(file_path),
        size_bytes=stat.st_size,
        last_modified=last_modified,
        last_accessed=access_time(stat.st_atime),
        extension=file_extension(file_path.name),
    )
