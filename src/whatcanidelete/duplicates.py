"""Same-name duplicate detection across a finished scan.

Files are grouped by case-insensitive base name regardless of folder. In
each group the most recently modified file keeps its verdict and every
older copy is downgraded to "be careful". Equal modification times are
ordered by full path so the kept copy is stable between runs.
"""

from collections import defaultdict

from whatcanidelete.models import FileEntry

DUPLICATE_NOTE = "Older copy of a duplicate file name."


def _newest_first(members: list[FileEntry]) -> list[FileEntry]:
    ordered = sorted(members, key=lambda e: e.full_path)
    ordered.sort(key=lambda e: e.last_modified, reverse=True)
    return ordered


def find_duplicate_groups(entries: list[FileEntry]) -> dict[str, list[FileEntry]]:
    """
    Group entries sharing a base name.

    Args:
        entries: Classified entries from a scan

    Returns:
        Dict of lower-cased name -> members, newest first. Only names with
        more than one member are included.
    """
    groups: dict[str, list[FileEntry]] = defaultdict(list)
    for entry in entries:
        groups[entry.name.lower()].append(entry)

    return {
        name: _newest_first(members)
        for name, members in groups.items()
        if len(members) > 1
    }


def flag_duplicates(entries: list[FileEntry]) -> list[FileEntry]:
    """
    Downgrade all but the newest copy of each duplicated file name.

    Args:
        entries: Classified entries from a scan

    Returns:
        New list in the same order, with older copies replaced
    """
    replacements: dict[str, FileEntry] = {}

    for members in find_duplicate_groups(entries).values():
        for older in members[1:]:
            replacements[older.full_path] = older.downgraded(DUPLICATE_NOTE)

    return [replacements.get(entry.full_path, entry) for entry in entries]
