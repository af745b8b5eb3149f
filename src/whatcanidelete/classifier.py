"""Classification rules for a single file.

Rules are evaluated in order and the first match wins:

1. Temporary or cache-style extension -> likely safe
2. Not accessed (or modified) for a year -> likely safe
3. Large and idle for six months -> be careful
4. Anything else -> do not delete
"""

from datetime import datetime

from whatcanidelete.models import (
    DEFAULT_RULES,
    ClassificationRules,
    FileCategory,
    FileMetadata,
    Judgment,
)

TEMPORARY_REASON = "Temporary or cache-style extension."
STALE_REASON = "Not accessed for over a year."
LARGE_IDLE_REASON = "Large file not opened in over six months."
RECENT_REASON = "Recent activity or insufficient data."


def classify(
    metadata: FileMetadata,
    now: datetime,
    rules: ClassificationRules = DEFAULT_RULES,
) -> Judgment:
    """
    Assign a category and reason to one file.

    Args:
        metadata: File facts from the metadata reader
        now: Current time used to compute idle age
        rules: Thresholds and temporary extensions

    Returns:
        Judgment with a non-empty reason
    """
    if rules.is_temporary(metadata.extension):
        return Judgment(category=FileCategory.LIKELY_SAFE, reason=TEMPORARY_REASON)

    age = now - metadata.effective_last_access

    if age >= rules.stale_after:
        return Judgment(category=FileCategory.LIKELY_SAFE, reason=STALE_REASON)

    if age >= rules.idle_after and metadata.size_bytes >= rules.large_file_bytes:
        return Judgment(category=FileCategory.BE_CAREFUL, reason=LARGE_IDLE_REASON)

    return Judgment(category=FileCategory.DO_NOT_DELETE, reason=RECENT_REASON)

