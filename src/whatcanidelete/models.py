"""Data models for whatcanidelete."""

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FileCategory(str, Enum):
    """How the analyzer classifies each file."""

    LIKELY_SAFE = "likely_safe"  # Temp files, or untouched for a year
    BE_CAREFUL = "be_careful"  # Large and idle, or an older duplicate
    DO_NOT_DELETE = "do_not_delete"  # Recently used or not enough data

    @property
    def description(self) -> str:
        """Label used in reports and the terminal."""
        return CATEGORY_DESCRIPTIONS[self]


CATEGORY_DESCRIPTIONS = {
    FileCategory.LIKELY_SAFE: "Likely Safe to Delete",
    FileCategory.BE_CAREFUL: "Be Careful",
    FileCategory.DO_NOT_DELETE: "Do Not Delete",
}


def format_size(size_bytes: int) -> str:
    """Format bytes to human-readable string (binary units)."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024**2:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024**3:
        return f"{size_bytes / 1024**2:.1f} MB"
    else:
        return f"{size_bytes / 1024**3:.1f} GB"


class FileMetadata(BaseModel):
    """Filesystem facts captured for a single file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Base file name")
    full_path: str = Field(..., description="Absolute path, unique within a run")
    size_bytes: int = Field(..., ge=0, description="File size in bytes")
    last_modified: datetime = Field(..., description="Last write time")
    last_accessed: Optional[datetime] = Field(
        None, description="Last access time, None when the filesystem does not track it"
    )
    extension: str = Field("", description="Extension with leading dot, case preserved")

    @property
    def effective_last_access(self) -> datetime:
        """Last access if tracked, otherwise last modification."""
        return self.last_accessed or self.last_modified


class Judgment(BaseModel):
    """Category and reason assigned to a file together."""

    model_config = ConfigDict(frozen=True)

    category: FileCategory
    reason: str = Field(..., min_length=1)


class FileEntry(FileMetadata):
    """One analyzed file and its classification outcome."""

    category: FileCategory = Field(..., description="Advisory category")
    reason: str = Field(..., description="Why the file got its category")

    @classmethod
    def from_judgment(cls, metadata: FileMetadata, judgment: Judgment) -> "FileEntry":
        """Build an entry from metadata and the classifier's verdict."""
        return cls(
            **metadata.model_dump(),
            category=judgment.category,
            reason=judgment.reason,
        )

    def downgraded(self, note: str) -> "FileEntry":
        """Return a copy forced to BE_CAREFUL with note appended to the reason."""
        reason = f"{self.reason} {note}" if self.reason.strip() else note
        return self.model_copy(update={"category": FileCategory.BE_CAREFUL, "reason": reason})

    @property
    def size_human(self) -> str:
        """Human-readable size string."""
        return format_size(self.size_bytes)

    @property
    def last_accessed_description(self) -> str:
        """Access date as yyyy-MM-dd, or 'Unavailable'."""
        if self.last_accessed is None:
            return "Unavailable"
        return self.last_accessed.strftime("%Y-%m-%d")

    @property
    def category_description(self) -> str:
        """Display label of the category."""
        return self.category.description


class ClassificationRules(BaseModel):
    """Thresholds and extension list used by the classifier."""

    model_config = ConfigDict(frozen=True)

    temporary_extensions: frozenset[str] = Field(
        default=frozenset({".tmp", ".log", ".bak", ".old", ".cache"}),
        description="Extensions treated as temporary or cache files",
    )
    stale_after: timedelta = Field(
        default=timedelta(days=365),
        description="Idle time after which a file is likely safe to delete",
    )
    idle_after: timedelta = Field(
        default=timedelta(days=180),
        description="Idle time after which a large file needs caution",
    )
    large_file_bytes: int = Field(
        default=100 * 1024 * 1024,
        ge=0,
        description="Size from which a file counts as large",
    )

    @field_validator("temporary_extensions")
    @classmethod
    def _normalize_extensions(cls, value: frozenset[str]) -> frozenset[str]:
        normalized = set()
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.add(ext if ext.startswith(".") else f".{ext}")
        return frozenset(normalized)

    def is_temporary(self, extension: str) -> bool:
        """Check an extension against the temporary set, ignoring case."""
        return extension.lower() in self.temporary_extensions


DEFAULT_RULES = ClassificationRules()


class AnalysisSummary(BaseModel):
    """Per-category counts derived from a finished analysis."""

    counts: dict[FileCategory, int] = Field(default_factory=dict)
    bytes_by_category: dict[FileCategory, int] = Field(default_factory=dict)

    @property
    def total_files(self) -> int:
        return sum(self.counts.values())

    @property
    def total_bytes(self) -> int:
        return sum(self.bytes_by_category.values())

    @property
    def safe_count(self) -> int:
        return self.counts.get(FileCategory.LIKELY_SAFE, 0)

    @property
    def careful_count(self) -> int:
        return self.counts.get(FileCategory.BE_CAREFUL, 0)

    @property
    def protect_count(self) -> int:
        return self.counts.get(FileCategory.DO_NOT_DELETE, 0)

    @property
    def text(self) -> str:
        """One-line summary sentence."""
        return (
            f"{self.safe_count} files likely safe to delete, "
            f"{self.careful_count} need caution, "
            f"{self.protect_count} should be preserved."
        )
