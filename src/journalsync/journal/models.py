"""Data models for journal files, mirror results and sync runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from journalsync.core.utils.file_io import MARKDOWN_SUFFIX, parse_iso_date

FRONTMATTER_DELIMITER = "---"


def date_from_filename(filename: str) -> str:
    """Return the filename's stem with a trailing ``.md`` removed.

    No validation: ``notes.md`` yields ``"notes"``.
    """
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    return name.removesuffix(MARKDOWN_SUFFIX)


@dataclass
class JournalFile:
    """A journal entry file named ``YYYY-MM-DD.md``.

    Attributes:
        filename: Base name, unique within its directory.
        raw_content: Text as read from disk.
    """

    filename: str
    raw_content: str

    @property
    def has_frontmatter(self) -> bool:
        return self.raw_content.startswith(FRONTMATTER_DELIMITER)

    @property
    def date(self) -> str:
        return date_from_filename(self.filename)

    @property
    def entry_date(self) -> date | None:
        """The filename date as a ``datetime.date``, or None if malformed."""
        return parse_iso_date(self.date)


@dataclass
class MirrorResult:
    """What one mirror pass did.

    Attributes:
        processed: Source filenames copied to the destination, in order.
        removed: Destination filenames deleted because their source is gone.
        normalized: Source filenames that received injected frontmatter.
    """

    processed: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    normalized: list[str] = field(default_factory=list)


@dataclass
class SyncRun:
    """Ephemeral record of one Mirror -> Detect -> Publish execution."""

    files_processed: int = 0
    stale_files_removed: int = 0
    has_changes: bool = False
    committed: bool = False
    started_at: datetime = field(default_factory=datetime.now)
    finished_at: datetime | None = None

    def __repr__(self) -> str:
        return (
            f"SyncRun(processed={self.files_processed}, removed={self.stale_files_removed}, "
            f"changes={self.has_changes}, committed={self.committed})"
        )


@dataclass
class JournalEntry:
    """A parsed journal entry as served to the site.

    Attributes:
        slug: Filename without ``.md``.
        title: Frontmatter title.
        date: Frontmatter date.
        description: Optional frontmatter description.
        content: Body text without frontmatter, trimmed.
        raw_content: Full file text.
    """

    slug: str
    title: str
    date: date
    content: str
    raw_content: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "date": self.date.isoformat(),
            "description": self.description,
            "content": self.content,
            "rawContent": self.raw_content,
        }
