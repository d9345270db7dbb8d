"""Journal store: read access to dated markdown entries.

``MarkdownJournalStore`` reads a flat directory of ``YYYY-MM-DD.md`` files,
which is the layout the vault and the site both use.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

from loguru import logger

from journalsync.core.utils.file_io import (
    MARKDOWN_SUFFIX,
    list_markdown_files,
    parse_frontmatter,
    parse_iso_date,
    read_text,
)

from .models import JournalEntry, date_from_filename


class MarkdownJournalStore:
    """A directory of ``YYYY-MM-DD.md`` files.

    Example::

        store = MarkdownJournalStore("obsidian/journal")
        latest = store.get_entries()[0]
        august = store.get_entries(start=date(2025, 8, 1), end=date(2025, 8, 31))
        entry = store.get_entry("2025-08-25")
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def read_entry(self, path: Path) -> str:
        return read_text(path)

    def _parse_entry(self, path: Path) -> JournalEntry:
        raw_content = self.read_entry(path)
        frontmatter, body = parse_frontmatter(raw_content)
        if not frontmatter:
            raise ValueError("No frontmatter found")

        entry_date = parse_iso_date(frontmatter.get("date"))
        if entry_date is None:
            raise ValueError(f"Invalid or missing date: {frontmatter.get('date')!r}")

        title = frontmatter.get("title")
        if not title:
            raise ValueError("Missing title")

        description = frontmatter.get("description")
        return JournalEntry(
            slug=date_from_filename(path.name),
            title=str(title),
            date=entry_date,
            description=str(description) if description is not None else None,
            content=body,
            raw_content=raw_content,
        )

    def get_entries(self, start: date | None = None, end: date | None = None) -> list[JournalEntry]:
        """Parseable entries, newest first.

        Args:
            start: Earliest frontmatter date (inclusive). None = no lower bound.
            end: Latest frontmatter date (inclusive). None = no upper bound.

        Files without usable frontmatter are skipped with a warning; an
        unreadable directory yields an empty list.
        """
        try:
            names = list_markdown_files(self.directory)
        except OSError as e:
            logger.error(f"Failed to read journal directory {self.directory}: {e}")
            return []

        entries = []
        for name in names:
            try:
                entry = self._parse_entry(self.directory / name)
            except (OSError, UnicodeDecodeError, ValueError) as e:
                logger.warning(f"Failed to parse journal entry {name}: {e}")
                continue
            if start and entry.date < start:
                continue
            if end and entry.date > end:
                continue
            entries.append(entry)

        return sorted(entries, key=lambda entry: entry.date, reverse=True)

    def get_entry(self, slug: str) -> JournalEntry | None:
        filename = slug if slug.endswith(MARKDOWN_SUFFIX) else f"{slug}{MARKDOWN_SUFFIX}"
        for entry in self.get_entries():
            if f"{entry.slug}{MARKDOWN_SUFFIX}" == filename:
                return entry
        return None
