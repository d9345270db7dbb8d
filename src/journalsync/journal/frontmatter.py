"""Frontmatter normalization for journal entries.

Entries written in the vault often start as bare text.  The site's content
layer needs ``title`` and ``date`` keys, so a header is synthesized from the
filename when none is present.
"""

from __future__ import annotations

from .models import FRONTMATTER_DELIMITER, JournalFile

DEFAULT_DESCRIPTION = "Daily journal entry"


def build_frontmatter(entry_date: str, description: str = DEFAULT_DESCRIPTION) -> str:
    """Render the header block for ``entry_date``, including the trailing blank line."""
    return (
        f"{FRONTMATTER_DELIMITER}\n"
        f'title: "Journal - {entry_date}"\n'
        f'date: "{entry_date}"\n'
        f'description: "{description}"\n'
        f"{FRONTMATTER_DELIMITER}\n\n"
    )


def ensure_frontmatter(filename: str, raw_content: str) -> tuple[str, bool]:
    """Make sure ``raw_content`` begins with a YAML header.

    Args:
        filename: Entry filename, expected as ``YYYY-MM-DD.md``.  Other names
            are used literally for the title and date.
        raw_content: Entry text.

    Returns:
        ``(content, changed)``.  Content already starting with ``---`` comes
        back untouched with ``changed=False``; otherwise the synthesized header
        is prepended to the unmodified body.
    """
    return normalize(JournalFile(filename, raw_content))


def normalize(journal_file: JournalFile) -> tuple[str, bool]:
    """Same as ``ensure_frontmatter`` for an already loaded ``JournalFile``."""
    if journal_file.has_frontmatter:
        return journal_file.raw_content, False
    return build_frontmatter(journal_file.date) + journal_file.raw_content, True
