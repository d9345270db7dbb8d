"""Journal files: frontmatter normalization, directory mirroring and read access.

Provides the data models for entries and sync runs, the ``ensure_frontmatter``
normalizer, the ``mirror`` reconciler, and a markdown-directory entry store.
"""

from .frontmatter import ensure_frontmatter
from .mirror import mirror
from .models import JournalEntry, JournalFile, MirrorResult, SyncRun
from .store import MarkdownJournalStore

__all__ = [
    "JournalEntry",
    "JournalFile",
    "MarkdownJournalStore",
    "MirrorResult",
    "SyncRun",
    "ensure_frontmatter",
    "mirror",
]
