"""
journalsync exception hierarchy.

All journalsync exceptions inherit from JournalSyncError, so callers can catch
library-level failures while still telling a broken mirror apart from a
rejected push.
"""

from __future__ import annotations


class JournalSyncError(Exception):
    """Base exception class for all journalsync errors."""


class ConfigurationError(JournalSyncError):
    """Raised for configuration errors (missing keys, invalid values)."""


class FileIOError(JournalSyncError):
    """Raised when reading, writing or deleting journal files fails."""


class VersionControlError(JournalSyncError):
    """Raised when a git command exits non-zero or cannot be started."""

    def __init__(self, command: list[str], returncode: int | None = None, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = self.stderr or f"exit status {returncode}"
        super().__init__(f"{' '.join(self.command)} failed: {detail}")
