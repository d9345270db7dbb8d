"""The sync pipeline: Mirror -> Detect -> Publish.

Each step finishes before the next begins.  Publishing happens only when git
reports uncommitted changes under the two journal directories; the working
tree diff, not the mirror's own report, decides whether to commit.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from loguru import logger

from journalsync.journal.mirror import mirror
from journalsync.journal.models import SyncRun

from .git import GitRepository


class SyncPipeline:
    """One configured journal sync.

    Args:
        source_dir: Vault journal directory.
        dest_dir: Site content directory.
        repo: Repository both directories belong to.
    """

    def __init__(self, source_dir: str | Path, dest_dir: str | Path, repo: GitRepository):
        self.source_dir = Path(source_dir)
        self.dest_dir = Path(dest_dir)
        self.repo = repo

    @classmethod
    def from_config(cls, config) -> SyncPipeline:  # type: ignore[no-untyped-def]
        """Build a pipeline from a ``Config``."""
        settings = config.validated()
        repo = GitRepository(
            settings.paths.repo_root,
            remote=settings.git.remote,
            branch=settings.git.branch,
            commit_prefix=settings.git.commit_prefix,
        )
        return cls(settings.paths.source_dir, settings.paths.dest_dir, repo)

    def run(self) -> SyncRun:
        """Execute one pass.  FileIOError / VersionControlError propagate."""
        run = SyncRun()

        result = mirror(self.source_dir, self.dest_dir)
        run.files_processed = len(result.processed)
        run.stale_files_removed = len(result.removed)

        run.has_changes = self.repo.has_changes(self.source_dir, self.dest_dir)
        if not run.has_changes:
            logger.info("No changes to commit")
        else:
            self.repo.publish(self.source_dir, self.dest_dir)
            run.committed = True
            logger.success("Journal successfully synced and deployed!")

        run.finished_at = datetime.now()
        logger.debug(f"{run!r}")
        return run
