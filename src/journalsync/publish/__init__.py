"""Publishing: git change detection, commit/push, and the sync pipeline."""

from .git import GitRepository, commit_message
from .pipeline import SyncPipeline

__all__ = ["GitRepository", "SyncPipeline", "commit_message"]
