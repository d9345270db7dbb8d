"""Pydantic models for config validation.

``Config.validated()`` returns a ``JournalSyncConfig``.  Env-var overrides
arrive as strings; the models coerce them to their declared types.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PathsConfig(BaseModel):
    """Repository and journal directory locations."""

    repo_root: Path = Path(".")
    source_dir: Path = Path("obsidian/journal")
    dest_dir: Path = Path("src/content/journal")

    @field_validator("repo_root", "source_dir", "dest_dir", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v

    @model_validator(mode="after")
    def _anchor_relative(self) -> PathsConfig:
        # git runs with -C repo_root, so every path must be absolute by now.
        self.repo_root = self.repo_root.resolve()
        if not self.source_dir.is_absolute():
            self.source_dir = self.repo_root / self.source_dir
        if not self.dest_dir.is_absolute():
            self.dest_dir = self.repo_root / self.dest_dir
        if self.source_dir == self.dest_dir:
            raise ValueError("source_dir and dest_dir must differ")
        return self


class SyncConfig(BaseModel):
    """Trigger timing, in minutes."""

    interval_minutes: float = Field(default=30, gt=0)
    debounce_minutes: float = Field(default=30, gt=0)


class GitConfig(BaseModel):
    """Publishing settings.  Empty remote/branch means a plain ``git push``."""

    remote: str = ""
    branch: str = ""
    commit_prefix: str = "journal: update entries"

    @model_validator(mode="after")
    def _branch_needs_remote(self) -> GitConfig:
        if self.branch and not self.remote:
            raise ValueError("git.branch requires git.remote")
        return self


class LoggingConfig(BaseModel):
    level: str = "INFO"
    file: str = ""


class JournalSyncConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so site-specific sections can live in the same file.
    """

    model_config = ConfigDict(extra="allow")

    paths: PathsConfig = Field(default_factory=PathsConfig)
    sync: SyncConfig = SyncConfig()
    git: GitConfig = GitConfig()
    logging: LoggingConfig = LoggingConfig()
