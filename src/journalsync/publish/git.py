"""Thin git wrapper: scoped status, stage, commit and push.

Every command runs synchronously via ``subprocess.run`` against an explicit
working tree (``git -C <root>``).  Paths are passed as pathspecs relative to
that root so staging never reaches outside the journal directories.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from loguru import logger

from journalsync.core.exceptions import VersionControlError

DEFAULT_COMMIT_PREFIX = "journal: update entries"


def commit_message(today: date | None = None, prefix: str = DEFAULT_COMMIT_PREFIX) -> str:
    """``"<prefix> YYYY-MM-DD"`` for the commit date (not the entry date)."""
    return f"{prefix} {(today or date.today()).isoformat()}"


class GitRepository:
    """A git working tree that journal changes are published from.

    Args:
        root: Working tree root.  Made absolute; relative ``paths`` given to the
            methods below are read relative to it, as ``git -C`` does.
        remote: Remote to push to.  Empty means the branch's upstream.
        branch: Branch to push.  Only used together with ``remote``.
        commit_prefix: Leading text of every commit message.
        git: Executable name or path.
    """

    def __init__(
        self,
        root: str | Path,
        *,
        remote: str = "",
        branch: str = "",
        commit_prefix: str = DEFAULT_COMMIT_PREFIX,
        git: str = "git",
    ):
        self.root = Path(root).absolute()
        self.remote = remote
        self.branch = branch
        self.commit_prefix = commit_prefix
        self._git = git

    def _run(self, *args: str) -> str:
        command = [self._git, *args]
        argv = [self._git, "-C", str(self.root), *args]
        logger.debug(f"$ {' '.join(argv)}")
        try:
            proc = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise VersionControlError(command, stderr=str(e)) from e
        if proc.returncode != 0:
            raise VersionControlError(command, proc.returncode, proc.stderr or proc.stdout)
        return proc.stdout

    def _pathspecs(self, paths: Sequence[str | Path]) -> list[str]:
        specs = []
        for path in paths:
            p = Path(path)
            specs.append(os.path.relpath(p, self.root) if p.is_absolute() else str(p))
        return specs

    def status(self, *paths: str | Path) -> str:
        """Porcelain status restricted to ``paths``."""
        return self._run("status", "--porcelain", "--", *self._pathspecs(paths))

    def has_changes(self, *paths: str | Path) -> bool:
        """True iff the working tree differs from HEAD anywhere under ``paths``.

        Advisory only: it reports whatever is uncommitted, whether or not a
        mirror pass produced it.
        """
        return bool(self.status(*paths).strip())

    def stage(self, *paths: str | Path) -> None:
        self._run("add", "--all", "--", *self._pathspecs(paths))

    def commit(self, message: str) -> None:
        self._run("commit", "-m", message)

    def push(self) -> None:
        if self.remote:
            args = ["push", self.remote]
            if self.branch:
                args.append(self.branch)
            self._run(*args)
        else:
            self._run("push")

    def publish(self, *paths: str | Path, today: date | None = None) -> str:
        """Stage ``paths``, commit with a date-stamped message, and push.

        Any failing step raises VersionControlError; nothing is retried.

        Returns:
            The commit message used.
        """
        message = commit_message(today, self.commit_prefix)
        logger.info("Committing journal changes...")
        self.stage(*paths)
        self.commit(message)
        logger.info("Pushing changes to remote...")
        self.push()
        return message
