"""Filesystem-event trigger built on watchdog.

The watchdog observer runs on its own thread; events are handed to the
asyncio loop with ``call_soon_threadsafe`` and feed a ``DebouncedSync``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import timedelta
from pathlib import Path, PurePath

from loguru import logger
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .base import threaded_runner, wait_for_shutdown
from .debounce import DEFAULT_DELAY, DebouncedSync

EventCallback = Callable[[str, str], object]
"""``(kind, path)`` where kind is ``add``, ``change`` or ``unlink``."""

_EVENT_KINDS = {
    "created": "add",
    "modified": "change",
    "deleted": "unlink",
    "moved": "add",
}


def is_hidden(path: str | Path, root: str | Path) -> bool:
    """True if any component of ``path`` below ``root`` starts with a dot."""
    try:
        parts = PurePath(path).relative_to(root).parts
    except ValueError:
        parts = PurePath(path).parts
    return any(part.startswith(".") for part in parts)


class JournalEventHandler(FileSystemEventHandler):
    """Translate watchdog events into ``(kind, path)`` callbacks on a loop.

    Directory events and dotfiles are ignored.  A move reports its
    destination, which is how editors perform atomic saves.
    """

    def __init__(self, root: str | Path, callback: EventCallback, loop: asyncio.AbstractEventLoop):
        self.root = Path(root)
        self._callback = callback
        self._loop = loop

    def on_any_event(self, event: FileSystemEvent) -> None:  # type: ignore[override]
        kind = _EVENT_KINDS.get(event.event_type)
        if kind is None or event.is_directory:
            return
        path = event.dest_path if event.event_type == "moved" else event.src_path
        path = path.decode() if isinstance(path, bytes) else str(path)
        if is_hidden(path, self.root):
            return
        self._loop.call_soon_threadsafe(self._callback, kind, path)


class JournalWatcher:
    """Owns the watchdog observer for one journal directory."""

    def __init__(self, directory: str | Path, callback: EventCallback):
        self.directory = Path(directory)
        self._callback = callback
        self._observer = None

    def start(self, loop: asyncio.AbstractEventLoop) -> None:
        handler = JournalEventHandler(self.directory, self._callback, loop)
        self._observer = Observer()
        self._observer.schedule(handler, str(self.directory), recursive=True)
        self._observer.start()
        logger.info(f"Watching for changes in: {self.directory}")

    def stop(self) -> None:
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        self._observer = None


async def serve_watch(pipeline, delay: timedelta = DEFAULT_DELAY) -> None:  # type: ignore[no-untyped-def]
    """Watch the pipeline's source directory until SIGINT/SIGTERM."""
    from apscheduler.schedulers.asyncio import AsyncIOScheduler

    scheduler = AsyncIOScheduler()
    debouncer = DebouncedSync(threaded_runner(pipeline), scheduler, delay)
    watcher = JournalWatcher(pipeline.source_dir, debouncer.notify)

    scheduler.start()
    watcher.start(asyncio.get_running_loop())
    logger.info(f"Journal watcher is running (sync after {delay} of quiet). Press Ctrl+C to stop")
    try:
        await wait_for_shutdown("Stopping journal watcher...")
    finally:
        watcher.stop()
        debouncer.cancel()
        scheduler.shutdown(wait=False)
