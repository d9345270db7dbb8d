"""Shared pieces of the trigger strategies.

A trigger decides *when* the sync pipeline runs.  Continuous triggers live on
an asyncio loop; the pipeline itself is blocking (file I/O and git
subprocesses), so it is pushed to a worker thread to keep the loop free for
timer and filesystem callbacks.
"""

from __future__ import annotations

import asyncio
import signal
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

from loguru import logger

from journalsync.journal.models import SyncRun
from journalsync.publish.pipeline import SyncPipeline

RunFn = Callable[[], Awaitable[Any]]
"""Async callable that performs one sync pass."""


class SyncState(Enum):
    IDLE = "idle"
    SYNCING = "syncing"


def run_once(pipeline: SyncPipeline) -> SyncRun:
    """One-shot trigger: a single pass, errors propagate to the caller."""
    return pipeline.run()


def threaded_runner(pipeline: SyncPipeline) -> RunFn:
    """Wrap ``pipeline.run`` so it executes on a worker thread."""

    async def _run() -> SyncRun:
        return await asyncio.to_thread(pipeline.run)

    return _run


async def wait_for_shutdown(message: str) -> None:
    """Block until SIGINT or SIGTERM.

    Where the loop cannot install signal handlers (Windows), Ctrl+C surfaces
    as KeyboardInterrupt from ``asyncio.run`` instead.
    """
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    installed = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop.set)
            installed.append(sig)
        except (NotImplementedError, RuntimeError):
            continue
    try:
        await stop.wait()
        logger.info(message)
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)
