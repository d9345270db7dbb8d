"""Fixed-interval trigger.

Runs the pipeline at start and then every ``interval`` via an APScheduler
interval job.  A failing pass is logged and the schedule carries on.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from loguru import logger

from .base import RunFn, SyncState, threaded_runner, wait_for_shutdown

DEFAULT_INTERVAL = timedelta(minutes=30)


class IntervalSync:
    """Poll-style trigger: ``IDLE -> SYNCING -> IDLE`` on every tick.

    Args:
        run_fn: Async callable performing one sync pass.
        scheduler: An APScheduler scheduler (``AsyncIOScheduler`` in practice).
        interval: Time between ticks.
    """

    JOB_ID = "journal_interval_sync"

    def __init__(self, run_fn: RunFn, scheduler: Any, interval: timedelta = DEFAULT_INTERVAL):
        self._run_fn = run_fn
        self._scheduler = scheduler
        self.interval = interval
        self.state = SyncState.IDLE

    def start(self, *, run_immediately: bool = True) -> None:
        """Register the interval job.  The first tick fires now unless disabled."""
        from apscheduler.triggers.interval import IntervalTrigger

        kwargs: dict[str, Any] = {}
        if run_immediately:
            kwargs["next_run_time"] = datetime.now().astimezone()
        self._scheduler.add_job(
            self.tick,
            trigger=IntervalTrigger(seconds=self.interval.total_seconds()),
            id=self.JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
            **kwargs,
        )
        logger.info(f"Checking for changes every {self.interval}")

    def stop(self) -> None:
        if self._scheduler.get_job(self.JOB_ID):
            self._scheduler.remove_job(self.JOB_ID)

    async def tick(self) -> None:
        """One scheduled pass.  Never raises."""
        logger.info(f"[{datetime.now():%H:%M:%S}] Checking for journal changes...")
        self.state = SyncState.SYNCING
        try:
            await self._run_fn()
        except Exception as e:
            logger.error(f"Error syncing journal: {e}")
        finally:
            self.state = SyncState.IDLE


async def serve_interval(pipeline, interval: timedelta = DEFAULT_INTERVAL) -> None:  # type: ignore[no-untyped-def]
    """Run the interval trigger until SIGINT/SIGTERM."""
    from apscheduler.schedulers.asyncio import AsyncIOScheduler

    scheduler = AsyncIOScheduler()
    trigger = IntervalSync(threaded_runner(pipeline), scheduler, interval)
    trigger.start()
    scheduler.start()
    logger.info("Starting continuous journal sync. Press Ctrl+C to stop")
    try:
        await wait_for_shutdown("Stopping journal sync...")
    finally:
        trigger.stop()
        scheduler.shutdown(wait=False)
