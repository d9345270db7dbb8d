"""Debounced trigger: sync once the journal has been quiet for a while.

Every filesystem event pushes a single pending APScheduler date job to
``now + delay``.  When the job fires during an in-flight pass it reschedules
instead of starting a second one, and every finished pass arms a fresh idle
timer.  All state lives on the ``DebouncedSync`` instance and is only touched
from the event loop thread.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from loguru import logger

from .base import RunFn, SyncState

DEFAULT_DELAY = timedelta(minutes=30)

_EVENT_VERBS = {
    "add": "added",
    "change": "changed",
    "unlink": "removed",
}


@dataclass
class DebounceState:
    """Mutable scheduling state for one watcher.

    Attributes:
        pending_run_at: When the next sync is due, or None if nothing is armed.
        sync_in_flight: True while a pass is running.
    """

    pending_run_at: datetime | None = None
    sync_in_flight: bool = False

    @property
    def phase(self) -> SyncState:
        return SyncState.SYNCING if self.sync_in_flight else SyncState.IDLE


def _local_now() -> datetime:
    return datetime.now().astimezone()


class DebouncedSync:
    """Coalesce bursts of journal events into one sync pass.

    Args:
        run_fn: Async callable performing one sync pass.
        scheduler: An APScheduler scheduler; only ``add_job``/``get_job``/
            ``remove_job`` are used.
        delay: Quiet period after the last event before syncing.
        clock: Returns the current timezone-aware time.
    """

    JOB_ID = "journal_debounced_sync"

    def __init__(
        self,
        run_fn: RunFn,
        scheduler: Any,
        delay: timedelta = DEFAULT_DELAY,
        clock: Callable[[], datetime] = _local_now,
    ):
        self._run_fn = run_fn
        self._scheduler = scheduler
        self.delay = delay
        self._clock = clock
        self.state = DebounceState()
        self.runs_started = 0

    def notify(self, kind: str = "change", path: str = "") -> datetime:
        """Record a filesystem event and push the pending sync back."""
        if path:
            logger.info(f"File {path} has been {_EVENT_VERBS.get(kind, kind)}")
        return self._schedule()

    def cancel(self) -> None:
        """Drop the pending sync, if any."""
        if self._scheduler.get_job(self.JOB_ID):
            self._scheduler.remove_job(self.JOB_ID)
        self.state.pending_run_at = None

    def _schedule(self) -> datetime:
        from apscheduler.triggers.date import DateTrigger

        run_at = self._clock() + self.delay
        # A fire during a running pass must reach fire() so it can reschedule.
        self._scheduler.add_job(
            self.fire,
            trigger=DateTrigger(run_date=run_at),
            id=self.JOB_ID,
            replace_existing=True,
            max_instances=2,
            misfire_grace_time=None,
        )
        self.state.pending_run_at = run_at
        logger.debug(f"Journal sync scheduled for {run_at:%H:%M:%S}")
        return run_at

    async def fire(self) -> None:
        """Timer callback.  Never raises."""
        self.state.pending_run_at = None
        if self.state.sync_in_flight:
            logger.info("Sync already in progress, rescheduling")
            self._schedule()
            return

        self.state.sync_in_flight = True
        self.runs_started += 1
        logger.info("Syncing journal...")
        try:
            await self._run_fn()
        except Exception as e:
            logger.error(f"Error syncing journal: {e}")
        finally:
            self.state.sync_in_flight = False
            self._schedule()
