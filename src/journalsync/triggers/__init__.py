"""Trigger strategies deciding when the sync pipeline runs.

- ``run_once``: a single pass.
- ``IntervalSync``: a pass every N minutes.
- ``DebouncedSync`` + ``JournalWatcher``: a pass after N quiet minutes
  following filesystem activity.
"""

from .base import SyncState, run_once
from .debounce import DebouncedSync, DebounceState
from .interval import IntervalSync, serve_interval
from .watcher import JournalEventHandler, JournalWatcher, serve_watch

__all__ = [
    "DebounceState",
    "DebouncedSync",
    "IntervalSync",
    "JournalEventHandler",
    "JournalWatcher",
    "SyncState",
    "run_once",
    "serve_interval",
    "serve_watch",
]
