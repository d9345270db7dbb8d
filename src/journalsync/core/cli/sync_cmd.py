"""journalsync sync: one pass, or a pass every interval with --watch."""

from __future__ import annotations

import asyncio
import sys
from datetime import timedelta

import click
from loguru import logger

from journalsync.core.exceptions import JournalSyncError


@click.command()
@click.option("--watch", "-w", "continuous", is_flag=True, help="Keep running and sync on a fixed interval.")
@click.pass_context
def sync(ctx: click.Context, continuous: bool) -> None:
    """Mirror the journal into the site and commit/push any changes."""
    from journalsync.core.cli.common import create_pipeline, load_config
    from journalsync.triggers import run_once, serve_interval

    config = load_config(ctx)
    pipeline = create_pipeline(config)

    if continuous:
        interval = timedelta(minutes=config.validated().sync.interval_minutes)
        try:
            asyncio.run(serve_interval(pipeline, interval))
        except KeyboardInterrupt:
            logger.info("Stopping journal sync...")
        return

    try:
        run = run_once(pipeline)
    except JournalSyncError as e:
        logger.error(f"Error syncing journal: {e}")
        sys.exit(1)

    if run.committed:
        click.echo(f"Synced {run.files_processed} file(s), removed {run.stale_files_removed}, committed and pushed.")
    else:
        click.echo(f"Synced {run.files_processed} file(s), removed {run.stale_files_removed}, nothing to commit.")
