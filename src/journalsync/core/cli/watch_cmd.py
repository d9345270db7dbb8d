"""journalsync watch: sync after the journal has been quiet for a while."""

from __future__ import annotations

import asyncio
from datetime import timedelta

import click
from loguru import logger


@click.command()
@click.pass_context
def watch(ctx: click.Context) -> None:
    """Watch the vault journal and sync once edits settle down."""
    from journalsync.core.cli.common import create_pipeline, load_config
    from journalsync.triggers import serve_watch

    config = load_config(ctx)
    pipeline = create_pipeline(config)
    delay = timedelta(minutes=config.validated().sync.debounce_minutes)

    try:
        asyncio.run(serve_watch(pipeline, delay))
    except KeyboardInterrupt:
        logger.info("Stopping journal watcher...")
