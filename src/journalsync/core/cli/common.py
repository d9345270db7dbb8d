"""Shared setup logic for CLI commands."""

from __future__ import annotations

import os
import sys

import click
from loguru import logger

from journalsync.core.config import DEFAULT_CONFIG_NAME, Config
from journalsync.core.exceptions import ConfigurationError
from journalsync.core.utils.logging import setup_logging


def load_config(ctx: click.Context) -> Config:
    """Build a Config from the group options and set up logging.

    Exits with status 1 on an invalid configuration.
    """
    opts = ctx.obj or {}
    repo_root = os.path.abspath(opts.get("repo_root") or os.getcwd())
    config_file = opts.get("config_file") or os.path.join(repo_root, DEFAULT_CONFIG_NAME)

    try:
        config = Config(config_file=config_file, repo_root=repo_root)
        settings = config.validated()
    except ConfigurationError as e:
        setup_logging("ERROR")
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(
        level=opts.get("log_level") or settings.logging.level,
        log_file=settings.logging.file or None,
    )
    return config


def create_pipeline(config: Config):  # type: ignore[no-untyped-def]
    """Create the SyncPipeline described by ``config``."""
    from journalsync.publish.pipeline import SyncPipeline

    return SyncPipeline.from_config(config)
