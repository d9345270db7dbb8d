"""journalsync CLI: entry point for the sync, watch and entries commands."""

from __future__ import annotations

import click

from journalsync import __version__


@click.group()
@click.version_option(version=__version__, package_name="journalsync")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file (default: <repo>/journalsync.yaml).",
)
@click.option(
    "--repo",
    "repo_root",
    type=click.Path(file_okay=False),
    default=None,
    help="Repository root holding both journal directories (default: current directory).",
)
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, repo_root: str | None, log_level: str | None) -> None:
    """journalsync: mirror your vault journal into the site and publish it."""
    ctx.obj = {"config_file": config_file, "repo_root": repo_root, "log_level": log_level}


# Register subcommands (lazy imports keep startup fast)
from .entries_cmd import entries
from .sync_cmd import sync
from .watch_cmd import watch

main.add_command(sync)
main.add_command(watch)
main.add_command(entries)
