"""journalsync entries: print parsed journal entries as JSON."""

from __future__ import annotations

import json
import sys
from datetime import datetime

import click

_DATE = click.DateTime(formats=["%Y-%m-%d"])


@click.command()
@click.option("--slug", default=None, help="Print only this entry (e.g. 2025-08-25).")
@click.option("--since", type=_DATE, default=None, help="Earliest entry date, inclusive (YYYY-MM-DD).")
@click.option("--until", type=_DATE, default=None, help="Latest entry date, inclusive (YYYY-MM-DD).")
@click.pass_context
def entries(ctx: click.Context, slug: str | None, since: datetime | None, until: datetime | None) -> None:
    """Print journal entries from the vault, newest first, as JSON."""
    from journalsync.core.cli.common import load_config
    from journalsync.journal.store import MarkdownJournalStore

    config = load_config(ctx)
    store = MarkdownJournalStore(config.validated().paths.source_dir)

    if slug:
        entry = store.get_entry(slug)
        if entry is None:
            click.echo(json.dumps({"error": "Journal entry not found"}))
            sys.exit(1)
        click.echo(json.dumps(entry.to_dict(), indent=2))
        return

    start = since.date() if since else None
    end = until.date() if until else None
    click.echo(json.dumps([entry.to_dict() for entry in store.get_entries(start, end)], indent=2))
