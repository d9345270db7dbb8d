"""Directory mirror: reconcile the site's journal folder with the vault.

Every ``.md`` file in the source directory is normalized and written to the
destination; destination ``.md`` files without a source counterpart are
deleted.  The operation is not transactional: an I/O failure stops the pass
and leaves earlier writes in place.
"""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from journalsync.core.exceptions import FileIOError
from journalsync.core.utils.file_io import list_markdown_files, read_text, safe_write

from .frontmatter import normalize
from .models import JournalFile, MirrorResult


def mirror(source_dir: str | Path, dest_dir: str | Path, *, persist_source: bool = True) -> MirrorResult:
    """Copy normalized journal files from ``source_dir`` into ``dest_dir``.

    Args:
        source_dir: Vault journal directory.
        dest_dir: Site content directory; created if missing.
        persist_source: Rewrite source files that received frontmatter so the
            next pass finds them already normalized.

    Returns:
        A MirrorResult listing processed, removed and normalized filenames.

    Raises:
        FileIOError: On any read, write, listing or delete failure, or when a
            source file is not valid UTF-8.
    """
    source = Path(source_dir)
    dest = Path(dest_dir)
    result = MirrorResult()

    try:
        dest.mkdir(parents=True, exist_ok=True)
        markdown_files = list_markdown_files(source)
        logger.info(f"Found {len(markdown_files)} journal files to process")

        for name in markdown_files:
            source_path = source / name
            journal_file = JournalFile(name, read_text(source_path))
            content, changed = normalize(journal_file)

            if changed:
                result.normalized.append(name)
                if persist_source:
                    safe_write(source_path, content)
                    logger.info(f"Added frontmatter to: {name}")

            safe_write(dest / name, content)
            result.processed.append(name)
            logger.debug(f"Synced: {name}")

        keep = set(markdown_files)
        for name in list_markdown_files(dest):
            if name not in keep:
                os.unlink(dest / name)
                result.removed.append(name)
                logger.info(f"Removed stale entry: {name}")
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError(f"Mirror {source} -> {dest} failed: {e}") from e

    return result
