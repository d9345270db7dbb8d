"""
File I/O utilities: safe write, markdown listing, frontmatter parsing.

All functions operate on explicit paths; no implicit directory lookups.
"""

from __future__ import annotations

import os
import re
from datetime import date, datetime
from pathlib import Path

import yaml
from loguru import logger

MARKDOWN_SUFFIX = ".md"


def safe_write(filepath: str | Path, content: str, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content to a file, creating parent directories as needed.

    Newlines are written as given, so CRLF bodies survive a round trip.
    """
    os.makedirs(os.path.dirname(str(filepath)) or ".", exist_ok=True)
    with open(filepath, mode, encoding=encoding, newline="") as f:
        f.write(content)


def read_text(filepath: str | Path, encoding: str = "utf-8") -> str:
    """Read a file without newline translation."""
    with open(filepath, encoding=encoding, newline="") as f:
        return f.read()


def list_markdown_files(directory: str | Path) -> list[str]:
    """Return names of regular ``.md`` files in ``directory``, sorted.

    The suffix match is exact and case-sensitive (``NOTE.MD`` is skipped).
    Raises ``OSError`` if the directory cannot be listed.
    """
    names = []
    with os.scandir(directory) as it:
        for entry in it:
            if entry.name.endswith(MARKDOWN_SUFFIX) and entry.is_file():
                names.append(entry.name)
    return sorted(names)


def parse_frontmatter(content: str) -> tuple[dict, str]:
    """
    Parse YAML frontmatter from markdown content.

    Returns:
        (frontmatter_dict, content_without_frontmatter).
        If no frontmatter found, returns ({}, original_content).
    """
    content = content.strip()
    if not content.startswith("---"):
        return {}, content

    try:
        parts = content.split("---", 2)
        if len(parts) < 3:
            return {}, content

        yaml_content = parts[1].strip()
        remaining = parts[2].strip()

        if yaml_content:
            yaml_content = yaml_content.replace("\t", "    ")
            # Handle Obsidian-style #tags in YAML lists
            yaml_content = re.sub(r"(^\s*-\s+)(#.*)$", r"\1'\2'", yaml_content, flags=re.MULTILINE)
            frontmatter = yaml.safe_load(yaml_content) or {}
        else:
            frontmatter = {}

        if not isinstance(frontmatter, dict):
            return {}, content
        return frontmatter, remaining
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse markdown frontmatter: {e}")
        return {}, content


def parse_iso_date(value: object) -> date | None:
    """Coerce a ``YYYY-MM-DD`` string (or a date YAML already parsed) to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError:
            return None
    return None
