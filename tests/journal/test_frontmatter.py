"""Tests for journalsync.journal.frontmatter."""

import pytest

from journalsync.journal.frontmatter import build_frontmatter, ensure_frontmatter, normalize
from journalsync.journal.models import JournalFile

EXPECTED_HEADER = (
    "---\n"
    'title: "Journal - 2025-08-25"\n'
    'date: "2025-08-25"\n'
    'description: "Daily journal entry"\n'
    "---\n"
    "\n"
)


@pytest.mark.smoke
class TestEnsureFrontmatter:
    def test_injects_header_from_filename(self):
        content, changed = ensure_frontmatter("2025-08-25.md", "body text")
        assert changed is True
        assert content == EXPECTED_HEADER + "body text"

    def test_body_preserved_byte_for_byte(self):
        body = "  leading spaces\r\nwindows line\n\n---not a header\n\ttab"
        content, _ = ensure_frontmatter("2025-08-25.md", body)
        assert content.endswith(body)
        assert content[len(EXPECTED_HEADER) :] == body

    def test_existing_frontmatter_passes_through(self):
        raw = "---\ntitle: X\n---\nbody"
        content, changed = ensure_frontmatter("2025-08-25.md", raw)
        assert changed is False
        assert content is raw

    def test_idempotent(self):
        once, _ = ensure_frontmatter("2025-08-25.md", "body")
        twice, changed = ensure_frontmatter("2025-08-25.md", once)
        assert changed is False
        assert twice == once

    def test_empty_content(self):
        content, changed = ensure_frontmatter("2025-08-25.md", "")
        assert changed is True
        assert content == EXPECTED_HEADER

    def test_leading_whitespace_is_not_frontmatter(self):
        _, changed = ensure_frontmatter("2025-08-25.md", "\n---\ntitle: X\n---\n")
        assert changed is True

    def test_malformed_filename_degrades_to_literal(self):
        content, changed = ensure_frontmatter("shopping list.md", "eggs")
        assert changed is True
        assert 'title: "Journal - shopping list"' in content
        assert 'date: "shopping list"' in content

    def test_filename_without_md_suffix(self):
        content, _ = ensure_frontmatter("2025-08-25.txt", "x")
        assert 'date: "2025-08-25.txt"' in content

    def test_path_uses_basename(self):
        content, _ = ensure_frontmatter("obsidian/journal/2025-01-02.md", "x")
        assert 'date: "2025-01-02"' in content


def test_build_frontmatter_custom_description():
    header = build_frontmatter("2025-01-01", description="Travel log")
    assert 'description: "Travel log"' in header
    assert header.endswith("---\n\n")


def test_normalize_uses_journal_file():
    bare = JournalFile("2025-02-02.md", "text")
    headed = JournalFile("2025-02-02.md", "---\ntitle: x\n---\n")
    assert normalize(bare) == ensure_frontmatter("2025-02-02.md", "text")
    assert normalize(headed) == (headed.raw_content, False)
