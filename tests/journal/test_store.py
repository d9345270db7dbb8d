"""Tests for journalsync.journal.store."""

from datetime import date

import pytest

from journalsync.journal.store import MarkdownJournalStore


def _entry(title, day, body="Body", description=None):
    lines = ["---", f'title: "{title}"', f'date: "{day}"']
    if description:
        lines.append(f'description: "{description}"')
    lines += ["---", "", body, ""]
    return "\n".join(lines)


@pytest.fixture
def store(tmp_path):
    (tmp_path / "2025-01-01.md").write_text(_entry("New Year", "2025-01-01", "First"))
    (tmp_path / "2025-03-15.md").write_text(_entry("Ides", "2025-03-15", "Beware", "March"))
    (tmp_path / "2024-12-31.md").write_text(_entry("Eve", "2024-12-31"))
    (tmp_path / "2025-02-01.md").write_text("no frontmatter here")
    (tmp_path / "scratch.md").write_text(_entry("Scratch", "not-a-date"))
    return MarkdownJournalStore(tmp_path)


class TestEntries:
    def test_newest_first_and_skips_unparseable(self, store):
        entries = store.get_entries()
        assert [e.slug for e in entries] == ["2025-03-15", "2025-01-01", "2024-12-31"]

    def test_entry_fields(self, store):
        entry = store.get_entry("2025-03-15")
        assert entry is not None
        assert entry.title == "Ides"
        assert entry.date == date(2025, 3, 15)
        assert entry.description == "March"
        assert entry.content == "Beware"
        assert entry.raw_content.startswith("---\n")

    def test_get_entry_accepts_filename(self, store):
        assert store.get_entry("2025-01-01.md").title == "New Year"

    def test_unknown_slug(self, store):
        assert store.get_entry("1999-01-01") is None

    def test_unquoted_yaml_date(self, tmp_path):
        (tmp_path / "2025-05-05.md").write_text("---\ntitle: Plain\ndate: 2025-05-05\n---\nhi\n")
        entry = MarkdownJournalStore(tmp_path).get_entry("2025-05-05")
        assert entry.date == date(2025, 5, 5)

    def test_missing_directory_is_empty(self, tmp_path):
        assert MarkdownJournalStore(tmp_path / "nope").get_entries() == []

    def test_crlf_entry(self, tmp_path):
        (tmp_path / "2025-07-07.md").write_bytes(b"---\r\ntitle: Windows\r\ndate: 2025-07-07\r\n---\r\n\r\nbody\r\n")
        entry = MarkdownJournalStore(tmp_path).get_entry("2025-07-07")
        assert entry.title == "Windows"
        assert entry.content == "body"

    def test_invalid_utf8_is_skipped(self, store, tmp_path):
        (tmp_path / "2025-04-01.md").write_bytes(b"---\ntitle: \xff\n---\n")
        assert [e.slug for e in store.get_entries()] == ["2025-03-15", "2025-01-01", "2024-12-31"]


class TestDateRange:
    def test_inclusive_bounds(self, store):
        entries = store.get_entries(start=date(2025, 1, 1), end=date(2025, 3, 15))
        assert [e.slug for e in entries] == ["2025-03-15", "2025-01-01"]

    def test_open_start(self, store):
        assert [e.slug for e in store.get_entries(end=date(2025, 1, 1))] == ["2025-01-01", "2024-12-31"]

    def test_open_end(self, store):
        assert [e.slug for e in store.get_entries(start=date(2025, 1, 2))] == ["2025-03-15"]

    def test_filters_on_frontmatter_date(self, tmp_path):
        (tmp_path / "2025-06-01.md").write_text(_entry("Backdated", "2024-06-01"))
        store = MarkdownJournalStore(tmp_path)
        assert store.get_entries(start=date(2025, 1, 1)) == []
        assert [e.title for e in store.get_entries(end=date(2024, 12, 31))] == ["Backdated"]
