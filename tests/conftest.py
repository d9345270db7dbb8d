"""Shared test fixtures for journalsync."""

import shutil
import subprocess
import sys
import tempfile

import pytest
from loguru import logger


def pytest_collection_modifyitems(config, items):
    if shutil.which("git") is not None:
        return
    skip_git = pytest.mark.skip(reason="git executable not available")
    for item in items:
        if "git" in item.keywords:
            item.add_marker(skip_git)


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture(autouse=True)
def _reset_logging():
    """CLI tests point loguru at CliRunner streams; restore stderr afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")


@pytest.fixture
def journal_dirs(tmp_path):
    """Return (source_dir, dest_dir) laid out like the site repository."""
    source = tmp_path / "obsidian" / "journal"
    dest = tmp_path / "src" / "content" / "journal"
    source.mkdir(parents=True)
    return source, dest


def _git(cwd, *args):
    proc = subprocess.run(["git", "-C", str(cwd), *args], capture_output=True, text=True)
    assert proc.returncode == 0, f"git {' '.join(args)} failed: {proc.stderr}"
    return proc.stdout


@pytest.fixture
def run_git():
    """Run git in a directory and return stdout; fails the test on error."""
    return _git


@pytest.fixture
def git_repo(tmp_path, monkeypatch):
    """A site repository with an upstream bare remote and one initial commit.

    Returns the working tree path.  ``obsidian/journal`` exists and is empty.
    """
    for key in ("GIT_DIR", "GIT_WORK_TREE", "GIT_INDEX_FILE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_TERMINAL_PROMPT", "0")
    monkeypatch.setenv("HOME", str(tmp_path))

    remote = tmp_path / "remote.git"
    work = tmp_path / "site"
    work.mkdir()
    _git(tmp_path, "init", "--bare", str(remote))
    _git(work, "init")
    _git(work, "config", "user.name", "Journal Tester")
    _git(work, "config", "user.email", "tester@example.com")
    _git(work, "config", "commit.gpgsign", "false")
    (work / "README.md").write_text("site\n")
    (work / "obsidian" / "journal").mkdir(parents=True)
    _git(work, "add", "README.md")
    _git(work, "commit", "-m", "initial")
    _git(work, "remote", "add", "origin", str(remote))
    _git(work, "push", "-u", "origin", "HEAD")
    return work
