import os

import pytest

from git_deploy_tool.core import FileSynchronizer
from git_deploy_tool.models import SyncOutcome


@pytest.fixture
def synchronizer():
    return FileSynchronizer()


def test_writes_content_creating_directories(synchronizer, tmp_path):
    path = tmp_path / "a" / "b" / "index.html"

    assert synchronizer.sync("<p>hi</p>", path) == SyncOutcome.WRITTEN
    assert path.read_text() == "<p>hi</p>"


def test_overwrites_existing_file(synchronizer, tmp_path):
    path = tmp_path / "index.html"
    path.write_text("old")

    synchronizer.sync("new", path)

    assert path.read_text() == "new"


def test_empty_content_deletes(synchronizer, tmp_path):
    path = tmp_path / "index.html"
    path.write_text("old")

    assert synchronizer.sync("", path) == SyncOutcome.DELETED
    assert not path.exists()


def test_deleting_missing_file_is_not_an_error(synchronizer, tmp_path):
    assert synchronizer.sync("", tmp_path / "missing" / "index.html") == SyncOutcome.UNCHANGED


def test_write_failure_is_reported(synchronizer, tmp_path):
    """Test that a path blocked by a regular file fails without raising."""
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory")

    assert synchronizer.sync("content", blocker / "index.html") == SyncOutcome.FAILED


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs POSIX permissions")
def test_read_only_directory(synchronizer, tmp_path):
    read_only = tmp_path / "read-only"
    read_only.mkdir()
    read_only.chmod(0o500)

    try:
        assert synchronizer.sync("content", read_only / "index.html") == SyncOutcome.FAILED
    finally:
        read_only.chmod(0o700)
