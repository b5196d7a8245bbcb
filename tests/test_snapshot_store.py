"""Tests for snapshot storage."""

import pytest

from svcs.core.snapshot_store import SnapshotStore, is_valid_commit_id
from svcs.core.types import CommitNotFoundError, SnapshotExistsError


@pytest.fixture
def store(repo):
    return SnapshotStore(repo)


class TestSnapshotStore:
    def test_write_and_read(self, store):
        """Test that a snapshot returns exactly what was written."""
        files = {"a.txt": b"hello", "docs/b.md": b"\x00binary\xff"}

        path = store.write("abc123", files)

        assert path.name == "abc123"
        assert (path / "docs" / "b.md").read_bytes() == b"\x00binary\xff"
        assert store.read("abc123") == files

    def test_snapshot_is_never_overwritten(self, store):
        """Test that an existing id cannot be written again."""
        store.write("abc123", {"a.txt": b"one"})

        with pytest.raises(SnapshotExistsError):
            store.write("abc123", {"a.txt": b"two"})
        assert store.read("abc123") == {"a.txt": b"one"}

    def test_read_unknown(self, store):
        """Test that reading an unknown id fails."""
        with pytest.raises(CommitNotFoundError):
            store.read("deadbeef")

    def test_read_rejects_path_like_ids(self, store, repo):
        """Test that ids cannot escape the commits directory."""
        with pytest.raises(CommitNotFoundError):
            store.read("..")
        assert not store.exists("../commits")

    def test_list_skips_staging_dirs(self, store, repo):
        """Test that hidden staging directories are not snapshots."""
        store.write("bbb", {"a.txt": b"1"})
        store.write("aaa", {"a.txt": b"2"})
        (repo.commits_dir / ".ccc.tmp").mkdir()

        assert store.list() == ["aaa", "bbb"]

    def test_failed_write_leaves_nothing(self, store, repo):
        """Test that a failing write removes its staging directory."""
        with pytest.raises(TypeError):
            store.write("abc", {"a.txt": "not bytes"})

        assert store.list() == []
        assert list(repo.commits_dir.iterdir()) == []

    def test_transaction_rolls_back(self, store):
        """Test that an error inside the transaction removes the snapshot."""
        with pytest.raises(RuntimeError):
            with store.transaction("abc", {"a.txt": b"x"}):
                raise RuntimeError("log append failed")

        assert not store.exists("abc")

    def test_transaction_keeps_snapshot(self, store):
        """Test that a clean transaction keeps the snapshot."""
        with store.transaction("abc", {"a.txt": b"x"}) as path:
            assert path.is_dir()

        assert store.read("abc") == {"a.txt": b"x"}


class TestCommitIds:
    def test_valid_ids(self):
        assert is_valid_commit_id("0123456789abcdef")

    def test_invalid_ids(self):
        for value in ("", "..", "ABC", "a/b", "abc def"):
            assert not is_valid_commit_id(value)
