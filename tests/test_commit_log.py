"""Tests for the commit log."""

import pytest

from svcs.core.commit_log import CommitLog, decode_entry, encode_entry
from svcs.core.types import CorruptLogError, LogEntry


@pytest.fixture
def log(repo):
    return CommitLog(repo)


class TestCommitLog:
    def test_empty(self, log):
        """Test that an empty log has no latest entry."""
        assert log.all() == []
        assert log.latest() is None

    def test_append_order(self, log):
        """Test that entries come back in append order."""
        log.append("c1", "alice", "first")
        log.append("c2", "alice", "second")

        assert [e.commit_id for e in log.all()] == ["c1", "c2"]
        assert log.latest() == LogEntry("c2", "alice", "second")

    def test_plain_record_format(self, log, repo):
        """Test that simple messages use the id|author|message layout."""
        log.append("c1", "alice", "first commit")

        assert repo.log_path.read_text() == "c1|alice|first commit\n"

    def test_delimiter_in_message(self, log):
        """Test that pipes, backslashes and newlines survive storage."""
        message = "fix a|b\\c\nsecond line\r"
        log.append("c1", "bob|smith", message)

        entry = log.latest()
        assert entry.author == "bob|smith"
        assert entry.message == message

    def test_corrupt_line(self, log, repo):
        """Test that an unparseable record aborts reading."""
        repo.log_path.write_text("c1|alice|ok\nbroken-line\n")

        with pytest.raises(CorruptLogError) as exc:
            log.all()
        assert exc.value.line_number == 2


class TestRecordCodec:
    def test_escaped_record(self):
        assert encode_entry(LogEntry("c1", "a", "x|y")) == "c1|a|x\\|y"
        assert decode_entry("c1|a|x\\|y") == LogEntry("c1", "a", "x|y")

    def test_dangling_escape(self):
        with pytest.raises(CorruptLogError):
            decode_entry("c1|a|oops\\")

    def test_too_many_fields(self):
        with pytest.raises(CorruptLogError):
            decode_entry("c1|a|b|c")
