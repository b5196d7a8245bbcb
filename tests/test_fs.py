"""Tests for filesystem and environment helpers."""

import pytest

from svcs.utils.env import get_repository_root, is_debug_mode
from svcs.utils.fs import atomic_write, ensure_file, file_digest, is_fixed_digest, load_json_object


class TestAtomicWrite:
    def test_text_and_bytes(self, tmp_path):
        """Test that text is stored as UTF-8 and bytes verbatim."""
        atomic_write(tmp_path / "t.txt", "héllo")
        atomic_write(tmp_path / "nested" / "b.bin", b"\x00\xff")

        assert (tmp_path / "t.txt").read_bytes() == "héllo".encode("utf-8")
        assert (tmp_path / "nested" / "b.bin").read_bytes() == b"\x00\xff"

    def test_failure_leaves_target_and_no_temp(self, tmp_path):
        target = tmp_path / "t.txt"
        target.write_text("old")

        with pytest.raises(TypeError):
            atomic_write(target, 42)

        assert target.read_text() == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["t.txt"]


class TestEnsureFile:
    def test_creates_once(self, tmp_path):
        path = tmp_path / "a" / "b.txt"

        assert ensure_file(path) is True
        path.write_text("keep")
        assert ensure_file(path) is False
        assert path.read_text() == "keep"


class TestDigests:
    def test_fixed_digests(self):
        assert is_fixed_digest("sha256")
        assert is_fixed_digest("sha1")

    def test_rejected_digests(self):
        for name in ("shake_128", "shake_256", "nope", ""):
            assert not is_fixed_digest(name)

    def test_file_digest(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_bytes(b"hello")

        assert file_digest(path).hex() == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )


class TestLoadJsonObject:
    def test_missing(self, tmp_path):
        assert load_json_object(tmp_path / "none.json") == {}

    def test_invalid(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text("{oops")

        assert load_json_object(path) == {}

    def test_object(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text('{"digest": "sha1"}')

        assert load_json_object(path) == {"digest": "sha1"}


class TestEnv:
    def test_debug_values(self, monkeypatch):
        for value, expected in (("1", True), (" TRUE ", True), ("on", True), ("0", False), ("", False)):
            monkeypatch.setenv("SVCS_DEBUG", value)
            assert is_debug_mode() is expected

    def test_repository_root(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert get_repository_root().resolve() == tmp_path.resolve()

        monkeypatch.setenv("SVCS_ROOT", "  ~/proj ")
        assert get_repository_root() == tmp_path / "proj"
