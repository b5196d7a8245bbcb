from __future__ import annotations

import pytest

from svcs.core.repository import Repository


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Prevent developer machine `~/.svcs/config.json` and debug flags from influencing tests."""

    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("SVCS_DEBUG", "0")
    monkeypatch.delenv("SVCS_ROOT", raising=False)


@pytest.fixture
def work_dir(tmp_path):
    """Working directory with one text file."""
    work = tmp_path / "work"
    work.mkdir()
    (work / "a.txt").write_text("hello")
    return work


@pytest.fixture
def repo(work_dir):
    """Initialized repository rooted at the working directory."""
    repository = Repository(work_dir)
    repository.init()
    return repository
