"""Tests for log path construction."""

import os
from pathlib import Path

import pytest

from wm.errors import HomeDirectoryError
from wm.models.log import CalendarDate
from wm.paths import expand_root, find_log_files, log_path

from conftest import write_log


def test_log_path_has_no_zero_padding():
    """Test that /logs + 2024-03-05 maps to /logs/2024/3/5.txt."""
    date = CalendarDate(year=2024, month=3, day=5)
    assert log_path(date, "/logs") == Path("/logs/2024/3/5.txt")


def test_log_path_is_pure():
    """Test that the same inputs always give the same path."""
    date = CalendarDate(year=2023, month=12, day=31)
    assert log_path(date, "/logs") == log_path(date, "/logs")
    assert log_path(date, "/logs/") == Path("/logs/2023/12/31.txt")


def test_log_path_expands_home_marker(tmp_path, monkeypatch):
    """Test that a leading ~ is replaced with the home directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    date = CalendarDate(year=2024, month=3, day=5)

    path = log_path(date, "~/.wm/logs")

    assert path == tmp_path / ".wm" / "logs" / "2024" / "3" / "5.txt"
    assert log_path(date, "~/.wm/logs") == path


def test_expand_root_leaves_other_paths_alone(tmp_path):
    assert expand_root(str(tmp_path)) == tmp_path
    assert expand_root("relative/logs") == Path("relative") / "logs"


def test_expand_root_normalizes_separators():
    """Test that redundant separators are collapsed."""
    assert expand_root("/logs//daily/") == Path("/logs") / "daily"


def test_expand_root_raises_when_home_unknown(monkeypatch):
    """Test that an unresolvable home directory raises HomeDirectoryError."""

    def _no_home(self):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "expanduser", _no_home)

    with pytest.raises(HomeDirectoryError):
        expand_root("~/.wm/logs")


def test_find_log_files_orders_by_date(log_root):
    """Test that logs are listed oldest first by numeric year/month/day."""
    later = write_log(log_root, 2024, 10, 2, "b")
    earlier = write_log(log_root, 2024, 9, 30, "a")
    oldest = write_log(log_root, 2023, 12, 31, "c")

    assert find_log_files(str(log_root)) == [oldest, earlier, later]


def test_find_log_files_ignores_non_log_entries(log_root):
    """Test that only <digits>/<digits>/<digits>.txt files are returned."""
    log = write_log(log_root, 2024, 3, 5, "x")
    (log_root / "2024" / "3" / "notes.txt").write_text("x")
    (log_root / "2024" / "3" / "6.md").write_text("x")
    (log_root / "archive" / "1").mkdir(parents=True)
    (log_root / "archive" / "1" / "1.txt").write_text("x")
    (log_root / "2024" / "3" / "7.txt").mkdir()

    assert find_log_files(str(log_root)) == [log]


def test_find_log_files_missing_root(tmp_path):
    assert find_log_files(str(tmp_path / "missing")) == []


@pytest.mark.skipif(os.name == "nt", reason="POSIX path layout")
def test_log_path_uses_native_separators():
    date = CalendarDate(year=2024, month=3, day=5)
    assert str(log_path(date, "/logs")) == "/logs/2024/3/5.txt"
