"""Pytest fixtures for wm tests."""

from datetime import datetime

import pytest

from wm.config import WmConfig, write_default_config


@pytest.fixture
def log_root(tmp_path):
    """Create an empty log root directory.
    
    Args:
        tmp_path: pytest's built-in temporary directory fixture
        
    Returns:
        Path to the log root
    """
    root = tmp_path / "logs"
    root.mkdir()
    return root


@pytest.fixture
def fixed_now():
    """Reference time used for relative dates."""
    return datetime(2024, 3, 5, 9, 30, 0)


@pytest.fixture
def config_file(tmp_path, log_root, monkeypatch):
    """Write a config file pointing at log_root and expose it through WMCFG.
    
    Returns:
        Path to the config file
    """
    path = tmp_path / "wm.toml"
    write_default_config(
        path,
        WmConfig(root=str(log_root), editor="fake-editor", context_size=20),
    )
    monkeypatch.setenv("WMCFG", str(path))
    return path


def write_log(root, year, month, day, text):
    """Write a log file under root and return its path."""
    path = root / str(year) / str(month) / f"{day}.txt"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
