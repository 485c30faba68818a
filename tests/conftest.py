"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tasklist.config import Config, ConfigModel  # noqa: E402
from tasklist.storage import TaskStore  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests away from the real home directory and config singleton."""
    monkeypatch.delenv("TASKLIST_DB", raising=False)
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture
def config(tmp_path):
    """Configuration pointing at a temporary data folder."""
    return ConfigModel(data_dir=str(tmp_path / "tasks_db"))


@pytest.fixture
def store(config):
    """A fresh task store on a temporary database."""
    with TaskStore.open(config) as s:
        yield s


@pytest.fixture
def runner():
    return CliRunner()
