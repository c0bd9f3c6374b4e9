"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from duke_cli.config import reset_config  # noqa: E402
from duke_cli.storage import Storage  # noqa: E402

from fakes import RecordingStorage, RecordingUi  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.duke directory and cached config."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("DUKE_CONFIG", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def ui():
    return RecordingUi()


@pytest.fixture
def storage():
    return RecordingStorage()


@pytest.fixture
def file_storage(tmp_path):
    return Storage(tmp_path / "data" / "tasks.md")
