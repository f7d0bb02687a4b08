"""Pytest configuration and shared fixtures for LogManager tests."""

import os
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Optional

import pytest

from logmanager.config.schema import LogManagerConfig


# =============================================================================
# Test Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_working_directory(tmp_path, monkeypatch):
    """Automatically isolate all tests in a temporary directory.

    This keeps a logmanager.yaml in the project directory from leaking
    into tests. All tests run with tmp_path as cwd.
    """
    monkeypatch.chdir(tmp_path)


# =============================================================================
# Date Fixtures
# =============================================================================


@pytest.fixture
def today() -> date:
    """Fixed reference date for window computations."""
    return date(2024, 6, 15)


def days_ago(days: int, reference: Optional[date] = None) -> date:
    """Return the date ``days`` before ``reference`` (default: today)."""
    return (reference or date.today()) - timedelta(days=days)


def set_file_date(path: Path, day: date) -> Path:
    """Set a file's access and modification time to noon on ``day``.

    On Linux the creation date falls back to the older of ctime and
    mtime, so this also moves the effective creation date.
    """
    timestamp = datetime.combine(day, time(12, 0)).timestamp()
    os.utime(path, (timestamp, timestamp))
    return path


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Create an empty data directory within tmp_path."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def dated_folders(data_dir: Path) -> Path:
    """
    Create a mix of date-named and other folders.

    Structure:
        data/
            20240101/
            2024-01-01_backup/
            InvalidFolder/
            2024-02-30/
    """
    for name in ["20240101", "2024-01-01_backup", "InvalidFolder", "2024-02-30"]:
        (data_dir / name).mkdir()
    return data_dir


@pytest.fixture
def aged_files(data_dir: Path) -> Path:
    """
    Create log files of known age relative to the real today.

    Structure:
        data/
            app_1d.log    (1 day old)
            app_5d.log    (5 days old)
            app_10d.log   (10 days old)
            notes_30d.txt (30 days old)
    """
    for name, age in [
        ("app_1d.log", 1),
        ("app_5d.log", 5),
        ("app_10d.log", 10),
        ("notes_30d.txt", 30),
    ]:
        path = data_dir / name
        path.write_text("log line\n")
        set_file_date(path, days_ago(age))
    return data_dir


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def default_config() -> LogManagerConfig:
    """Return default configuration."""
    return LogManagerConfig()


# Make helpers available
pytest.days_ago = days_ago
pytest.set_file_date = set_file_date
