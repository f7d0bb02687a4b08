"""Unit tests for logmanager.core.models."""

from datetime import date, timedelta
from pathlib import Path

import pytest

from logmanager.core.errors import InvalidDateRangeError
from logmanager.core.models import DatedEntry, DateType, DayWindow


class TestDayWindowFromOffsets:
    """Tests for DayWindow.from_offsets."""

    def test_no_offsets_is_unbounded(self, today):
        window = DayWindow.from_offsets(today=today)

        assert window.min_date is None
        assert window.max_date is None

    def test_younger_than_sets_min_date(self, today):
        window = DayWindow.from_offsets(younger_than=10, today=today)

        assert window.min_date == date(2024, 6, 5)
        assert window.max_date is None

    def test_older_than_sets_max_date(self, today):
        window = DayWindow.from_offsets(older_than=7, today=today)

        assert window.min_date is None
        assert window.max_date == date(2024, 6, 8)

    def test_both_offsets(self, today):
        window = DayWindow.from_offsets(older_than=7, younger_than=30, today=today)

        assert window.min_date == date(2024, 5, 16)
        assert window.max_date == date(2024, 6, 8)

    def test_zero_older_than_is_today(self, today):
        window = DayWindow.from_offsets(older_than=0, today=today)

        assert window.max_date == today

    @pytest.mark.parametrize("older_than,younger_than", [(10, 10), (11, 10), (0, 0), (30, 7)])
    def test_contradictory_offsets_rejected(self, today, older_than, younger_than):
        with pytest.raises(InvalidDateRangeError):
            DayWindow.from_offsets(older_than=older_than, younger_than=younger_than, today=today)

    def test_negative_offset_rejected(self, today):
        with pytest.raises(InvalidDateRangeError, match="older_than"):
            DayWindow.from_offsets(older_than=-1, today=today)

        with pytest.raises(InvalidDateRangeError, match="younger_than"):
            DayWindow.from_offsets(younger_than=-5, today=today)

    def test_invalid_range_is_value_error(self, today):
        with pytest.raises(ValueError):
            DayWindow.from_offsets(older_than=5, younger_than=1, today=today)

    def test_huge_offset_clamps_to_date_min(self, today):
        window = DayWindow.from_offsets(younger_than=10_000_000, today=today)

        assert window.min_date == date.min

    def test_defaults_to_real_today(self):
        window = DayWindow.from_offsets(older_than=0)

        assert window.max_date == date.today()


class TestDayWindowContains:
    """Tests for DayWindow.contains."""

    def test_unbounded_accepts_everything(self):
        window = DayWindow()

        assert window.contains(date(1, 1, 1))
        assert window.contains(date(9999, 12, 31))

    def test_accepts_exactly_the_open_interval(self, today):
        older_than, younger_than = 3, 8
        window = DayWindow.from_offsets(older_than, younger_than, today=today)

        accepted = [
            offset for offset in range(0, 12)
            if window.contains(today - timedelta(days=offset))
        ]

        assert accepted == [4, 5, 6, 7]

    def test_min_boundary_excluded(self, today):
        window = DayWindow.from_offsets(younger_than=10, today=today)

        assert not window.contains(today - timedelta(days=10))
        assert window.contains(today - timedelta(days=9))

    def test_max_boundary_excluded(self, today):
        window = DayWindow.from_offsets(older_than=10, today=today)

        assert not window.contains(today - timedelta(days=10))
        assert window.contains(today - timedelta(days=11))

    def test_older_than_zero_excludes_today(self, today):
        window = DayWindow.from_offsets(older_than=0, today=today)

        assert not window.contains(today)
        assert window.contains(today - timedelta(days=1))

    def test_younger_than_one_includes_today(self, today):
        window = DayWindow.from_offsets(younger_than=1, today=today)

        assert window.contains(today)
        assert not window.contains(today - timedelta(days=1))


class TestDayWindowDescribe:
    """Tests for DayWindow.describe."""

    def test_describe_bounds(self, today):
        window = DayWindow.from_offsets(older_than=1, younger_than=2, today=today)

        assert window.describe() == ("2024-06-13", "2024-06-14")

    def test_describe_missing_bounds(self):
        assert DayWindow().describe() == ("None", "None")


class TestDatedEntry:
    """Tests for DatedEntry."""

    def test_name(self):
        entry = DatedEntry(path=Path("/logs/app.log"), date=date(2024, 1, 2))

        assert entry.name == "app.log"

    def test_to_dict_file(self):
        entry = DatedEntry(path=Path("/logs/app.log"), date=date(2024, 1, 2))

        data = entry.to_dict()

        assert data["date"] == "2024-01-02"
        assert data["type"] == "file"
        assert data["path"] == str(Path("/logs/app.log"))

    def test_to_dict_directory(self):
        entry = DatedEntry(path=Path("/backups/20240102"), date=date(2024, 1, 2), is_dir=True)

        assert entry.to_dict()["type"] == "directory"


class TestDateType:
    """Tests for DateType enum."""

    def test_values(self):
        assert DateType("created") is DateType.CREATED
        assert DateType("modified") is DateType.LAST_MODIFIED
