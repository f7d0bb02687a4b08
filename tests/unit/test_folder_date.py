"""Unit tests for logmanager.core.folder_date."""

from datetime import date

import pytest

from logmanager.core.folder_date import make_date, parse_folder_date


class TestParseFolderDate:
    """Tests for parse_folder_date."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("20241030", date(2024, 10, 30)),
            ("2024-10-30", date(2024, 10, 30)),
            ("20241030_backup", date(2024, 10, 30)),
            ("2024-10-30_001", date(2024, 10, 30)),
            ("2024-10-30 release", date(2024, 10, 30)),
            ("202410301", date(2024, 10, 30)),
            ("00010101", date(1, 1, 1)),
            ("9999-12-31", date(9999, 12, 31)),
            ("20240229", date(2024, 2, 29)),
        ],
    )
    def test_valid_names(self, name, expected):
        assert parse_folder_date(name) == expected

    @pytest.mark.parametrize(
        "name",
        [
            "InvalidFolder",
            "backup_20241030",
            "2024_10_30",
            "2024-1-30",
            "2024103",
            "24-10-30",
            "2024-02-30",
            "20240230",
            "20230229",
            "2024-04-31",
            "20241301",
            "2024-00-10",
            "20241000",
            "00001231",
            "",
        ],
    )
    def test_invalid_names(self, name):
        assert parse_folder_date(name) is None

    def test_none(self):
        assert parse_folder_date(None) is None

    def test_non_ascii_digits_rejected(self):
        # Arabic-Indic digits are \d in Unicode regexes but not a date here
        assert parse_folder_date("٢٠٢٤١٠٣٠") is None

    def test_compact_form_wins_over_dashed(self):
        # "2024" followed by "1030" is read as YYYYMMDD, not retried as dashed
        assert parse_folder_date("20241030-2024-01-01") == date(2024, 10, 30)

    def test_round_trip_today(self):
        today = date.today()

        assert parse_folder_date(today.strftime("%Y%m%d")) == today
        assert parse_folder_date(today.strftime("%Y-%m-%d")) == today


class TestMakeDate:
    """Tests for make_date."""

    def test_valid(self):
        assert make_date(2024, 1, 31) == date(2024, 1, 31)

    @pytest.mark.parametrize(
        "year,month,day",
        [(0, 1, 1), (10000, 1, 1), (2024, 0, 1), (2024, 13, 1), (2024, 1, 0), (2024, 1, 32), (2024, 2, 30)],
    )
    def test_invalid(self, year, month, day):
        assert make_date(year, month, day) is None
