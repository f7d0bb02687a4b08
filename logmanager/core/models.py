"""Data models for LogManager."""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from pathlib import Path
from typing import Optional

from logmanager.core.errors import InvalidDateRangeError


class DateType(Enum):
    """Filesystem timestamp used as a file's comparison date."""

    CREATED = "created"
    LAST_MODIFIED = "modified"


def _days_before(today: date, days: int) -> date:
    """Return ``today - days``, clamped to date.min."""
    try:
        return today - timedelta(days=days)
    except OverflowError:
        return date.min


@dataclass(frozen=True)
class DayWindow:
    """Exclusive date range derived from "older/younger than N days".

    A date passes when it is strictly after ``min_date`` and strictly
    before ``max_date``. A missing boundary does not constrain.
    """

    min_date: Optional[date] = None
    max_date: Optional[date] = None

    @classmethod
    def from_offsets(
        cls,
        older_than: Optional[int] = None,
        younger_than: Optional[int] = None,
        today: Optional[date] = None,
    ) -> "DayWindow":
        """
        Build a window relative to today.

        Args:
            older_than: Entries must be older than this many days
            younger_than: Entries must be younger than this many days
            today: Reference date (default: date.today())

        Returns:
            DayWindow

        Raises:
            InvalidDateRangeError: If an offset is negative or
                older_than >= younger_than
        """
        for name, value in (("older_than", older_than), ("younger_than", younger_than)):
            if value is not None and value < 0:
                raise InvalidDateRangeError(f"{name} must not be negative (got {value})")

        if older_than is not None and younger_than is not None and older_than >= younger_than:
            raise InvalidDateRangeError(
                f"older_than ({older_than}) must be less than younger_than ({younger_than})"
            )

        if today is None:
            today = date.today()

        return cls(
            min_date=_days_before(today, younger_than) if younger_than is not None else None,
            max_date=_days_before(today, older_than) if older_than is not None else None,
        )

    def contains(self, value: date) -> bool:
        """Check whether a date falls strictly inside the window."""
        if self.min_date is not None and value <= self.min_date:
            return False
        if self.max_date is not None and value >= self.max_date:
            return False
        return True

    def describe(self) -> tuple[str, str]:
        """Return (min, max) formatted for display, "None" when absent."""
        return (
            self.min_date.isoformat() if self.min_date else "None",
            self.max_date.isoformat() if self.max_date else "None",
        )


@dataclass(frozen=True)
class DatedEntry:
    """A file or directory together with the date it was filtered on."""

    path: Path
    date: date
    is_dir: bool = False

    @property
    def name(self) -> str:
        return self.path.name

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dict."""
        return {
            "path": str(self.path),
            "date": self.date.isoformat(),
            "type": "directory" if self.is_dir else "file",
        }
