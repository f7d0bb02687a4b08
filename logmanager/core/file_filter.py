"""File filtering by filesystem timestamps."""

import logging
import os
from datetime import date, datetime
from pathlib import Path
from typing import Iterator, Optional

from logmanager.core.models import DatedEntry, DateType, DayWindow
from logmanager.core.scanner import EntryFilter, StopSignal, require_directory
from logmanager.utils.constants import DEFAULT_PATTERN

logger = logging.getLogger(__name__)


def creation_timestamp(stat_result: os.stat_result) -> float:
    """
    Get a file's creation time from a stat result.

    Uses the birth time where the platform reports one (macOS, BSD,
    Windows on newer Pythons), st_ctime on Windows, and otherwise the
    older of st_ctime and st_mtime.
    """
    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is not None:
        return birthtime
    if os.name == "nt":
        return stat_result.st_ctime
    return min(stat_result.st_ctime, stat_result.st_mtime)


class FileFilter(EntryFilter):
    """Selects files whose creation or modification day falls in a window."""

    want_dirs = False

    def __init__(
        self,
        date_type: DateType = DateType.CREATED,
        recurse: bool = False,
        pattern: str = DEFAULT_PATTERN,
        ignore_hidden: bool = True,
    ):
        super().__init__(recurse=recurse, pattern=pattern, ignore_hidden=ignore_hidden)
        self.date_type = date_type

    @property
    def date_source(self) -> str:
        return self.date_type.value

    def entry_date(self, entry: os.DirEntry) -> Optional[date]:
        stat_result = entry.stat()
        if self.date_type == DateType.LAST_MODIFIED:
            timestamp = stat_result.st_mtime
        else:
            timestamp = creation_timestamp(stat_result)
        return datetime.fromtimestamp(timestamp).date()


def filter_files(
    path: Path,
    *,
    date_type: DateType = DateType.CREATED,
    older_than: Optional[int] = None,
    younger_than: Optional[int] = None,
    recurse: bool = False,
    pattern: str = DEFAULT_PATTERN,
    ignore_hidden: bool = True,
    stop_event: Optional[StopSignal] = None,
    today: Optional[date] = None,
) -> Iterator[DatedEntry]:
    """
    Convenience function to filter files by age.

    Validation (directory existence, then date range) happens before the
    iterator is returned.

    Args:
        path: Directory to search
        date_type: Timestamp to compare (creation or last modification)
        older_than: Files must be older than this many days
        younger_than: Files must be younger than this many days
        recurse: Whether to search subdirectories
        pattern: File name pattern with * and ? wildcards
        ignore_hidden: Whether to skip hidden files/folders
        stop_event: Optional cancellation signal
        today: Reference date (default: date.today())

    Returns:
        Iterator of DatedEntry for matching files
    """
    root = require_directory(path)
    window = DayWindow.from_offsets(older_than, younger_than, today=today)
    file_filter = FileFilter(
        date_type=date_type,
        recurse=recurse,
        pattern=pattern,
        ignore_hidden=ignore_hidden,
    )
    return file_filter.filter(root, window, stop_event=stop_event)
