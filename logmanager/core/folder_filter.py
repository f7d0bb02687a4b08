"""Folder filtering by dates embedded in folder names."""

import logging
import os
from datetime import date
from pathlib import Path
from typing import Iterator, Optional

from logmanager.core.folder_date import parse_folder_date
from logmanager.core.models import DatedEntry, DayWindow
from logmanager.core.scanner import EntryFilter, StopSignal, require_directory
from logmanager.utils.constants import DEFAULT_PATTERN

logger = logging.getLogger(__name__)


class FolderFilter(EntryFilter):
    """Selects folders whose name starts with a date inside a window.

    Folders without a parseable date are skipped, never reported as errors.
    """

    want_dirs = True
    date_source = "folder name"

    def entry_date(self, entry: os.DirEntry) -> Optional[date]:
        folder_date = parse_folder_date(entry.name)
        if folder_date is None:
            logger.debug(f"Skipping folder (invalid date format): {entry.name}")
        return folder_date


def filter_folders(
    path: Path,
    *,
    older_than: Optional[int] = None,
    younger_than: Optional[int] = None,
    recurse: bool = False,
    pattern: str = DEFAULT_PATTERN,
    ignore_hidden: bool = True,
    stop_event: Optional[StopSignal] = None,
    today: Optional[date] = None,
) -> Iterator[DatedEntry]:
    """
    Convenience function to filter date-named folders by age.

    Args:
        path: Directory to search
        older_than: Folders must be older than this many days
        younger_than: Folders must be younger than this many days
        recurse: Whether to search subdirectories
        pattern: Folder name pattern with * and ? wildcards (e.g. "2024*")
        ignore_hidden: Whether to skip hidden folders
        stop_event: Optional cancellation signal
        today: Reference date (default: date.today())

    Returns:
        Iterator of DatedEntry for matching folders
    """
    root = require_directory(path)
    window = DayWindow.from_offsets(older_than, younger_than, today=today)
    folder_filter = FolderFilter(recurse=recurse, pattern=pattern, ignore_hidden=ignore_hidden)
    return folder_filter.filter(root, window, stop_event=stop_event)
