"""Date extraction from folder names for LogManager."""

import logging
import re
from datetime import date
from typing import Optional

logger = logging.getLogger(__name__)


# Anchored at the start; anything after the date is ignored
# (e.g. 20240101_001, 2024-01-01_backup)
FOLDER_DATE_PATTERNS = [
    (re.compile(r"^(\d{4})(\d{2})(\d{2})", re.ASCII), "YYYYMMDD"),
    (re.compile(r"^(\d{4})-(\d{2})-(\d{2})", re.ASCII), "YYYY-MM-DD"),
]


def parse_folder_date(folder_name: Optional[str]) -> Optional[date]:
    """
    Parse a date from the start of a folder name.

    Supported formats, tried in order: ``YYYYMMDD`` and ``YYYY-MM-DD``.
    The first format that matches decides the result.

    Args:
        folder_name: Folder base name

    Returns:
        date, or None if the name has no valid leading date
    """
    if not folder_name:
        return None

    for pattern, label in FOLDER_DATE_PATTERNS:
        match = pattern.match(folder_name)
        if not match:
            continue

        year, month, day = (int(group) for group in match.groups())
        result = make_date(year, month, day)
        if result is None:
            logger.debug(f"Invalid {label} date in folder name: {folder_name}")
        return result

    return None


def make_date(year: int, month: int, day: int) -> Optional[date]:
    """Build a date, returning None for out-of-range or impossible dates (Feb 30)."""
    if not (1 <= year <= 9999 and 1 <= month <= 12 and 1 <= day <= 31):
        return None

    try:
        return date(year, month, day)
    except ValueError:
        return None
