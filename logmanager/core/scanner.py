"""Lazy directory enumeration shared by the file and folder filters."""

import logging
import os
import stat
from collections import deque
from datetime import date
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterator, Optional, Protocol

from logmanager.core.errors import DirectoryAccessError, DirectoryNotFoundError
from logmanager.core.models import DatedEntry, DayWindow
from logmanager.utils.constants import DEFAULT_PATTERN

logger = logging.getLogger(__name__)

_HIDDEN_ATTRIBUTES = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2) | getattr(
    stat, "FILE_ATTRIBUTE_SYSTEM", 0x4
)


class StopSignal(Protocol):
    """Anything with an ``is_set()`` method, e.g. threading.Event."""

    def is_set(self) -> bool: ...


def is_hidden_entry(entry: os.DirEntry) -> bool:
    """
    Check if a directory entry is hidden.

    Dot-names are hidden everywhere; on Windows the hidden and system
    attributes are honoured as well.
    """
    if entry.name.startswith("."):
        return True
    if os.name == "nt":
        attributes = getattr(entry.stat(follow_symlinks=False), "st_file_attributes", 0)
        return bool(attributes & _HIDDEN_ATTRIBUTES)
    return False


def matches_pattern(name: str, pattern: str) -> bool:
    """Match a name against a wildcard pattern supporting only ``*`` and ``?``.

    ``[`` is taken literally, so "[2024]*" only matches names starting
    with "[2024]".
    """
    return fnmatch(name, pattern.replace("[", "[[]"))


def require_directory(path: Path) -> Path:
    """Return ``path`` as a Path, raising DirectoryNotFoundError if it is not a directory."""
    root = Path(path)
    if not root.is_dir():
        raise DirectoryNotFoundError(f"Directory not found: {root}", target=str(root))
    return root


def iter_directory(
    root: Path,
    *,
    want_dirs: bool,
    recurse: bool = False,
    pattern: str = DEFAULT_PATTERN,
    ignore_hidden: bool = True,
    stop_event: Optional[StopSignal] = None,
) -> Iterator[os.DirEntry]:
    """
    Lazily yield entries below ``root`` whose names match ``pattern``.

    Directories are visited breadth first. Subdirectories that cannot be
    read are skipped with a warning; an unreadable ``root`` raises
    DirectoryAccessError. Symlinked directories are yielded but not
    descended into.

    Args:
        root: Directory to enumerate
        want_dirs: Yield directories (True) or files (False)
        recurse: Descend into subdirectories
        pattern: Wildcard pattern (``*`` and ``?``) matched against entry names
        ignore_hidden: Skip hidden entries and do not descend into them
        stop_event: Polled once per entry; enumeration ends when set

    Yields:
        os.DirEntry objects
    """
    pending: deque[str] = deque([str(root)])

    while pending:
        directory = pending.popleft()

        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if stop_event is not None and stop_event.is_set():
                        logger.debug("Stop requested, ending enumeration")
                        return

                    try:
                        if ignore_hidden and is_hidden_entry(entry):
                            continue
                        is_dir = entry.is_dir()
                        if is_dir and recurse and not entry.is_symlink():
                            pending.append(entry.path)
                    except OSError as e:
                        logger.warning(f"Cannot inspect {entry.path}: {e}")
                        continue

                    if is_dir == want_dirs and matches_pattern(entry.name, pattern):
                        yield entry

        except PermissionError as e:
            if directory == str(root):
                raise DirectoryAccessError(f"Access denied: {root}", target=str(root)) from e
            logger.warning(f"Access denied: {directory} - {e}")
        except OSError as e:
            if directory == str(root):
                raise DirectoryAccessError(f"Cannot enumerate {root}: {e}", target=str(root)) from e
            logger.warning(f"Cannot enumerate {directory}: {e}")


class EntryFilter:
    """Base class for date-window filters over a directory tree.

    Subclasses pick files or directories and decide which date an entry
    is compared on.
    """

    want_dirs = False
    date_source = "unspecified"

    def __init__(
        self,
        recurse: bool = False,
        pattern: str = DEFAULT_PATTERN,
        ignore_hidden: bool = True,
    ):
        """
        Initialize the filter.

        Args:
            recurse: Whether to search subdirectories
            pattern: Name pattern with * and ? wildcards (e.g. "*.log", "2024*")
            ignore_hidden: Whether to skip hidden files/folders
        """
        self.recurse = recurse
        self.pattern = pattern or DEFAULT_PATTERN
        self.ignore_hidden = ignore_hidden

    def entry_date(self, entry: os.DirEntry) -> Optional[date]:
        """Return the comparison date for an entry, or None to skip it."""
        raise NotImplementedError

    def filter(
        self,
        path: Path,
        window: DayWindow,
        stop_event: Optional[StopSignal] = None,
    ) -> Iterator[DatedEntry]:
        """
        Filter entries under ``path`` by ``window``.

        The directory is checked immediately; enumeration itself is lazy.

        Args:
            path: Directory to search
            window: Day window entries must fall into
            stop_event: Optional cancellation signal

        Returns:
            Iterator of DatedEntry for matching entries

        Raises:
            DirectoryNotFoundError: If ``path`` is not an existing directory
        """
        root = require_directory(path)
        return self._iter_matches(root, window, stop_event)

    def _iter_matches(
        self,
        root: Path,
        window: DayWindow,
        stop_event: Optional[StopSignal],
    ) -> Iterator[DatedEntry]:
        min_date, max_date = window.describe()
        logger.debug(f"Searching in: {root}")
        logger.debug(f"Pattern: {self.pattern} (recurse: {self.recurse})")
        logger.debug(f"Date type: {self.date_source}")
        logger.debug(f"Min date: {min_date}")
        logger.debug(f"Max date: {max_date}")

        for entry in iter_directory(
            root,
            want_dirs=self.want_dirs,
            recurse=self.recurse,
            pattern=self.pattern,
            ignore_hidden=self.ignore_hidden,
            stop_event=stop_event,
        ):
            try:
                entry_date = self.entry_date(entry)
            except PermissionError as e:
                logger.warning(f"Access denied: {entry.path} - {e}")
                continue
            except Exception as e:
                logger.error(f"Error reading {entry.path}: {e}")
                continue

            if entry_date is None or not window.contains(entry_date):
                continue

            yield DatedEntry(path=Path(entry.path), date=entry_date, is_dir=self.want_dirs)
