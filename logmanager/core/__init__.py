"""Core modules for LogManager."""

from logmanager.core.errors import (
    DirectoryAccessError,
    DirectoryNotFoundError,
    InvalidDateRangeError,
    LogManagerError,
    SevenZipNotFoundError,
    SevenZipVerificationError,
)
from logmanager.core.file_filter import FileFilter, filter_files
from logmanager.core.folder_date import parse_folder_date
from logmanager.core.folder_filter import FolderFilter, filter_folders
from logmanager.core.models import DatedEntry, DateType, DayWindow
from logmanager.core.sevenzip import SevenZipLocator

__all__ = [
    "DateType",
    "DatedEntry",
    "DayWindow",
    "FileFilter",
    "FolderFilter",
    "SevenZipLocator",
    "filter_files",
    "filter_folders",
    "parse_folder_date",
    "LogManagerError",
    "DirectoryNotFoundError",
    "DirectoryAccessError",
    "InvalidDateRangeError",
    "SevenZipNotFoundError",
    "SevenZipVerificationError",
]
