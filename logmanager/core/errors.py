"""Exceptions raised by LogManager operations.

Each error carries a stable ``error_id`` (shown to the user alongside the
message) and the CLI exit code used when it aborts a command.
"""

from typing import Optional

from logmanager.utils.constants import (
    EXIT_DIRECTORY_ACCESS_DENIED,
    EXIT_DIRECTORY_NOT_FOUND,
    EXIT_INVALID_DATE_RANGE,
    EXIT_SEVENZIP_NOT_FOUND,
    EXIT_SEVENZIP_VERIFICATION_FAILED,
)


class LogManagerError(Exception):
    """Base class for fatal LogManager errors."""

    error_id = "LogManagerError"
    exit_code = 1

    def __init__(self, message: str, target: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.target = target


class DirectoryNotFoundError(LogManagerError, FileNotFoundError):
    """The directory to enumerate does not exist."""

    error_id = "DirectoryNotFound"
    exit_code = EXIT_DIRECTORY_NOT_FOUND


class DirectoryAccessError(LogManagerError, PermissionError):
    """The directory to enumerate cannot be read."""

    error_id = "DirectoryAccessDenied"
    exit_code = EXIT_DIRECTORY_ACCESS_DENIED


class InvalidDateRangeError(LogManagerError, ValueError):
    """older_than/younger_than describe an empty or negative window."""

    error_id = "InvalidDateRange"
    exit_code = EXIT_INVALID_DATE_RANGE


class SevenZipNotFoundError(LogManagerError, FileNotFoundError):
    """No 7-Zip executable was found on this system."""

    error_id = "7ZipNotFound"
    exit_code = EXIT_SEVENZIP_NOT_FOUND


class SevenZipVerificationError(LogManagerError, RuntimeError):
    """A 7-Zip executable was found but did not run successfully."""

    error_id = "7ZipVerificationFailed"
    exit_code = EXIT_SEVENZIP_VERIFICATION_FAILED
