"""7-Zip executable discovery for LogManager.

Searches well-known install locations, the PATH, and (on Unix-like
systems) ``which`` for a 7-Zip binary. The search itself never raises;
callers decide whether a missing executable is fatal.
"""

import logging
import os
import platform
import stat
import subprocess
from typing import Iterable, Mapping, Optional, Sequence

from logmanager.core.errors import SevenZipNotFoundError, SevenZipVerificationError
from logmanager.core.process import ProcessRunner, SubprocessRunner
from logmanager.utils.constants import (
    SEVENZIP_INFO_ARGUMENT,
    SEVENZIP_UNIX_BINARIES,
    SEVENZIP_UNIX_PATHS,
    SEVENZIP_WINDOWS_BINARY,
    SEVENZIP_WINDOWS_PATHS,
    VERIFY_TIMEOUT_SECONDS,
    WHICH_COMMAND,
    WHICH_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def is_executable(path: str) -> bool:
    """Check if a file exists and has any execute bit (owner, group, other)."""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return False
    return stat.S_ISREG(mode) and bool(mode & _EXECUTE_BITS)


class SevenZipLocator:
    """Finds and optionally verifies a 7-Zip executable.

    Example:
        locator = SevenZipLocator()
        path = locator.locate(verify=True)
    """

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        system: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        windows_paths: Optional[Sequence[str]] = None,
        unix_paths: Optional[Sequence[str]] = None,
        extra_paths: Iterable[str] = (),
        which_timeout: float = WHICH_TIMEOUT_SECONDS,
        verify_timeout: float = VERIFY_TIMEOUT_SECONDS,
    ):
        """
        Initialize the locator.

        Args:
            runner: Process runner (default: SubprocessRunner)
            system: OS family as reported by platform.system()
            environ: Environment used for PATH and Program Files lookups
            windows_paths: Candidate paths checked first on Windows
            unix_paths: Candidate paths checked first on Linux/macOS
            extra_paths: User-configured candidates checked before the built-in ones
            which_timeout: Seconds to wait for each ``which`` lookup
            verify_timeout: Seconds to wait for the verification run
        """
        self.runner = runner or SubprocessRunner()
        self.system = system or platform.system()
        self.environ = os.environ if environ is None else environ
        self.windows_paths = list(SEVENZIP_WINDOWS_PATHS if windows_paths is None else windows_paths)
        self.unix_paths = list(SEVENZIP_UNIX_PATHS if unix_paths is None else unix_paths)
        self.extra_paths = list(extra_paths)
        self.which_timeout = which_timeout
        self.verify_timeout = verify_timeout

    def find(self) -> Optional[str]:
        """
        Locate the 7-Zip executable.

        Returns:
            Full path to the executable, or None if not found
        """
        if self.system == "Windows":
            return self._find_windows()
        if self.system in ("Linux", "Darwin"):
            return self._find_unix()

        logger.debug(f"Unsupported platform for 7-Zip lookup: {self.system}")
        return None

    def _find_windows(self) -> Optional[str]:
        for candidate in self._windows_candidates():
            if os.path.isfile(candidate):
                return candidate

        return self._find_in_path(SEVENZIP_WINDOWS_BINARY)

    def _windows_candidates(self) -> list[str]:
        candidates = self.extra_paths + self.windows_paths
        for variable in ("ProgramFiles", "ProgramFiles(x86)"):
            base = self.environ.get(variable)
            if base:
                candidates.append(base.rstrip("\\") + "\\7-Zip\\" + SEVENZIP_WINDOWS_BINARY)

        # Windows paths are case-insensitive
        seen: set[str] = set()
        unique: list[str] = []
        for candidate in candidates:
            if candidate.lower() not in seen:
                seen.add(candidate.lower())
                unique.append(candidate)
        return unique

    def _find_in_path(self, file_name: str) -> Optional[str]:
        """Search each PATH entry (';'-separated) for ``file_name``."""
        path_var = self.environ.get("PATH", "")
        for directory in path_var.split(";"):
            directory = directory.strip()
            if not directory:
                continue
            candidate = os.path.join(directory, file_name)
            if os.path.isfile(candidate):
                return candidate
        return None

    def _find_unix(self) -> Optional[str]:
        for candidate in self.extra_paths + self.unix_paths:
            if is_executable(candidate):
                return candidate

        for name in SEVENZIP_UNIX_BINARIES:
            found = self._which(name)
            if found:
                return found

        return None

    def _which(self, name: str) -> Optional[str]:
        """Resolve ``name`` with the which command; None on any failure."""
        try:
            result = self.runner.run([WHICH_COMMAND, name], timeout=self.which_timeout)
        except subprocess.TimeoutExpired:
            logger.debug(f"'which {name}' timed out")
            return None
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"'which {name}' failed: {e}")
            return None

        if not result.ok:
            return None

        output = result.stdout.strip()
        if output and os.path.isfile(output):
            return output
        return None

    def verify(self, executable_path: Optional[str]) -> bool:
        """
        Check that the executable runs.

        Runs ``<path> i`` (7-Zip's capability listing) and treats a zero
        exit status as working.

        Args:
            executable_path: Path to the 7z executable

        Returns:
            True if the executable ran successfully, False otherwise
        """
        if not executable_path or not os.path.isfile(executable_path):
            return False

        try:
            result = self.runner.run(
                [executable_path, SEVENZIP_INFO_ARGUMENT],
                timeout=self.verify_timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"7-Zip verification timed out: {executable_path}")
            return False
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"7-Zip verification failed to start: {e}")
            return False

        return result.ok

    def locate(self, verify: bool = False, required: bool = False) -> Optional[str]:
        """
        Find the executable, optionally verify it, and apply the required policy.

        Args:
            verify: Run the executable to check that it works
            required: Raise instead of returning None

        Returns:
            Path to a (verified) executable, or None

        Raises:
            SevenZipNotFoundError: If required and no executable was found
            SevenZipVerificationError: If required and verification failed
        """
        logger.debug("Searching for 7-Zip executable...")
        executable_path = self.find()

        if executable_path is None:
            logger.debug("7-Zip executable not found on this system")
            if required:
                raise SevenZipNotFoundError("7-Zip executable not found. Please install 7-Zip.")
            return None

        logger.debug(f"Found 7-Zip at: {executable_path}")

        if verify:
            logger.debug("Verifying 7-Zip executable...")
            if not self.verify(executable_path):
                logger.warning(
                    f"7-Zip executable found at '{executable_path}' but verification failed"
                )
                if required:
                    raise SevenZipVerificationError(
                        f"7-Zip executable at '{executable_path}' is not working properly",
                        target=executable_path,
                    )
                return None
            logger.debug("7-Zip executable verified successfully")

        return executable_path


def find_7zip_executable() -> Optional[str]:
    """Convenience function to locate 7-Zip with default settings."""
    return SevenZipLocator().find()


def verify_executable(executable_path: str) -> bool:
    """Convenience function to check that a 7-Zip executable runs."""
    return SevenZipLocator().verify(executable_path)
