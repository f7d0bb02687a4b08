"""External process execution for LogManager.

Everything that spawns a process goes through a ProcessRunner so tests
can substitute a fake instead of starting real subprocesses.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and captured output of a finished process."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProcessRunner(Protocol):
    """Runs a command to completion within a timeout.

    Implementations raise OSError when the command cannot be started and
    subprocess.TimeoutExpired when it does not finish in time.
    """

    def run(self, args: Sequence[str], timeout: float) -> ProcessResult: ...


class SubprocessRunner:
    """ProcessRunner backed by subprocess.run."""

    def run(self, args: Sequence[str], timeout: float) -> ProcessResult:
        logger.debug(f"Running: {' '.join(args)} (timeout {timeout}s)")
        result = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            timeout=timeout,
        )
        return ProcessResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )
