"""Process helpers for the dotnet CLI and the dotnet-install scripts."""

import logging
import shlex
import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured output of a finished process.

    Attributes:
        stdout: Decoded standard output.
        stderr: Decoded standard error.
        returncode: Process exit status.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """True when the process exited with status 0."""
        return self.returncode == 0

    @property
    def error_detail(self) -> str:
        """Short failure description: stderr, else the exit status."""
        return self.stderr.strip() or f"exit code {self.returncode}"


def run_command(args: Sequence[str]) -> CommandResult:
    """Run a process to completion and capture its output.

    dotnet and the install scripts are not time-bounded; the call returns
    when the process exits. A non-zero exit status is reported through
    the result, not raised.

    Args:
        args: Executable and arguments.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        FileNotFoundError: If the executable does not exist.
        OSError: If the process cannot be started.
    """
    logger.debug("$ %s", shlex.join(args))
    completed = subprocess.run(  # nosec: B603
        list(args),
        capture_output=True,
        text=True,
        errors="replace",
        check=False,
    )
    if completed.returncode != 0:
        logger.debug("%s exited with status %d", args[0], completed.returncode)
    return CommandResult(
        stdout=completed.stdout,
        stderr=completed.stderr,
        returncode=completed.returncode,
    )


def command_exists(name: str) -> bool:
    """Check whether name resolves to an executable (PATH lookup or explicit path)."""
    return shutil.which(name) is not None
