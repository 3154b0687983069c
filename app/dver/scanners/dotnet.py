"""dotnet CLI scanner implementation.

Lists installed SDKs with `dotnet --list-sdks`, whose output has one
entry per line:

    8.0.406 [/usr/share/dotnet/sdk]
"""

import logging
from pathlib import Path

from dver.models.sdk import InstalledSdk
from dver.scanners.base import SdkScanner
from dver.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)


def parse_sdk_line(line: str) -> InstalledSdk | None:
    """Parse a single line of `dotnet --list-sdks` output.

    Args:
        line: One output line, e.g. '8.0.406 [/usr/share/dotnet/sdk]'.

    Returns:
        InstalledSdk if the line is a valid entry whose path sits directly
        under the reported base, None otherwise.
    """
    head, sep, tail = line.partition("[")
    if not sep:
        return None

    tokens = head.split()
    version = tokens[0] if tokens else ""
    base = tail.strip().rstrip("]").strip()
    if not version or not base:
        return None

    base_dir = Path(base)
    install_path = base_dir / version
    # Absolute tokens, "." and separators would move the path off its base
    if install_path.parent != base_dir:
        return None

    return InstalledSdk(version=version, install_path=install_path)


def parse_sdk_list(output: str) -> list[InstalledSdk]:
    """Parse `dotnet --list-sdks` output into SDK records.

    Malformed lines are skipped. Order and duplicates are preserved.

    Args:
        output: Raw stdout of the command.

    Returns:
        List of InstalledSdk in encounter order.
    """
    sdks: list[InstalledSdk] = []
    for line in output.splitlines():
        sdk = parse_sdk_line(line)
        if sdk is None:
            if line.strip():
                logger.debug("Skipping malformed SDK line: %r", line[:100])
            continue
        sdks.append(sdk)
    return sdks


class DotnetScanner(SdkScanner):
    """Scanner backed by the dotnet CLI.

    Attributes:
        command: dotnet executable name or path.
    """

    def __init__(self, command: str = "dotnet") -> None:
        """Initialize the scanner.

        Args:
            command: dotnet executable name or path.
        """
        self.command = command

    def is_available(self) -> bool:
        """Check that dotnet is on PATH and answers `--version`."""
        if not command_exists(self.command):
            return False
        try:
            return self._run("--version").success
        except OSError:
            return False

    def scan(self) -> list[InstalledSdk]:
        """List installed SDKs.

        Returns:
            InstalledSdk for each line of `dotnet --list-sdks`.

        Raises:
            RuntimeError: If dotnet cannot be run or exits non-zero.
        """
        result = self._run_checked("--list-sdks", "Failed to list SDKs")
        sdks = parse_sdk_list(result.stdout)
        logger.debug("Found %d installed SDK(s)", len(sdks))
        return sdks

    def current_version(self) -> str:
        """Return the output of `dotnet --version`.

        Raises:
            RuntimeError: If dotnet cannot be run or exits non-zero.
        """
        result = self._run_checked("--version", "Failed to get current dotnet version")
        return result.stdout.strip()

    def _run(self, *args: str) -> CommandResult:
        return run_command([self.command, *args])

    def _run_checked(self, arg: str, context: str) -> CommandResult:
        """Run dotnet and raise RuntimeError with context on failure."""
        try:
            result = self._run(arg)
        except OSError as e:
            msg = f"{context}: {e}"
            raise RuntimeError(msg) from e

        if not result.success:
            msg = f"{context}: {result.error_detail}"
            raise RuntimeError(msg)

        return result
