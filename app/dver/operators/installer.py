"""dotnet-install script operator.

Downloads Microsoft's dotnet-install script for the current platform
and runs it to install an SDK.
"""

import contextlib
import logging
import os
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path

import httpx

from dver.utils.shell import CommandResult, run_command

logger = logging.getLogger(__name__)

INSTALL_SCRIPT_BASE_URL = "https://dotnet.microsoft.com/download/dotnet/scripts/v1"


class InstallerError(Exception):
    """Base exception for installer errors."""


class InstallerDownloadError(InstallerError):
    """Raised when the install script cannot be downloaded.

    Attributes:
        status_code: HTTP status code, None for transport failures.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InstallerExecutionError(InstallerError):
    """Raised when the install script exits non-zero.

    Attributes:
        result: Captured output and exit code of the script.
    """

    def __init__(self, message: str, result: CommandResult) -> None:
        super().__init__(message)
        self.result = result


@dataclass(frozen=True, slots=True)
class InstallRequest:
    """What to install and where.

    Attributes:
        lts: Install the latest LTS channel. Takes precedence over version.
        version: Specific SDK version to install.
        install_dir: Target directory (script default when None).
    """

    lts: bool = False
    version: str | None = None
    install_dir: str | None = None

    def script_args(self) -> list[str]:
        """Selector flags passed to dotnet-install (accepted by both scripts)."""
        args: list[str] = []
        if self.lts:
            args.extend(["-Channel", "LTS"])
        elif self.version:
            args.extend(["-Version", self.version])
        if self.install_dir:
            args.extend(["-InstallDir", self.install_dir])
        return args


def is_windows() -> bool:
    """Check if running on Windows."""
    return sys.platform == "win32"


def script_name(windows: bool | None = None) -> str:
    """Name of the install script for the platform."""
    windows = is_windows() if windows is None else windows
    return "dotnet-install.ps1" if windows else "dotnet-install.sh"


def script_url(windows: bool | None = None) -> str:
    """Download URL of the install script for the platform."""
    return f"{INSTALL_SCRIPT_BASE_URL}/{script_name(windows)}"


class InstallerOperator:
    """Installs the .NET SDK with the official dotnet-install script.

    Attributes:
        client: HTTP client used for the download.
        temp_dir: Directory the script is written to.
        windows: Whether to use the PowerShell script and invocation.
    """

    def __init__(
        self,
        client: httpx.Client,
        temp_dir: Path | None = None,
        windows: bool | None = None,
    ) -> None:
        """Initialize the operator.

        Args:
            client: HTTP client (timeout and User-Agent already applied).
            temp_dir: Directory for the downloaded script. Defaults to the
                system temp directory.
            windows: Platform override. Defaults to the running platform.
        """
        self.client = client
        self.temp_dir = temp_dir or Path(tempfile.gettempdir())
        self.windows = is_windows() if windows is None else windows

    def download_script(self) -> Path:
        """Download the install script to a process-unique temp file.

        Returns:
            Path to the downloaded script, executable on POSIX.

        Raises:
            InstallerDownloadError: On a transport error or non-success status.
            InstallerError: If the script cannot be written.
        """
        url = script_url(self.windows)
        logger.info("Downloading %s", url)

        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            msg = f"Failed to download installer script: {e}"
            raise InstallerDownloadError(msg) from e

        if not response.is_success:
            msg = f"Failed to download installer script: HTTP {response.status_code}"
            raise InstallerDownloadError(msg, status_code=response.status_code)

        script_path = self.temp_dir / f"{script_name(self.windows)}_{os.getpid()}"
        try:
            script_path.write_bytes(response.content)
            if not self.windows:
                script_path.chmod(0o755)
        except OSError as e:
            with contextlib.suppress(OSError):
                script_path.unlink()
            msg = f"Failed to write installer script: {e}"
            raise InstallerError(msg) from e

        logger.debug("Saved installer script to %s", script_path)
        return script_path

    def build_command(self, script_path: Path, request: InstallRequest) -> list[str]:
        """Build the interpreter command line for the script."""
        if self.windows:
            args = [
                "powershell",
                "-NoLogo",
                "-NoProfile",
                "-NonInteractive",
                "-ExecutionPolicy",
                "Bypass",
                "-File",
                str(script_path),
            ]
        else:
            args = ["bash", str(script_path)]
        return args + request.script_args()

    def install(self, request: InstallRequest) -> CommandResult:
        """Download and run the install script.

        The script file is deleted afterwards whatever the outcome.

        Args:
            request: Channel/version and install directory selection.

        Returns:
            CommandResult of the successful script run.

        Raises:
            InstallerDownloadError: If the download fails.
            InstallerExecutionError: If the script exits non-zero.
            InstallerError: If the script cannot be written or started.
        """
        script_path = self.download_script()
        try:
            args = self.build_command(script_path, request)
            logger.info("Running %s", " ".join(args))
            try:
                result = run_command(args)
            except OSError as e:
                msg = f"Failed to start installer: {e}"
                raise InstallerError(msg) from e
        finally:
            with contextlib.suppress(OSError):
                script_path.unlink()

        if not result.success:
            msg = f"dotnet installation failed (exit code {result.returncode})"
            raise InstallerExecutionError(msg, result)

        return result
