"""Environment health checks for `dver doctor`.

Each check returns a DoctorCheck. Environment lookups (home directory,
PATH, working directory) are passed in by the caller.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dver.core.paths import get_user_dotnet_dir
from dver.core.pin import PinError, read_pin
from dver.scanners.base import SdkScanner


@dataclass(frozen=True, slots=True)
class DoctorCheck:
    """Result of a single doctor health check."""

    name: str
    passed: bool
    message: str
    severity: str  # "error", "warning", "info"


def check_dotnet_available(scanner: SdkScanner) -> DoctorCheck:
    """Check that the dotnet command runs."""
    if scanner.is_available():
        return DoctorCheck(
            "dotnet_available", True, "dotnet command is available in your PATH.", "info"
        )
    return DoctorCheck(
        "dotnet_available",
        False,
        "dotnet command not found. Please install .NET and ensure PATH is correct.",
        "error",
    )


def check_user_dir_in_path(home: Path, path_var: str) -> DoctorCheck:
    """Check that ~/.dotnet is listed in PATH."""
    dotnet_dir = get_user_dotnet_dir(home)
    entries = [Path(p) for p in path_var.split(os.pathsep) if p]
    if dotnet_dir in entries:
        return DoctorCheck(
            "user_dir_in_path", True, ".NET SDK installation directory is in your PATH.", "info"
        )
    return DoctorCheck(
        "user_dir_in_path",
        False,
        f".NET SDK installation directory ({dotnet_dir}) might not be in PATH.",
        "warning",
    )


def check_pinned_version(scanner: SdkScanner, cwd: Path) -> DoctorCheck | None:
    """Check that the version pinned in cwd/global.json is installed.

    Returns:
        DoctorCheck, or None when there is no global.json.
    """
    try:
        pin = read_pin(cwd)
    except PinError as e:
        return DoctorCheck("pinned_version", False, str(e), "error")

    if pin is None:
        return None

    pinned = pin.sdk.version
    try:
        installed = {sdk.version for sdk in scanner.scan()}
    except RuntimeError as e:
        return DoctorCheck("pinned_version", False, str(e), "error")

    if pinned in installed:
        return DoctorCheck(
            "pinned_version", True, f"Pinned SDK {pinned} is installed.", "info"
        )
    return DoctorCheck(
        "pinned_version",
        False,
        f"global.json pins SDK {pinned}, which is not installed.",
        "warning",
    )


def run_doctor_checks(
    scanner: SdkScanner,
    *,
    home: Path,
    path_var: str,
    cwd: Path,
) -> list[DoctorCheck]:
    """Run all checks in order.

    Stops after the first check when dotnet itself is unavailable.
    """
    checks = [check_dotnet_available(scanner)]
    if not checks[0].passed:
        return checks

    checks.append(check_user_dir_in_path(home, path_var))

    pinned = check_pinned_version(scanner, cwd)
    if pinned is not None:
        checks.append(pinned)

    return checks
