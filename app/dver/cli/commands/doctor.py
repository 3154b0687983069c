"""Doctor command implementation.

Checks the environment for common installation problems.
"""

import os
from pathlib import Path

import typer

from dver.cli.types import get_scanner, is_quiet
from dver.core.doctor import DoctorCheck, run_doctor_checks
from dver.utils.formatting import console

_SEVERITY_ICONS = {
    "info": "✅",
    "warning": "⚠️",
    "error": "❌",
}

_SEVERITY_STYLES = {
    "info": "success",
    "warning": "warning",
    "error": "error",
}


def _print_check(check: DoctorCheck) -> None:
    icon = _SEVERITY_ICONS.get(check.severity, "-")
    style = _SEVERITY_STYLES.get(check.severity, "text")
    console.print(f"{icon} {check.message}", style=style, markup=False, highlight=False)


def run_doctor(ctx: typer.Context) -> None:
    """Check for common issues."""
    if not is_quiet(ctx):
        console.print("Checking for common issues...")

    checks = run_doctor_checks(
        get_scanner(ctx),
        home=Path.home(),
        path_var=os.environ.get("PATH", ""),
        cwd=Path.cwd(),
    )
    for check in checks:
        _print_check(check)
