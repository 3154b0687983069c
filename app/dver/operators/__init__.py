"""Operators that change the SDK installation state."""

from dver.operators.installer import (
    InstallerDownloadError,
    InstallerError,
    InstallerExecutionError,
    InstallerOperator,
    InstallRequest,
)
from dver.operators.uninstall import SdkRemover, installation_roots, is_within_roots, select_targets

__all__ = [
    "InstallRequest",
    "InstallerDownloadError",
    "InstallerError",
    "InstallerExecutionError",
    "InstallerOperator",
    "SdkRemover",
    "installation_roots",
    "is_within_roots",
    "select_targets",
]
