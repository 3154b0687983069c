"""Abstract base class for SDK scanners.

This module defines the Scanner interface that wraps the external
tool reporting installed SDKs.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from dver.models.sdk import InstalledSdk


class SdkScanner(ABC):
    """Abstract base class for SDK scanners.

    Scanners query an external tool and return the SDK inventory for
    the current run. The inventory is never cached between calls.

    Example:
        >>> scanner = DotnetScanner()
        >>> if scanner.is_available():
        ...     for sdk in scanner.scan():
        ...         print(f"{sdk.version}: {sdk.install_path}")
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the SDK tool can be run on this system.

        Returns:
            True if the tool is usable, False otherwise.
        """

    @abstractmethod
    def scan(self) -> list[InstalledSdk]:
        """List installed SDKs in the order the tool reports them.

        Returns:
            InstalledSdk records, duplicates included.

        Raises:
            RuntimeError: If the tool cannot be run or reports failure.
        """

    @abstractmethod
    def current_version(self) -> str:
        """Return the SDK version the tool resolves for the working directory.

        Raises:
            RuntimeError: If the tool cannot be run or reports failure.
        """


def sorted_versions(sdks: Iterable[InstalledSdk]) -> list[str]:
    """Unique versions of an inventory in ascending version order."""
    return sorted({sdk.version for sdk in sdks}, key=version_sort_key)


def version_sort_key(version: str) -> tuple[tuple[int, int | str], ...]:
    """Sort key ordering dotted versions numerically.

    Numeric components compare as numbers and sort before text
    components, so '9.0.100' sorts before '10.0.100'.
    """
    parts: list[tuple[int, int | str]] = []
    for part in version.replace("-", ".").split("."):
        if part.isdigit():
            parts.append((0, int(part)))
        else:
            parts.append((1, part))
    return tuple(parts)
