"""SDK models for inventory, selection and removal.

This module defines the data structures for installed .NET SDKs,
the user's removal selector, and per-target removal outcomes.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True, slots=True)
class InstalledSdk:
    """An SDK installation reported by `dotnet --list-sdks`.

    Attributes:
        version: SDK version string (e.g., '8.0.406').
        install_path: Directory holding this version's files,
            '<base>/<version>' where base is the directory the tool reported.
    """

    version: str
    install_path: Path

    def __post_init__(self) -> None:
        """Validate SDK data after initialization."""
        if not self.version:
            msg = "SDK version cannot be empty"
            raise ValueError(msg)

    @property
    def root(self) -> Path:
        """Directory the tool reported this SDK under."""
        return self.install_path.parent


class SelectorKind(Enum):
    """How a VersionSelector matches installed versions.

    Attributes:
        ALL: Every installed SDK.
        EXACT: Full version, compared by string equality.
        MAJOR_PREFIX: Major version, matches versions starting with '<major>.'.
    """

    ALL = "all"
    EXACT = "exact"
    MAJOR_PREFIX = "major"


@dataclass(frozen=True, slots=True)
class VersionSelector:
    """A removal request against the SDK inventory.

    Attributes:
        kind: Matching strategy.
        value: Version or major version text (None for ALL).
    """

    kind: SelectorKind
    value: str | None = None

    @classmethod
    def from_args(cls, version: str | None, all_versions: bool) -> "VersionSelector | None":
        """Build a selector from command-line input.

        `all_versions` wins over a version string. A version containing
        a '.' is matched exactly, anything else as a major prefix.

        Args:
            version: Version text supplied by the user, if any.
            all_versions: Whether --all was given.

        Returns:
            VersionSelector, or None when neither input was supplied.
        """
        if all_versions:
            return cls(SelectorKind.ALL)
        if not version:
            return None
        if "." in version:
            return cls(SelectorKind.EXACT, version)
        return cls(SelectorKind.MAJOR_PREFIX, version)

    def matches(self, sdk: InstalledSdk) -> bool:
        """Check whether an installed SDK is selected."""
        if self.kind == SelectorKind.ALL:
            return True
        if self.kind == SelectorKind.EXACT:
            return sdk.version == self.value
        return sdk.version.startswith(f"{self.value}.")

    def describe(self) -> str:
        """Human-readable form for messages."""
        if self.kind == SelectorKind.ALL:
            return "all versions"
        if self.kind == SelectorKind.EXACT:
            return f"version {self.value}"
        return f"versions {self.value}.*"


class RemovalStatus(Enum):
    """Outcome of removing one SDK directory."""

    REMOVED = "removed"
    SKIPPED_UNSAFE = "skipped"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of removing a single SDK.

    Attributes:
        sdk: The SDK that was targeted.
        status: What happened to it.
        error: Underlying error text for FAILED results.
    """

    sdk: InstalledSdk
    status: RemovalStatus
    error: str | None = None

    @property
    def removed(self) -> bool:
        """Check if the SDK directory was deleted."""
        return self.status == RemovalStatus.REMOVED

    @property
    def message(self) -> str:
        """One-line description of the outcome."""
        version = self.sdk.version
        if self.status == RemovalStatus.REMOVED:
            return f"Removed {version}"
        if self.status == RemovalStatus.SKIPPED_UNSAFE:
            return f"Skipping {version}: path {self.sdk.install_path} outside known SDK roots"
        if self.status == RemovalStatus.NOT_FOUND:
            return f"Directory for {version} not found"
        return f"Failed to remove {version}: {self.error}"
