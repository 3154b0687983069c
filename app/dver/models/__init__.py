"""Data models for dver."""

from dver.models.release import ChannelReleases, Release, ReleaseChannel, ReleaseIndex, ReleaseSdk
from dver.models.sdk import (
    InstalledSdk,
    RemovalResult,
    RemovalStatus,
    SelectorKind,
    VersionSelector,
)

__all__ = [
    "ChannelReleases",
    "InstalledSdk",
    "Release",
    "ReleaseChannel",
    "ReleaseIndex",
    "ReleaseSdk",
    "RemovalResult",
    "RemovalStatus",
    "SelectorKind",
    "VersionSelector",
]
