"""Release metadata models for the .NET releases feed.

These mirror the subset of releases-index.json and the per-channel
releases.json documents that dver reads. Keys in the feed are
kebab-case; unknown keys are ignored.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _none_to_list(value: Any) -> Any:
    return [] if value is None else value


# The feed uses null where a list is empty
NullableList = BeforeValidator(_none_to_list)


class ReleaseChannel(BaseModel):
    """One entry of releases-index.json (a major.minor channel)."""

    model_config = ConfigDict(populate_by_name=True)

    channel_version: Annotated[str | None, Field(alias="channel-version")] = None
    latest_release: Annotated[str | None, Field(alias="latest-release")] = None
    latest_sdk: Annotated[str | None, Field(alias="latest-sdk")] = None
    release_type: Annotated[str | None, Field(alias="release-type")] = None
    support_phase: Annotated[str | None, Field(alias="support-phase")] = None
    releases_json: Annotated[str, Field(alias="releases.json")]

    @property
    def is_lts(self) -> bool:
        """Check if the channel is a long-term support release."""
        return self.release_type == "lts"


class ReleaseIndex(BaseModel):
    """releases-index.json."""

    model_config = ConfigDict(populate_by_name=True)

    releases_index: Annotated[list[ReleaseChannel], Field(alias="releases-index")]


class ReleaseSdk(BaseModel):
    """SDK shipped with a release."""

    model_config = ConfigDict(populate_by_name=True)

    version: str | None = None
    version_display: Annotated[str | None, Field(alias="version-display")] = None
    runtime_version: Annotated[str | None, Field(alias="runtime-version")] = None


class Release(BaseModel):
    """One release within a channel's releases.json."""

    model_config = ConfigDict(populate_by_name=True)

    release_date: Annotated[str | None, Field(alias="release-date")] = None
    release_version: Annotated[str | None, Field(alias="release-version")] = None
    security: bool | None = None
    sdk: ReleaseSdk | None = None
    sdks: Annotated[list[ReleaseSdk], NullableList] = Field(default_factory=list)

    @property
    def sdk_versions(self) -> list[str]:
        """SDK versions shipped with this release, primary SDK first."""
        versions: list[str] = []
        candidates = ([self.sdk] if self.sdk else []) + self.sdks
        for sdk in candidates:
            if sdk.version and sdk.version not in versions:
                versions.append(sdk.version)
        return versions


class ChannelReleases(BaseModel):
    """A channel's releases.json."""

    model_config = ConfigDict(populate_by_name=True)

    releases: Annotated[list[Release], NullableList] = Field(default_factory=list)
