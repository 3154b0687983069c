"""Remote .NET release listing.

Reads the official release metadata feed: releases-index.json lists
one entry per channel (e.g. 8.0), each pointing at a releases.json
with every patch release of that channel.
"""

import logging
from dataclasses import dataclass, field
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from dver.models.release import ChannelReleases, Release, ReleaseIndex

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class RemoteReleasesError(Exception):
    """Raised when release metadata cannot be fetched or parsed."""


@dataclass(slots=True)
class RemoteChannel:
    """Releases published for one channel.

    Attributes:
        channel_version: Channel identifier (e.g., '8.0').
        release_type: 'lts' or 'sts'.
        releases_url: URL of the channel's releases.json.
        releases: Releases in feed order (newest first).
        error: Why the channel's releases could not be fetched, if so.
    """

    channel_version: str
    release_type: str
    releases_url: str
    releases: list[Release] = field(default_factory=list)
    error: str | None = None


def _get_model(client: httpx.Client, url: str, model: type[ModelT]) -> ModelT:
    """GET a URL and validate its JSON body.

    Raises:
        httpx.HTTPStatusError: On a non-success status.
        RemoteReleasesError: On transport errors or malformed JSON.
    """
    logger.debug("GET %s", url)
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError:
        raise
    except httpx.HTTPError as e:
        raise RemoteReleasesError(f"Failed to fetch {url}: {e}") from e

    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise RemoteReleasesError(f"Malformed release metadata at {url}: {e}") from e


def fetch_remote_channels(
    client: httpx.Client,
    index_url: str,
    lts_only: bool = False,
) -> list[RemoteChannel]:
    """Fetch every channel and its releases.

    A non-success status for a single channel is recorded on that
    channel and the remaining channels are still fetched.

    Args:
        client: HTTP client (timeout and User-Agent already applied).
        index_url: URL of releases-index.json.
        lts_only: Keep only channels whose release type is 'lts'.

    Returns:
        RemoteChannel per channel in index order.

    Raises:
        RemoteReleasesError: If the index cannot be fetched, or any
            document is malformed or unreachable.
    """
    try:
        index = _get_model(client, index_url, ReleaseIndex)
    except httpx.HTTPStatusError as e:
        msg = f"Failed to fetch releases-index.json: HTTP {e.response.status_code}"
        raise RemoteReleasesError(msg) from e

    channels: list[RemoteChannel] = []
    for entry in index.releases_index:
        if lts_only and not entry.is_lts:
            continue

        channel = RemoteChannel(
            channel_version=entry.channel_version or "unknown",
            release_type=entry.release_type or "unknown",
            releases_url=entry.releases_json,
        )
        try:
            channel.releases = _get_model(client, entry.releases_json, ChannelReleases).releases
        except httpx.HTTPStatusError as e:
            channel.error = f"Failed to fetch {entry.releases_json}: HTTP {e.response.status_code}"
            logger.warning(channel.error)
        channels.append(channel)

    return channels
