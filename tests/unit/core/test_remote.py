"""Unit tests for remote release listing."""

import json

import httpx
import pytest
from dver.core.remote import RemoteReleasesError, fetch_remote_channels
from dver.utils.http import create_client

INDEX_URL = "https://feed.test/releases-index.json"

INDEX = {
    "releases-index": [
        {
            "channel-version": "9.0",
            "release-type": "sts",
            "releases.json": "https://feed.test/9.0/releases.json",
        },
        {
            "channel-version": "8.0",
            "release-type": "lts",
            "releases.json": "https://feed.test/8.0/releases.json",
        },
    ]
}

CHANNELS = {
    "https://feed.test/9.0/releases.json": {
        "releases": [
            {"release-version": "9.0.1", "sdk": {"version": "9.0.102"}, "sdks": None},
            {"release-version": "9.0.0", "sdk": {"version": "9.0.100"}},
        ]
    },
    "https://feed.test/8.0/releases.json": {
        "releases": [{"release-version": "8.0.11", "release-date": "2024-11-12"}]
    },
}


def _client(overrides: dict[str, httpx.Response] | None = None) -> httpx.Client:
    overrides = overrides or {}

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url in overrides:
            return overrides[url]
        if url == INDEX_URL:
            return httpx.Response(200, json=INDEX)
        if url in CHANNELS:
            return httpx.Response(200, json=CHANNELS[url])
        return httpx.Response(404)

    return create_client(transport=httpx.MockTransport(handler))


class TestFetchRemoteChannels:
    """Tests for fetch_remote_channels."""

    def test_lists_every_channel(self) -> None:
        """Each channel carries its releases in feed order."""
        channels = fetch_remote_channels(_client(), INDEX_URL)

        assert [c.channel_version for c in channels] == ["9.0", "8.0"]
        assert [r.release_version for r in channels[0].releases] == ["9.0.1", "9.0.0"]
        assert channels[0].releases[0].sdk_versions == ["9.0.102"]
        assert channels[1].release_type == "lts"

    def test_lts_only(self) -> None:
        """lts_only keeps only LTS channels."""
        channels = fetch_remote_channels(_client(), INDEX_URL, lts_only=True)

        assert [c.channel_version for c in channels] == ["8.0"]

    def test_channel_http_error_is_recorded(self) -> None:
        """A failing channel is reported and the others still load."""
        client = _client({"https://feed.test/9.0/releases.json": httpx.Response(503)})

        channels = fetch_remote_channels(client, INDEX_URL)

        assert channels[0].error is not None
        assert "HTTP 503" in channels[0].error
        assert channels[0].releases == []
        assert channels[1].error is None
        assert len(channels[1].releases) == 1

    def test_index_http_error(self) -> None:
        """A failing index is a hard error with the status code."""
        client = _client({INDEX_URL: httpx.Response(500)})

        with pytest.raises(RemoteReleasesError, match="HTTP 500"):
            fetch_remote_channels(client, INDEX_URL)

    def test_malformed_index(self) -> None:
        """An index without releases-index is a hard error."""
        client = _client({INDEX_URL: httpx.Response(200, content=json.dumps({}).encode())})

        with pytest.raises(RemoteReleasesError, match="Malformed"):
            fetch_remote_channels(client, INDEX_URL)

    def test_transport_error(self) -> None:
        """Network failures are wrapped."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = create_client(transport=httpx.MockTransport(handler))

        with pytest.raises(RemoteReleasesError, match="timed out"):
            fetch_remote_channels(client, INDEX_URL)
