"""Remote command implementation.

Lists SDK versions published in the official .NET release feed.
"""

from typing import Annotated

import typer
from rich.markup import escape

from dver.cli.types import is_quiet, require_config
from dver.core.remote import RemoteChannel, RemoteReleasesError, fetch_remote_channels
from dver.utils.formatting import console, print_error, print_warning
from dver.utils.http import create_client


def _print_channel(channel: RemoteChannel) -> None:
    console.print(
        f"\n[bold_header]Channel: {escape(channel.channel_version)} "
        f"({escape(channel.release_type)})[/]"
    )
    if channel.error:
        print_warning(channel.error)
        return

    for release in channel.releases:
        version = release.release_version or "unknown"
        line = f"  [sdk.version]{escape(version)}[/]"
        if release.release_date:
            line += f"  [muted]{escape(release.release_date)}[/]"
        if release.sdk_versions:
            line += f"  SDK {escape(', '.join(release.sdk_versions))}"
        console.print(line, highlight=False)


def list_remote(
    ctx: typer.Context,
    lts: Annotated[
        bool,
        typer.Option(
            "--lts",
            help="Show only LTS channels.",
        ),
    ] = False,
) -> None:
    """List SDK versions available from Microsoft."""
    config = require_config(ctx)

    with create_client(config.network) as client:
        try:
            channels = fetch_remote_channels(
                client,
                config.network.releases_index_url,
                lts_only=lts,
            )
        except RemoteReleasesError as e:
            print_error(f"Failed to list remote SDKs: {e}")
            raise typer.Exit(code=1) from e

    if not is_quiet(ctx):
        console.print("Remote .NET SDK versions available:")
    for channel in channels:
        _print_channel(channel)
