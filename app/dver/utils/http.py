"""HTTP client construction.

Every request dver makes goes through a client built here so the
timeout and identifying User-Agent header are applied uniformly.
"""

import httpx

from dver.core.config import NetworkConfig


def create_client(
    network: NetworkConfig | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an httpx client configured from network settings.

    Args:
        network: Network settings. If None, uses defaults.
        transport: Optional transport override (used by tests).

    Returns:
        httpx.Client that follows redirects. The caller closes it.
    """
    network = network or NetworkConfig()
    return httpx.Client(
        timeout=network.timeout_seconds,
        headers={"User-Agent": network.user_agent},
        follow_redirects=True,
        transport=transport,
    )
