"""Shared HTTP client configuration."""

import httpx

from omglol._version import __version__

API_ORIGIN = "https://api.omg.lol/"
DEFAULT_TIMEOUT = 30.0


def create_http_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """Create configured HTTP client.

    The returned client is a connection pool that can be shared by several
    omglol handles and used from multiple threads.

    Args:
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        headers={"User-Agent": f"omglol-python/{__version__}"},
    )
