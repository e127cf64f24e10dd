"""
Async HTTP Client Configuration

Provides the shared httpx.AsyncClient used for completion calls, with
connection pooling. The application lifespan closes it on shutdown.
"""

from typing import Optional

import httpx

# Connect timeout is fixed; the read timeout comes from CLAUDE_REQUEST_TIMEOUT
CONNECT_TIMEOUT = 5.0


# Shared client instance (lazily initialized)
_client: Optional[httpx.AsyncClient] = None


async def get_client() -> httpx.AsyncClient:
    """Get the shared async HTTP client."""
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(60.0, connect=CONNECT_TIMEOUT),
            limits=httpx.Limits(max_keepalive_connections=20, max_connections=50),
        )
    return _client


async def close_client():
    """Close the shared client (call on app shutdown)."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def request_timeout(seconds: float) -> httpx.Timeout:
    """Per-request timeout for a completion call."""
    return httpx.Timeout(seconds, connect=CONNECT_TIMEOUT)
