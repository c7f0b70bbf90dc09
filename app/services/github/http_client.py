"""
Pooled HTTP client shared by every GitHubReadOperations instance.

Timeouts and pool size come from settings. Auth headers differ per
instance, so they travel with each request instead of living on the client.
"""

import logging

import httpx

from app.config import settings

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def _build_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            settings.github_request_timeout, connect=settings.github_connect_timeout
        ),
        limits=httpx.Limits(
            max_connections=settings.github_max_connections,
            max_keepalive_connections=settings.github_max_connections // 2,
        ),
        http2=True,
    )


def get_github_client() -> httpx.AsyncClient:
    """Return the shared client, opening a new one if none is open."""
    global _client
    if _client is None or _client.is_closed:
        _client = _build_client()
        logger.debug(
            f"Opened GitHub HTTP client (timeout={settings.github_request_timeout}s, "
            f"max_connections={settings.github_max_connections})"
        )
    return _client


async def close_github_client() -> None:
    """Close the shared client on shutdown. Safe to call when none is open."""
    global _client
    if _client is None or _client.is_closed:
        return
    await _client.aclose()
    _client = None
    logger.debug("Closed GitHub HTTP client")
