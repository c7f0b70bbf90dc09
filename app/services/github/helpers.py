"""
GitHub API helper utilities.

Provides rate limit handling and error response processing for GitHub API calls.
"""

import logging
from datetime import UTC, datetime

import httpx

from app.services.github.exceptions import (
    GitHubNotFound,
    GitHubRateLimited,
    GitHubTransportError,
)

logger = logging.getLogger(__name__)


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get("X-RateLimit-Remaining")
        self.reset = response.headers.get("X-RateLimit-Reset")

    @property
    def reset_timestamp(self) -> int | None:
        """Get reset timestamp as integer, or None if not available."""
        return int(self.reset) if self.reset and self.reset.isdigit() else None

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return self.remaining is not None and self.remaining.strip() == "0"


def handle_error_response(
    response: httpx.Response,
    context: str,
    not_found_message: str = "Not found",
    error_message: str | None = None,
) -> None:
    """
    Map a non-success GitHub response onto the error taxonomy.

    Args:
        response: The HTTP response from GitHub API
        context: What was being fetched, for log messages (e.g. "octocat/hello")
        not_found_message: Message for GitHubNotFound on 404
        error_message: Message for GitHubTransportError; defaults to
            "HTTP error! status: <code>"

    Raises:
        GitHubRateLimited: 403 with an exhausted quota
        GitHubNotFound: 404
        GitHubTransportError: Any other status outside 2xx
    """
    if response.is_success:
        return

    rate_info = RateLimitInfo(response)

    if response.status_code == 403 and rate_info.is_exhausted:
        logger.warning(
            f"GitHub rate limit exhausted while fetching {context} "
            f"(resets at {rate_info.reset_timestamp})"
        )
        raise GitHubRateLimited(rate_limit_reset=rate_info.reset_timestamp)

    if response.status_code == 404:
        raise GitHubNotFound(not_found_message)

    logger.warning(f"GitHub API error {response.status_code} for {context}")
    raise GitHubTransportError(
        error_message or f"HTTP error! status: {response.status_code}",
        response.status_code,
    )


def format_reset_time(reset_timestamp: int | None, now: datetime | None = None) -> str:
    """
    Format a rate limit reset timestamp for display.

    Produces e.g. "Oct 19, 2026, 3:04:05 PM UTC". A missing timestamp is
    rendered as the current time, since the quota could refill at any moment.
    """
    if reset_timestamp is None:
        moment = now or datetime.now(UTC)
    else:
        moment = datetime.fromtimestamp(reset_timestamp, tz=UTC)

    hour = f"{moment:%I}".lstrip("0")
    return f"{moment:%b} {moment.day}, {moment.year}, {hour}:{moment:%M:%S %p} UTC"
