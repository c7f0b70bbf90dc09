"""Exceptions for GitHub service."""


class GitHubAPIError(Exception):
    """Error from GitHub API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)


class GitHubNotFound(GitHubAPIError):
    """The requested user or repository does not exist (404)."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message, status_code=404)


class GitHubRateLimited(GitHubAPIError):
    """The API quota is exhausted (403 with zero remaining requests).

    ``rate_limit_reset`` holds the unix timestamp at which the quota refills,
    or None when GitHub did not send the header.
    """

    def __init__(self, rate_limit_reset: int | None = None):
        super().__init__(
            "GitHub API rate limit exceeded",
            status_code=403,
            rate_limit_reset=rate_limit_reset,
        )


class GitHubTransportError(GitHubAPIError):
    """Any other non-success status, network failure, or malformed payload."""
