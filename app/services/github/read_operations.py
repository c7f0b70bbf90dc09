"""
GitHub API read operations.

Provides the read-only operations the dashboard needs:
- Listing a user's repositories
- Commit activity statistics for a repository
"""

import asyncio
import logging
from typing import Any

import httpx

from app.config import settings
from app.services.github.exceptions import GitHubTransportError
from app.services.github.helpers import handle_error_response
from app.services.github.http_client import get_github_client
from app.services.github.types import CommitActivityWeek, Repository

logger = logging.getLogger(__name__)


class GitHubReadOperations:
    """
    Read-only operations for GitHub API.

    Works with or without a token. Without one, GitHub applies the
    unauthenticated rate limit (60 requests/hr per IP).

    Uses a shared HTTP client singleton for connection pooling.
    """

    USER_AGENT = "github-activity-dashboard"

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        retry_delay: float | None = None,
    ):
        self.token = (token if token is not None else settings.github_token).strip()
        self.base_url = (base_url or settings.github_api_url).rstrip("/")
        self.retry_delay = (
            retry_delay if retry_delay is not None else settings.commit_activity_retry_delay
        )
        self._headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": settings.github_api_version,
            "User-Agent": self.USER_AGENT,
        }
        if self.token:
            self._headers["Authorization"] = f"token {self.token}"

    @property
    def has_token(self) -> bool:
        """Whether requests are authenticated."""
        return bool(self.token)

    async def _get(self, url: str, params: dict[str, str] | None = None) -> httpx.Response:
        """GET with transport failures mapped to GitHubTransportError."""
        client = get_github_client()
        try:
            return await client.get(url, headers=self._headers, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"GitHub request to {url} failed: {e}")
            raise GitHubTransportError(f"Network error: {e}") from e

    async def list_repositories(self, username: str) -> list[Repository]:
        """
        Fetch a user's public repositories, most recently updated first.

        Only the first page GitHub returns is used.

        Args:
            username: GitHub login

        Returns:
            List of Repository

        Raises:
            GitHubNotFound: The user does not exist
            GitHubRateLimited: The API quota is exhausted
            GitHubTransportError: Any other failure
        """
        response = await self._get(
            f"{self.base_url}/users/{username}/repos",
            params={"sort": "updated"},
        )
        handle_error_response(response, username, not_found_message="User not found")

        data = response.json()
        if not isinstance(data, list):
            raise GitHubTransportError("Unexpected response from GitHub", response.status_code)

        repos = [Repository.from_api(item) for item in data]
        logger.info(f"Fetched {len(repos)} repositories for {username}")
        return repos

    async def fetch_commit_activity(
        self,
        owner: str,
        repo: str,
        max_retries: int | None = None,
    ) -> list[CommitActivityWeek]:
        """
        Fetch the last year of weekly commit activity for a repository.

        GitHub computes these statistics in the background and answers 202
        until they are ready. A 202 is retried after a fixed delay, up to
        max_retries times. Running out of retries is not an error: the
        result degrades to an empty series.

        Args:
            owner: Repository owner
            repo: Repository name
            max_retries: Retries after the first request (default from settings)

        Returns:
            Weekly series, oldest first. Empty if GitHub has no data (204)
            or never finished computing it.

        Raises:
            GitHubNotFound: The repository does not exist
            GitHubRateLimited: The API quota is exhausted
            GitHubTransportError: Any other failure
        """
        if max_retries is None:
            max_retries = settings.commit_activity_max_retries

        url = f"{self.base_url}/repos/{owner}/{repo}/stats/commit_activity"
        full_name = f"{owner}/{repo}"
        attempt = 0

        while True:
            response = await self._get(url)

            if response.status_code == 202:
                if attempt >= max_retries:
                    logger.warning(
                        f"Commit activity for {full_name} still being computed "
                        f"after {attempt} retries, returning empty series"
                    )
                    return []
                attempt += 1
                logger.info(
                    f"Commit activity for {full_name} not ready, "
                    f"retry {attempt}/{max_retries} in {self.retry_delay}s"
                )
                await asyncio.sleep(self.retry_delay)
                continue

            if response.status_code == 204:
                return []

            handle_error_response(
                response,
                full_name,
                not_found_message=f"Repository {full_name} not found",
                error_message="Failed to fetch commit activity",
            )
            return self._parse_commit_activity(response.json(), full_name)

    def _parse_commit_activity(self, data: Any, full_name: str) -> list[CommitActivityWeek]:
        """Convert the commit_activity payload into CommitActivityWeek records."""
        if not isinstance(data, list):
            return []
        try:
            return [CommitActivityWeek.from_api(week) for week in data]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Malformed commit activity for {full_name}: {e}")
            raise GitHubTransportError("Malformed commit activity response") from e
