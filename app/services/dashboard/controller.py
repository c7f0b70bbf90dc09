"""
Dashboard controller.

Owns the dashboard state and drives it through its transitions:

    idle -> loading -> loaded | error
    loaded | error -> loading   (new search or repository selection)

Every search or selection takes a new request id. Results that come back
for a request that is no longer the latest are dropped, so a slow response
for a previously selected repository can never overwrite the series of the
current one.
"""

import logging
from dataclasses import replace
from typing import Any

from app.services.dashboard.exceptions import DashboardValidationError
from app.services.dashboard.state import DashboardState, Notification, SessionStatus
from app.services.github import (
    GitHubAPIError,
    GitHubRateLimited,
    GitHubReadOperations,
    format_reset_time,
)

logger = logging.getLogger(__name__)

TOKEN_HINT = " (Add GitHub token to increase limits)"
SELECTION_FAILED_MESSAGE = "Failed to fetch commit activity for this repository."


def validate_username(username: str) -> str:
    """Return the trimmed username, or raise if nothing was entered."""
    cleaned = (username or "").strip()
    if not cleaned:
        raise DashboardValidationError("Username required", "Please enter a GitHub username")
    return cleaned


def describe_search_error(error: GitHubAPIError, has_token: bool) -> str:
    """User-facing message for a failed search."""
    if isinstance(error, GitHubRateLimited):
        message = f"API rate limit exceeded. Try again after {format_reset_time(error.rate_limit_reset)}"
        return message if has_token else message + TOKEN_HINT
    return error.message


class DashboardController:
    """State container for one dashboard session."""

    def __init__(self, github: GitHubReadOperations):
        self._github = github
        self._state = DashboardState()

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def has_token(self) -> bool:
        return self._github.has_token

    def reset(self) -> DashboardState:
        """Discard everything and return to idle. In-flight results are dropped."""
        self._state = DashboardState(request_id=self._state.request_id + 1)
        return self._state

    # -- transitions -------------------------------------------------------

    def _begin(self, **changes: Any) -> int:
        """Enter loading under a fresh request id."""
        request_id = self._state.request_id + 1
        self._state = replace(
            self._state,
            status=SessionStatus.LOADING,
            notification=None,
            request_id=request_id,
            **changes,
        )
        return request_id

    def _apply(self, request_id: int, **changes: Any) -> bool:
        """Apply changes if request_id is still the latest. Returns False if stale."""
        if request_id != self._state.request_id:
            logger.debug(
                f"Dropping stale result for request {request_id} "
                f"(latest is {self._state.request_id})"
            )
            return False
        self._state = replace(self._state, **changes)
        return True

    def _reject(self, error: DashboardValidationError) -> DashboardState:
        """Surface a validation failure without touching anything else."""
        logger.info(f"Rejected input: {error.message}")
        self._state = replace(
            self._state, notification=Notification.error(error.message, title=error.title)
        )
        return self._state

    # -- actions -----------------------------------------------------------

    async def search(self, username: str) -> DashboardState:
        """
        Load a user's repositories and the activity of the first one.

        Any failure clears repositories and activity and moves to error.
        """
        try:
            username = validate_username(username)
        except DashboardValidationError as e:
            return self._reject(e)

        # username is committed together with the repositories it owns
        request_id = self._begin()
        logger.info(f"Searching repositories for {username}")

        try:
            repos = await self._github.list_repositories(username)
            selected = repos[0].name if repos else None
            if not self._apply(
                request_id,
                username=username,
                repositories=tuple(repos),
                selected_repository=selected,
                commit_activity=(),
            ):
                return self._state

            series = (
                await self._github.fetch_commit_activity(username, selected) if selected else []
            )
        except GitHubAPIError as e:
            message = describe_search_error(e, self.has_token)
            logger.warning(f"Search for {username} failed: {e.message}")
            self._apply(
                request_id,
                username=username,
                repositories=(),
                selected_repository=None,
                commit_activity=(),
                status=SessionStatus.ERROR,
                error_message=message,
                notification=Notification.error(message),
            )
            return self._state

        self._apply(
            request_id,
            commit_activity=tuple(series),
            status=SessionStatus.LOADED,
            error_message=None,
        )
        return self._state

    async def select_repository(self, name: str) -> DashboardState:
        """
        Switch the selected repository and load its activity.

        On failure only the activity is cleared; the repository list and the
        selection stay as they are.
        """
        if name not in self._state.repository_names:
            return self._reject(
                DashboardValidationError("Unknown repository", f"No repository named {name!r}")
            )

        request_id = self._begin(selected_repository=name, commit_activity=())
        owner = self._state.username

        try:
            series = await self._github.fetch_commit_activity(owner, name)
        except GitHubAPIError as e:
            logger.warning(f"Commit activity for {owner}/{name} failed: {e.message}")
            self._apply(
                request_id,
                commit_activity=(),
                status=SessionStatus.ERROR,
                error_message=SELECTION_FAILED_MESSAGE,
                notification=Notification.error(SELECTION_FAILED_MESSAGE),
            )
            return self._state

        self._apply(
            request_id,
            commit_activity=tuple(series),
            status=SessionStatus.LOADED,
            error_message=None,
        )
        return self._state
