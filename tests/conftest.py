"""Root conftest — shared fixtures for all tests.

Provides:
- A mocked GitHubReadOperations (no network)
- A DashboardController wired to it
- API client with the controller dependency overridden
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.services.dashboard import DashboardController
from app.services.github import GitHubReadOperations


@pytest.fixture
def github() -> MagicMock:
    """GitHubReadOperations stand-in with async operations and no token."""
    mock = MagicMock(spec=GitHubReadOperations)
    mock.has_token = False
    mock.list_repositories = AsyncMock(return_value=[])
    mock.fetch_commit_activity = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def controller(github: MagicMock) -> DashboardController:
    return DashboardController(github)


@pytest.fixture
async def api_client(controller: DashboardController):
    """HTTP client against the app with the dashboard controller overridden."""
    from app.api.deps import get_dashboard_controller
    from app.main import app

    app.dependency_overrides[get_dashboard_controller] = lambda: controller

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
