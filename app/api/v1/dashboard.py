"""
Dashboard endpoints: search a user, select a repository, read the charts.

Failures from GitHub are part of the dashboard payload (status, error,
notification), not HTTP errors, so clients render them like any other state.
"""

import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_dashboard_controller
from app.schemas.dashboard import DashboardResponse, SearchRequest, SelectRepositoryRequest
from app.services.dashboard import DashboardController, build_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])
logger = logging.getLogger(__name__)


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    controller: DashboardController = Depends(get_dashboard_controller),
) -> DashboardResponse:
    """Current dashboard state."""
    return build_dashboard(controller.state, controller.has_token)


@router.post("/search", response_model=DashboardResponse)
async def search(
    data: SearchRequest,
    controller: DashboardController = Depends(get_dashboard_controller),
) -> DashboardResponse:
    """Load a user's repositories and the commit activity of the most recently updated one."""
    state = await controller.search(data.username)
    return build_dashboard(state, controller.has_token)


@router.post("/select", response_model=DashboardResponse)
async def select_repository(
    data: SelectRepositoryRequest,
    controller: DashboardController = Depends(get_dashboard_controller),
) -> DashboardResponse:
    """Switch the selected repository and load its commit activity."""
    state = await controller.select_repository(data.repository)
    return build_dashboard(state, controller.has_token)


@router.post("/reset", response_model=DashboardResponse)
async def reset(
    controller: DashboardController = Depends(get_dashboard_controller),
) -> DashboardResponse:
    """Start over with an empty session."""
    state = controller.reset()
    return build_dashboard(state, controller.has_token)
