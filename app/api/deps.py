"""Shared FastAPI dependencies."""

from app.services.dashboard import DashboardController
from app.services.github import GitHubReadOperations

# One dashboard session per process
_controller: DashboardController | None = None


def get_dashboard_controller() -> DashboardController:
    """Get or create the process-wide dashboard controller.

    The GitHub token is read from settings once, when the controller is created.
    """
    global _controller
    if _controller is None:
        _controller = DashboardController(GitHubReadOperations())
    return _controller
