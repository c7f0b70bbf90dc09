"""Dashboard session: state container, controller and presentation."""

from app.services.dashboard.controller import DashboardController
from app.services.dashboard.exceptions import DashboardValidationError
from app.services.dashboard.presenter import build_dashboard
from app.services.dashboard.state import DashboardState, Notification, SessionStatus

__all__ = [
    "DashboardController",
    "DashboardState",
    "DashboardValidationError",
    "Notification",
    "SessionStatus",
    "build_dashboard",
]
