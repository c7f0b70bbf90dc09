"""Pydantic schemas for API request/response validation."""

from app.schemas.dashboard import (
    NO_ACTIVITY_MESSAGE,
    ActivityPanels,
    BarChartPanel,
    ChartBarOut,
    DashboardResponse,
    HeatmapDayOut,
    HeatmapPanel,
    NotificationOut,
    RepositoryRow,
    SearchRequest,
    SelectRepositoryRequest,
)

__all__ = [
    "ActivityPanels",
    "BarChartPanel",
    "ChartBarOut",
    "DashboardResponse",
    "HeatmapDayOut",
    "HeatmapPanel",
    "NO_ACTIVITY_MESSAGE",
    "NotificationOut",
    "RepositoryRow",
    "SearchRequest",
    "SelectRepositoryRequest",
]
