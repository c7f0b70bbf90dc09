"""Pydantic schemas for the dashboard API.

These are display-ready: optional repository fields are already rendered
("-" for unknown), chart values are percentages, and empty charts carry
the message to show instead of a chart.
"""

import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field

NO_ACTIVITY_MESSAGE = "No commit activity found"


class SearchRequest(BaseModel):
    """Request to load a user's repositories."""

    username: str = ""


class SelectRepositoryRequest(BaseModel):
    """Request to switch the selected repository."""

    repository: str


class NotificationOut(BaseModel):
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class RepositoryRow(BaseModel):
    """One row of the repositories table."""

    id: int
    name: str
    url: str
    description: str
    language: str
    stars: int
    selected: bool


class ChartBarOut(BaseModel):
    label: str
    value: int
    height_pct: float = Field(ge=0, le=100)
    title: str


class HeatmapDayOut(BaseModel):
    date: dt.date
    count: int
    intensity_pct: float = Field(ge=0, le=100)
    title: str


class BarChartPanel(BaseModel):
    """Weekly or monthly tab."""

    caption: str
    bars: list[ChartBarOut] = Field(default_factory=list)
    empty_message: str | None = None


class HeatmapPanel(BaseModel):
    """Yearly tab."""

    caption: str
    columns: int = 0
    days: list[HeatmapDayOut] = Field(default_factory=list)
    legend: list[int] = Field(default_factory=lambda: [0, 25, 50, 75, 100])
    empty_message: str | None = None


class ActivityPanels(BaseModel):
    """Commit activity for the selected repository, in all three granularities."""

    repository: str
    weekly: BarChartPanel
    monthly: BarChartPanel
    yearly: HeatmapPanel


class DashboardResponse(BaseModel):
    """Full dashboard payload."""

    username: str
    status: Literal["idle", "loading", "error", "loaded"]
    loading: bool
    error: str | None
    notification: NotificationOut | None
    token_notice: str | None
    repositories: list[RepositoryRow]
    activity: ActivityPanels | None
