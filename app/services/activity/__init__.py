"""Commit activity projections for the dashboard charts."""

from app.services.activity.aggregators import (
    BarChart,
    ChartBar,
    Heatmap,
    HeatmapDay,
    monthly_view,
    weekly_view,
    yearly_view,
)

__all__ = [
    "BarChart",
    "ChartBar",
    "Heatmap",
    "HeatmapDay",
    "monthly_view",
    "weekly_view",
    "yearly_view",
]
