"""Turns a DashboardState into the display-ready DashboardResponse."""

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
)
from app.services.activity import BarChart, Heatmap, monthly_view, weekly_view, yearly_view
from app.services.dashboard.state import DashboardState
from app.services.github.types import CommitActivityWeek, Repository

MISSING = "-"

WEEKLY_CAPTION = "Last 12 weeks of commit activity"
MONTHLY_CAPTION = "Last 12 months of commit activity"
YEARLY_CAPTION = "Contribution activity for the past year"

TOKEN_NOTICE = (
    "Using unauthenticated API (60 requests/hr limit). Add GitHub token to increase limits"
)


def repository_row(repo: Repository, selected: str | None) -> RepositoryRow:
    return RepositoryRow(
        id=repo.id,
        name=repo.name,
        url=repo.web_url,
        description=repo.description or MISSING,
        language=repo.primary_language or MISSING,
        stars=repo.star_count,
        selected=repo.name == selected,
    )


def bar_panel(caption: str, chart: BarChart | None) -> BarChartPanel:
    if chart is None:
        return BarChartPanel(caption=caption, empty_message=NO_ACTIVITY_MESSAGE)
    return BarChartPanel(
        caption=caption,
        bars=[
            ChartBarOut(
                label=bar.label,
                value=bar.value,
                height_pct=bar.height_pct,
                title=bar.title,
            )
            for bar in chart.bars
        ],
    )


def heatmap_panel(caption: str, heatmap: Heatmap | None) -> HeatmapPanel:
    if heatmap is None:
        return HeatmapPanel(caption=caption, empty_message=NO_ACTIVITY_MESSAGE)
    return HeatmapPanel(
        caption=caption,
        columns=heatmap.columns,
        days=[
            HeatmapDayOut(
                date=day.date.date(),
                count=day.count,
                intensity_pct=day.intensity_pct,
                title=day.title,
            )
            for day in heatmap.days
        ],
    )


def activity_panels(repository: str, series: tuple[CommitActivityWeek, ...]) -> ActivityPanels:
    return ActivityPanels(
        repository=repository,
        weekly=bar_panel(WEEKLY_CAPTION, weekly_view(series)),
        monthly=bar_panel(MONTHLY_CAPTION, monthly_view(series)),
        yearly=heatmap_panel(YEARLY_CAPTION, yearly_view(series)),
    )


def build_dashboard(state: DashboardState, has_token: bool) -> DashboardResponse:
    """
    Build the dashboard payload for a state snapshot.

    Activity panels are only included once a repository is selected.
    """
    notification = None
    if state.notification is not None:
        notification = NotificationOut(
            title=state.notification.title,
            description=state.notification.description,
            variant=state.notification.variant,
        )

    activity = None
    if state.selected_repository:
        activity = activity_panels(state.selected_repository, state.commit_activity)

    return DashboardResponse(
        username=state.username,
        status=state.status.value,
        loading=state.is_loading,
        error=state.error_message,
        notification=notification,
        token_notice=None if has_token else TOKEN_NOTICE,
        repositories=[repository_row(repo, state.selected_repository) for repo in state.repositories],
        activity=activity,
    )
