"""
Commit activity aggregators.

Pure functions that project the weekly commit-activity series onto the three
dashboard granularities:
- weekly_view: the last 12 weeks as bars
- monthly_view: the whole series rolled up by calendar month, last 12 months
- yearly_view: the last 52 weeks expanded into a per-day heat-map

Each returns None when there is nothing to draw. Shorter series are shown
as they are; nothing is padded.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from app.services.github.types import CommitActivityWeek

WEEKLY_WINDOW = 12
MONTHLY_WINDOW = 12
YEARLY_WEEKS = 52
SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class ChartBar:
    """A single bar: raw value plus its height as a percentage of the tallest."""

    label: str
    value: int
    height_pct: float
    title: str


@dataclass(frozen=True)
class BarChart:
    """Bars in chronological order."""

    bars: tuple[ChartBar, ...]


@dataclass(frozen=True)
class HeatmapDay:
    """One cell of the yearly heat-map."""

    date: datetime
    count: int
    intensity_pct: float
    title: str


@dataclass(frozen=True)
class Heatmap:
    """Days in chronological order, laid out 7 rows per column."""

    days: tuple[HeatmapDay, ...]

    @property
    def columns(self) -> int:
        return math.ceil(len(self.days) / 7)


def _to_datetime(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=UTC)


def _short_date(moment: datetime) -> str:
    """e.g. "Jan 7"."""
    return f"{moment:%b} {moment.day}"


def _long_date(moment: datetime) -> str:
    """e.g. "Jan 7, 2024"."""
    return f"{moment:%b} {moment.day}, {moment.year}"


def _scale(value: int, peak: int) -> float:
    """Percentage of peak, with the denominator floored at 1."""
    return value / max(peak, 1) * 100


def weekly_view(series: Sequence[CommitActivityWeek]) -> BarChart | None:
    """Bars for the last 12 weeks, scaled against the busiest of those weeks."""
    weeks = list(series)[-WEEKLY_WINDOW:]
    if not weeks:
        return None

    peak = max(week.total_commits for week in weeks)
    bars = []
    for week in weeks:
        start = _to_datetime(week.week_start)
        bars.append(
            ChartBar(
                label=_short_date(start),
                value=week.total_commits,
                height_pct=_scale(week.total_commits, peak),
                title=f"{week.total_commits} commits in week of {_long_date(start)}",
            )
        )
    return BarChart(bars=tuple(bars))


def monthly_totals(series: Sequence[CommitActivityWeek]) -> dict[tuple[int, int], int]:
    """
    Sum weekly totals by the calendar month each week starts in.

    Keys are (year, month) in chronological order of first appearance,
    which is chronological since the series is oldest first.
    """
    totals: dict[tuple[int, int], int] = {}
    for week in series:
        start = _to_datetime(week.week_start)
        key = (start.year, start.month)
        totals[key] = totals.get(key, 0) + week.total_commits
    return totals


def monthly_view(series: Sequence[CommitActivityWeek]) -> BarChart | None:
    """Bars for the last 12 calendar months of the full series."""
    if not series:
        return None

    months = list(monthly_totals(series).items())[-MONTHLY_WINDOW:]
    peak = max(total for _, total in months)
    bars = []
    for (year, month), total in months:
        first_day = datetime(year, month, 1, tzinfo=UTC)
        bars.append(
            ChartBar(
                label=f"{first_day:%b}",
                value=total,
                height_pct=_scale(total, peak),
                title=f"{total} commits in {first_day:%b} {year}",
            )
        )
    return BarChart(bars=tuple(bars))


def expand_days(series: Sequence[CommitActivityWeek]) -> list[tuple[datetime, int]]:
    """Flatten the last 52 weeks into (date, count) pairs, one per day."""
    days = []
    for week in list(series)[-YEARLY_WEEKS:]:
        for day_index, count in enumerate(week.daily_counts):
            days.append((_to_datetime(week.week_start + day_index * SECONDS_PER_DAY), count))
    return days


def yearly_view(series: Sequence[CommitActivityWeek]) -> Heatmap | None:
    """Per-day heat-map for the last 52 weeks, intensity relative to the busiest day."""
    days = expand_days(series)
    if not days or all(count == 0 for _, count in days):
        return None

    peak = max(count for _, count in days)
    cells = tuple(
        HeatmapDay(
            date=date,
            count=count,
            intensity_pct=min(_scale(count, peak), 100.0),
            title=f"{count} commits on {_long_date(date)}",
        )
        for date, count in days
    )
    return Heatmap(days=cells)
