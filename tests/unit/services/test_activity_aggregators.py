"""Unit tests for the commit activity aggregators.

Covers the weekly, monthly and yearly projections: window sizes,
scaling, labels, empty-series handling and purity.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from app.services.activity.aggregators import (
    SECONDS_PER_DAY,
    expand_days,
    monthly_totals,
    monthly_view,
    weekly_view,
    yearly_view,
)
from tests.helpers.factories import FIRST_WEEK, WEEK_SECONDS, make_series, make_week


# ═══════════════════════════════════════════════════════════════════════════
# weekly_view
# ═══════════════════════════════════════════════════════════════════════════


class TestWeeklyView:
    """Tests for the last-12-weeks bar chart."""

    def test_empty_series_has_no_data(self):
        assert weekly_view([]) is None

    def test_uses_only_last_twelve_weeks(self):
        series = make_series(list(range(1, 16)))

        chart = weekly_view(series)

        assert chart is not None
        assert [bar.value for bar in chart.bars] == list(range(4, 16))

    def test_busiest_week_maps_to_full_height(self):
        chart = weekly_view(make_series([2, 8, 4]))

        assert [bar.height_pct for bar in chart.bars] == [25.0, 100.0, 50.0]

    def test_scales_against_displayed_weeks_only(self):
        # The 100-commit week falls outside the window and must not flatten the rest
        series = make_series([100] + [5] * 12)

        chart = weekly_view(series)

        assert all(bar.height_pct == 100.0 for bar in chart.bars)

    def test_heights_stay_in_range(self):
        chart = weekly_view(make_series([0, 3, 7, 1, 0, 12, 9]))

        assert all(0 <= bar.height_pct <= 100 for bar in chart.bars)

    def test_all_zero_weeks_have_zero_height(self):
        chart = weekly_view(make_series([0, 0, 0]))

        assert chart is not None
        assert [bar.height_pct for bar in chart.bars] == [0.0, 0.0, 0.0]

    def test_shorter_series_is_not_padded(self):
        assert len(weekly_view(make_series([1, 2])).bars) == 2

    def test_labels_and_titles(self):
        chart = weekly_view(make_series([3, 1]))

        assert chart.bars[0].label == "Jan 7"
        assert chart.bars[0].title == "3 commits in week of Jan 7, 2024"
        assert chart.bars[1].label == "Jan 14"


# ═══════════════════════════════════════════════════════════════════════════
# monthly_view
# ═══════════════════════════════════════════════════════════════════════════


class TestMonthlyView:
    """Tests for the calendar-month roll-up."""

    def test_empty_series_has_no_data(self):
        assert monthly_view([]) is None

    def test_groups_weeks_by_start_month(self):
        # Jan 2024 has four week starts (7, 14, 21, 28), Feb four, then Mar 3
        chart = monthly_view(make_series([1] * 9))

        assert [bar.label for bar in chart.bars] == ["Jan", "Feb", "Mar"]
        assert [bar.value for bar in chart.bars] == [4, 4, 1]
        assert [bar.height_pct for bar in chart.bars] == [100.0, 100.0, 25.0]

    def test_groups_full_series_then_keeps_last_twelve_months(self):
        # 60 weeks from Jan 7, 2024 end on Feb 23, 2025: 14 calendar months
        series = make_series([1] * 60)

        chart = monthly_view(series)

        assert len(chart.bars) == 12
        assert chart.bars[0].title == "5 commits in Mar 2024"
        assert chart.bars[-1].label == "Feb"
        assert chart.bars[-1].value == 4
        assert sum(monthly_totals(series).values()) == 60

    def test_same_month_in_different_years_stays_separate(self):
        series = make_series([1] * 60)

        totals = monthly_totals(series)

        assert totals[(2024, 1)] == 4
        assert totals[(2025, 1)] == 4

    def test_month_totals_match_daily_counts(self):
        series = [
            make_week(FIRST_WEEK + i * WEEK_SECONDS, [i % 3, 1, 0, 2, 0, i % 2, 1])
            for i in range(20)
        ]

        for (year, month), total in monthly_totals(series).items():
            daily_sum = sum(
                sum(week.daily_counts)
                for week in series
                if (
                    datetime.fromtimestamp(week.week_start, tz=UTC).year,
                    datetime.fromtimestamp(week.week_start, tz=UTC).month,
                )
                == (year, month)
            )
            assert daily_sum == total

    def test_months_are_chronological(self):
        chart = monthly_view(make_series([1] * 30))

        titles = [bar.title.split(" in ")[1] for bar in chart.bars]
        assert titles == [
            "Jan 2024",
            "Feb 2024",
            "Mar 2024",
            "Apr 2024",
            "May 2024",
            "Jun 2024",
            "Jul 2024",
        ]


# ═══════════════════════════════════════════════════════════════════════════
# yearly_view
# ═══════════════════════════════════════════════════════════════════════════


class TestYearlyView:
    """Tests for the per-day heat-map."""

    def test_empty_series_has_no_data(self):
        assert yearly_view([]) is None

    def test_all_zero_days_have_no_data(self):
        assert yearly_view(make_series([0, 0, 0])) is None

    @pytest.mark.parametrize("weeks", [1, 10, 52, 60])
    def test_day_count_is_seven_per_week_up_to_52_weeks(self, weeks):
        heatmap = yearly_view(make_series([1] * weeks))

        assert len(heatmap.days) == 7 * min(52, weeks)
        assert heatmap.columns == min(52, weeks)

    def test_day_dates_follow_week_start(self):
        series = make_series([1] * 60)

        heatmap = yearly_view(series)

        kept = series[-52:]
        for index, day in enumerate(heatmap.days):
            week = kept[index // 7]
            expected = week.week_start + (index % 7) * SECONDS_PER_DAY
            assert day.date == datetime.fromtimestamp(expected, tz=UTC)
            assert day.count >= 0

    def test_intensity_relative_to_busiest_day(self):
        heatmap = yearly_view([make_week(days=[0, 1, 2, 0, 4, 0, 0])])

        assert [day.intensity_pct for day in heatmap.days] == [0, 25, 50, 0, 100, 0, 0]

    def test_titles(self):
        heatmap = yearly_view([make_week(days=[0, 1, 2, 0, 4, 0, 0])])

        assert heatmap.days[4].title == "4 commits on Jan 11, 2024"

    def test_expand_days_pairs_counts_with_dates(self):
        days = expand_days([make_week(days=[5, 0, 0, 0, 0, 0, 1])])

        assert days[0] == (datetime(2024, 1, 7, tzinfo=UTC), 5)
        assert days[6] == (datetime(2024, 1, 13, tzinfo=UTC), 1)


# ═══════════════════════════════════════════════════════════════════════════
# Purity
# ═══════════════════════════════════════════════════════════════════════════


class TestPurity:
    """Aggregators are deterministic and leave their input alone."""

    @pytest.mark.parametrize("view", [weekly_view, monthly_view, yearly_view])
    def test_same_input_same_output(self, view):
        series = make_series([3, 0, 7, 2, 9, 1] * 10)
        snapshot = list(series)

        assert view(series) == view(series)
        assert series == snapshot
