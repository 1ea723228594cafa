from datetime import date, datetime

import pytest

from healthtrack.models.entry import Entry
from healthtrack.models.goal import Goal
from healthtrack.tracking.summary import (
    build_weekly_stats,
    compare_to_goal,
    compute_totals,
    round_half_up,
    weekly_averages,
    weekly_window_start,
)


def _entry(minutes: int, water: float, day: date = date(2024, 6, 10)) -> Entry:
    return Entry(
        user_id=1,
        date=day,
        workout="Walking",
        workout_minutes=minutes,
        water_consumption=water,
        sleep_time="23:00",
        wakeup_time="07:00",
    )


def _goal(minutes: int, water: float) -> Goal:
    return Goal(
        user_id=1,
        date=date(2024, 6, 10),
        workout="Walking",
        workout_minutes=minutes,
        calories_burnt=200,
        water_consumption=water,
        sleep_time="22:00",
        wakeup_time="06:00",
        systolic=120,
        diastolic=80,
        heart_rate=60,
    )


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "ndigits", "expected"),
        [(2.5, 0, 3.0), (3.5, 0, 4.0), (2.4, 0, 2.0), (1.25, 1, 1.3), (1.5, 1, 1.5)],
    )
    def test_ties_round_up(self, value: float, ndigits: int, expected: float) -> None:
        assert round_half_up(value, ndigits) == expected


class TestTodayTotals:
    def test_no_entries_means_no_totals(self) -> None:
        assert compute_totals([]) is None

    def test_sums_all_entries(self) -> None:
        totals = compute_totals([_entry(30, 1.0), _entry(20, 0.5)])
        assert totals is not None
        assert totals.workout_minutes == 50
        assert totals.water_consumption == 1.5

    def test_zero_valued_entries_still_produce_totals(self) -> None:
        totals = compute_totals([_entry(0, 0.0)])
        assert totals is not None
        assert totals.workout_minutes == 0

    def test_comparison(self) -> None:
        totals = compute_totals([_entry(30, 1.0), _entry(20, 0.5)])
        comparison = compare_to_goal(totals, _goal(40, 2.0))
        assert comparison is not None
        assert comparison.workout_minutes.actual == 50
        assert comparison.workout_minutes.goal == 40
        assert comparison.workout_minutes.achieved is True
        assert comparison.water_consumption.achieved is False

    def test_goal_met_exactly_is_achieved(self) -> None:
        comparison = compare_to_goal(compute_totals([_entry(40, 2.0)]), _goal(40, 2.0))
        assert comparison is not None
        assert comparison.workout_minutes.achieved is True
        assert comparison.water_consumption.achieved is True

    def test_comparison_needs_goal_and_totals(self) -> None:
        assert compare_to_goal(None, _goal(40, 2.0)) is None
        assert compare_to_goal(compute_totals([_entry(10, 1.0)]), None) is None


class TestWeeklyStats:
    def test_averages(self) -> None:
        entries = [_entry(10, 1.0), _entry(20, 1.5), _entry(30, 2.0)]
        averages = weekly_averages(entries)
        assert averages.workout_minutes == 20
        assert averages.water_consumption == 1.5

    def test_averages_weight_by_entry_not_day(self) -> None:
        entries = [
            _entry(10, 1.0, date(2024, 6, 9)),
            _entry(10, 1.0, date(2024, 6, 9)),
            _entry(40, 2.0, date(2024, 6, 10)),
        ]
        averages = weekly_averages(entries)
        assert averages.workout_minutes == 20
        assert averages.water_consumption == 1.3

    def test_averages_round_half_up(self) -> None:
        averages = weekly_averages([_entry(10, 1.0), _entry(11, 1.0)])
        assert averages.workout_minutes == 11

    def test_empty_week_is_zero_not_absent(self) -> None:
        stats = build_weekly_stats([])
        assert stats.weekly_stats == []
        assert stats.averages.workout_minutes == 0
        assert stats.averages.water_consumption == 0
        assert stats.total_entries == 0

    def test_items_keep_entry_order(self) -> None:
        entries = [_entry(10, 1.0, date(2024, 6, 8)), _entry(20, 1.0, date(2024, 6, 9))]
        stats = build_weekly_stats(entries)
        assert [s.date for s in stats.weekly_stats] == [date(2024, 6, 8), date(2024, 6, 9)]
        assert stats.weekly_stats[0].workout == "Walking"
        assert stats.total_entries == 2


class TestWeeklyWindow:
    def test_mid_day_excludes_the_day_seven_days_back(self) -> None:
        assert weekly_window_start(datetime(2024, 6, 10, 15, 0)) == date(2024, 6, 4)

    def test_midnight_includes_the_day_seven_days_back(self) -> None:
        assert weekly_window_start(datetime(2024, 6, 10, 0, 0)) == date(2024, 6, 3)
