"""Pure aggregation over entries: today's totals, goal comparison, weekly averages.

Kept free of database access so the rules can be exercised directly.
"""

import math
from collections.abc import Sequence
from datetime import date, datetime, time, timedelta

from healthtrack.models.entry import Entry
from healthtrack.models.goal import Goal
from healthtrack.schemas.entry import (
    Comparison,
    MetricComparison,
    Totals,
    WeeklyAverages,
    WeeklyStatItem,
    WeeklyStats,
)

WEEKLY_WINDOW = timedelta(days=7)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with ties going up (2.5 -> 3), unlike the built-in banker's rounding."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def compute_totals(entries: Sequence[Entry]) -> Totals | None:
    """Sum today's entries. No entries means no totals, not zero totals."""
    if not entries:
        return None
    return Totals(
        workout_minutes=sum(e.workout_minutes for e in entries),
        water_consumption=sum(e.water_consumption for e in entries),
    )


def _compare(actual: float, target: float) -> MetricComparison:
    return MetricComparison(actual=actual, goal=target, achieved=actual >= target)


def compare_to_goal(totals: Totals | None, goal: Goal | None) -> Comparison | None:
    if totals is None or goal is None:
        return None
    return Comparison(
        workout_minutes=_compare(totals.workout_minutes, goal.workout_minutes),
        water_consumption=_compare(totals.water_consumption, goal.water_consumption),
    )


def weekly_window_start(now: datetime) -> date:
    """First calendar day inside the rolling window ``date >= now - 7 days``.

    Entry dates count as midnight, so the day seven days back is only inside
    the window when ``now`` is itself exactly midnight.
    """
    since = now - WEEKLY_WINDOW
    if since.time() == time.min:
        return since.date()
    return since.date() + timedelta(days=1)


def weekly_averages(entries: Sequence[Entry]) -> WeeklyAverages:
    """Per-entry means; a day with several entries weighs more."""
    if not entries:
        return WeeklyAverages(workout_minutes=0, water_consumption=0)
    count = len(entries)
    minutes = sum(e.workout_minutes for e in entries) / count
    water = sum(e.water_consumption for e in entries) / count
    return WeeklyAverages(
        workout_minutes=int(round_half_up(minutes)),
        water_consumption=round_half_up(water, 1),
    )


def build_weekly_stats(entries: Sequence[Entry]) -> WeeklyStats:
    """Entries are expected in ascending date order."""
    return WeeklyStats(
        weekly_stats=[
            WeeklyStatItem(
                date=e.date,
                workout_minutes=e.workout_minutes,
                water_consumption=e.water_consumption,
                workout=e.workout,
            )
            for e in entries
        ],
        averages=weekly_averages(entries),
        total_entries=len(entries),
    )
