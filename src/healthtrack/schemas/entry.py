from datetime import date, datetime
from typing import Any

from pydantic import Field, field_validator

from healthtrack.schemas.base import (
    MAX_COUNT,
    TIME_PATTERN,
    WORKOUT_PATTERN,
    CalendarDay,
    CamelModel,
    reject_null,
)
from healthtrack.schemas.goal import GoalRead


class EntryBase(CamelModel):
    date: CalendarDay
    workout: str = Field(pattern=WORKOUT_PATTERN)
    workout_minutes: int = Field(ge=0, le=MAX_COUNT)
    water_consumption: float = Field(ge=0, allow_inf_nan=False)
    sleep_time: str = Field(pattern=TIME_PATTERN)
    wakeup_time: str = Field(pattern=TIME_PATTERN)


class EntryCreate(EntryBase):
    pass


class EntryUpdate(CamelModel):
    """Partial entry update. The date of an entry cannot be changed."""

    workout: str | None = Field(default=None, pattern=WORKOUT_PATTERN)
    workout_minutes: int | None = Field(default=None, ge=0, le=MAX_COUNT)
    water_consumption: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    sleep_time: str | None = Field(default=None, pattern=TIME_PATTERN)
    wakeup_time: str | None = Field(default=None, pattern=TIME_PATTERN)

    @field_validator("*")
    @classmethod
    def reject_nulls(cls, value: Any) -> Any:
        return reject_null(value)


class EntryRead(EntryBase):
    id: int
    user_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class EntryResponse(CamelModel):
    message: str
    entry: EntryRead


# ── Derived views ───────────────────────────────────────────────────


class Totals(CamelModel):
    workout_minutes: int
    water_consumption: float


class MetricComparison(CamelModel):
    actual: int | float
    goal: int | float
    achieved: bool


class Comparison(CamelModel):
    workout_minutes: MetricComparison
    water_consumption: MetricComparison


class TodayComparison(CamelModel):
    entries: list[EntryRead]
    entry: EntryRead | None
    goal: GoalRead | None
    totals: Totals | None
    comparison: Comparison | None


class WeeklyStatItem(CamelModel):
    date: date
    workout_minutes: int
    water_consumption: float
    workout: str


class WeeklyAverages(CamelModel):
    workout_minutes: int
    water_consumption: float


class WeeklyStats(CamelModel):
    weekly_stats: list[WeeklyStatItem]
    averages: WeeklyAverages
    total_entries: int
