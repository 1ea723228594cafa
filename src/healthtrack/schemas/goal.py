from datetime import datetime
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


class BloodPressure(CamelModel):
    systolic: int = Field(ge=50, le=300)
    diastolic: int = Field(ge=30, le=200)


class BloodPressureUpdate(CamelModel):
    systolic: int | None = Field(default=None, ge=50, le=300)
    diastolic: int | None = Field(default=None, ge=30, le=200)

    @field_validator("*")
    @classmethod
    def reject_nulls(cls, value: Any) -> Any:
        return reject_null(value)


class GoalBase(CamelModel):
    date: CalendarDay
    workout: str = Field(pattern=WORKOUT_PATTERN)
    workout_minutes: int = Field(ge=0, le=MAX_COUNT)
    calories_burnt: int = Field(ge=0, le=MAX_COUNT)
    water_consumption: float = Field(ge=0, allow_inf_nan=False)

    # Sleep
    sleep_time: str = Field(pattern=TIME_PATTERN)
    wakeup_time: str = Field(pattern=TIME_PATTERN)

    # Vitals
    blood_pressure: BloodPressure
    heart_rate: int = Field(ge=30, le=220)


class GoalCreate(GoalBase):
    pass


class GoalUpdate(CamelModel):
    """Partial goal update. The date of a goal cannot be changed."""

    workout: str | None = Field(default=None, pattern=WORKOUT_PATTERN)
    workout_minutes: int | None = Field(default=None, ge=0, le=MAX_COUNT)
    calories_burnt: int | None = Field(default=None, ge=0, le=MAX_COUNT)
    water_consumption: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    sleep_time: str | None = Field(default=None, pattern=TIME_PATTERN)
    wakeup_time: str | None = Field(default=None, pattern=TIME_PATTERN)
    blood_pressure: BloodPressureUpdate | None = None
    heart_rate: int | None = Field(default=None, ge=30, le=220)

    @field_validator("*")
    @classmethod
    def reject_nulls(cls, value: Any) -> Any:
        return reject_null(value)


class GoalRead(GoalBase):
    id: int
    user_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class GoalResponse(CamelModel):
    message: str
    goal: GoalRead
