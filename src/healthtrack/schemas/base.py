"""Shared pieces for the tracking schemas: camelCase wire format and field rules."""

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

WORKOUT_TYPES = (
    "Running",
    "Cycling",
    "Weightlifting",
    "Swimming",
    "Yoga",
    "Walking",
    "Basketball",
    "Tennis",
    "Other",
)
WORKOUT_PATTERN = rf"^({'|'.join(WORKOUT_TYPES)})$"

# 24-hour clock, leading zero on the hour optional
TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"

# Upper bound for counters (minutes, calories); fits a 32-bit INTEGER column
MAX_COUNT = 2_147_483_647
# Largest primary key SQLite can bind
MAX_ID = 2**63 - 1


def _to_calendar_day(value: Any) -> Any:
    """Reduce ISO-8601 datetimes to their calendar day; time of day is irrelevant."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    return value


CalendarDay = Annotated[date, BeforeValidator(_to_calendar_day)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


def reject_null(value: Any) -> Any:
    """Fields sent in an update must carry a value; leaving them out is the way to skip them."""
    if value is None:
        raise ValueError("Field may be omitted but not null")
    return value
