"""Entry store access and the dashboard views derived from entries."""

import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from healthtrack.config import get_settings
from healthtrack.errors import NotFoundError
from healthtrack.models.entry import Entry
from healthtrack.schemas.entry import (
    EntryCreate,
    EntryRead,
    EntryUpdate,
    TodayComparison,
    WeeklyStats,
)
from healthtrack.schemas.goal import GoalRead
from healthtrack.tracking.goals import find_goal_for_day
from healthtrack.tracking.summary import (
    build_weekly_stats,
    compare_to_goal,
    compute_totals,
    weekly_window_start,
)

logger = logging.getLogger(__name__)


def local_now() -> datetime:
    """Current wall-clock time in the configured time zone (naive)."""
    return datetime.now(ZoneInfo(get_settings().timezone)).replace(tzinfo=None)


async def list_entries(session: AsyncSession, user_id: int) -> list[Entry]:
    stmt = (
        select(Entry)
        .where(Entry.user_id == user_id)
        .order_by(Entry.date.desc(), Entry.created_at.desc(), Entry.id.desc())
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_entry_by_date(session: AsyncSession, user_id: int, day: date) -> Entry:
    """Earliest logged entry for ``day``."""
    stmt = (
        select(Entry)
        .where(Entry.user_id == user_id, Entry.date == day)
        .order_by(Entry.created_at, Entry.id)
        .limit(1)
    )
    result = await session.execute(stmt)
    entry = result.scalar_one_or_none()
    if entry is None:
        raise NotFoundError("No entry found for this date")
    return entry


async def create_entry(session: AsyncSession, user_id: int, body: EntryCreate) -> Entry:
    entry = Entry(user_id=user_id, **body.model_dump())
    session.add(entry)
    await session.commit()
    await session.refresh(entry)
    return entry


async def _get_owned_entry(session: AsyncSession, user_id: int, entry_id: int) -> Entry:
    stmt = select(Entry).where(Entry.id == entry_id, Entry.user_id == user_id)
    result = await session.execute(stmt)
    entry = result.scalar_one_or_none()
    if entry is None:
        raise NotFoundError("Entry not found")
    return entry


async def update_entry(
    session: AsyncSession, user_id: int, entry_id: int, body: EntryUpdate
) -> Entry:
    entry = await _get_owned_entry(session, user_id, entry_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(entry, field, value)
    await session.commit()
    await session.refresh(entry)
    return entry


async def delete_entry(session: AsyncSession, user_id: int, entry_id: int) -> None:
    entry = await _get_owned_entry(session, user_id, entry_id)
    await session.delete(entry)
    await session.commit()


async def get_today_comparison(
    session: AsyncSession, user_id: int, today: date | None = None
) -> TodayComparison:
    """Today's entries and totals set against today's goal.

    ``totals`` and ``comparison`` are None (not zero) when nothing was logged
    today; ``comparison`` additionally needs a goal for the day.
    """
    today = today or local_now().date()
    stmt = (
        select(Entry)
        .where(Entry.user_id == user_id, Entry.date == today)
        .order_by(Entry.created_at.desc(), Entry.id.desc())
    )
    result = await session.execute(stmt)
    entries = list(result.scalars().all())
    goal = await find_goal_for_day(session, user_id, today)

    totals = compute_totals(entries)
    return TodayComparison(
        entries=[EntryRead.model_validate(e) for e in entries],
        entry=EntryRead.model_validate(entries[0]) if entries else None,
        goal=GoalRead.model_validate(goal) if goal is not None else None,
        totals=totals,
        comparison=compare_to_goal(totals, goal),
    )


async def get_weekly_stats(
    session: AsyncSession, user_id: int, now: datetime | None = None
) -> WeeklyStats:
    """Entries of the rolling window starting seven days before ``now``, oldest first."""
    now = now or local_now()
    since = weekly_window_start(now)
    stmt = (
        select(Entry)
        .where(Entry.user_id == user_id, Entry.date >= since)
        .order_by(Entry.date, Entry.created_at, Entry.id)
    )
    result = await session.execute(stmt)
    entries = list(result.scalars().all())
    logger.debug("Weekly stats for user %s since %s: %d entries", user_id, since, len(entries))
    return build_weekly_stats(entries)
