"""Service-level tests: explicit clocks and concurrent writers."""

import asyncio
from collections.abc import AsyncGenerator
from datetime import date, datetime
from pathlib import Path

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from healthtrack.database import Base
from healthtrack.errors import ConflictError
from healthtrack.models.entry import Entry
from healthtrack.models.goal import Goal
from healthtrack.schemas.entry import EntryCreate
from healthtrack.schemas.goal import GoalCreate, GoalUpdate
from healthtrack.tracking import entries, goals
from tests.conftest import create_user, test_session

GOAL = GoalCreate(
    date=date(2024, 6, 10),
    workout="Swimming",
    workout_minutes=45,
    calories_burnt=400,
    water_consumption=2.5,
    sleep_time="22:00",
    wakeup_time="06:00",
    blood_pressure={"systolic": 118, "diastolic": 76},
    heart_rate=62,
)


def _entry(day: date, minutes: int = 30, water: float = 1.0) -> EntryCreate:
    return EntryCreate(
        date=day,
        workout="Tennis",
        workout_minutes=minutes,
        water_consumption=water,
        sleep_time="23:15",
        wakeup_time="7:05",
    )


@pytest.fixture
async def file_sessions(tmp_path: Path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    # Separate connections per session, unlike the shared in-memory test engine
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'race.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    sessions = async_sessionmaker(engine, expire_on_commit=False)
    async with sessions() as session:
        await create_user(session)
    yield sessions
    await engine.dispose()


async def test_concurrent_goal_creates_yield_one_conflict(
    file_sessions: async_sessionmaker[AsyncSession],
) -> None:
    async def create() -> Goal:
        async with file_sessions() as session:
            return await goals.create_goal(session, 1, GOAL)

    results = await asyncio.gather(create(), create(), return_exceptions=True)

    assert sum(isinstance(r, Goal) for r in results) == 1
    assert sum(isinstance(r, ConflictError) for r in results) == 1
    async with file_sessions() as session:
        count = await session.scalar(select(func.count(Goal.id)))
    assert count == 1


async def test_concurrent_entry_creates_all_succeed(
    file_sessions: async_sessionmaker[AsyncSession],
) -> None:
    async def create(minutes: int) -> Entry:
        async with file_sessions() as session:
            return await entries.create_entry(session, 1, _entry(date(2024, 6, 10), minutes))

    results = await asyncio.gather(*(create(m) for m in range(5)))

    assert len({e.id for e in results}) == 5
    async with file_sessions() as session:
        count = await session.scalar(select(func.count(Entry.id)))
    assert count == 5


async def test_today_comparison_with_explicit_day() -> None:
    async with test_session() as session:
        user = await create_user(session)
        await goals.create_goal(session, user.id, GOAL)
        await entries.create_entry(session, user.id, _entry(date(2024, 6, 10), 20, 1.0))
        await entries.create_entry(session, user.id, _entry(date(2024, 6, 10), 30, 2.0))
        await entries.create_entry(session, user.id, _entry(date(2024, 6, 11), 60, 3.0))

        view = await entries.get_today_comparison(session, user.id, today=date(2024, 6, 10))

    assert [e.workout_minutes for e in view.entries] == [30, 20]
    assert view.entry is not None and view.entry.workout_minutes == 30
    assert view.totals is not None
    assert view.totals.workout_minutes == 50
    assert view.totals.water_consumption == 3.0
    assert view.comparison is not None
    assert view.comparison.workout_minutes.achieved is True
    assert view.comparison.water_consumption.achieved is True


async def test_weekly_stats_window_has_no_upper_bound() -> None:
    now = datetime(2024, 6, 10, 12, 0)
    async with test_session() as session:
        user = await create_user(session)
        for day in (date(2024, 6, 3), date(2024, 6, 4), date(2024, 6, 12)):
            await entries.create_entry(session, user.id, _entry(day))

        stats = await entries.get_weekly_stats(session, user.id, now=now)

    assert [s.date for s in stats.weekly_stats] == [date(2024, 6, 4), date(2024, 6, 12)]
    assert stats.total_entries == 2


async def test_update_goal_keeps_date() -> None:
    async with test_session() as session:
        user = await create_user(session)
        goal = await goals.create_goal(session, user.id, GOAL)
        updated = await goals.update_goal(
            session, user.id, goal.id, GoalUpdate(workout_minutes=50)
        )

    assert updated.date == date(2024, 6, 10)
    assert updated.workout_minutes == 50
    assert updated.systolic == 118
