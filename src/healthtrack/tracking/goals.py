"""Goal store access: per-user daily goals, at most one per calendar day."""

import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from healthtrack.errors import ConflictError, NotFoundError
from healthtrack.models.goal import Goal
from healthtrack.schemas.goal import GoalCreate, GoalUpdate

logger = logging.getLogger(__name__)


async def list_goals(session: AsyncSession, user_id: int) -> list[Goal]:
    stmt = select(Goal).where(Goal.user_id == user_id).order_by(Goal.date.desc())
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def find_goal_for_day(session: AsyncSession, user_id: int, day: date) -> Goal | None:
    stmt = select(Goal).where(Goal.user_id == user_id, Goal.date == day)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def get_goal_by_date(session: AsyncSession, user_id: int, day: date) -> Goal:
    goal = await find_goal_for_day(session, user_id, day)
    if goal is None:
        raise NotFoundError("No goal found for this date")
    return goal


async def create_goal(session: AsyncSession, user_id: int, body: GoalCreate) -> Goal:
    """Insert a goal for ``body.date``.

    There is no existence pre-check: the (user_id, date) unique constraint
    decides which of two concurrent creates wins, and the loser gets
    ``ConflictError``.
    """
    goal = Goal(
        user_id=user_id,
        date=body.date,
        workout=body.workout,
        workout_minutes=body.workout_minutes,
        calories_burnt=body.calories_burnt,
        water_consumption=body.water_consumption,
        sleep_time=body.sleep_time,
        wakeup_time=body.wakeup_time,
        systolic=body.blood_pressure.systolic,
        diastolic=body.blood_pressure.diastolic,
        heart_rate=body.heart_rate,
    )
    session.add(goal)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        logger.info("Duplicate goal for user %s on %s", user_id, body.date)
        raise ConflictError() from exc
    await session.refresh(goal)
    return goal


async def _get_owned_goal(session: AsyncSession, user_id: int, goal_id: int) -> Goal:
    stmt = select(Goal).where(Goal.id == goal_id, Goal.user_id == user_id)
    result = await session.execute(stmt)
    goal = result.scalar_one_or_none()
    if goal is None:
        raise NotFoundError("Goal not found")
    return goal


async def update_goal(
    session: AsyncSession, user_id: int, goal_id: int, body: GoalUpdate
) -> Goal:
    """Apply the supplied fields of ``body``; fields left out stay untouched."""
    goal = await _get_owned_goal(session, user_id, goal_id)

    update_data = body.model_dump(exclude_unset=True)
    blood_pressure = update_data.pop("blood_pressure", {})
    for field, value in update_data.items():
        setattr(goal, field, value)
    for field, value in blood_pressure.items():
        setattr(goal, field, value)

    await session.commit()
    await session.refresh(goal)
    return goal


async def delete_goal(session: AsyncSession, user_id: int, goal_id: int) -> None:
    goal = await _get_owned_goal(session, user_id, goal_id)
    await session.delete(goal)
    await session.commit()
